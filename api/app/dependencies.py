"""
Factory functions providing shared clients and services as FastAPI dependencies
"""
from functools import lru_cache

from app.config import Settings, get_settings
from app.services.amadeus_auth import AmadeusTokenService
from app.services.auth_service import AuthService
from app.services.destination_service import DestinationService
from app.services.hotel_service import HotelService
from app.services.phone_verification import PhoneVerificationService
from app.services.providers import AmadeusProvider, SupabaseAuthProvider
from app.services.wishlist_service import WishlistService
from app.stores import DestinationStore, IntegrationTokenStore, UserStore, WishlistStore


def get_app_settings() -> Settings:
    """FastAPI dependency returning application settings"""
    return get_settings()


@lru_cache()
def get_amadeus_provider() -> AmadeusProvider:
    return AmadeusProvider()


@lru_cache()
def get_supabase_auth_provider() -> SupabaseAuthProvider:
    return SupabaseAuthProvider()


@lru_cache()
def get_amadeus_token_service() -> AmadeusTokenService:
    """Process-wide token cache shared by every Amadeus call"""
    return AmadeusTokenService(
        provider=get_amadeus_provider(),
        store=IntegrationTokenStore(),
    )


@lru_cache()
def get_hotel_service() -> HotelService:
    settings = get_settings()
    return HotelService(
        provider=get_amadeus_provider(),
        token_service=get_amadeus_token_service(),
        verbose=settings.VERBOSE_LOGGING,
    )


@lru_cache()
def get_destination_service() -> DestinationService:
    settings = get_settings()
    return DestinationService(DestinationStore(geometry_enabled=settings.DESTINATIONS_GEOMETRY_ENABLED))


@lru_cache()
def get_wishlist_service() -> WishlistService:
    return WishlistService(WishlistStore())


@lru_cache()
def get_auth_service() -> AuthService:
    return AuthService(provider=get_supabase_auth_provider(), users=UserStore())


def get_phone_verification_service() -> PhoneVerificationService:
    settings = get_settings()
    return PhoneVerificationService(
        api_key=settings.PHONE_VERIFICATION_API_KEY,
        issuer=settings.PHONE_VERIFICATION_ISSUER,
        audience=settings.PHONE_VERIFICATION_AUDIENCE,
    )


__all__ = [
    "get_app_settings",
    "get_amadeus_provider",
    "get_supabase_auth_provider",
    "get_amadeus_token_service",
    "get_hotel_service",
    "get_destination_service",
    "get_wishlist_service",
    "get_auth_service",
    "get_phone_verification_service",
]
