"""
Third-party API providers - Amadeus hotels and Supabase Auth
"""
from .base import ExternalProvider, ProviderError, ProviderStatus
from .amadeus import AmadeusProvider
from .supabase_auth import SupabaseAuthError, SupabaseAuthProvider

__all__ = [
    "ExternalProvider",
    "ProviderError",
    "ProviderStatus",
    "AmadeusProvider",
    "SupabaseAuthError",
    "SupabaseAuthProvider",
]
