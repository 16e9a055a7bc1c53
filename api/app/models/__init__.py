"""SQLAlchemy Models"""
from app.models.user import User, UserProfile
from app.models.destination import Destination, destinations_public_view
from app.models.integration_token import IntegrationToken
from app.models.wishlist import Poi, PoiWishlist

__all__ = [
    "User", "UserProfile", "Destination", "destinations_public_view",
    "IntegrationToken", "Poi", "PoiWishlist",
]
