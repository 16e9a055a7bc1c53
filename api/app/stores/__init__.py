"""Data stores over the hosted Supabase Postgres"""
from app.stores.base import BaseStore
from app.stores.destinations import DestinationStore
from app.stores.integration_tokens import IntegrationTokenStore, TokenRecord
from app.stores.users import UserStore
from app.stores.wishlist import WishlistStore

__all__ = [
    "BaseStore",
    "DestinationStore",
    "IntegrationTokenStore",
    "TokenRecord",
    "UserStore",
    "WishlistStore",
]
