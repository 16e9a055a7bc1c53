"""
Wishlist Service - users' saved points of interest
"""
from typing import Any, Dict, List
import logging

from app.stores.wishlist import WishlistStore
from app.utils.errors import BadRequestError, NotFoundError, StoreError

logger = logging.getLogger(__name__)


class WishlistService:

    def __init__(self, store: WishlistStore):
        self._store = store

    async def get_all_by_user(self, user_id: str) -> List[Dict[str, Any]]:
        """Wishlist rows for a user, each with its POI nested under `poi`"""
        try:
            return await self._store.list_for_user(user_id)
        except StoreError as e:
            raise BadRequestError(e.message)

    async def add(self, user_id: str, poi_id: str) -> Dict[str, Any]:
        try:
            existing = await self._store.find(user_id, poi_id)
        except StoreError as e:
            raise BadRequestError(e.message)
        if existing:
            raise BadRequestError("POI already wishlisted.")

        try:
            row = await self._store.insert(user_id, poi_id)
        except StoreError as e:
            raise BadRequestError(e.message)
        logger.info(f"Wishlist add: user={user_id} poi={poi_id}")
        return row

    async def remove(self, user_id: str, poi_id: str) -> Dict[str, str]:
        try:
            deleted = await self._store.delete(user_id, poi_id)
        except StoreError as e:
            raise BadRequestError(e.message)
        if not deleted:
            raise NotFoundError("POI not found in wishlist.")
        logger.info(f"Wishlist remove: user={user_id} poi={poi_id}")
        return {"poi_id": poi_id, "user_id": user_id}
