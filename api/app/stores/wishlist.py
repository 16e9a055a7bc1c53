"""
Wishlist Store - poi_wishlist join rows with their POI details
"""
from typing import Any, Dict, List, Optional
import uuid

from sqlalchemy import select, insert, delete
from sqlalchemy.orm import joinedload

from app.models.wishlist import Poi, PoiWishlist
from app.stores.base import BaseStore


def _to_dict(instance) -> Dict[str, Any]:
    data = {}
    for column in instance.__table__.columns:
        value = getattr(instance, column.key)
        data[column.name] = str(value) if isinstance(value, uuid.UUID) else value
    return data


def _uuid(value: str) -> uuid.UUID:
    return uuid.UUID(str(value))


class WishlistStore(BaseStore):

    async def list_for_user(self, user_id: str) -> List[Dict[str, Any]]:
        stmt = (
            select(PoiWishlist)
            .options(joinedload(PoiWishlist.poi))
            .where(PoiWishlist.user_id == _uuid(user_id))
            .order_by(PoiWishlist.created_at.desc())
        )
        async with self.session() as db:
            result = await db.execute(stmt)
            entries = result.unique().scalars().all()
            rows = []
            for entry in entries:
                row = _to_dict(entry)
                row["poi"] = _to_dict(entry.poi) if entry.poi is not None else None
                rows.append(row)
        return rows

    async def find(self, user_id: str, poi_id: str) -> Optional[Dict[str, Any]]:
        stmt = select(PoiWishlist).where(
            PoiWishlist.user_id == _uuid(user_id),
            PoiWishlist.poi_id == _uuid(poi_id),
        )
        async with self.session() as db:
            entry = (await db.execute(stmt)).scalars().first()
            return _to_dict(entry) if entry is not None else None

    async def insert(self, user_id: str, poi_id: str) -> Dict[str, Any]:
        stmt = (
            insert(PoiWishlist)
            .values(user_id=_uuid(user_id), poi_id=_uuid(poi_id))
            .returning(*PoiWishlist.__table__.c)
        )
        async with self.session() as db:
            row = (await db.execute(stmt)).mappings().one()
        return {key: str(value) if isinstance(value, uuid.UUID) else value for key, value in row.items()}

    async def delete(self, user_id: str, poi_id: str) -> int:
        """Delete the exact pair; returns the number of rows removed"""
        stmt = (
            delete(PoiWishlist)
            .where(
                PoiWishlist.user_id == _uuid(user_id),
                PoiWishlist.poi_id == _uuid(poi_id),
            )
            .returning(PoiWishlist.id)
        )
        async with self.session() as db:
            deleted = (await db.execute(stmt)).scalars().all()
        return len(deleted)
