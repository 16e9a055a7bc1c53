"""
Destination Store - reads through vw_destinations_public, writes to destinations
"""
from typing import Any, Dict, List, Optional
import uuid

from sqlalchemy import select, insert, update, delete
from sqlalchemy.ext.asyncio import async_sessionmaker

from app.models.destination import Destination, destinations_public_view
from app.stores.base import BaseStore

GEOMETRY_FIELDS = ("area", "center")

# API field name -> mapped attribute on Destination
_WRITE_ATTRIBUTES = {
    "name": "name",
    "slug": "slug",
    "area": "area",
    "center": "center",
    "center_lat": "center_lat",
    "center_lng": "center_lng",
    "metadata": "extra_metadata",
    "base_price": "base_price",
    "altitude_m": "altitude_m",
    "created_by": "created_by",
}


class DestinationStore(BaseStore):
    """
    With geometry enabled rows come from the public view, which serializes
    area/center as GeoJSON text. Without it the base table is read minus its
    geometry columns, so deployments lacking PostGIS still work.
    """

    def __init__(self, session_factory: Optional[async_sessionmaker] = None, geometry_enabled: bool = True):
        super().__init__(session_factory)
        self.geometry_enabled = geometry_enabled

    def _select(self):
        if self.geometry_enabled:
            return select(destinations_public_view)
        columns = [c.label(c.name) for c in Destination.__table__.c if c.name not in GEOMETRY_FIELDS]
        return select(*columns)

    def _id_column(self):
        if self.geometry_enabled:
            return destinations_public_view.c.id
        return Destination.__table__.c.id

    def _write_values(self, values: Dict[str, Any]) -> Dict[str, Any]:
        prepared = {}
        for field, value in values.items():
            if field not in _WRITE_ATTRIBUTES:
                continue
            if field in GEOMETRY_FIELDS and not self.geometry_enabled:
                continue
            prepared[_WRITE_ATTRIBUTES[field]] = value
        return prepared

    async def list_all(self) -> List[Dict[str, Any]]:
        async with self.session() as db:
            result = await db.execute(self._select())
            return [dict(row) for row in result.mappings().all()]

    async def get(self, destination_id: str) -> Optional[Dict[str, Any]]:
        try:
            key = uuid.UUID(str(destination_id))
        except ValueError:
            return None
        async with self.session() as db:
            result = await db.execute(self._select().where(self._id_column() == key))
            row = result.mappings().one_or_none()
        return dict(row) if row is not None else None

    async def insert(self, values: Dict[str, Any]) -> Dict[str, Any]:
        stmt = insert(Destination).values(**self._write_values(values)).returning(Destination.id)
        async with self.session() as db:
            new_id = (await db.execute(stmt)).scalar_one()
        return await self.get(str(new_id))

    async def update(self, destination_id: str, values: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        prepared = self._write_values(values)
        if prepared:
            stmt = (
                update(Destination)
                .where(Destination.id == uuid.UUID(str(destination_id)))
                .values(**prepared)
            )
            async with self.session() as db:
                await db.execute(stmt)
        return await self.get(destination_id)

    async def delete(self, destination_id: str) -> None:
        stmt = delete(Destination).where(Destination.id == uuid.UUID(str(destination_id)))
        async with self.session() as db:
            await db.execute(stmt)
