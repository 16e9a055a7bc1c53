"""
Destination Service - CRUD over the destinations resource
"""
from typing import Any, Dict, List, Optional
import logging

from app.schemas.destination import DestinationCreate, DestinationUpdate
from app.stores.destinations import DestinationStore
from app.utils.errors import BadRequestError, NotFoundError, StoreError
from app.utils.geojson import destination_from_row

logger = logging.getLogger(__name__)


class DestinationService:
    """Maps API requests onto the destination store; decodes geometry on the way out"""

    def __init__(self, store: DestinationStore):
        self._store = store

    async def get_all(self) -> List[Dict[str, Any]]:
        try:
            rows = await self._store.list_all()
        except StoreError as e:
            raise BadRequestError(e.message)
        return [destination_from_row(row) for row in rows]

    async def get_by_id(self, destination_id: str) -> Dict[str, Any]:
        try:
            row = await self._store.get(destination_id)
        except StoreError as e:
            raise BadRequestError(e.message)
        if row is None:
            raise NotFoundError(f"Destination with ID {destination_id} not found.")
        return destination_from_row(row)

    async def create(self, payload: DestinationCreate, created_by: Optional[str] = None) -> Dict[str, Any]:
        values = payload.model_dump(exclude_none=True)
        if created_by:
            values["created_by"] = created_by
        try:
            row = await self._store.insert(values)
        except StoreError as e:
            raise BadRequestError(e.message)
        logger.info(f"Destination created: {row['id']} ({payload.slug})")
        return destination_from_row(row)

    async def update(self, destination_id: str, payload: DestinationUpdate) -> Dict[str, Any]:
        existing = await self.get_by_id(destination_id)

        values = payload.model_dump(exclude_unset=True)
        if not values:
            return existing

        try:
            row = await self._store.update(destination_id, values)
        except StoreError as e:
            raise BadRequestError(e.message)
        if row is None:
            raise NotFoundError(f"Destination with ID {destination_id} not found.")
        logger.info(f"Destination updated: {destination_id} fields={sorted(values)}")
        return destination_from_row(row)

    async def delete(self, destination_id: str) -> Dict[str, str]:
        await self.get_by_id(destination_id)
        try:
            await self._store.delete(destination_id)
        except StoreError as e:
            raise BadRequestError(e.message)
        logger.info(f"Destination deleted: {destination_id}")
        return {"destination_id": destination_id}
