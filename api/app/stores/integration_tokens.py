"""
Integration Token Store - persisted OAuth tokens, one row per provider
"""
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional

from sqlalchemy import select
from sqlalchemy.dialects.postgresql import insert

from app.models.integration_token import IntegrationToken
from app.stores.base import BaseStore


@dataclass
class TokenRecord:
    provider: str
    access_token: str
    expires_at: datetime


class IntegrationTokenStore(BaseStore):

    async def get(self, provider: str) -> Optional[TokenRecord]:
        async with self.session() as db:
            result = await db.execute(
                select(IntegrationToken).where(IntegrationToken.provider == provider)
            )
            row = result.scalar_one_or_none()
        if row is None:
            return None
        expires_at = row.expires_at
        if expires_at.tzinfo is None:
            expires_at = expires_at.replace(tzinfo=timezone.utc)
        return TokenRecord(provider=row.provider, access_token=row.access_token, expires_at=expires_at)

    async def upsert(self, record: TokenRecord) -> None:
        """Insert or replace the token row keyed by provider"""
        stmt = insert(IntegrationToken).values(
            provider=record.provider,
            access_token=record.access_token,
            expires_at=record.expires_at,
        ).on_conflict_do_update(
            index_elements=[IntegrationToken.provider],
            set_={
                "access_token": record.access_token,
                "expires_at": record.expires_at,
                "updated_at": datetime.now(timezone.utc),
            }
        )
        async with self.session() as db:
            await db.execute(stmt)
