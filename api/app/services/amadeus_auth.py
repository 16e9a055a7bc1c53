"""
Amadeus Token Service - read-through cache for the client-credentials bearer token
"""
import asyncio
import logging
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Callable, Optional

from app.services.providers.amadeus import AmadeusProvider
from app.stores.integration_tokens import IntegrationTokenStore, TokenRecord
from app.utils.errors import StoreError

logger = logging.getLogger(__name__)

# A token is never handed out within this window of its expiry
EXPIRY_MARGIN = timedelta(seconds=60)


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class CachedToken:
    token: str
    expires_at: datetime

    def usable_at(self, now: datetime) -> bool:
        return self.expires_at - now > EXPIRY_MARGIN


class AmadeusTokenService:
    """
    Hands out a usable Amadeus bearer token.

    Lookup order is memory, then the persisted integration_tokens row, then a
    live grant. Misses are single-flighted behind a lock so concurrent callers
    trigger at most one refresh.
    """

    provider_name = "amadeus"

    def __init__(
        self,
        provider: AmadeusProvider,
        store: IntegrationTokenStore,
        clock: Callable[[], datetime] = utcnow,
    ):
        self._provider = provider
        self._store = store
        self._clock = clock
        self._cached: Optional[CachedToken] = None
        self._lock = asyncio.Lock()

    @property
    def cached(self) -> Optional[CachedToken]:
        return self._cached

    def _from_memory(self) -> Optional[str]:
        if self._cached and self._cached.usable_at(self._clock()):
            return self._cached.token
        return None

    async def get_token(self) -> str:
        token = self._from_memory()
        if token:
            return token

        async with self._lock:
            # Another caller may have refreshed while we waited
            token = self._from_memory()
            if token:
                return token

            try:
                record = await self._store.get(self.provider_name)
            except StoreError as e:
                logger.warning(f"Could not read persisted {self.provider_name} token: {e}")
                record = None

            if record is not None:
                candidate = CachedToken(token=record.access_token, expires_at=record.expires_at)
                if candidate.usable_at(self._clock()):
                    self._cached = candidate
                    return candidate.token

            return await self._refresh()

    async def refresh_now(self) -> str:
        """Unconditionally fetch a new token, replacing memory and the persisted row"""
        async with self._lock:
            return await self._refresh()

    async def _refresh(self) -> str:
        access_token, expires_in = await self._provider.fetch_access_token()
        lifetime = max(0, expires_in - int(EXPIRY_MARGIN.total_seconds()))
        expires_at = self._clock() + timedelta(seconds=lifetime)

        self._cached = CachedToken(token=access_token, expires_at=expires_at)

        try:
            await self._store.upsert(
                TokenRecord(provider=self.provider_name, access_token=access_token, expires_at=expires_at)
            )
        except StoreError as e:
            logger.warning(f"Refreshed {self.provider_name} token but failed to persist it: {e}")

        logger.info(f"Refreshed {self.provider_name} token, valid until {expires_at.isoformat()}")
        return access_token
