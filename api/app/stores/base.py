"""
Base Store - session handling and error translation shared by all stores
"""
from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional
import asyncio
import logging

import asyncpg
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from app.utils.database import AsyncSessionLocal
from app.utils.errors import StoreError

logger = logging.getLogger(__name__)

# asyncpg raises connect-time failures without SQLAlchemy wrapping them
STORE_FAILURES = (
    SQLAlchemyError,
    OSError,
    asyncio.TimeoutError,
    asyncpg.exceptions.InterfaceError,
    asyncpg.exceptions.PostgresError,
)


def _upstream_message(error: Exception) -> str:
    """Prefer the driver's message over SQLAlchemy's wrapper text"""
    original = getattr(error, "orig", None)
    message = str(original) if original is not None else str(error)
    return message or type(error).__name__


class BaseStore:
    """
    Each operation runs in its own session from the shared factory, so a store
    instance can be held for the whole process lifetime.
    """

    def __init__(self, session_factory: Optional[async_sessionmaker] = None):
        self._session_factory = session_factory or AsyncSessionLocal

    @asynccontextmanager
    async def session(self) -> AsyncIterator[AsyncSession]:
        async with self._session_factory() as session:
            try:
                yield session
                await session.commit()
            except STORE_FAILURES as e:
                message = _upstream_message(e)
                logger.warning(f"{type(self).__name__} operation failed: {message}")
                try:
                    await session.rollback()
                except STORE_FAILURES as rollback_error:
                    logger.debug(f"Rollback after failure also failed: {rollback_error}")
                raise StoreError(message, e) from e
