"""
Supabase Postgres Connection & Session Management
"""
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import create_async_engine, AsyncSession, async_sessionmaker
from sqlalchemy.orm import declarative_base
import logging

from app.config import settings

logger = logging.getLogger(__name__)

engine = create_async_engine(
    settings.DATABASE_URL,
    echo=settings.DEBUG,
    pool_size=settings.DB_POOL_SIZE,
    max_overflow=settings.DB_MAX_OVERFLOW,
    pool_pre_ping=True,
    pool_recycle=1800,
    connect_args={
        # Supabase's pooler (pgbouncer, transaction mode) cannot hold prepared statements
        "statement_cache_size": 0,
        "command_timeout": 30,
    },
)

AsyncSessionLocal = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
    autoflush=False,
)

# Tables are owned by Supabase migrations; models only describe them
Base = declarative_base()


async def init_db():
    """Check connectivity and, when destinations use geometry, that PostGIS is installed"""
    logger.info("Connecting to Supabase Postgres...")
    async with engine.connect() as conn:
        await conn.execute(text("SELECT 1"))
        if settings.DESTINATIONS_GEOMETRY_ENABLED:
            try:
                version = (await conn.execute(text("SELECT postgis_lib_version()"))).scalar()
                logger.info(f"PostGIS {version} available")
            except SQLAlchemyError:
                logger.warning(
                    "PostGIS not available; set DESTINATIONS_GEOMETRY_ENABLED=false to read destinations without geometry"
                )
    logger.info("Supabase Postgres connection established")


async def close_db():
    logger.info("Closing Supabase Postgres connection...")
    await engine.dispose()


async def get_db() -> AsyncSession:
    """
    Dependency that provides a database session
    Usage: db: AsyncSession = Depends(get_db)
    """
    async with AsyncSessionLocal() as session:
        yield session
