import logging
from functools import lru_cache
from typing import AsyncGenerator

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    create_async_engine,
    async_sessionmaker,
    AsyncSession,
)
from sqlalchemy.pool import StaticPool

from ..config.settings import Settings, get_settings

logger = logging.getLogger(__name__)

# Development fallback used when DATABASE_URL is not configured.
IN_MEMORY_DATABASE_URL = "sqlite+aiosqlite://"


def build_engine(settings: Settings) -> AsyncEngine:
    """
    Create the AsyncEngine for the configured database.

    Without DATABASE_URL an in-memory SQLite engine is returned; StaticPool keeps
    the single in-memory database alive for every session of the process.
    """
    if settings.database_configured:
        return create_async_engine(
            settings.DATABASE_URL,
            echo=settings.SQLALCHEMY_ECHO,
            pool_pre_ping=True,  # Enables connection health checks
        )

    logger.info("DATABASE_URL not set; using in-memory database")
    return create_async_engine(
        IN_MEMORY_DATABASE_URL,
        echo=settings.SQLALCHEMY_ECHO,
        poolclass=StaticPool,
    )


@lru_cache()
def get_engine() -> AsyncEngine:
    return build_engine(get_settings())


@lru_cache()
def get_sessionmaker() -> async_sessionmaker[AsyncSession]:
    # `async_sessionmaker` returns an async session factory.
    return async_sessionmaker(
        bind=get_engine(),
        class_=AsyncSession,
        expire_on_commit=False,
    )


async def get_async_session() -> AsyncGenerator[AsyncSession, None]:
    """FastAPI dependency. Yields a session and ensures it's closed after the request.

    Usage:
        async def endpoint(db: AsyncSession = Depends(get_async_session)):
            await db.execute(...)
    """
    async with get_sessionmaker()() as session:
        yield session
