"""Async engine and session factory built from application settings."""

from typing import Any

from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine

from restcraft.config import Settings
from restcraft.models.base import Base


def engine_options(settings: Settings) -> dict[str, Any]:
    """Keyword arguments for ``create_async_engine``.

    SQLite uses a static pool that rejects sizing arguments, so pool sizing
    is only passed for server databases.
    """
    options: dict[str, Any] = {"pool_pre_ping": True, "echo": settings.sql_echo}
    if not settings.database_url.startswith("sqlite"):
        options["pool_size"] = settings.db_pool_size
        options["max_overflow"] = settings.db_max_overflow
    return options


async def init_db(settings: Settings) -> AsyncEngine:
    """Create the async engine described by ``settings``.

    With ``settings.create_schema`` set, missing tables are created too.
    """
    engine = create_async_engine(settings.database_url, **engine_options(settings))
    if settings.create_schema:
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
    return engine


def get_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Sessions keep loaded attributes after commit so views can be built from them."""
    return async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


async def close_db(engine: AsyncEngine) -> None:
    """Dispose of the engine and its pooled connections."""
    await engine.dispose()
