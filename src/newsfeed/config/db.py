"""Database connection and session management."""

from collections.abc import AsyncGenerator
from typing import Any, Final

from sqlalchemy.ext.asyncio import create_async_engine
from sqlmodel.ext.asyncio.session import AsyncSession

from .config import settings

__all__ = ["engine", "get_session"]


def _engine_options() -> dict[str, Any]:
    """Pool and driver options for the configured database URL."""
    options: dict[str, Any] = {
        "echo": settings.db_logging,
        "future": settings.db_future,
        "pool_pre_ping": settings.db_pool_pre_ping,
        "pool_recycle": settings.db_pool_recycle,
    }
    if settings.db_url.startswith("sqlite"):
        options["connect_args"] = {
            "check_same_thread": False,
            "timeout": settings.db_timeout,
        }
        # In-memory SQLite runs on a StaticPool, which takes no sizing arguments
        if ":memory:" in settings.db_url:
            return options

    options.update(
        pool_timeout=settings.db_pool_timeout,
        pool_size=settings.db_pool_size,
        max_overflow=settings.db_max_overflow,
    )
    return options


engine: Final = create_async_engine(settings.db_url, **_engine_options())


async def get_session() -> AsyncGenerator[AsyncSession]:
    """Get session for database operations."""
    async with AsyncSession(engine, expire_on_commit=False) as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
