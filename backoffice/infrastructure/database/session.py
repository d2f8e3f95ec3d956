"""Async engine, session factory and the per-request unit of work."""

from collections.abc import AsyncGenerator
from typing import Any

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from backoffice.config import get_settings

_ASYNC_DRIVERS = {
    "sqlite:///": "sqlite+aiosqlite:///",
    "postgresql://": "postgresql+asyncpg://",
    "postgres://": "postgresql+asyncpg://",
}


def to_async_url(url: str) -> str:
    """Swap a plain SQLite/PostgreSQL URL onto its async driver."""
    for sync_prefix, async_prefix in _ASYNC_DRIVERS.items():
        if url.startswith(sync_prefix):
            return async_prefix + url[len(sync_prefix):]
    return url


def engine_options(url: str, *, sql_debug: bool = False) -> dict[str, Any]:
    options: dict[str, Any] = {"echo": sql_debug}
    if not url.startswith("sqlite"):
        # Long-lived PostgreSQL connections get dropped by proxies.
        options.update(pool_pre_ping=True, pool_recycle=1800)
    return options


settings = get_settings()
_async_url = to_async_url(settings.database_url)

engine = create_async_engine(
    _async_url,
    **engine_options(_async_url, sql_debug=settings.log_level_sql.upper() == "DEBUG"),
)

async_session_factory = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
)


async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """FastAPI dependency: one session per request.

    Committed when the endpoint returns, rolled back when it raises.
    """
    async with async_session_factory() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
