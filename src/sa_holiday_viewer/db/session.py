"""
sa_holiday_viewer.db.session

Engine and session factory for the search audit store.

Responsibilities:
- Build the async engine from `Settings.database_url` (aiosqlite by default).
- Build the sessionmaker used by `api.deps.db_session`.
"""

from __future__ import annotations

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from sa_holiday_viewer.settings import Settings


def create_engine(settings: Settings) -> AsyncEngine:
    return create_async_engine(settings.database_url, pool_pre_ping=True)


def create_sessionmaker(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    # Attempt rows are serialised after the request commits; keep them loaded.
    return async_sessionmaker(bind=engine, expire_on_commit=False, autoflush=False)
