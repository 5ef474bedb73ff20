"""
sa_holiday_viewer.db.init_db

Creates the `search_attempts` table when the app starts in dev or test.
"""

from __future__ import annotations

from sqlalchemy.ext.asyncio import AsyncEngine

from sa_holiday_viewer.db import models  # noqa: F401  (registers SearchAttempt on Base.metadata)
from sa_holiday_viewer.db.base import Base


async def init_db(engine: AsyncEngine) -> None:
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
