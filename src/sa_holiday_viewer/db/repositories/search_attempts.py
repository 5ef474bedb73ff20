"""
sa_holiday_viewer.db.repositories.search_attempts

Repository for `SearchAttempt` entities.

Responsibilities:
- Append search attempts.
- Query attempts by viewer, newest first.
"""

from __future__ import annotations

import uuid

from sqlalchemy import desc, select
from sqlalchemy.ext.asyncio import AsyncSession

from sa_holiday_viewer.db.models import SearchAttempt, SearchOutcomeKind


class SearchAttemptRepo:
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def add(
        self,
        *,
        viewer_id: uuid.UUID,
        masked_id_number: str,
        outcome: SearchOutcomeKind,
        birth_year: int | None,
        holiday_count: int,
    ) -> SearchAttempt:
        attempt = SearchAttempt(
            viewer_id=viewer_id,
            masked_id_number=masked_id_number,
            outcome=outcome,
            birth_year=birth_year,
            holiday_count=holiday_count,
        )
        self._session.add(attempt)
        await self._session.flush()
        return attempt

    async def list_for_viewer(
        self, viewer_id: uuid.UUID, *, limit: int = 100
    ) -> list[SearchAttempt]:
        stmt = (
            select(SearchAttempt)
            .where(SearchAttempt.viewer_id == viewer_id)
            .order_by(desc(SearchAttempt.created_at))
            .limit(limit)
        )
        return list((await self._session.execute(stmt)).scalars().all())
