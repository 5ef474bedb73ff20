"""
sa_holiday_viewer.services.search_service

Search lifecycle service (transaction + persistence owner).

Responsibilities:
- Run a viewer search through its orchestrator.
- Record each completed attempt in the audit trail and commit.
"""

from __future__ import annotations

import uuid

from sqlalchemy.ext.asyncio import AsyncSession

from sa_holiday_viewer.db.models import SearchAttempt, SearchOutcomeKind
from sa_holiday_viewer.db.repositories.search_attempts import SearchAttemptRepo
from sa_holiday_viewer.observability.logging import mask_id_number
from sa_holiday_viewer.orchestrator import SearchOutcome, SearchPhase, SearchStage
from sa_holiday_viewer.viewer import HolidayViewer


class SearchService:
    def __init__(self, *, session: AsyncSession) -> None:
        self._session = session
        self._attempts = SearchAttemptRepo(session)

    async def search(self, viewer: HolidayViewer) -> SearchOutcome:
        # Captured before awaiting: the input may change while the search is in flight.
        id_number = viewer.id_number
        outcome = await viewer.handle_search()

        await self._attempts.add(
            viewer_id=viewer.viewer_id,
            masked_id_number=mask_id_number(id_number),
            outcome=classify_outcome(outcome),
            birth_year=outcome.birth_year,
            holiday_count=len(outcome.state.holidays),
        )
        await self._session.commit()
        return outcome

    async def list_attempts(self, viewer_id: uuid.UUID) -> list[SearchAttempt]:
        return await self._attempts.list_for_viewer(viewer_id)


def classify_outcome(outcome: SearchOutcome) -> SearchOutcomeKind:
    if not outcome.applied:
        return SearchOutcomeKind.superseded
    if outcome.failed_stage is SearchStage.decode:
        return SearchOutcomeKind.decode_failed
    if outcome.failed_stage is SearchStage.fetch:
        return SearchOutcomeKind.fetch_failed
    if outcome.state.phase is SearchPhase.success:
        return SearchOutcomeKind.success
    return SearchOutcomeKind.empty


# --- Module Notes -----------------------------------------------------------
# Searches rejected by the orchestrator (invalid id, disposed viewer) raise before anything
# is recorded; only invocations that reached a terminal state are persisted.
