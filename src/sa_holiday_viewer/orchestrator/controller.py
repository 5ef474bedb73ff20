"""
sa_holiday_viewer.orchestrator.controller

Search orchestrator: decode the id number, then fetch the holidays of the birth year.

Responsibilities:
- Enforce the search precondition (validated id number, orchestrator still open).
- Run the two stages strictly in sequence and map each outcome to a `SearchState`.
- Own the current `SearchState`; only the most recent invocation may replace it.
- Discard results that arrive after `close()`.
"""

from __future__ import annotations

from dataclasses import dataclass

from sa_holiday_viewer.collaborators.models import DecodedIdentity, Holiday, SearchBackend
from sa_holiday_viewer.observability.logging import get_logger
from sa_holiday_viewer.orchestrator.errors import OrchestratorClosed, SearchNotAllowed
from sa_holiday_viewer.orchestrator.stages import SearchStage, StageFailed, run_stage
from sa_holiday_viewer.orchestrator.state import (
    DECODE_FAILED_MESSAGE,
    FETCH_FAILED_MESSAGE,
    SearchState,
)
from sa_holiday_viewer.validation import validate

log = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class SearchOutcome:
    """
    Result of one `search()` invocation.

    `state` is the state this invocation computed. When `applied` is False the invocation was
    superseded by a newer one (or the orchestrator was closed) and `state` was not published.
    """

    generation: int
    state: SearchState
    applied: bool
    failed_stage: SearchStage | None = None
    birth_year: int | None = None


class SearchOrchestrator:
    def __init__(self, backend: SearchBackend) -> None:
        self._backend = backend
        self._state = SearchState.idle()
        self._generation = 0
        self._closed = False

    @property
    def state(self) -> SearchState:
        return self._state

    @property
    def closed(self) -> bool:
        return self._closed

    def close(self) -> None:
        # In-flight invocations see `_closed` and drop their results.
        self._closed = True

    def _is_current(self, generation: int) -> bool:
        return not self._closed and generation == self._generation

    def _publish(self, generation: int, state: SearchState) -> bool:
        if not self._is_current(generation):
            log.info(
                "search_result_discarded",
                generation=generation,
                current_generation=self._generation,
                closed=self._closed,
                phase=state.phase.value,
            )
            return False
        self._state = state
        return True

    async def search(self, id_number: str) -> SearchOutcome:
        if self._closed:
            raise OrchestratorClosed("orchestrator is closed")
        if not validate(id_number).valid:
            log.info("search_rejected", reason="invalid_id_number")
            raise SearchNotAllowed("id number failed validation")

        # A newer invocation supersedes any in-flight one.
        self._generation += 1
        generation = self._generation
        self._publish(generation, SearchState.loading())
        log.info("search_started", generation=generation)

        try:
            return await self._run(generation, id_number)
        finally:
            # Loading must never outlive the invocation that set it (e.g. on cancellation).
            if self._is_current(generation) and self._state.is_loading:
                self._state = SearchState.idle()

    async def _run(self, generation: int, id_number: str) -> SearchOutcome:
        decoded = await run_stage(
            SearchStage.decode, lambda: self._backend.decode_identity(id_number)
        )
        if isinstance(decoded, StageFailed):
            return self._finish(
                generation,
                SearchState.failure(DECODE_FAILED_MESSAGE),
                failed_stage=SearchStage.decode,
            )

        identity: DecodedIdentity = decoded.value
        if not self._is_current(generation):
            # Superseded while decoding; do not issue the fetch on behalf of a stale search.
            return self._finish(generation, SearchState.idle(), birth_year=identity.year)

        fetched = await run_stage(
            SearchStage.fetch, lambda: self._backend.fetch_holidays(identity.year)
        )
        if isinstance(fetched, StageFailed):
            return self._finish(
                generation,
                SearchState.failure(FETCH_FAILED_MESSAGE),
                failed_stage=SearchStage.fetch,
                birth_year=identity.year,
            )

        holidays: list[Holiday] = fetched.value
        return self._finish(
            generation,
            SearchState.from_holidays(holidays),
            birth_year=identity.year,
        )

    def _finish(
        self,
        generation: int,
        state: SearchState,
        *,
        failed_stage: SearchStage | None = None,
        birth_year: int | None = None,
    ) -> SearchOutcome:
        applied = self._publish(generation, state)
        log.info(
            "search_finished",
            generation=generation,
            phase=state.phase.value,
            applied=applied,
            failed_stage=failed_stage.value if failed_stage else None,
            birth_year=birth_year,
            holiday_count=len(state.holidays),
        )
        return SearchOutcome(
            generation=generation,
            state=state,
            applied=applied,
            failed_stage=failed_stage,
            birth_year=birth_year,
        )


# --- Module Notes -----------------------------------------------------------
# Single event loop, no locks: the generation counter is the only coordination between
# overlapping invocations. Older responses are dropped instead of overwriting newer state.
