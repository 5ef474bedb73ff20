"""
tests.test_orchestrator

Decode → fetch state machine, including overlapping and abandoned searches.
"""

from __future__ import annotations

import asyncio
from datetime import date

import pytest

from sa_holiday_viewer.collaborators.models import Holiday
from sa_holiday_viewer.orchestrator import (
    DECODE_FAILED_MESSAGE,
    FETCH_FAILED_MESSAGE,
    OrchestratorClosed,
    SearchNotAllowed,
    SearchOrchestrator,
    SearchPhase,
    SearchStage,
    SearchState,
)
from tests.fakes import NEW_YEAR_1990, VALID_ID, FakeBackend, GatedBackend


def _assert_exclusive(state: SearchState) -> None:
    visible = [state.is_loading, state.show_results, bool(state.error_message)]
    assert sum(visible) <= 1, state


@pytest.mark.asyncio
async def test_success_shows_results() -> None:
    backend = FakeBackend(year=1990, holidays=[NEW_YEAR_1990])
    orch = SearchOrchestrator(backend)

    outcome = await orch.search(VALID_ID)

    state = orch.state
    assert state.phase is SearchPhase.success
    assert state.holidays == (NEW_YEAR_1990,)
    assert state.show_results is True
    assert state.error_message == ""
    assert state.is_loading is False
    assert outcome.applied is True
    assert outcome.birth_year == 1990
    assert outcome.failed_stage is None
    assert backend.calls == [("decode", VALID_ID), ("fetch", 1990)]


@pytest.mark.asyncio
async def test_empty_holidays_is_silent() -> None:
    orch = SearchOrchestrator(FakeBackend(holidays=[]))

    await orch.search(VALID_ID)

    state = orch.state
    assert state.phase is SearchPhase.empty
    assert state.show_results is False
    assert state.error_message == ""
    assert state.is_loading is False


@pytest.mark.asyncio
async def test_decode_failure() -> None:
    backend = FakeBackend(decode_error=RuntimeError("decoder down"))
    orch = SearchOrchestrator(backend)

    outcome = await orch.search(VALID_ID)

    assert orch.state.phase is SearchPhase.failure
    assert orch.state.error_message == DECODE_FAILED_MESSAGE
    assert orch.state.is_loading is False
    assert outcome.failed_stage is SearchStage.decode
    # The fetch is never issued without a decoded year.
    assert [c[0] for c in backend.calls] == ["decode"]


@pytest.mark.asyncio
async def test_fetch_failure() -> None:
    orch = SearchOrchestrator(FakeBackend(fetch_error=ConnectionError("no route")))

    outcome = await orch.search(VALID_ID)

    assert orch.state.phase is SearchPhase.failure
    assert orch.state.error_message == FETCH_FAILED_MESSAGE
    assert orch.state.is_loading is False
    assert orch.state.holidays == ()
    assert outcome.failed_stage is SearchStage.fetch
    assert outcome.birth_year == 1990


@pytest.mark.asyncio
async def test_holiday_order_is_preserved() -> None:
    unordered = [
        Holiday(name="Christmas Day", date=date(1990, 12, 25)),
        Holiday(name="New Year's Day", date=date(1990, 1, 1)),
        Holiday(name="Freedom Day", date=date(1990, 4, 27)),
    ]
    orch = SearchOrchestrator(FakeBackend(holidays=unordered))

    await orch.search(VALID_ID)

    assert list(orch.state.holidays) == unordered


@pytest.mark.asyncio
async def test_loading_state_is_exclusive_and_clears_previous_error() -> None:
    backend = GatedBackend(decode_error=RuntimeError("first attempt fails"))
    orch = SearchOrchestrator(backend)
    await orch.search(VALID_ID)
    assert orch.state.error_message == DECODE_FAILED_MESSAGE

    backend.decode_error = None
    backend.holidays = [NEW_YEAR_1990]
    backend.decode_entered.clear()
    gate = backend.gate_next()
    task = asyncio.create_task(orch.search(VALID_ID))
    await backend.decode_entered.wait()

    assert orch.state.is_loading is True
    assert orch.state.error_message == ""
    assert orch.state.show_results is False
    assert orch.state.holidays == ()
    _assert_exclusive(orch.state)

    gate.set()
    await task
    assert orch.state.phase is SearchPhase.success
    _assert_exclusive(orch.state)


@pytest.mark.asyncio
async def test_invalid_id_is_rejected_without_transition() -> None:
    backend = FakeBackend(holidays=[NEW_YEAR_1990])
    orch = SearchOrchestrator(backend)

    with pytest.raises(SearchNotAllowed):
        await orch.search("8001015009088")

    assert orch.state == SearchState.idle()
    assert backend.calls == []


@pytest.mark.asyncio
async def test_newer_search_supersedes_in_flight_one() -> None:
    backend = GatedBackend(holidays=[NEW_YEAR_1990])
    orch = SearchOrchestrator(backend)
    gate = backend.gate_next()

    first = asyncio.create_task(orch.search(VALID_ID))
    await backend.decode_entered.wait()

    second = await orch.search(VALID_ID)
    assert second.applied is True
    assert orch.state.phase is SearchPhase.success

    gate.set()
    first_outcome = await first

    assert first_outcome.applied is False
    assert orch.state == second.state
    # The stale invocation stops after decoding; only the newer one fetched.
    assert [c for c in backend.calls if c[0] == "fetch"] == [("fetch", 1990)]


@pytest.mark.asyncio
async def test_close_discards_in_flight_result() -> None:
    backend = GatedBackend(holidays=[NEW_YEAR_1990])
    orch = SearchOrchestrator(backend)
    gate = backend.gate_next()

    task = asyncio.create_task(orch.search(VALID_ID))
    await backend.decode_entered.wait()
    orch.close()
    gate.set()
    outcome = await task

    assert outcome.applied is False
    assert orch.state.phase is not SearchPhase.success
    with pytest.raises(OrchestratorClosed):
        await orch.search(VALID_ID)


@pytest.mark.asyncio
async def test_cancellation_clears_loading() -> None:
    backend = GatedBackend()
    orch = SearchOrchestrator(backend)
    backend.gate_next()

    task = asyncio.create_task(orch.search(VALID_ID))
    await backend.decode_entered.wait()
    assert orch.state.is_loading is True

    task.cancel()
    with pytest.raises(asyncio.CancelledError):
        await task

    assert orch.state.is_loading is False
    assert orch.state.phase is SearchPhase.idle


def test_failure_state_requires_message() -> None:
    with pytest.raises(ValueError):
        SearchState.failure("")


def test_from_holidays_empty_is_not_success() -> None:
    state = SearchState.from_holidays([])
    assert state.phase is SearchPhase.empty
    assert state.show_results is False
    assert state.is_loading is False
    assert state.error_message == ""
