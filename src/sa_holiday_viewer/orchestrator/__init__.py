"""
sa_holiday_viewer.orchestrator

Search orchestration package (decode → fetch state machine).

Responsibilities:
- Immutable search state, stage-tagged collaborator calls, and the orchestrator itself.
"""

from sa_holiday_viewer.orchestrator.controller import SearchOrchestrator, SearchOutcome
from sa_holiday_viewer.orchestrator.errors import OrchestratorClosed, SearchNotAllowed
from sa_holiday_viewer.orchestrator.stages import SearchStage
from sa_holiday_viewer.orchestrator.state import (
    DECODE_FAILED_MESSAGE,
    FETCH_FAILED_MESSAGE,
    SearchPhase,
    SearchState,
)

__all__ = [
    "DECODE_FAILED_MESSAGE",
    "FETCH_FAILED_MESSAGE",
    "OrchestratorClosed",
    "SearchNotAllowed",
    "SearchOrchestrator",
    "SearchOutcome",
    "SearchPhase",
    "SearchStage",
    "SearchState",
]
