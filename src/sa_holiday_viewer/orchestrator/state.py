"""
sa_holiday_viewer.orchestrator.state

UI-visible search state.

Responsibilities:
- Define the search phases and the immutable `SearchState` value.
- Provide one constructor per transition target so callers cannot build a state that shows
  loading, results and an error at the same time.
"""

from __future__ import annotations

import enum
from collections.abc import Iterable
from dataclasses import dataclass

from sa_holiday_viewer.collaborators.models import Holiday

DECODE_FAILED_MESSAGE = "Invalid ID or decoding failed."
FETCH_FAILED_MESSAGE = "Could not retrieve holidays."


class SearchPhase(enum.StrEnum):
    idle = "IDLE"
    loading = "LOADING"
    success = "SUCCESS"
    # Fetch returned no holidays: displays exactly like idle (no results, no error).
    empty = "EMPTY"
    failure = "FAILURE"


@dataclass(frozen=True, slots=True)
class SearchState:
    phase: SearchPhase = SearchPhase.idle
    holidays: tuple[Holiday, ...] = ()
    error_message: str = ""

    @property
    def is_loading(self) -> bool:
        return self.phase is SearchPhase.loading

    @property
    def show_results(self) -> bool:
        return self.phase is SearchPhase.success and bool(self.holidays) and not self.error_message

    @classmethod
    def idle(cls) -> SearchState:
        return cls()

    @classmethod
    def loading(cls) -> SearchState:
        return cls(phase=SearchPhase.loading)

    @classmethod
    def from_holidays(cls, holidays: Iterable[Holiday]) -> SearchState:
        rows = tuple(holidays)
        if not rows:
            return cls(phase=SearchPhase.empty)
        return cls(phase=SearchPhase.success, holidays=rows)

    @classmethod
    def failure(cls, message: str) -> SearchState:
        if not message:
            raise ValueError("failure state requires a message")
        return cls(phase=SearchPhase.failure, error_message=message)


# --- Module Notes -----------------------------------------------------------
# SearchState is replaced wholesale on each transition; it is never mutated in place.
