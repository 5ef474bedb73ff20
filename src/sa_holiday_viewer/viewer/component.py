"""
sa_holiday_viewer.viewer.component

The holiday viewer component: id number input, inline validation, search trigger, results.

Responsibilities:
- Own the candidate id number and re-validate it on every change.
- Gate the search trigger on the latest validation result.
- Delegate searches to `SearchOrchestrator` and expose its state for rendering.
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass

from sa_holiday_viewer.collaborators.models import SearchBackend
from sa_holiday_viewer.orchestrator import SearchOrchestrator, SearchOutcome, SearchState
from sa_holiday_viewer.validation import ValidationResult, validate


@dataclass(frozen=True, slots=True)
class Column:
    label: str
    field_name: str
    type: str


COLUMNS: tuple[Column, ...] = (
    Column(label="Holiday Name", field_name="name", type="text"),
    Column(label="Date", field_name="date", type="date"),
)


class HolidayViewer:
    def __init__(self, backend: SearchBackend, *, viewer_id: uuid.UUID | None = None) -> None:
        self.viewer_id = viewer_id or uuid.uuid4()
        self._orchestrator = SearchOrchestrator(backend)
        self._id_number = ""
        # Empty input is invalid, so search starts disabled.
        self._validation = validate(self._id_number)

    @property
    def id_number(self) -> str:
        return self._id_number

    @property
    def validation(self) -> ValidationResult:
        return self._validation

    @property
    def search_enabled(self) -> bool:
        return self._validation.valid and not self._orchestrator.closed

    @property
    def state(self) -> SearchState:
        return self._orchestrator.state

    @property
    def disposed(self) -> bool:
        return self._orchestrator.closed

    def handle_change(self, value: str) -> ValidationResult:
        # Input changes never touch SearchState; only the orchestrator writes it.
        self._id_number = value
        self._validation = validate(value)
        return self._validation

    async def handle_search(self) -> SearchOutcome:
        return await self._orchestrator.search(self._id_number)

    def dispose(self) -> None:
        self._orchestrator.close()
