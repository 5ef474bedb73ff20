"""
sa_holiday_viewer.collaborators.models

Values exchanged with the decoding and holiday collaborators.

Responsibilities:
- Define `DecodedIdentity` (carries the birth year) and `Holiday`.
- Define the `SearchBackend` protocol the orchestrator depends on.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Protocol


@dataclass(frozen=True, slots=True)
class DecodedIdentity:
    year: int
    date_of_birth: date | None = None


@dataclass(frozen=True, slots=True)
class Holiday:
    name: str
    date: date


class SearchBackend(Protocol):
    async def decode_identity(self, id_number: str) -> DecodedIdentity: ...

    async def fetch_holidays(self, year: int) -> list[Holiday]: ...


class CollaboratorResponseError(Exception):
    """
    A collaborator answered 2xx but the payload did not have the expected shape.
    """


# --- Module Notes -----------------------------------------------------------
# Tests pass in-memory fakes that satisfy SearchBackend; production uses InternalApiClient.
