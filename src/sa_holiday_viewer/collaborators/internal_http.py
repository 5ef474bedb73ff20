"""
sa_holiday_viewer.collaborators.internal_http

HTTP client boundary used by the orchestrator to call the decoding and holiday systems.

Responsibilities:
- Attach short-lived JWT credentials (role=internal_system).
- Call collaborator endpoints under `/internal/v1/*`.
- Convert JSON payloads into `DecodedIdentity` / `Holiday` values.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, timedelta
from typing import Any

import httpx

from sa_holiday_viewer.auth.jwt import issue_token, jwt_config_from_settings
from sa_holiday_viewer.collaborators.models import (
    CollaboratorResponseError,
    DecodedIdentity,
    Holiday,
)
from sa_holiday_viewer.settings import Settings


@dataclass(frozen=True, slots=True)
class InternalApiAuth:
    # Identity used for collaborator calls; subject is an internal service identity.
    subject: str = "sa-holiday-viewer"
    roles: tuple[str, ...] = ("internal_system",)


class InternalApiClient:
    """
    Implements `SearchBackend` over HTTP.
    Errors from httpx (transport failures, non-2xx statuses) propagate to the caller.
    """

    def __init__(
        self,
        *,
        settings: Settings,
        http: httpx.AsyncClient,
        auth: InternalApiAuth | None = None,
    ) -> None:
        self._settings = settings
        self._http = http
        self._auth = auth or InternalApiAuth()

    def _authz(self) -> dict[str, str]:
        token = issue_token(
            cfg=jwt_config_from_settings(self._settings),
            subject=self._auth.subject,
            roles=list(self._auth.roles),
            ttl=timedelta(minutes=5),
        )
        return {"Authorization": f"Bearer {token}"}

    async def decode_identity(self, id_number: str) -> DecodedIdentity:
        r = await self._http.get(
            f"/internal/v1/identity/{id_number}/decode",
            headers=self._authz(),
        )
        r.raise_for_status()
        return _parse_decoded(r.json())

    async def fetch_holidays(self, year: int) -> list[Holiday]:
        r = await self._http.get(
            f"/internal/v1/holidays/{year}",
            headers=self._authz(),
        )
        r.raise_for_status()
        return _parse_holidays(r.json())


def _parse_decoded(payload: Any) -> DecodedIdentity:
    if not isinstance(payload, dict):
        raise CollaboratorResponseError("decode response must be an object")
    year = payload.get("year")
    # bool is an int subclass; reject it explicitly.
    if not isinstance(year, int) or isinstance(year, bool):
        raise CollaboratorResponseError("decode response is missing an integer 'year'")

    dob_raw = payload.get("date_of_birth")
    dob: date | None = None
    if dob_raw is not None:
        try:
            dob = date.fromisoformat(str(dob_raw))
        except ValueError as e:
            raise CollaboratorResponseError(f"invalid date_of_birth: {dob_raw!r}") from e
    return DecodedIdentity(year=year, date_of_birth=dob)


def _parse_holidays(payload: Any) -> list[Holiday]:
    # Accept both {"holidays": [...]} and a bare list.
    items = payload.get("holidays") if isinstance(payload, dict) else payload
    if not isinstance(items, list):
        raise CollaboratorResponseError("holiday response must contain a list")

    out: list[Holiday] = []
    for it in items:
        if not isinstance(it, dict) or "name" not in it or "date" not in it:
            raise CollaboratorResponseError(f"malformed holiday entry: {it!r}")
        try:
            day = date.fromisoformat(str(it["date"]))
        except ValueError as e:
            raise CollaboratorResponseError(f"invalid holiday date: {it['date']!r}") from e
        out.append(Holiday(name=str(it["name"]), date=day))
    return out


# --- Module Notes -----------------------------------------------------------
# Holiday order is preserved exactly as received; callers must not re-sort.
