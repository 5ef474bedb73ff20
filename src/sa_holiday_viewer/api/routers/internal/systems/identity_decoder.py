"""
sa_holiday_viewer.api.routers.internal.systems.identity_decoder

Emulated identity decoding system.

Responsibilities:
- Turn a valid SA id number into its birth date (YYMMDD prefix) and birth year.
- Reject ids that fail validation or whose prefix is not a calendar date (422).
"""

from __future__ import annotations

from datetime import date

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel

from sa_holiday_viewer.auth.deps import require_roles
from sa_holiday_viewer.validation import validate

router = APIRouter(dependencies=[Depends(require_roles("internal_system"))])


class DecodeResponse(BaseModel):
    year: int
    date_of_birth: date


def resolve_birth_date(id_number: str, *, today: date | None = None) -> date:
    """
    Two-digit years resolve to the most recent century that does not put the birth in the future.

    Raises ValueError when the YYMMDD prefix is not a real date in either century.
    """

    today = today or date.today()
    yy, mm, dd = int(id_number[0:2]), int(id_number[2:4]), int(id_number[4:6])

    for century in (2000, 1900):
        try:
            born = date(century + yy, mm, dd)
        except ValueError:
            # 29 Feb can be valid in one century and not the other (e.g. 00 → 2000 vs 1900).
            continue
        if born <= today:
            return born
    raise ValueError(f"no valid birth date for prefix {id_number[:6]}")


@router.get("/{id_number}/decode", response_model=DecodeResponse)
async def decode_identity(id_number: str) -> DecodeResponse:
    if not validate(id_number).valid:
        raise HTTPException(status_code=422, detail="Invalid SA ID number")
    try:
        born = resolve_birth_date(id_number)
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e)) from e
    return DecodeResponse(year=born.year, date_of_birth=born)


# --- Module Notes -----------------------------------------------------------
# Called by `InternalApiClient.decode_identity`.
