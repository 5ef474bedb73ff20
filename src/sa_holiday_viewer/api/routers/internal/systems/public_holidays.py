"""
sa_holiday_viewer.api.routers.internal.systems.public_holidays

Emulated holiday lookup system.

Responsibilities:
- Return the public holidays of a year for the configured country, ordered by date.
"""

from __future__ import annotations

import datetime as dt

import holidays
from fastapi import APIRouter, Depends, HTTPException, Path
from pydantic import BaseModel

from sa_holiday_viewer.auth.deps import require_roles
from sa_holiday_viewer.settings import Settings, get_settings

router = APIRouter(dependencies=[Depends(require_roles("internal_system"))])


class HolidayItem(BaseModel):
    name: str
    date: dt.date


class HolidaysResponse(BaseModel):
    year: int
    country: str
    holidays: list[HolidayItem]


def public_holidays_for(country: str, year: int) -> list[HolidayItem]:
    calendar = holidays.country_holidays(country, years=year)
    return [HolidayItem(name=name, date=day) for day, name in sorted(calendar.items())]


@router.get("/{year}", response_model=HolidaysResponse)
async def get_public_holidays(
    year: int = Path(ge=1900, le=2100),
    settings: Settings = Depends(get_settings),
) -> HolidaysResponse:
    country = settings.holiday_country.upper()
    try:
        items = public_holidays_for(country, year)
    except NotImplementedError as e:
        # holidays raises NotImplementedError for unknown country codes.
        raise HTTPException(
            status_code=422, detail=f"Unsupported country: {country}"
        ) from e
    return HolidaysResponse(year=year, country=country, holidays=items)


# --- Module Notes -----------------------------------------------------------
# Called by `InternalApiClient.fetch_holidays`. An empty list is a valid answer.
