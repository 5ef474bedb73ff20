"""
sa_holiday_viewer.api.routers.viewers

Viewer session endpoints.

Responsibilities:
- Create and dispose viewer sessions.
- Bind the id number input (re-validated on every update).
- Trigger the decode → fetch search and render the resulting state.
- Expose the persisted search attempts of a viewer.
"""

from __future__ import annotations

import datetime as dt
import uuid

from fastapi import APIRouter, Depends, HTTPException, Response
from pydantic import BaseModel
from sqlalchemy.ext.asyncio import AsyncSession
from starlette.status import HTTP_204_NO_CONTENT, HTTP_404_NOT_FOUND, HTTP_409_CONFLICT

from sa_holiday_viewer.api.deps import db_session, get_viewer, viewer_registry
from sa_holiday_viewer.api.routers.identity import ValidationView
from sa_holiday_viewer.orchestrator import OrchestratorClosed, SearchNotAllowed
from sa_holiday_viewer.services.search_service import SearchService
from sa_holiday_viewer.services.viewer_registry import ViewerNotFound, ViewerRegistry
from sa_holiday_viewer.viewer import COLUMNS, HolidayViewer

router = APIRouter(prefix="/v1/viewers", tags=["viewers"])


class ColumnView(BaseModel):
    label: str
    field_name: str
    type: str


class HolidayView(BaseModel):
    name: str
    date: dt.date


class ViewerResponse(BaseModel):
    viewer_id: uuid.UUID
    id_number: str
    validation: ValidationView
    search_enabled: bool
    phase: str
    is_loading: bool
    show_results: bool
    error_message: str
    columns: list[ColumnView]
    holidays: list[HolidayView]

    @classmethod
    def from_viewer(cls, viewer: HolidayViewer) -> ViewerResponse:
        state = viewer.state
        # The results table is rendered only when show_results holds.
        rows = state.holidays if state.show_results else ()
        return cls(
            viewer_id=viewer.viewer_id,
            id_number=viewer.id_number,
            validation=ValidationView(
                valid=viewer.validation.valid, message=viewer.validation.message
            ),
            search_enabled=viewer.search_enabled,
            phase=state.phase.value,
            is_loading=state.is_loading,
            show_results=state.show_results,
            error_message=state.error_message,
            columns=[
                ColumnView(label=c.label, field_name=c.field_name, type=c.type) for c in COLUMNS
            ],
            holidays=[HolidayView(name=h.name, date=h.date) for h in rows],
        )


class IdNumberUpdate(BaseModel):
    id_number: str


class SearchAttemptView(BaseModel):
    id: uuid.UUID
    masked_id_number: str
    outcome: str
    birth_year: int | None
    holiday_count: int
    created_at: dt.datetime


@router.post("", response_model=ViewerResponse, status_code=201)
async def create_viewer(
    registry: ViewerRegistry = Depends(viewer_registry),
) -> ViewerResponse:
    return ViewerResponse.from_viewer(registry.create())


@router.get("/{viewer_id}", response_model=ViewerResponse)
async def get_viewer_state(viewer: HolidayViewer = Depends(get_viewer)) -> ViewerResponse:
    return ViewerResponse.from_viewer(viewer)


@router.put("/{viewer_id}/id-number", response_model=ViewerResponse)
async def update_id_number(
    body: IdNumberUpdate,
    viewer: HolidayViewer = Depends(get_viewer),
) -> ViewerResponse:
    viewer.handle_change(body.id_number)
    return ViewerResponse.from_viewer(viewer)


@router.post("/{viewer_id}/search", response_model=ViewerResponse)
async def search_holidays(
    viewer: HolidayViewer = Depends(get_viewer),
    session: AsyncSession = Depends(db_session),
) -> ViewerResponse:
    try:
        await SearchService(session=session).search(viewer)
    except SearchNotAllowed as e:
        raise HTTPException(
            status_code=HTTP_409_CONFLICT, detail=viewer.validation.message or "Search disabled"
        ) from e
    except OrchestratorClosed as e:
        raise HTTPException(status_code=HTTP_404_NOT_FOUND, detail="Viewer not found") from e
    return ViewerResponse.from_viewer(viewer)


@router.get("/{viewer_id}/attempts", response_model=list[SearchAttemptView])
async def list_search_attempts(
    viewer: HolidayViewer = Depends(get_viewer),
    session: AsyncSession = Depends(db_session),
) -> list[SearchAttemptView]:
    attempts = await SearchService(session=session).list_attempts(viewer.viewer_id)
    return [
        SearchAttemptView(
            id=a.id,
            masked_id_number=a.masked_id_number,
            outcome=a.outcome.value,
            birth_year=a.birth_year,
            holiday_count=a.holiday_count,
            created_at=a.created_at,
        )
        for a in attempts
    ]


@router.delete("/{viewer_id}", status_code=HTTP_204_NO_CONTENT)
async def dispose_viewer(
    viewer_id: uuid.UUID,
    registry: ViewerRegistry = Depends(viewer_registry),
) -> Response:
    try:
        registry.dispose(viewer_id)
    except ViewerNotFound as e:
        raise HTTPException(status_code=HTTP_404_NOT_FOUND, detail="Viewer not found") from e
    return Response(status_code=HTTP_204_NO_CONTENT)
