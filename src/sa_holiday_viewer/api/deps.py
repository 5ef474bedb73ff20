"""
sa_holiday_viewer.api.deps

FastAPI dependency wiring for the API layer.

Responsibilities:
- Provide request-scoped DB sessions.
- Resolve viewer sessions from the registry stored on app.state.
"""

from __future__ import annotations

import uuid
from collections.abc import AsyncIterator

from fastapi import Depends, HTTPException, Request
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker
from starlette.status import HTTP_404_NOT_FOUND

from sa_holiday_viewer.services.viewer_registry import ViewerNotFound, ViewerRegistry
from sa_holiday_viewer.viewer import HolidayViewer


def sessionmaker_from_app(request: Request) -> async_sessionmaker[AsyncSession]:
    # Created in the app lifespan (see `sa_holiday_viewer.api.app.create_app`).
    return request.app.state.sessionmaker  # type: ignore[attr-defined]


async def db_session(
    session_factory: async_sessionmaker[AsyncSession] = Depends(sessionmaker_from_app),
) -> AsyncIterator[AsyncSession]:
    async with session_factory() as session:
        yield session


def viewer_registry(request: Request) -> ViewerRegistry:
    return request.app.state.viewers  # type: ignore[attr-defined]


def get_viewer(
    viewer_id: uuid.UUID,
    registry: ViewerRegistry = Depends(viewer_registry),
) -> HolidayViewer:
    try:
        return registry.get(viewer_id)
    except ViewerNotFound as e:
        raise HTTPException(status_code=HTTP_404_NOT_FOUND, detail="Viewer not found") from e
