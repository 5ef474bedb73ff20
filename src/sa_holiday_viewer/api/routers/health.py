"""
sa_holiday_viewer.api.routers.health

Liveness (`/healthz`) and readiness (`/readyz`) for the viewer service.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends
from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession

from sa_holiday_viewer.api.deps import db_session, viewer_registry
from sa_holiday_viewer.services.viewer_registry import ViewerRegistry

router = APIRouter()


@router.get("/healthz")
async def healthz() -> dict[str, str]:
    return {"status": "ok"}


@router.get("/readyz")
async def readyz(
    session: AsyncSession = Depends(db_session),
    registry: ViewerRegistry = Depends(viewer_registry),
) -> dict[str, str | int]:
    # Searches are recorded in the audit table, so an unreachable DB means not ready.
    await session.execute(text("SELECT 1"))
    return {"status": "ready", "viewers": len(registry)}
