"""
sa_holiday_viewer.api.routers.internal.router

Internal collaborator router aggregator.

Responsibilities:
- Mount per-system internal routers under `/internal/v1`.
"""

from __future__ import annotations

from fastapi import APIRouter

from sa_holiday_viewer.api.routers.internal.systems import identity_decoder, public_holidays

router = APIRouter(prefix="/internal/v1", tags=["internal"])

## Each included router is protected by RBAC role `internal_system`.
router.include_router(identity_decoder.router, prefix="/identity")
router.include_router(public_holidays.router, prefix="/holidays")
