"""
sa_holiday_viewer.api.routers.identity

Stateless id number validation (the per-keystroke check).
"""

from __future__ import annotations

from fastapi import APIRouter
from pydantic import BaseModel

from sa_holiday_viewer.validation import validate

router = APIRouter(prefix="/v1/identity", tags=["identity"])


class ValidateRequest(BaseModel):
    id_number: str


class ValidationView(BaseModel):
    valid: bool
    message: str


@router.post("/validate", response_model=ValidationView)
async def validate_id_number(body: ValidateRequest) -> ValidationView:
    result = validate(body.id_number)
    return ValidationView(valid=result.valid, message=result.message)
