"""
sa_holiday_viewer.orchestrator.stages

Stage-tagged execution of collaborator calls.

Responsibilities:
- Await one remote call and return a tagged success/failure value instead of raising.
- Keep failures attributable to exactly one stage (decode or fetch).
"""

from __future__ import annotations

import enum
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import Generic, TypeVar

from sa_holiday_viewer.observability.logging import get_logger

log = get_logger(__name__)

T = TypeVar("T")


class SearchStage(enum.StrEnum):
    decode = "DECODE"
    fetch = "FETCH"


@dataclass(frozen=True)
class StageSucceeded(Generic[T]):
    stage: SearchStage
    value: T


@dataclass(frozen=True, slots=True)
class StageFailed:
    stage: SearchStage
    error: Exception


StageResult = StageSucceeded[T] | StageFailed


async def run_stage(stage: SearchStage, call: Callable[[], Awaitable[T]]) -> StageResult[T]:
    # Cancellation (BaseException) is not caught; it propagates to the orchestrator.
    try:
        value = await call()
    except Exception as e:
        log.warning(
            "search_stage_failed",
            stage=stage.value,
            error_type=type(e).__name__,
            error=str(e),
            exc_info=True,
        )
        return StageFailed(stage=stage, error=e)
    return StageSucceeded(stage=stage, value=value)
