"""
sa_holiday_viewer.db.models

Persistence schema for the search audit trail.

Responsibilities:
- Define `SearchAttempt`: one append-only row per completed viewer search.
"""

from __future__ import annotations

import enum
import uuid
from datetime import UTC, datetime

from sqlalchemy import Enum, Index, String, Uuid as SAUuid
from sqlalchemy.orm import Mapped, mapped_column

from sa_holiday_viewer.db.base import Base


def _utcnow() -> datetime:
    # Naive UTC; SQLite has no tz-aware datetime type.
    return datetime.now(tz=UTC).replace(tzinfo=None)


class SearchOutcomeKind(enum.StrEnum):
    # Enum values are stored in DB; treat as stable API contract.
    success = "SUCCESS"
    empty = "EMPTY"
    decode_failed = "DECODE_FAILED"
    fetch_failed = "FETCH_FAILED"
    superseded = "SUPERSEDED"


class SearchAttempt(Base):
    __tablename__ = "search_attempts"

    id: Mapped[uuid.UUID] = mapped_column(
        SAUuid(as_uuid=True), primary_key=True, default=uuid.uuid4
    )
    viewer_id: Mapped[uuid.UUID] = mapped_column(SAUuid(as_uuid=True), nullable=False, index=True)

    # Only the YYMMDD prefix is stored in clear.
    masked_id_number: Mapped[str] = mapped_column(String(13), nullable=False)
    outcome: Mapped[SearchOutcomeKind] = mapped_column(
        Enum(SearchOutcomeKind), nullable=False, index=True
    )
    birth_year: Mapped[int | None] = mapped_column(nullable=True)
    holiday_count: Mapped[int] = mapped_column(nullable=False, default=0)

    created_at: Mapped[datetime] = mapped_column(nullable=False, default=_utcnow, index=True)

    __table_args__ = (Index("ix_search_attempts_viewer_created", "viewer_id", "created_at"),)
