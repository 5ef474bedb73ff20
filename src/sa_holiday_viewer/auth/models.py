"""
sa_holiday_viewer.auth.models

Responsibilities:
- Define the authenticated caller type (`Principal`) injected into collaborator routes.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Principal:
    subject: str
    roles: frozenset[str]
