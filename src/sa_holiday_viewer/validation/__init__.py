"""
sa_holiday_viewer.validation

Identity number validation package.

Responsibilities:
- Pure structural + checksum checks for SA identity numbers.
"""

from sa_holiday_viewer.validation.id_number import (
    INVALID_ID_MESSAGE,
    ValidationResult,
    is_structurally_valid,
    luhn_check_digit,
    passes_checksum,
    validate,
)

__all__ = [
    "INVALID_ID_MESSAGE",
    "ValidationResult",
    "is_structurally_valid",
    "luhn_check_digit",
    "passes_checksum",
    "validate",
]
