"""
sa_holiday_viewer.validation.id_number

South African identity number validation.

Responsibilities:
- Structural check: exactly 13 ASCII decimal digits.
- Luhn checksum over the digit sequence (any length).
- Combine both into a user-facing `ValidationResult`.

All functions are pure and total: malformed input yields False / invalid, never an exception.
"""

from __future__ import annotations

from dataclasses import dataclass

ID_NUMBER_LENGTH = 13

INVALID_ID_MESSAGE = "Please enter a valid 13-digit SA ID number."

_DIGITS = frozenset("0123456789")


@dataclass(frozen=True, slots=True)
class ValidationResult:
    valid: bool
    message: str = ""

    @classmethod
    def ok(cls) -> ValidationResult:
        return cls(valid=True)

    @classmethod
    def invalid(cls) -> ValidationResult:
        return cls(valid=False, message=INVALID_ID_MESSAGE)


def _all_digits(candidate: str) -> bool:
    # str.isdigit() also accepts superscripts and other Unicode digits.
    return all(ch in _DIGITS for ch in candidate)


def is_structurally_valid(candidate: object) -> bool:
    if not isinstance(candidate, str):
        return False
    return len(candidate) == ID_NUMBER_LENGTH and _all_digits(candidate)


def passes_checksum(candidate: object) -> bool:
    """
    Luhn check, scanning right to left and doubling every second digit.

    Input containing anything other than ASCII digits (or empty input) is rejected rather than
    coerced, so the result never depends on how garbage would have been interpreted.
    """

    if not isinstance(candidate, str) or not candidate or not _all_digits(candidate):
        return False

    total = 0
    double_next = False
    for ch in reversed(candidate):
        d = ord(ch) - ord("0")
        if double_next:
            d *= 2
            if d > 9:
                d -= 9
        total += d
        double_next = not double_next
    return total % 10 == 0


def luhn_check_digit(stem: str) -> str:
    """
    Return the digit that, appended to `stem`, makes the whole string pass `passes_checksum`.
    """

    if not _all_digits(stem):
        raise ValueError("stem must contain only decimal digits")
    for digit in "0123456789":
        if passes_checksum(stem + digit):
            return digit
    # Unreachable: exactly one digit in 0-9 closes any Luhn sum.
    raise AssertionError("no Luhn check digit found")


def validate(candidate: object) -> ValidationResult:
    if is_structurally_valid(candidate) and passes_checksum(candidate):
        return ValidationResult.ok()
    return ValidationResult.invalid()


# --- Module Notes -----------------------------------------------------------
# validate() runs on every input change (no debounce); keep it allocation-light.
