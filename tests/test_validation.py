"""
tests.test_validation

Structural and Luhn checks for SA identity numbers.
"""

from __future__ import annotations

import random

import pytest

from sa_holiday_viewer.validation import (
    INVALID_ID_MESSAGE,
    ValidationResult,
    is_structurally_valid,
    luhn_check_digit,
    passes_checksum,
    validate,
)

KNOWN_VALID_ID = "8001015009087"


def _reference_luhn(digits: str) -> bool:
    # Independent formulation: odd positions from the right as-is, even positions doubled
    # and reduced to their digit sum.
    total = 0
    for pos, ch in enumerate(reversed(digits)):
        n = int(ch)
        if pos % 2 == 1:
            q, r = divmod(n * 2, 10)
            n = q + r
        total += n
    return total % 10 == 0


@pytest.mark.parametrize(
    "candidate",
    [
        "",
        "800101500908",  # 12 digits
        "80010150090870",  # 14 digits
        " 8001015009087",
        "8001015009087 ",
        "+800101500908",
        "8001-01500908",
        "80010150O9087",  # letter O
        "８００１０１５００９０８７",  # full-width digits
        "٨٠٠١٠١٥٠٠٩٠٨٧",  # Arabic-Indic digits
    ],
)
def test_structurally_invalid(candidate: str) -> None:
    assert is_structurally_valid(candidate) is False


@pytest.mark.parametrize("candidate", [None, 8001015009087, ["8001015009087"]])
def test_structural_check_is_total_for_non_strings(candidate: object) -> None:
    assert is_structurally_valid(candidate) is False
    assert passes_checksum(candidate) is False
    assert validate(candidate).valid is False


def test_structurally_valid_ignores_checksum() -> None:
    assert is_structurally_valid("8001015009088") is True


def test_known_vector_passes_checksum() -> None:
    # Right-to-left weighted sum is 40.
    assert passes_checksum(KNOWN_VALID_ID) is True


@pytest.mark.parametrize(
    ("candidate", "expected"),
    [
        ("8001015009088", False),
        ("9001014800089", True),
        ("79927398713", True),
        ("79927398710", False),
        ("0", True),
        ("18", True),
        ("19", False),
    ],
)
def test_checksum_any_length(candidate: str, expected: bool) -> None:
    assert passes_checksum(candidate) is expected


@pytest.mark.parametrize("candidate", ["", "12a4", "80010150090 7", "-18"])
def test_checksum_rejects_malformed_input(candidate: str) -> None:
    assert passes_checksum(candidate) is False


def test_checksum_matches_reference_for_13_digit_strings() -> None:
    rng = random.Random(20240101)
    for _ in range(2000):
        candidate = "".join(rng.choice("0123456789") for _ in range(13))
        assert passes_checksum(candidate) is _reference_luhn(candidate), candidate


def test_luhn_check_digit() -> None:
    assert luhn_check_digit("800101500908") == "7"
    assert luhn_check_digit("900101480008") == "9"
    stem = "801301500908"
    assert passes_checksum(stem + luhn_check_digit(stem))


def test_luhn_check_digit_rejects_non_digits() -> None:
    with pytest.raises(ValueError):
        luhn_check_digit("80010150090x")


def test_validate_valid_has_no_message() -> None:
    assert validate(KNOWN_VALID_ID) == ValidationResult(valid=True, message="")


@pytest.mark.parametrize("candidate", ["", "8001015009088", "800101500908", "abc"])
def test_validate_invalid_has_fixed_message(candidate: str) -> None:
    result = validate(candidate)
    assert result.valid is False
    assert result.message == INVALID_ID_MESSAGE


def test_validate_is_idempotent() -> None:
    for candidate in (KNOWN_VALID_ID, "8001015009088", ""):
        first = validate(candidate)
        second = validate(candidate)
        assert first == second
