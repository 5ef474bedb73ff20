from __future__ import annotations

import logging

import httpx
import pytest

from sa_holiday_viewer.observability.logging import (
    IdNumberMaskingFilter,
    _mask_id_numbers,
    mask_id_number,
)
from sa_holiday_viewer.validation import luhn_check_digit


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("8001015009087", "800101*******"),
        ("/internal/v1/identity/8001015009087/decode", "/internal/v1/identity/800101*******/decode"),
        ("ids 8001015009087 and 9001014800089", "ids 800101******* and 900101*******"),
        # Not 13 digits: left alone.
        ("80010150090", "80010150090"),
        ("80010150090870", "80010150090870"),
        ("/internal/v1/holidays/1990", "/internal/v1/holidays/1990"),
    ],
)
def test_mask_id_number(text: str, expected: str) -> None:
    assert mask_id_number(text) == expected


def test_processor_masks_nested_values() -> None:
    event = {
        "event": "search_stage_failed",
        "exception": [
            {
                "exc_value": "for url '/internal/v1/identity/8001015009087/decode'",
                "frames": [{"locals": {"id_number": "'8001015009087'"}, "lineno": 12}],
            }
        ],
        "ids": ("8001015009087",),
    }

    out = _mask_id_numbers(None, "warning", event)

    assert "8001015009087" not in repr(out)
    assert out["exception"][0]["frames"][0]["locals"]["id_number"] == "'800101*******'"
    assert out["exception"][0]["frames"][0]["lineno"] == 12
    assert out["ids"] == ("800101*******",)


def test_stdlib_filter_masks_formatted_message() -> None:
    record = logging.LogRecord(
        name="uvicorn.access",
        level=logging.INFO,
        pathname=__file__,
        lineno=1,
        msg='%s - "GET %s"',
        args=("127.0.0.1", "/internal/v1/identity/8001015009087/decode"),
        exc_info=None,
    )

    assert IdNumberMaskingFilter().filter(record) is True
    assert record.getMessage() == '127.0.0.1 - "GET /internal/v1/identity/800101*******/decode"'


@pytest.mark.asyncio
async def test_failed_search_never_logs_raw_id_number(
    client: httpx.AsyncClient, caplog: pytest.LogCaptureFixture
) -> None:
    # Checksum-valid, but month 13 cannot be decoded.
    stem = "801301500908"
    id_number = stem + luhn_check_digit(stem)
    caplog.set_level(logging.DEBUG)

    r = await client.post("/v1/viewers")
    viewer_id = r.json()["viewer_id"]
    await client.put(f"/v1/viewers/{viewer_id}/id-number", json={"id_number": id_number})
    r = await client.post(f"/v1/viewers/{viewer_id}/search")
    assert r.json()["phase"] == "FAILURE"

    messages = [record.getMessage() for record in caplog.records]
    assert any("search_stage_failed" in m for m in messages)
    assert any("801301*******" in m for m in messages)
    assert not [m for m in messages if id_number in m]
