"""
sa_holiday_viewer.observability.logging

Structured logging configuration for the service.

Responsibilities:
- Configure `structlog` for JSON logs.
- Mask SA id numbers wherever they appear in log output, including rendered tracebacks
  and records emitted by stdlib loggers (httpx, uvicorn).
- Provide a small wrapper for obtaining bound loggers.
"""

from __future__ import annotations

import logging
import re
import sys
from typing import Any

import structlog

_ID_NUMBER_RE = re.compile(r"(?<!\d)(\d{6})(\d{7})(?!\d)")

# These log full request URLs at INFO/DEBUG, and collaborator URLs carry the id number.
_QUIET_LOGGERS = ("httpx", "httpcore")


def mask_id_number(text: str) -> str:
    """
    Keep the YYMMDD prefix of every 13-digit run and star out the rest.
    """

    return _ID_NUMBER_RE.sub(lambda m: m.group(1) + "*" * len(m.group(2)), text)


class IdNumberMaskingFilter(logging.Filter):
    """
    Stdlib filter applying `mask_id_number` to the formatted message of every record.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        message = record.getMessage()
        masked = mask_id_number(message)
        if masked != message:
            record.msg = masked
            record.args = None
        return True


_masking_filter = IdNumberMaskingFilter()


def configure_logging(*, service_name: str, level: str) -> None:
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=getattr(logging, level.upper(), logging.INFO),
    )
    # addFilter ignores a filter that is already attached.
    for handler in logging.getLogger().handlers:
        handler.addFilter(_masking_filter)
    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_log_level,
            structlog.stdlib.add_logger_name,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            _add_service_name(service_name),
            structlog.processors.dict_tracebacks,
            # After dict_tracebacks: exception values and frame locals are plain data here.
            _mask_id_numbers,
            structlog.processors.JSONRenderer(),
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )


def _add_service_name(service_name: str):
    def processor(_: Any, __: str, event_dict: dict[str, Any]) -> dict[str, Any]:
        event_dict.setdefault("service", service_name)
        return event_dict

    return processor


def _mask_value(value: Any) -> Any:
    if isinstance(value, str):
        return mask_id_number(value)
    if isinstance(value, dict):
        return {k: _mask_value(v) for k, v in value.items()}
    if isinstance(value, list):
        return [_mask_value(v) for v in value]
    if isinstance(value, tuple):
        return tuple(_mask_value(v) for v in value)
    return value


def _mask_id_numbers(_: Any, __: str, event_dict: dict[str, Any]) -> dict[str, Any]:
    return {key: _mask_value(value) for key, value in event_dict.items()}


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    return structlog.get_logger(name)


# --- Module Notes -----------------------------------------------------------
# Request-scoped metadata is bound via contextvars in `observability.middleware`.
