"""Core logging setup and configuration.

This module wires structured JSON logging with context propagation and
OpenTelemetry correlation while keeping configuration declarative via
``logging.config.dictConfig``.
"""

from __future__ import annotations

import json
import logging
import logging.config
from datetime import datetime, timezone
from typing import Any, Dict, Optional, Set

from opentelemetry import trace


def _build_reserved_keys() -> Set[str]:
    """Collect standard ``LogRecord`` attributes to avoid duplicating them."""
    probe = logging.LogRecord(
        name="sqlfrags.probe",
        level=logging.INFO,
        pathname=__file__,
        lineno=0,
        msg="",
        args=(),
        exc_info=None,
    )
    reserved = set(probe.__dict__.keys())
    reserved.update({"asctime", "message"})
    return reserved


_RESERVED_LOG_RECORD_KEYS = _build_reserved_keys()

PLAIN_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)


class CustomJsonFormatter(logging.Formatter):
    """JSON formatter that enriches log entries with context and trace data."""

    def format(self, record: logging.LogRecord) -> str:
        log_record: Dict[str, Any] = {}

        for key, value in record.__dict__.items():
            if key not in _RESERVED_LOG_RECORD_KEYS and key not in log_record:
                log_record[key] = value

        log_record["timestamp"] = datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat()
        log_record["level"] = record.levelname
        log_record["logger"] = record.name
        log_record["message"] = record.getMessage()

        span_context = trace.get_current_span().get_span_context()
        if span_context.is_valid:
            log_record["trace_id"] = format(span_context.trace_id, "032x")
            log_record["span_id"] = format(span_context.span_id, "016x")

        if record.exc_info:
            log_record["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_record, default=str)


def setup_logging(level: Optional[str] = None, json_output: Optional[bool] = None) -> None:
    """Configure logging backed by ``logging.config.dictConfig``.

    Unset arguments are taken from ``settings.logging``; the configured
    environment name is attached to every record through ``ContextFilter``.

    Args:
        level: Base log level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        json_output: Emit one JSON object per record instead of plain text.
    """
    from sqlfrags.logging.filters import set_logging_context
    from sqlfrags.settings import get_settings

    log_settings = get_settings().logging
    level = (level or log_settings.level).upper()
    if json_output is None:
        json_output = log_settings.json_output

    set_logging_context(environment=log_settings.environment)

    config_dict: Dict[str, Any] = {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "frags_json": {
                "()": "sqlfrags.logging.logger.CustomJsonFormatter",
            },
            "frags_plain": {
                "format": PLAIN_FORMAT,
            },
        },
        "filters": {
            "frags_context": {
                "()": "sqlfrags.logging.filters.ContextFilter",
            }
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "level": level,
                "formatter": "frags_json" if json_output else "frags_plain",
                "filters": ["frags_context"],
                "stream": "ext://sys.stdout",
            }
        },
        "root": {
            "level": level,
            "handlers": ["console"],
        },
    }

    logging.config.dictConfig(config_dict)
