"""Centralized logging configuration.

Requests carry personal wellness data, so logging follows a few rules:
- Structured JSON lines on stdout, one object per record
- Metadata only: no request/response bodies, prompts, model output or API keys
- `extra` fields are optional; the formatter must never raise due to missing keys
"""

from __future__ import annotations

import json
import logging
import logging.config
from datetime import UTC, datetime
from typing import Any

# Optional `extra` keys copied into every JSON record (None when absent).
_EXTRA_FIELDS = ("request_id", "status_code", "duration_ms", "error")


class JsonFormatter(logging.Formatter):
    """Emit JSON logs while safely handling missing `extra` fields.

    A `'%(request_id)s'`-style format string would raise KeyError on records
    that don't carry those fields (e.g. uvicorn or httpx logs).
    """

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, tz=UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "method": getattr(record, "method", getattr(record, "http_method", None)),
            "path": getattr(record, "path", getattr(record, "request_path", None)),
        }
        for key in _EXTRA_FIELDS:
            payload[key] = getattr(record, key, None)

        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)

        return json.dumps(payload, ensure_ascii=False)


def setup_logging(level: str = "INFO") -> None:
    """Configure application logging (JSON to stdout)."""

    log_level = level.upper()
    logging.config.dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "json": {
                    "()": "app.core.logging.JsonFormatter",
                }
            },
            "handlers": {
                "default": {
                    "class": "logging.StreamHandler",
                    "formatter": "json",
                    "stream": "ext://sys.stdout",
                }
            },
            "root": {
                "level": log_level,
                "handlers": ["default"],
            },
            # httpx logs full request URLs at INFO; keep them out of the stream.
            "loggers": {
                "httpx": {"level": "WARNING"},
            },
        }
    )
