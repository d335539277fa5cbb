"""Structured Logging — one JSON object per log record, keyed by request and device.

Invariants:
    - Every record carries timestamp (record creation, UTC), level, logger, message
    - Request/device context (CONTEXT_FIELDS) included only when the caller set it
    - setup_logging installs exactly one inventory handler on the root logger,
      however many times the lifespan runs

Design Decisions:
    - stdlib logging + json: every module logs via logging.getLogger(__name__)
      and passes context through `extra=`
    - Text format keeps the request ID visible for local runs
"""

import json
import logging
from datetime import datetime, timezone

CONTEXT_FIELDS = (
    "request_id", "device_id", "error_code", "method", "path",
    "status_code", "duration_ms",
)

_TEXT_FORMAT = "%(asctime)s %(levelname)s %(name)s [%(request_id)s] %(message)s"


class JSONFormatter(logging.Formatter):

    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "timestamp": datetime.fromtimestamp(
                record.created, timezone.utc,
            ).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        entry.update(
            (key, getattr(record, key)) for key in CONTEXT_FIELDS
            if getattr(record, key, None) is not None
        )
        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(entry, ensure_ascii=False, default=str)


class _TextFormatter(logging.Formatter):
    """Human-readable lines; records logged outside a request show "-"."""

    def formatMessage(self, record: logging.LogRecord) -> str:
        values = dict(record.__dict__)
        if values.get("request_id") is None:
            values["request_id"] = "-"
        return self._fmt % values


class _InventoryHandler(logging.StreamHandler):
    pass


def setup_logging(level: str = "INFO", fmt: str = "json") -> None:
    root = logging.getLogger()
    for existing in [h for h in root.handlers if isinstance(h, _InventoryHandler)]:
        root.removeHandler(existing)

    handler = _InventoryHandler()
    if fmt == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(_TextFormatter(_TEXT_FORMAT))
    root.addHandler(handler)
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
