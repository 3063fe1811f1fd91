"""Structured Logging - one JSON (or text) line per record on the root logger.

Invariants:
    - Each line carries the record's own creation time, not the time it was formatted
    - Known extras (record_id, error_code, path, operation) appear only when set
    - setup_logging() installs at most one application handler, however often it runs

Design Decisions:
    - Handler identified by name: rebuilding the app in one process (tests, reloads)
      swaps the handler instead of stacking duplicates
    - Foreign handlers (pytest caplog, uvicorn) are left alone
"""

import json
import logging
from datetime import datetime, timezone

HANDLER_NAME = "championship_api"
EXTRA_FIELDS = ("record_id", "error_code", "path", "operation")
TEXT_FORMAT = "%(asctime)s %(levelname)s %(name)s - %(message)s"


class JSONFormatter(logging.Formatter):
    """Render a LogRecord as a single JSON object."""

    def __init__(self, extra_fields: tuple[str, ...] = EXTRA_FIELDS):
        super().__init__()
        self.extra_fields = extra_fields

    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        payload.update(
            (key, getattr(record, key))
            for key in self.extra_fields
            if getattr(record, key, None) is not None
        )
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        if record.stack_info:
            payload["stack"] = self.formatStack(record.stack_info)
        return json.dumps(payload, ensure_ascii=False, default=str)


def build_handler(fmt: str) -> logging.Handler:
    handler = logging.StreamHandler()
    handler.set_name(HANDLER_NAME)
    handler.setFormatter(
        JSONFormatter() if fmt == "json" else logging.Formatter(TEXT_FORMAT),
    )
    return handler


def setup_logging(level: str = "INFO", fmt: str = "json") -> logging.Handler:
    """Install (or replace) the application handler on the root logger."""
    root = logging.getLogger()
    for existing in [h for h in root.handlers if h.get_name() == HANDLER_NAME]:
        root.removeHandler(existing)
        existing.close()
    handler = build_handler(fmt)
    root.addHandler(handler)
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    return handler
