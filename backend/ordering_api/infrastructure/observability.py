"""Structured Logging — one JSON object per record, configured once at startup.

Invariants:
    - Every record carries timestamp, level, logger, and message
    - Known extras (error code, request path, composite write metadata, username)
      are copied into the record only when set
    - setup_logging is idempotent: calling it again replaces its own handler
      instead of stacking duplicates

Design Decisions:
    - stdlib logging with a custom Formatter: no logging dependency to carry
    - LOG_FORMAT=text keeps local development readable
"""

import json
import logging
from datetime import datetime, timezone

EXTRA_FIELDS: tuple[str, ...] = (
    "error_code", "path", "operation",
    "composite", "parent_id", "dependent_count",
    "username",
)

_HANDLER_NAME = "ordering_api"


class JSONFormatter(logging.Formatter):
    """Render a LogRecord as a single-line JSON document."""

    def __init__(self, extra_fields: tuple[str, ...] = EXTRA_FIELDS):
        super().__init__()
        self.extra_fields = extra_fields

    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        entry.update(
            (name, getattr(record, name))
            for name in self.extra_fields
            if getattr(record, name, None) is not None
        )
        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(entry, ensure_ascii=False, default=str)


def setup_logging(level: str = "INFO", fmt: str = "json") -> None:
    """Install the application handler on the root logger."""
    handler = logging.StreamHandler()
    handler.set_name(_HANDLER_NAME)
    if fmt == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(
            "%(asctime)s %(levelname)-8s %(name)s: %(message)s",
        ))

    root = logging.getLogger()
    for existing in list(root.handlers):
        if existing.get_name() == _HANDLER_NAME:
            root.removeHandler(existing)
    root.addHandler(handler)
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
