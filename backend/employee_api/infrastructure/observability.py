"""Structured Logging — one root handler, JSON or text, employee context fields.

Invariants:
    - Every JSON line has timestamp, level, logger, message
    - Context fields (employee_id, error_code, path, status_code, batch_size)
      appear in both formats when set on the record via extra=
    - setup_logging() replaces the handler it installed earlier; calling it
      twice never duplicates output
"""

import json
import logging
from datetime import datetime, timezone

CONTEXT_FIELDS = (
    "employee_id", "error_code", "path", "status_code", "batch_size",
)

_HANDLER_NAME = "employee_api"


def _context(record: logging.LogRecord) -> dict:
    return {
        key: record.__dict__[key]
        for key in CONTEXT_FIELDS
        if record.__dict__.get(key) is not None
    }


class JSONFormatter(logging.Formatter):
    """One JSON object per record."""

    def format(self, record: logging.LogRecord) -> str:
        log = {
            "timestamp": datetime.fromtimestamp(
                record.created, timezone.utc,
            ).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            **_context(record),
        }
        if record.exc_info:
            log["exception"] = self.formatException(record.exc_info)
        return json.dumps(log, ensure_ascii=False, default=str)


class ContextTextFormatter(logging.Formatter):
    """Plain text for local runs, context fields appended as key=value."""

    def __init__(self):
        super().__init__("%(asctime)s %(levelname)s %(name)s: %(message)s")

    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)
        ctx = _context(record)
        if not ctx:
            return line
        pairs = " ".join(f"{k}={v}" for k, v in ctx.items())
        head, sep, tail = line.partition("\n")
        return f"{head} [{pairs}]{sep}{tail}"


def setup_logging(level: str = "INFO", fmt: str = "json") -> logging.Handler:
    """Install (or reinstall) the application handler on the root logger."""
    root = logging.getLogger()
    for existing in list(root.handlers):
        if existing.get_name() == _HANDLER_NAME:
            root.removeHandler(existing)

    handler = logging.StreamHandler()
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(JSONFormatter() if fmt == "json" else ContextTextFormatter())
    root.addHandler(handler)
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    return handler
