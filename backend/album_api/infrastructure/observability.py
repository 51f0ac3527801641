"""Structured Logging: JSON formatter, setup, and per-request access logging.

Invariants:
    - All logs include timestamp, level, logger name, and message
    - Extra fields (method, path, status_code, album_id, error_kind) surfaced when present
    - JSON format in production, human-readable in development
    - Every request logged once as "<METHOD> <path>", unhandled exceptions as status 500

Design Decisions:
    - setup_logging called once by the process entry point
"""

import json
import logging
import time
from datetime import datetime, timezone

from fastapi import Request

logger = logging.getLogger("album_api.access")

EXTRA_FIELDS = (
    "method", "path", "status_code", "duration_ms",
    "album_id", "error_kind",
)


def record_extras(record: logging.LogRecord) -> dict:
    """Known extra fields set on the record, in EXTRA_FIELDS order."""
    return {
        key: record.__dict__[key]
        for key in EXTRA_FIELDS
        if record.__dict__.get(key) is not None
    }


class JSONFormatter(logging.Formatter):
    """One JSON object per line, extras as top-level keys."""

    def format(self, record: logging.LogRecord) -> str:
        log = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            **record_extras(record),
        }
        if record.exc_info:
            log["exception"] = self.formatException(record.exc_info)
        return json.dumps(log, ensure_ascii=False)


class TextFormatter(logging.Formatter):
    """Human-readable line with extras appended as key=value pairs."""

    def __init__(self):
        super().__init__("%(asctime)s %(levelname)s %(name)s: %(message)s")

    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)
        extras = record_extras(record)
        if not extras:
            return line
        head, sep, tail = line.partition("\n")
        pairs = " ".join(f"{key}={val}" for key, val in extras.items())
        return f"{head} [{pairs}]{sep}{tail}"


def setup_logging(level: str = "INFO", fmt: str = "json"):
    """Attach one stream handler to the root logger."""
    handler = logging.StreamHandler()
    handler.setFormatter(JSONFormatter() if fmt == "json" else TextFormatter())
    logging.root.addHandler(handler)
    logging.root.setLevel(getattr(logging, level.upper(), logging.INFO))


def _log_access(request: Request, status_code: int, started: float) -> None:
    logger.info(
        f"{request.method} {request.url.path}",
        extra={
            "method": request.method,
            "path": request.url.path,
            "status_code": status_code,
            "duration_ms": round((time.perf_counter() - started) * 1000, 2),
        },
    )


async def log_requests(request: Request, call_next):
    """HTTP middleware: access log line per request.

    Unhandled exceptions are logged as 500 (the catch-all handler renders
    them as such) and re-raised.
    """
    started = time.perf_counter()
    try:
        response = await call_next(request)
    except Exception:
        _log_access(request, 500, started)
        raise
    _log_access(request, response.status_code, started)
    return response
