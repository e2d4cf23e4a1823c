"""Structured Logging - JSON log lines and the per-request access log.

Invariants:
    - Every line carries timestamp, level, logger name and message
    - Only keys listed in _EXTRA_KEYS are lifted from `extra` into the JSON line
    - Each HTTP request produces exactly two access events: "Incoming request"
      (method, url, remote_address) and "Request completed" (status_code, duration_ms)
    - A request that raises still gets its "Request completed" event (status 500)

Design Decisions:
    - setup_logging runs once in the lifespan; LOG_FORMAT=text switches to plain lines
      for local development
"""

import json
import logging
import time
from datetime import datetime, timezone

from fastapi import Request

_EXTRA_KEYS = (
    "event", "method", "url", "remote_address", "status_code", "duration_ms",
    "error_code", "path", "operation", "resource_id",
    "recipients", "attempt", "model",
)

access_logger = logging.getLogger("autoconnect.access")


class JSONFormatter(logging.Formatter):
    """One JSON object per log record."""

    def format(self, record: logging.LogRecord) -> str:
        log = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key in _EXTRA_KEYS:
            val = record.__dict__.get(key)
            if val is not None:
                log[key] = val
        if record.exc_info:
            log["exception"] = self.formatException(record.exc_info)
        return json.dumps(log, ensure_ascii=False, default=str)


def setup_logging(level: str = "INFO", fmt: str = "json"):
    handler = logging.StreamHandler()
    if fmt == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(
            "%(asctime)s %(levelname)s %(name)s - %(message)s",
        ))
    logging.root.addHandler(handler)
    logging.root.setLevel(getattr(logging, level.upper(), logging.INFO))


async def log_requests(request: Request, call_next):
    """HTTP middleware: log each request on arrival and on completion."""
    started = time.perf_counter()
    url = str(request.url.path)
    if request.url.query:
        url = f"{url}?{request.url.query}"
    access_logger.info(
        "Incoming request",
        extra={
            "event": "request",
            "method": request.method,
            "url": url,
            "remote_address": request.client.host if request.client else None,
        },
    )
    status_code = 500
    try:
        response = await call_next(request)
        status_code = response.status_code
        return response
    finally:
        access_logger.info(
            "Request completed",
            extra={
                "event": "response",
                "method": request.method,
                "url": url,
                "status_code": status_code,
                "duration_ms": round((time.perf_counter() - started) * 1000, 2),
            },
        )
