"""Structured Logging — JSON formatter and setup for production observability.

Invariants:
    - All logs include timestamp (the record's own creation time), level, logger, message
    - service tag added when configured, so webhook logs are separable from the API server's
    - Admission extras (request_uid, operation, cluster_name, error_code, error_count, path)
      surfaced when present; text format always shows the request uid column ("-" if none)
    - setup_logging is idempotent: repeated lifespans replace, never stack, its handler

Design Decisions:
    - JSONFormatter over third-party libs: zero dependencies, full control
    - Handler identified by name on the root logger: other handlers (pytest caplog,
      uvicorn) are left untouched
"""

import logging
import json
from datetime import datetime, timezone


HANDLER_NAME = "vpcadmission"

EXTRA_KEYS = (
    "request_uid", "operation", "cluster_name",
    "error_code", "error_count", "path",
)

TEXT_FORMAT = "%(asctime)s %(levelname)s %(name)s [%(request_uid)s] %(message)s"


class JSONFormatter(logging.Formatter):
    """Format logs as JSON for structured logging in production."""

    def __init__(self, service: str | None = None):
        super().__init__()
        self.service = service

    def format(self, record: logging.LogRecord) -> str:
        log = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if self.service:
            log["service"] = self.service
        for key in EXTRA_KEYS:
            val = record.__dict__.get(key)
            if val is not None:
                log[key] = val
        if record.exc_info:
            log["exception"] = self.formatException(record.exc_info)
        return json.dumps(log, ensure_ascii=False)


class RequestUidFilter(logging.Filter):
    """Give every record a request_uid so TEXT_FORMAT never raises KeyError."""

    def filter(self, record: logging.LogRecord) -> bool:
        if getattr(record, "request_uid", None) is None:
            record.request_uid = "-"
        return True


def setup_logging(
    level: str = "INFO", fmt: str = "json", service: str | None = None,
) -> logging.Handler:
    """Configure root logging for the webhook. Safe to call more than once."""
    for existing in list(logging.root.handlers):
        if existing.get_name() == HANDLER_NAME:
            logging.root.removeHandler(existing)

    handler = logging.StreamHandler()
    handler.set_name(HANDLER_NAME)
    if fmt == "json":
        handler.setFormatter(JSONFormatter(service))
    else:
        handler.addFilter(RequestUidFilter())
        handler.setFormatter(logging.Formatter(TEXT_FORMAT))
    logging.root.addHandler(handler)
    logging.root.setLevel(getattr(logging, level.upper(), logging.INFO))
    return handler
