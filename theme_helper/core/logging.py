"""
Logging utilities for Theme Helper.

- Provide a RequestIdFilter that attaches request_id and path (when in a Flask request context)
- Provide a JsonFormatter for structured logs when THEMEHELPER_JSON_LOGS=true
- Provide configure_logging() to initialize root logging and integrate with Flask's logger
"""

from __future__ import annotations

import logging
import os

# Channel used for component library diagnostics
COMPONENT_LOGGER_NAME = "ecl"


class RequestIdFilter(logging.Filter):
    """
    Attach request-scoped metadata (request_id, path) to log records.
    Safely degrades outside of a Flask request context.
    """

    def filter(self, record: logging.LogRecord) -> bool:  # type: ignore[override]
        from flask import g, has_request_context, request  # lazy import

        if has_request_context():
            record.request_id = getattr(g, "request_id", "-")
            record.path = request.path
        else:
            record.request_id = "-"
            record.path = "-"
        return True


class JsonFormatter(logging.Formatter):
    """
    Minimal JSON formatter that includes timestamp, level, logger, message, request_id, and path.
    """

    def format(self, record: logging.LogRecord) -> str:  # type: ignore[override]
        from json import dumps

        base = {
            "ts": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
            "request_id": getattr(record, "request_id", "-"),
        }
        path = getattr(record, "path", None)
        if path is not None:
            base["path"] = path
        return dumps(base, ensure_ascii=False)


def json_logs_enabled() -> bool:
    return os.environ.get("THEMEHELPER_JSON_LOGS", "false").lower() in ("1", "true", "yes")


def configure_logging(level: int = logging.INFO) -> logging.Logger:
    """
    Configure root logging for the application.

    Behavior:
    - Sets root logger to `level` (INFO by default)
    - Clears any existing handlers to avoid duplicates on reload
    - Chooses JSON or plain formatter based on THEMEHELPER_JSON_LOGS
    - Adds RequestIdFilter so formatters can reference %(request_id)s
    - Ensures Flask app logger propagates to root (no separate handlers)

    Returns the configured root logger.
    """
    root = logging.getLogger()
    root.setLevel(level)

    # Avoid duplicate logs in dev reloads or repeated factory calls
    root.handlers = []

    formatter: logging.Formatter
    if json_logs_enabled():
        formatter = JsonFormatter()
    else:
        formatter = logging.Formatter("[%(asctime)s] %(levelname)s %(name)s %(request_id)s %(message)s")

    handler = logging.StreamHandler()
    handler.setFormatter(formatter)
    handler.addFilter(RequestIdFilter())
    root.addHandler(handler)

    flask_logger = logging.getLogger("flask.app")
    flask_logger.handlers = []
    flask_logger.propagate = True

    return root


def get_component_logger() -> logging.Logger:
    return logging.getLogger(COMPONENT_LOGGER_NAME)


__all__ = [
    "COMPONENT_LOGGER_NAME",
    "JsonFormatter",
    "RequestIdFilter",
    "configure_logging",
    "get_component_logger",
    "json_logs_enabled",
]
