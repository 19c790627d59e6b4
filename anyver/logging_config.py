"""Centralized logging configuration.

Guarantees:
- All logs go to stderr (never stdout)
- Idempotent configuration (no duplicate handlers)
- Consistent format (human-readable by default; JSON when requested)

The library itself never calls :func:`configure_logging`; applications and
test harnesses do. Arguments left as ``None`` fall back to
:class:`anyver.config.Settings`.
"""

from __future__ import annotations

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from .config import get_settings

_ROOT_LOGGER_NAME = ""
_STDERR_HANDLER_NAME = "anyver_stderr_handler"

# LogRecord attributes that are not user-supplied extras
_STANDARD_ATTRS = frozenset(
    {
        "name",
        "msg",
        "args",
        "levelname",
        "levelno",
        "pathname",
        "filename",
        "module",
        "exc_info",
        "exc_text",
        "stack_info",
        "lineno",
        "funcName",
        "created",
        "msecs",
        "relativeCreated",
        "thread",
        "threadName",
        "processName",
        "process",
        "taskName",
    }
)


class _JsonFormatter(logging.Formatter):
    """One-line JSON formatter.

    Every record carries timestamp (ISO8601 UTC), level, logger and message;
    extras passed through ``extra=`` are copied alongside.
    """

    def format(self, record: logging.LogRecord) -> str:  # noqa: D401
        payload: Dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name or "root",
            "message": record.getMessage(),
        }

        for k, v in record.__dict__.items():
            if k.startswith("_") or k in _STANDARD_ATTRS:
                continue
            try:
                json.dumps(v)
            except (TypeError, ValueError):
                v = str(v)
            payload[k] = v

        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)

        return json.dumps(payload, ensure_ascii=False)


def _build_formatter(json_logs: bool) -> logging.Formatter:
    if json_logs:
        return _JsonFormatter()
    # Example: 2025-01-01T00:00:00+0000 DEBUG anyver.versioning compared versions
    return logging.Formatter(
        fmt="%(asctime)s %(levelname)s %(name)s %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S%z",
    )


def _get_or_create_stderr_handler(json_logs: bool) -> logging.Handler:
    root = logging.getLogger(_ROOT_LOGGER_NAME)
    for h in root.handlers:
        if getattr(h, "name", None) == _STDERR_HANDLER_NAME:
            h.setFormatter(_build_formatter(json_logs))
            return h

    handler = logging.StreamHandler(stream=sys.stderr)
    handler.name = _STDERR_HANDLER_NAME
    handler.setFormatter(_build_formatter(json_logs))
    return handler


def _is_stdout_handler(h: logging.Handler) -> bool:
    if isinstance(h, logging.StreamHandler):
        return getattr(h, "stream", None) is sys.stdout
    return False


def configure_logging(log_level: Optional[str] = None, json_logs: Optional[bool] = None) -> None:
    """Configure application-wide logging.

    Parameters
    ----------
    log_level: str, optional
        Root log level (e.g., "DEBUG", "INFO"). Defaults to ``Settings.LOG_LEVEL``.
    json_logs: bool, optional
        If True, emit one-line JSON per record. Defaults to ``Settings.LOG_JSON``.
    """

    settings = get_settings()
    if log_level is None:
        log_level = settings.LOG_LEVEL
    if json_logs is None:
        json_logs = settings.LOG_JSON

    level = logging.getLevelName((log_level or "").upper())
    if not isinstance(level, int):
        level = logging.INFO

    root = logging.getLogger(_ROOT_LOGGER_NAME)

    handler = _get_or_create_stderr_handler(json_logs)
    if handler not in root.handlers:
        root.handlers = [h for h in root.handlers if not _is_stdout_handler(h)]
        root.addHandler(handler)

    root.setLevel(level)


__all__ = ["configure_logging"]
