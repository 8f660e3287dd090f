"""Centralized logging configuration.

Supports human-friendly text logs and structured JSON logs. Setup is
non-intrusive by default: it leaves root handlers alone when the host
application (notebook, web server, report scheduler) already configured them.
"""

from __future__ import annotations

import json
import logging
import sys
import time
from collections.abc import Mapping
from contextvars import ContextVar
from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Any

from infra.config import get_settings

# Context that follows a report run through the system
# Use set_request_context() to populate, clear_request_context() to reset
request_ctx: ContextVar[dict[str, Any] | None] = ContextVar("request_ctx", default=None)

_STANDARD_RECORD_ATTRS = frozenset({
    "name", "msg", "args", "levelname", "levelno", "pathname", "filename", "module",
    "exc_info", "exc_text", "stack_info", "lineno", "funcName", "created", "msecs",
    "relativeCreated", "thread", "threadName", "processName", "process", "taskName",
})


def set_request_context(**kwargs: Any) -> None:
    """Set context values that will be included in all subsequent log entries."""
    current = request_ctx.get()
    if current is None:
        current = {}
    else:
        current = dict(current)
    current.update(kwargs)
    request_ctx.set(current)


def clear_request_context() -> None:
    """Clear the request context (typically at the start of a new report run)."""
    request_ctx.set({})


def get_request_context() -> dict[str, Any]:
    """Get a copy of the current request context."""
    ctx = request_ctx.get()
    return dict(ctx) if ctx else {}


def _utc_iso8601() -> str:
    # Example: 2026-01-24T18:03:12.123Z
    return datetime.now(UTC).isoformat(timespec="milliseconds").replace("+00:00", "Z")


class JsonFormatter(logging.Formatter):
    """
    JSON formatter:
      - Always outputs valid JSON (message escaped via json.dumps)
      - Merges `extra={...}` keys and the request context
      - Includes exception info when present
    """

    def __init__(self, *, extra_fields: Mapping[str, Any] | None = None) -> None:
        super().__init__()
        self._extra_fields = dict(extra_fields or {})

    def format(self, record: logging.LogRecord) -> str:
        base: dict[str, Any] = {
            "timestamp": _utc_iso8601(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "func": record.funcName,
            "line": record.lineno,
        }

        for k, v in self._extract_extras(record).items():
            # Core fields are never overwritten
            if k not in base:
                base[k] = v

        for k, v in self._extra_fields.items():
            base.setdefault(k, v)

        if record.exc_info:
            base["exception"] = self.formatException(record.exc_info)

        ctx = request_ctx.get()
        if ctx:
            for k, v in ctx.items():
                if k not in base:
                    base[k] = v

        return json.dumps(base, ensure_ascii=False, default=str)

    @staticmethod
    def _extract_extras(record: logging.LogRecord) -> dict[str, Any]:
        # Anything not in the standard LogRecord attributes came in via extra=
        return {k: v for k, v in record.__dict__.items() if k not in _STANDARD_RECORD_ATTRS}


class TextFormatter(logging.Formatter):
    """
    Human-friendly logs, but UTC timestamps.
    """
    converter = time.gmtime  # UTC

    def __init__(self) -> None:
        super().__init__("%(asctime)sZ | %(levelname)s | %(name)s | %(message)s")


class StructuredLogger:
    """
    Event-style logger: an event name plus keyword fields.

    Usage:
        from infra.logging_config import StructuredLogger, set_request_context

        logger = StructuredLogger(__name__)
        set_request_context(report="sales", run_id="123")
        logger.info("frame_done", frame="orders", rows=50)
        # JSON output: {"level": "INFO", "event": "frame_done", "frame": "orders",
        #               "rows": 50, "report": "sales", "run_id": "123", ...}
    """

    def __init__(self, name: str) -> None:
        self._logger = logging.getLogger(name)

    def is_enabled_for(self, level: int) -> bool:
        return self._logger.isEnabledFor(level)

    def _log(self, level: int, event: str, **kwargs: Any) -> None:
        extra = {
            "event": event,
            **kwargs,
        }
        self._logger.log(level, event, extra=extra)

    def debug(self, event: str, **kwargs: Any) -> None:
        self._log(logging.DEBUG, event, **kwargs)

    def info(self, event: str, **kwargs: Any) -> None:
        self._log(logging.INFO, event, **kwargs)

    def warning(self, event: str, **kwargs: Any) -> None:
        self._log(logging.WARNING, event, **kwargs)

    def error(self, event: str, **kwargs: Any) -> None:
        self._log(logging.ERROR, event, **kwargs)


@dataclass(frozen=True)
class LoggingConfig:
    level: str = "INFO"
    json_logs: bool = False
    override_root_handlers: bool = False
    extra_fields: Mapping[str, Any] | None = None


def setup_logging(
    *,
    level: str | None = None,
    json_logs: bool | None = None,
    override_root_handlers: bool | None = None,
    extra_fields: Mapping[str, Any] | None = None,
) -> None:
    """
    Central logging setup for the repo.

    Env vars:
      - REPORT_LOG_LEVEL: DEBUG|INFO|WARNING|ERROR (default INFO)
      - REPORT_LOG_JSON:  1/0 (default 0)
      - REPORT_LOG_OVERRIDE: 1/0 (default 0)
         If 1, replaces any pre-configured root handlers.
         If 0, only configures logging if root has no handlers.
    """
    config = get_settings(reload=True).logging

    cfg = LoggingConfig(
        level=(level or config.level).upper(),
        json_logs=json_logs if json_logs is not None else bool(config.json_logs),
        override_root_handlers=override_root_handlers
        if override_root_handlers is not None
        else bool(config.override_root_handlers),
        extra_fields=extra_fields,
    )

    root = logging.getLogger()
    root.setLevel(getattr(logging, cfg.level, logging.INFO))

    handler = logging.StreamHandler(sys.stdout)
    if cfg.json_logs:
        handler.setFormatter(JsonFormatter(extra_fields=cfg.extra_fields))
    else:
        handler.setFormatter(TextFormatter())

    if cfg.override_root_handlers:
        for h in list(root.handlers):
            root.removeHandler(h)
        root.addHandler(handler)
    elif not root.handlers:
        root.addHandler(handler)
