from __future__ import annotations

"""Small logging helpers to standardize dumptext logger names and configuration.

This module provides:
    - JsonLogFormatter: JSON log formatter with stable fields and optional context.
    - setup_base_logger: Configuration of the base 'dumptext' logger.
    - get_logger: Namespaced logger factory ('dumptext.*').

Stream policy:
    Progress and status records (DEBUG/INFO) go to stdout, warnings and
    errors go to stderr. The output file never receives log records.
"""

import logging
import os
import sys
from typing import Optional, TextIO

BASE_LOGGER = "dumptext"


class JsonLogFormatter(logging.Formatter):
    """Emit logs as compact JSON with a fixed schema.

    Fields:
        - ts: ISO-8601 timestamp in UTC with millisecond precision.
        - level: Log level name.
        - module: Logger name (e.g., 'dumptext.io.walker').
        - msg: Formatted message string.
        - version: dumptext.__version__ (fixed per formatter instance).
        - ctx: Optional dictionary attached to the record as 'context'.
    """

    def __init__(self) -> None:
        super().__init__()
        self._version = self._resolve_version()

    @staticmethod
    def _resolve_version() -> str:
        try:
            # Lazy import; dumptext/__init__ imports this module.
            from dumptext import __version__ as _v
            return str(_v)
        except ImportError:
            return os.getenv("DUMPTEXT_VERSION", "unknown")

    def format(self, record: logging.LogRecord) -> str:
        from datetime import datetime, timezone
        import json

        ts = datetime.fromtimestamp(record.created, tz=timezone.utc)
        ts_str = ts.isoformat(timespec="milliseconds").replace("+00:00", "Z")

        payload = {
            "ts": ts_str,
            "level": record.levelname,
            "module": record.name,
            "msg": record.getMessage(),
            "version": self._version,
        }

        ctx = getattr(record, "context", None)
        if isinstance(ctx, dict) and ctx:
            payload["ctx"] = ctx

        return json.dumps(payload, ensure_ascii=False)


class _BelowLevelFilter(logging.Filter):
    """Let through only records strictly below *level*."""

    def __init__(self, level: int) -> None:
        super().__init__()
        self._level = level

    def filter(self, record: logging.LogRecord) -> bool:
        return record.levelno < self._level


def resolve_level(value: str | None, default: int = logging.INFO) -> int:
    """Map a level name such as 'debug' or a numeric string to a logging level."""
    if not value:
        return default
    value = value.strip()
    if value.isdigit():
        return int(value)
    level = logging.getLevelName(value.upper())
    return level if isinstance(level, int) else default


def setup_base_logger(
    *,
    json_logs: bool = False,
    level: int = logging.INFO,
    stream: Optional[TextIO] = None,
    error_stream: Optional[TextIO] = None,
) -> logging.Logger:
    """Configure the base 'dumptext' logger and return it.

    Args:
        json_logs: If True, configure a JSON formatter, else plain text.
        level: Logging level for the base logger.
        stream: Progress stream (stdout by default).
        error_stream: Diagnostic stream (stderr by default).

    Returns:
        The configured base logger.
    """
    base = logging.getLogger(BASE_LOGGER)
    for handler in list(base.handlers):
        base.removeHandler(handler)
    base.setLevel(level)
    base.propagate = False

    info_handler = logging.StreamHandler(stream or sys.stdout)
    info_handler.addFilter(_BelowLevelFilter(logging.WARNING))
    diag_handler = logging.StreamHandler(error_stream or sys.stderr)
    diag_handler.setLevel(logging.WARNING)

    if json_logs:
        info_handler.setFormatter(JsonLogFormatter())
        diag_handler.setFormatter(JsonLogFormatter())
    else:
        info_handler.setFormatter(logging.Formatter("%(message)s"))
        diag_handler.setFormatter(logging.Formatter("%(levelname)s: %(message)s"))

    base.addHandler(info_handler)
    base.addHandler(diag_handler)
    return base


def get_logger(name: str | None = None) -> logging.Logger:
    """Return a namespaced logger under 'dumptext'."""
    if not name or name == BASE_LOGGER:
        return logging.getLogger(BASE_LOGGER)
    if name.startswith(BASE_LOGGER + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{BASE_LOGGER}.{name}")
