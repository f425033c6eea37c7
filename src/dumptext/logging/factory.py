from __future__ import annotations

import logging
import os
from typing import Optional, TextIO

from dumptext.core.interfaces.logging import LoggerFactoryProtocol
from dumptext.logging.helpers import get_logger, resolve_level, setup_base_logger


class DefaultLoggerFactory(LoggerFactoryProtocol):
    """Factory that configures and returns project-scoped loggers.

    Base configuration is delegated to `setup_base_logger` and happens once,
    on the first `get_logger` call.
    """

    def __init__(
        self,
        *,
        json_logs: bool = False,
        level: int = logging.INFO,
        stream: Optional[TextIO] = None,
        error_stream: Optional[TextIO] = None,
    ) -> None:
        self._json = bool(json_logs)
        self._level = int(level)
        self._stream = stream
        self._error_stream = error_stream
        self._configured = False

    @classmethod
    def from_env(cls, **kwargs) -> 'DefaultLoggerFactory':
        """Build a factory honoring DUMPTEXT_JSON_LOGS and DUMPTEXT_LOG_LEVEL."""
        json_logs = os.getenv('DUMPTEXT_JSON_LOGS') == '1'
        level = resolve_level(os.getenv('DUMPTEXT_LOG_LEVEL'))
        return cls(json_logs=json_logs, level=level, **kwargs)

    def _ensure_config(self) -> None:
        if self._configured:
            return
        setup_base_logger(
            json_logs=self._json,
            level=self._level,
            stream=self._stream,
            error_stream=self._error_stream,
        )
        self._configured = True

    def get_logger(self, name: str) -> logging.Logger:
        self._ensure_config()
        return get_logger(name)
