from __future__ import annotations
from typing import Protocol, runtime_checkable


@runtime_checkable
class LoggerLikeProtocol(Protocol):
    """Logging surface the pipeline stages write to.

    `debug`/`info` carry progress and belong on stdout; `warning`/`error`
    carry diagnostics and belong on stderr. A `logging.Logger` satisfies
    it, and so does any object that routes the four levels itself.
    """

    def debug(self, msg: str, *args, **kwargs) -> None: ...

    def info(self, msg: str, *args, **kwargs) -> None: ...

    def warning(self, msg: str, *args, **kwargs) -> None: ...

    def error(self, msg: str, *args, **kwargs) -> None: ...


@runtime_checkable
class LoggerFactoryProtocol(Protocol):
    """Hands out loggers below the `dumptext` namespace, configuring it once."""

    def get_logger(self, name: str) -> LoggerLikeProtocol:
        """Return the logger for component *name* (e.g. `'runner'`)."""
        ...
