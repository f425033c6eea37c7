from __future__ import annotations
"""Single append-only sink for the combined text.

`OutputAssembler` is a context manager: entering it runs the self-overwrite
guard, then creates or truncates the output file; every `append` writes one
file's surviving lines (plus the optional separator block) in call order.
The handle is flushed and closed on exit.
"""
import os
from pathlib import Path
from typing import Iterable, Optional, TextIO

from dumptext.constants import SEPARATOR_TEMPLATE, TEXT_ENCODING, TEXT_ERRORS
from dumptext.core.errors import OutputCreationError, SelfOverwriteError
from dumptext.core.models import RunConfig
from dumptext.core.interfaces.logging import LoggerLikeProtocol
from dumptext.logging.helpers import get_logger
from dumptext.utils.paths import same_resolved_path


class OutputAssembler:
    def __init__(self, config: RunConfig, *, logger: Optional[LoggerLikeProtocol] = None) -> None:
        self._config = config
        self._log = logger or get_logger('io.output')
        self._fh: Optional[TextIO] = None

    @property
    def path(self) -> Path:
        return self._config.output_file

    def check_not_self(self) -> None:
        """Refuse an output path that is the running program itself."""
        cfg = self._config
        if cfg.output_basename == cfg.program_name and same_resolved_path(cfg.output_file, cfg.program_path):
            raise SelfOverwriteError(cfg.program_name)

    def open(self) -> None:
        self.check_not_self()
        try:
            self._fh = open(self.path, 'w', encoding=TEXT_ENCODING, errors=TEXT_ERRORS, newline='')
        except OSError as exc:
            raise OutputCreationError(self.path, exc.strerror or str(exc)) from exc
        self._log.info("Output file '%s' created/cleared.", self.path)

    def close(self) -> None:
        if self._fh is not None:
            self._fh.close()
            self._fh = None

    def __enter__(self) -> 'OutputAssembler':
        self.open()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def append(self, source: os.PathLike | str, lines: Iterable[str]) -> int:
        """Write *lines* for *source* and return the number of bytes written."""
        if self._fh is None:
            raise RuntimeError('OutputAssembler.append() called outside of an open context')
        body = ''.join(lines)
        if self._config.add_separator:
            body += SEPARATOR_TEMPLATE.format(path=os.fspath(source))
        self._fh.write(body)
        return len(body.encode(TEXT_ENCODING, TEXT_ERRORS))
