from __future__ import annotations

"""
Text extraction strategies and the registry that selects one per run.

This module exposes:
  * `FileExtractor`: Base class; `extract(path)` returns plain text or raises
    `ExtractionError`.
  * `PandocExtractor`, `LynxExtractor`: External-tool strategies.
  * `PassthroughExtractor`: Returns the file contents unmodified; always available.
  * `ExtractorRegistry`: Priority-ordered strategies, probed once by `select()`.
  * `default_extractor_registry`: pandoc → lynx → passthrough.

Text crosses process and file boundaries decoded as UTF-8 with
`surrogateescape`, so arbitrary bytes are written back unchanged.
"""

import os
import shutil
import subprocess
from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Sequence

from dumptext.constants import TEXT_ENCODING, TEXT_ERRORS
from dumptext.core.errors import ExtractionError, NoExtractionMethodError
from dumptext.core.interfaces.extractors import Probe
from dumptext.core.models import ExtractionMethod
from dumptext.core.interfaces.logging import LoggerLikeProtocol
from dumptext.logging.helpers import get_logger
from dumptext.utils.suffixes import is_markup_extension


def command_exists(name: str) -> bool:
    """Return True if *name* resolves to an executable on PATH."""
    return shutil.which(name) is not None


def _decode(data: bytes) -> str:
    return data.decode(TEXT_ENCODING, errors=TEXT_ERRORS)


class FileExtractor(ABC):
    method: ExtractionMethod

    @abstractmethod
    def is_available(self) -> bool:
        raise NotImplementedError

    @abstractmethod
    def extract(self, path: str | os.PathLike) -> str:
        raise NotImplementedError

    @property
    def name(self) -> str:
        return self.method.value


class CommandExtractor(FileExtractor):
    """Run an external converter and capture its stdout as the file's text."""

    def __init__(self, *, probe: Optional[Probe] = None, logger: Optional[LoggerLikeProtocol] = None) -> None:
        self._probe: Probe = probe or command_exists
        self._log = logger or get_logger(f'io.extractors.{self.name}')

    @property
    def executable(self) -> str:
        exe = self.method.executable
        assert exe is not None
        return exe

    def is_available(self) -> bool:
        return self._probe(self.executable)

    @abstractmethod
    def build_command(self, path: str | os.PathLike) -> List[str]:
        raise NotImplementedError

    def extract(self, path: str | os.PathLike) -> str:
        cmd = self.build_command(path)
        self._log.debug('running %s', ' '.join(cmd))
        try:
            proc = subprocess.run(cmd, stdout=subprocess.PIPE, stderr=subprocess.PIPE, check=False)
        except OSError as exc:
            raise ExtractionError(path, f'{self.executable}: {exc}') from exc

        if proc.returncode != 0:
            stderr = _decode(proc.stderr or b'').strip()
            if stderr:
                self._log.debug('%s stderr for %s: %s', self.executable, path, stderr)
            raise ExtractionError(path, stderr or 'non-zero exit status', returncode=proc.returncode)
        return _decode(proc.stdout or b'')


class PandocExtractor(CommandExtractor):
    method = ExtractionMethod.PANDOC

    def build_command(self, path: str | os.PathLike) -> List[str]:
        return [self.executable, str(path), '-t', 'plain']


class LynxExtractor(CommandExtractor):
    method = ExtractionMethod.LYNX

    def build_command(self, path: str | os.PathLike) -> List[str]:
        # -nolist suppresses the numbered link list lynx appends to a dump.
        return [self.executable, '-dump', '-nolist', str(path)]


class PassthroughExtractor(FileExtractor):
    method = ExtractionMethod.PASSTHROUGH

    def __init__(self, *, logger: Optional[LoggerLikeProtocol] = None) -> None:
        self._log = logger or get_logger('io.extractors.cat')

    def is_available(self) -> bool:
        return True

    def extract(self, path: str | os.PathLike) -> str:
        try:
            return _decode(Path(path).read_bytes())
        except OSError as exc:
            raise ExtractionError(path, str(exc)) from exc


@dataclass(frozen=True)
class _Rule:
    extractor: FileExtractor
    priority: int = 0


class ExtractorRegistry:
    """Priority-ordered extraction strategies; the first available one wins."""

    def __init__(self, *, logger: Optional[LoggerLikeProtocol] = None) -> None:
        self._rules: List[_Rule] = []
        self._log = logger or get_logger('io.extractors')

    def register(self, extractor: FileExtractor, *, priority: int = 0) -> None:
        self._rules.append(_Rule(extractor=extractor, priority=priority))

    @property
    def extractors(self) -> List[FileExtractor]:
        """Registered strategies in probing order (highest priority first)."""
        ordered = sorted(self._rules, key=lambda r: r.priority, reverse=True)
        return [r.extractor for r in ordered]

    def methods(self) -> Sequence[ExtractionMethod]:
        return [e.method for e in self.extractors]

    def select(self) -> FileExtractor:
        for extractor in self.extractors:
            if extractor.is_available():
                return extractor
            self._log.debug('%s not available', extractor.name)
        names = ', '.join(f"'{m.value}'" for m in self.methods()) or 'none registered'
        raise NoExtractionMethodError(f'Cannot find any extraction method ({names}). Please install one.')

    def select_for(self, extension: str) -> FileExtractor:
        """Select a strategy and report the choice for files of *extension*."""
        extractor = self.select()
        if extractor.method is ExtractionMethod.PASSTHROUGH:
            tools = ' nor '.join(m.value for m in self.methods() if m.executable) or 'no converter'
            if is_markup_extension(extension):
                self._log.warning(
                    "Neither %s found. Using 'cat', formatting of '*.%s' files will be preserved.",
                    tools,
                    extension,
                )
            else:
                self._log.info("Using 'cat' for text extraction.")
        self._log.info("Using '%s' for text extraction.", extractor.name)
        return extractor


def default_extractor_registry(
    *,
    probe: Optional[Probe] = None,
    include_passthrough: bool = True,
    logger: Optional[LoggerLikeProtocol] = None,
) -> ExtractorRegistry:
    """Return the standard registry: pandoc, then lynx, then passthrough."""
    log = logger or get_logger('io.extractors')
    reg = ExtractorRegistry(logger=log)
    reg.register(PandocExtractor(probe=probe), priority=30)
    reg.register(LynxExtractor(probe=probe), priority=20)
    if include_passthrough:
        reg.register(PassthroughExtractor(), priority=0)
    return reg
