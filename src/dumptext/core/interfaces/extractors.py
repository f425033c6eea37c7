from __future__ import annotations

import os
from typing import Callable, Protocol, runtime_checkable

from dumptext.core.models import ExtractionMethod

Probe = Callable[[str], bool]


@runtime_checkable
class ExtractorProtocol(Protocol):
    method: ExtractionMethod

    def is_available(self) -> bool:
        ...

    def extract(self, path: str | os.PathLike) -> str:
        ...


@runtime_checkable
class ExtractorRegistryProtocol(Protocol):
    def register(self, extractor: ExtractorProtocol, *, priority: int = 0) -> None:
        ...

    def select(self) -> ExtractorProtocol:
        ...

    def select_for(self, extension: str) -> ExtractorProtocol:
        ...
