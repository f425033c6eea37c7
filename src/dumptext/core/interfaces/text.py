from __future__ import annotations
"""Line filter protocol definitions."""

from typing import List, Protocol, runtime_checkable


@runtime_checkable
class LineFilterProtocol(Protocol):
    """Protocol for per-line text filters.

    Methods:
        keeps: Return True when a single line survives the filter.
        filter_text: Split extracted text into newline-terminated surviving lines.
    """

    def keeps(self, line: str) -> bool:
        ...

    def filter_text(self, text: str) -> List[str]:
        ...
