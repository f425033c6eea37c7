from __future__ import annotations
from typing import List, Protocol, runtime_checkable

from dumptext.core.models import RunConfig


@runtime_checkable
class WalkerProtocol(Protocol):
    """Abstract candidate-file collector."""

    def gather_files(self, config: RunConfig) -> List[str]:
        """Collect candidate files below `config.input_dir`, sorted by path string.

        Each entry is the input directory joined with the relative path,
        unnormalized, so it can be shown and written back exactly as built.
        """
        ...
