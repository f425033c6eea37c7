from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Optional

from dumptext.constants import VCS_DIR


class ExtractionMethod(Enum):
    """Closed set of text extraction strategies, in no particular order."""

    PANDOC = 'pandoc'
    LYNX = 'lynx'
    PASSTHROUGH = 'cat'

    @property
    def executable(self) -> Optional[str]:
        """External program probed on PATH, or None when nothing is required."""
        if self is ExtractionMethod.PASSTHROUGH:
            return None
        return self.value


@dataclass(frozen=True)
class RunConfig:
    """Validated, read-only configuration for a single run.

    `input_dir` is kept exactly as given on the command line; candidate paths
    are joined onto it verbatim, so `.` yields `./a.md`.
    """
    input_dir: str
    output_file: Path
    extension: str
    program_name: str
    program_path: str
    exclude_dirs: frozenset[str] = field(default_factory=lambda: frozenset({VCS_DIR}))
    exclude_words: tuple[str, ...] = ()
    add_separator: bool = False

    @property
    def output_basename(self) -> str:
        return self.output_file.name

    @property
    def excluded_names(self) -> frozenset[str]:
        """File names never treated as candidates."""
        return frozenset({self.program_name, self.output_basename})
