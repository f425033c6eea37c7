# src/dumptext/utils/paths.py
"""
paths – Small, centralized path and token helpers for dumptext.

Provides:
  • split_csv(str)               – comma-separated option values
  • same_resolved_path(a, b)     – path identity after resolution
  • is_real_file(path)           – regular file, not a symlink
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import List


def split_csv(value: str | None) -> List[str]:
    """Split a comma-separated option value, dropping empty items."""
    if not value:
        return []
    return [item for item in value.split(",") if item]


def same_resolved_path(a: str | os.PathLike, b: str | os.PathLike) -> bool:
    """Return True if *a* and *b* resolve to the same absolute path."""
    return Path(a).resolve() == Path(b).resolve()


def is_real_file(path: str | os.PathLike) -> bool:
    """Return True for regular files that are not symbolic links."""
    return os.path.isfile(path) and not os.path.islink(path)
