from __future__ import annotations
"""Extension utilities for the target-file filter.

Semantics:
    * The CLI token passed via `-e` may carry ONE leading dot, which is
      stripped: ".txt" -> "txt", "txt" -> "txt", "..txt" -> ".txt".
    * Matching is performed with `str.endswith("." + ext)` over the filename
      (not the full path), so "notes.txt" matches "txt" while
      "notes.txt.bak" does not.
    * Matching is case-sensitive, like a shell glob.

Examples:
    normalize_extension(".md")               -> "md"
    has_extension("README.md", "md")         -> True
    has_extension("README.md.orig", "md")    -> False
"""

from dumptext.constants import MARKUP_EXTENSIONS


def normalize_extension(raw: str | None) -> str:
    """Strip a single leading dot; whitespace is part of the extension.

    Returns:
        The bare extension; may be empty, validation is up to the caller.
    """
    ext = raw or ""
    if ext.startswith("."):
        ext = ext[1:]
    return ext


def has_extension(filename: str, ext: str) -> bool:
    """Return True if a basename ends with `.<ext>`."""
    return bool(ext) and filename.endswith(f".{ext}")


def is_markup_extension(ext: str) -> bool:
    """Return True for formats whose markup survives a passthrough read."""
    return ext.lower() in MARKUP_EXTENSIONS
