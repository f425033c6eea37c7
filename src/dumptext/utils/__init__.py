"""
dumptext.utils – Small shared utilities (extension normalization, path checks).
"""
from .suffixes import normalize_extension, has_extension, is_markup_extension
from .paths import split_csv, same_resolved_path, is_real_file

__all__ = [
    "normalize_extension",
    "has_extension",
    "is_markup_extension",
    "split_csv",
    "same_resolved_path",
    "is_real_file",
]
