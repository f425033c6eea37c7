from __future__ import annotations

"""Project-wide defaults used across modules.

This module isolates public constants to reduce cross-module coupling.
"""

DEFAULT_INPUT_DIR: str = '.'
DEFAULT_OUTPUT_FILE: str = 'COMBINED_TEXT.txt'
DEFAULT_EXTENSION: str = 'html'

# Always pruned, wherever it occurs in the tree.
VCS_DIR: str = '.git'

# Formats whose markup survives a passthrough read.
MARKUP_EXTENSIONS: frozenset[str] = frozenset({'md', 'html', 'htm', 'rst', 'org'})

# Written after each file's text when the separator flag is set.
SEPARATOR_TEMPLATE: str = '\n--- End of {path} ---\n\n'

# Byte-preserving text decoding for extracted output and passthrough reads.
TEXT_ENCODING: str = 'utf-8'
TEXT_ERRORS: str = 'surrogateescape'
