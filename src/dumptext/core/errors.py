"""
Exceptions raised by the dumptext pipeline.

Every fatal error carries the process exit code the CLI should use. Only
`ExtractionError` is recoverable: the runner logs it and moves on to the
next candidate file.
"""

import os
from pathlib import Path
from typing import Optional, Union


class DumpTextError(Exception):
    """Base exception for all dumptext errors."""

    exit_code: int = 1
    show_usage: bool = False

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


class UsageError(DumpTextError):
    """Bad, missing or unknown command-line arguments."""

    show_usage = True


class EmptyExtensionError(DumpTextError):
    """The file extension is empty once its leading dot is stripped."""

    show_usage = True

    def __init__(self) -> None:
        super().__init__('File extension cannot be empty.')


class InvalidInputError(DumpTextError):
    """The input directory does not exist or is not a directory."""

    def __init__(self, input_dir: str) -> None:
        super().__init__(f"Input directory '{input_dir}' not found.")
        self.input_dir = input_dir


class NoExtractionMethodError(DumpTextError):
    """No extraction method is available on this host."""


class SelfOverwriteError(DumpTextError):
    """The output path points at the running program."""

    def __init__(self, program_name: str) -> None:
        super().__init__(f"Output file cannot be the script file itself ('{program_name}').")
        self.program_name = program_name


class OutputCreationError(DumpTextError):
    """The output file could not be created or truncated."""

    def __init__(self, output_file: Path, reason: str) -> None:
        super().__init__(f"Cannot create output file '{output_file}': {reason}")
        self.output_file = output_file


class ExtractionError(DumpTextError):
    """Text extraction failed for a single file."""

    def __init__(self, path: Union[str, os.PathLike], reason: str, *, returncode: Optional[int] = None) -> None:
        detail = f'exit code: {returncode}' if returncode is not None else reason
        super().__init__(f"Failed to extract text from '{path}' ({detail}).")
        self.path = path
        self.reason = reason
        self.returncode = returncode


class HelpRequested(UsageError):
    """`-h` was given: print usage and exit with the usage status."""

    def __init__(self) -> None:
        super().__init__('')
