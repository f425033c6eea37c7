# dumptext/parsing/parser.py
from __future__ import annotations

import argparse
from typing import NoReturn

from dumptext.constants import DEFAULT_EXTENSION, DEFAULT_INPUT_DIR, DEFAULT_OUTPUT_FILE, VCS_DIR
from dumptext.core.errors import UsageError


class _UsageErrorParser(argparse.ArgumentParser):
    """ArgumentParser that raises `UsageError` instead of exiting with status 2."""

    def error(self, message: str) -> NoReturn:
        raise UsageError(message)


def _build_parser(prog: str = "dumptext") -> argparse.ArgumentParser:
    """
    Build the CLI argument parser.

    Notes:
        - `-h` is handled by the caller (usage + exit status 1), so argparse's
          own help action is disabled.
        - Comma-separated lists are kept as raw strings here; splitting and
          merging with the defaults happens in `resolve_config`.
    """
    p = _UsageErrorParser(
        prog=prog,
        formatter_class=argparse.RawTextHelpFormatter,
        usage="%(prog)s [-i <input_dir>] [-o <output_file>] [-e <extension>] "
              "[-w <word1,word2,...>] [-d <dir1,dir2,...>] [-s] [-h]",
        add_help=False,
        allow_abbrev=False,
        description=(
            "Walk a directory tree, extract plain text from every '*.<extension>' file\n"
            "(pandoc, then lynx, then a raw read) and concatenate it into one file."
        ),
        epilog=(
            f"Note: the program file '{prog}' and the output file will always be excluded."
        ),
    )

    g_loc = p.add_argument_group("Discovery")
    g_flt = p.add_argument_group("Filtering")
    g_out = p.add_argument_group("Output")
    g_misc = p.add_argument_group("Miscellaneous")

    g_loc.add_argument(
        "-i",
        "--input",
        metavar="<input_dir>",
        dest="input_dir",
        default=DEFAULT_INPUT_DIR,
        help=f"Directory to search for files (default: {DEFAULT_INPUT_DIR})",
    )
    g_loc.add_argument(
        "-e",
        "--extension",
        metavar="<extension>",
        dest="extension",
        default=DEFAULT_EXTENSION,
        help=f"File extension to process, leading dot optional (default: {DEFAULT_EXTENSION})",
    )
    g_loc.add_argument(
        "-d",
        "--exclude-dirs",
        metavar="<dir_list>",
        dest="exclude_dirs",
        action="append",
        help=(
            "Comma-separated list of directory names to exclude (e.g., node_modules,build)\n"
            f"({VCS_DIR} is excluded by default). Repeatable."
        ),
    )

    g_flt.add_argument(
        "-w",
        "--exclude-words",
        metavar="<word_list>",
        dest="exclude_words",
        help="Comma-separated list of words; lines containing any of them are dropped",
    )

    g_out.add_argument(
        "-o",
        "--output",
        metavar="<output_file>",
        dest="output_file",
        default=DEFAULT_OUTPUT_FILE,
        help=(
            f"File to save combined text (default: {DEFAULT_OUTPUT_FILE})\n"
            "(This output file itself will be excluded from processing)"
        ),
    )
    g_out.add_argument(
        "-s",
        "--separator",
        action="store_true",
        dest="add_separator",
        help="Add a separator line between content from different files",
    )

    g_misc.add_argument(
        "-h",
        "--help",
        action="store_true",
        dest="help",
        help="Display this help message",
    )
    # Option parsing stops at the first operand; it and everything after it
    # land here untouched and are later ignored with a warning.
    g_misc.add_argument("operands", nargs=argparse.REMAINDER, help=argparse.SUPPRESS)

    return p
