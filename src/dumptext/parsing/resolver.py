from __future__ import annotations
"""Turn a parsed namespace into a validated `RunConfig`.

Validation follows the command's historical order: the input directory is
checked first, then the extension is normalized and must not be empty.
"""
import argparse
import os
from pathlib import Path
from typing import Optional, Sequence

from dumptext.constants import VCS_DIR
from dumptext.core.errors import EmptyExtensionError, InvalidInputError
from dumptext.core.models import RunConfig
from dumptext.core.interfaces.logging import LoggerLikeProtocol
from dumptext.logging.helpers import get_logger
from dumptext.utils.paths import split_csv
from dumptext.utils.suffixes import normalize_extension


def merge_exclude_dirs(raw_values: Optional[Sequence[str]]) -> frozenset[str]:
    """Merge every `-d` value with the default VCS exclusion."""
    names = {VCS_DIR}
    for raw in raw_values or ():
        names.update(split_csv(raw))
    return frozenset(names)


def resolve_config(
    ns: argparse.Namespace,
    *,
    program_path: str,
    logger: Optional[LoggerLikeProtocol] = None,
) -> RunConfig:
    """Validate *ns* and build the immutable run configuration.

    Raises:
        InvalidInputError: the input directory is missing or not a directory.
        EmptyExtensionError: the extension is empty once its dot is stripped.
    """
    log = logger or get_logger('parsing.resolver')

    operands = list(getattr(ns, 'operands', None) or [])
    if operands:
        log.warning('ignoring extra arguments: %s', ' '.join(operands))

    input_dir = str(ns.input_dir)
    if not os.path.isdir(input_dir):
        raise InvalidInputError(input_dir)

    extension = normalize_extension(ns.extension)
    if not extension:
        raise EmptyExtensionError()

    return RunConfig(
        input_dir=input_dir,
        output_file=Path(ns.output_file),
        extension=extension,
        program_name=os.path.basename(program_path),
        program_path=program_path,
        exclude_dirs=merge_exclude_dirs(ns.exclude_dirs),
        exclude_words=tuple(split_csv(ns.exclude_words)),
        add_separator=bool(ns.add_separator),
    )
