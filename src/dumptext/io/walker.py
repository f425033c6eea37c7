from __future__ import annotations
import os
from typing import List, Optional

from dumptext.core.interfaces import WalkerProtocol
from dumptext.core.models import RunConfig
from dumptext.core.interfaces.logging import LoggerLikeProtocol
from dumptext.logging.helpers import get_logger
from dumptext.utils.paths import is_real_file
from dumptext.utils.suffixes import has_extension


class TreeWalker(WalkerProtocol):
    """Collect candidate files below the input directory.

    Directories named in `exclude_dirs` are pruned at any depth and symlinked
    directories are never entered. Files are matched on their basename only:
    the extension must match and the name must differ from both the program
    name and the output file's basename, wherever the output actually lives.
    """

    def __init__(self, *, logger: Optional[LoggerLikeProtocol] = None) -> None:
        self._log = logger or get_logger('io.walker')

    def gather_files(self, config: RunConfig) -> List[str]:
        top = config.input_dir
        excluded_names = config.excluded_names
        collected: List[str] = []

        for dirpath, dirnames, filenames in os.walk(top, followlinks=False, onerror=self._on_error):
            dirnames[:] = [d for d in dirnames if self._should_descend(dirpath, d, config.exclude_dirs)]
            for fn in filenames:
                if not has_extension(fn, config.extension) or fn in excluded_names:
                    continue
                fp = os.path.join(dirpath, fn)
                if not is_real_file(fp):
                    self._log.debug('skipping non-regular file %s', fp)
                    continue
                collected.append(fp)

        # Unnormalized: `-i .` yields "./a.md".
        return sorted(collected)

    def _should_descend(self, dirpath: str, name: str, exclude_dirs: frozenset[str]) -> bool:
        if name in exclude_dirs:
            self._log.debug('pruned %s', os.path.join(dirpath, name))
            return False
        if os.path.islink(os.path.join(dirpath, name)):
            self._log.debug('not following symlinked directory %s', os.path.join(dirpath, name))
            return False
        return True

    def _on_error(self, exc: OSError) -> None:
        self._log.warning('⚠  cannot read directory %s (%s)', exc.filename, exc.strerror or exc)
