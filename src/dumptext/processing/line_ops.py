# src/dumptext/processing/line_ops.py
import re
from typing import Iterable, List, Optional, Pattern

from dumptext.core.interfaces.text import LineFilterProtocol
from dumptext.core.interfaces.logging import LoggerLikeProtocol
from dumptext.logging.helpers import get_logger


class WordFilter(LineFilterProtocol):
    """Drop lines that contain any excluded word as a whole word.

    The pattern is a single case-sensitive alternation bounded by `\\b` on
    both sides, compiled once. Words are matched literally. With no words
    the filter keeps everything.
    """

    def __init__(self, words: Iterable[str] = (), *, logger: Optional[LoggerLikeProtocol] = None) -> None:
        self._words: tuple[str, ...] = tuple(dict.fromkeys(w for w in words if w))
        self._log = logger or get_logger('processing.lineops')
        self._pattern: Optional[Pattern[str]] = None
        if self._words:
            alternation = '|'.join(re.escape(w) for w in self._words)
            self._pattern = re.compile(rf'\b(?:{alternation})\b')

    @property
    def words(self) -> tuple[str, ...]:
        return self._words

    @property
    def pattern(self) -> Optional[Pattern[str]]:
        return self._pattern

    def __bool__(self) -> bool:
        return self._pattern is not None

    def keeps(self, line: str) -> bool:
        """Return True when *line* holds none of the excluded words."""
        return self._pattern is None or self._pattern.search(line) is None

    def filter_text(self, text: str) -> List[str]:
        """Return the surviving lines of *text*, each terminated by a newline.

        Trailing newlines are collapsed first, so an empty extraction yields
        a single blank line and a text ending in several newlines does not
        produce extra blank lines.
        """
        lines = text.rstrip('\n').split('\n')
        if self._pattern is None:
            return [ln + '\n' for ln in lines]
        kept = [ln + '\n' for ln in lines if self._pattern.search(ln) is None]
        dropped = len(lines) - len(kept)
        if dropped:
            self._log.debug('dropped %d line(s) matching excluded words', dropped)
        return kept
