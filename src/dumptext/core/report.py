from __future__ import annotations

"""
Runtime summary of a single dumptext run.

The runner fills it in as files are processed; the CLI logs a one-line
summary from it and `to_json()` gives a machine-readable view.
"""

import json
import time
from dataclasses import dataclass, field
from typing import List, Tuple


@dataclass
class RunReport:
    method: str | None = None
    started_at: float = field(default_factory=time.perf_counter)
    finished_at: float | None = None
    duration_s: float | None = None

    candidates: int = 0
    written: List[str] = field(default_factory=list)
    skipped: List[Tuple[str, str]] = field(default_factory=list)
    bytes_written: int = 0

    def add_written(self, path: str, size: int) -> None:
        self.written.append(str(path))
        self.bytes_written += size

    def add_skipped(self, path: str, reason: str) -> None:
        self.skipped.append((str(path), reason))

    def finish(self) -> None:
        self.finished_at = time.perf_counter()
        self.duration_s = self.finished_at - self.started_at

    def summary(self) -> str:
        return f'{len(self.written)} file(s) written, {len(self.skipped)} skipped, {self.bytes_written} bytes'

    def to_json(self, *, indent: int = 2) -> str:
        return json.dumps(
            {
                "method": self.method,
                "started_at": self.started_at,
                "finished_at": self.finished_at,
                "duration_s": self.duration_s,
                "candidates": self.candidates,
                "written": self.written,
                "skipped": [{"path": p, "reason": r} for p, r in self.skipped],
                "bytes_written": self.bytes_written,
            },
            indent=indent,
        )
