#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""Traversal, pruning and candidate selection (dumptext.io.walker)."""
from __future__ import annotations

import contextlib
import os
import sys
import tempfile
import unittest
from pathlib import Path
from typing import Iterator

SRC = Path(__file__).resolve().parents[1] / "src"
TOOLS_DIR = Path(__file__).resolve().parent / "tools"
for _p in (SRC, TOOLS_DIR):
    if str(_p) not in sys.path:
        sys.path.insert(0, str(_p))

from build_fixtures import build_tree  # noqa: E402
from dumptext.core.models import RunConfig  # noqa: E402
from dumptext.io.walker import TreeWalker  # noqa: E402


def _config(root: Path, **overrides) -> RunConfig:
    values = dict(
        input_dir=str(root),
        output_file=root / "COMBINED_TEXT.txt",
        extension="md",
        program_name="dumptext",
        program_path="/usr/local/bin/dumptext",
    )
    values.update(overrides)
    return RunConfig(**values)


def _rel(paths, root: Path):
    return [os.path.relpath(p, root) for p in paths]


@contextlib.contextmanager
def _inside(directory: Path) -> Iterator[None]:
    """Temporarily switch CWD to *directory*."""
    cwd = Path.cwd()
    os.chdir(directory)
    try:
        yield
    finally:
        os.chdir(cwd)


class WalkerTests(unittest.TestCase):
    def setUp(self) -> None:
        self._td = tempfile.TemporaryDirectory()
        self.root = Path(self._td.name)
        self.walker = TreeWalker()

    def tearDown(self) -> None:
        self._td.cleanup()

    def _touch(self, rel: str, body: str = "x\n") -> None:
        fp = self.root / rel
        fp.parent.mkdir(parents=True, exist_ok=True)
        fp.write_text(body, encoding="utf-8")

    def test_nested_vcs_dir_is_pruned(self) -> None:
        for rel in ("a.md", "b.md", "sub/c.md", "sub/.git/d.md"):
            self._touch(rel)
        files = self.walker.gather_files(_config(self.root))
        self.assertEqual(_rel(files, self.root), ["a.md", "b.md", os.path.join("sub", "c.md")])

    def test_extension_match_is_exact_tail(self) -> None:
        for rel in ("notes.txt", "notes.txt.bak", "txt", "other.md"):
            self._touch(rel)
        files = self.walker.gather_files(_config(self.root, extension="txt"))
        self.assertEqual(_rel(files, self.root), ["notes.txt"])

    def test_custom_excluded_dirs_at_any_depth(self) -> None:
        build_tree(self.root)
        cfg = _config(self.root, exclude_dirs=frozenset({".git", "node_modules"}))
        rel = _rel(self.walker.gather_files(cfg), self.root)
        self.assertFalse(any("node_modules" in r for r in rel))
        self.assertFalse(any(".git" in r for r in rel))
        self.assertIn(os.path.join("sub", "c.md"), rel)

    def test_default_exclusion_keeps_other_dirs(self) -> None:
        build_tree(self.root)
        rel = _rel(self.walker.gather_files(_config(self.root)), self.root)
        self.assertIn(os.path.join("node_modules", "pkg", "readme.md"), rel)
        self.assertIn(os.path.join("deep", "node_modules", "nested.md"), rel)

    def test_output_basename_excluded_in_any_directory(self) -> None:
        build_tree(self.root)
        cfg = _config(self.root, output_file=Path("/elsewhere/COMBINED_TEXT.md"))
        rel = _rel(self.walker.gather_files(cfg), self.root)
        self.assertNotIn(os.path.join("other", "COMBINED_TEXT.md"), rel)

    def test_program_name_excluded(self) -> None:
        self._touch("tool.md")
        self._touch("keep.md")
        cfg = _config(self.root, program_name="tool.md", program_path="/bin/tool.md")
        self.assertEqual(_rel(self.walker.gather_files(cfg), self.root), ["keep.md"])

    def test_sorted_by_path_string(self) -> None:
        for rel in ("b.md", "a/z.md", "B.md", "a.md", "a-b.md"):
            self._touch(rel)
        files = self.walker.gather_files(_config(self.root))
        as_str = [str(p) for p in files]
        self.assertEqual(as_str, sorted(as_str))
        self.assertEqual(len(as_str), 5)

    def test_paths_keep_the_input_prefix(self) -> None:
        self._touch("a.md")
        files = self.walker.gather_files(_config(self.root))
        self.assertEqual(files[0], os.path.join(str(self.root), "a.md"))

    def test_current_dir_input_keeps_dot_prefix(self) -> None:
        self._touch("a.md")
        self._touch("sub/c.md")
        with _inside(self.root):
            files = self.walker.gather_files(_config(self.root, input_dir="."))
        self.assertEqual(files, [os.path.join(".", "a.md"), os.path.join(".", "sub", "c.md")])

    def test_relative_input_is_not_normalized(self) -> None:
        self._touch("d/a.md")
        with _inside(self.root):
            files = self.walker.gather_files(_config(self.root, input_dir="./d"))
        self.assertEqual(files, [os.path.join("./d", "a.md")])

    @unittest.skipUnless(hasattr(os, "symlink"), "symlinks not supported")
    def test_symlinked_directory_not_followed(self) -> None:
        self._touch("sub/c.md")
        try:
            os.symlink(os.path.join("..", "sub"), self.root / "sub" / "loop", target_is_directory=True)
        except OSError:
            self.skipTest("cannot create symlinks here")
        files = self.walker.gather_files(_config(self.root))
        self.assertEqual(_rel(files, self.root), [os.path.join("sub", "c.md")])

    @unittest.skipUnless(hasattr(os, "symlink"), "symlinks not supported")
    def test_symlinked_file_not_a_candidate(self) -> None:
        self._touch("real.md")
        try:
            os.symlink("real.md", self.root / "alias.md")
        except OSError:
            self.skipTest("cannot create symlinks here")
        files = self.walker.gather_files(_config(self.root))
        self.assertEqual(_rel(files, self.root), ["real.md"])

    def test_empty_tree(self) -> None:
        self.assertEqual(self.walker.gather_files(_config(self.root)), [])


if __name__ == "__main__":
    unittest.main()
