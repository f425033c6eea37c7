#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""Whole-word line filtering (dumptext.processing.line_ops)."""
from __future__ import annotations

import sys
import unittest
from pathlib import Path

SRC = Path(__file__).resolve().parents[1] / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from dumptext.processing.line_ops import WordFilter  # noqa: E402


class WordFilterTests(unittest.TestCase):
    def test_whole_word_only(self) -> None:
        wf = WordFilter(["foo", "bar"])
        self.assertTrue(wf.keeps("this has foobar"))
        self.assertFalse(wf.keeps("this has foo only"))
        self.assertFalse(wf.keeps("bar at the start"))
        self.assertFalse(wf.keeps("punctuated (foo)."))

    def test_case_sensitive(self) -> None:
        wf = WordFilter(["Secret"])
        self.assertTrue(wf.keeps("a secret line"))
        self.assertFalse(wf.keeps("a Secret line"))

    def test_words_are_literal(self) -> None:
        wf = WordFilter(["a.b"])
        self.assertTrue(wf.keeps("axb"))
        self.assertFalse(wf.keeps("see a.b here"))

    def test_empty_word_set_keeps_everything(self) -> None:
        wf = WordFilter([])
        self.assertFalse(wf)
        self.assertIsNone(wf.pattern)
        self.assertEqual(wf.filter_text("one\ntwo\n"), ["one\n", "two\n"])

    def test_empty_items_are_ignored(self) -> None:
        wf = WordFilter(["", "foo", "foo"])
        self.assertEqual(wf.words, ("foo",))
        self.assertTrue(wf.keeps("nothing to see"))

    def test_filter_preserves_order(self) -> None:
        wf = WordFilter(["drop"])
        text = "first\ndrop me\nsecond\nalso drop\nthird\n"
        self.assertEqual(wf.filter_text(text), ["first\n", "second\n", "third\n"])

    def test_trailing_newlines_collapsed(self) -> None:
        wf = WordFilter([])
        self.assertEqual(wf.filter_text("body\n\n\n"), ["body\n"])
        self.assertEqual(wf.filter_text("body"), ["body\n"])

    def test_empty_text_yields_blank_line(self) -> None:
        self.assertEqual(WordFilter([]).filter_text(""), ["\n"])
        self.assertEqual(WordFilter(["x"]).filter_text(""), ["\n"])

    def test_all_lines_dropped(self) -> None:
        self.assertEqual(WordFilter(["x"]).filter_text("x\nx y\n"), [])

    def test_removing_a_word_never_drops_more_lines(self) -> None:
        text = "alpha\nbeta gamma\ngamma\ndelta alpha\nepsilon\n"
        full = WordFilter(["alpha", "gamma"]).filter_text(text)
        fewer = WordFilter(["alpha"]).filter_text(text)
        self.assertTrue(set(full) <= set(fewer))
        self.assertGreater(len(fewer), len(full))


if __name__ == "__main__":
    unittest.main()
