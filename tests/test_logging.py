#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""Logger configuration: levels, JSON records and the stdout/stderr split."""
from __future__ import annotations

import io
import json
import logging
import os
import sys
import unittest
from pathlib import Path
from unittest.mock import patch

SRC = Path(__file__).resolve().parents[1] / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from dumptext import __version__  # noqa: E402
from dumptext.logging.factory import DefaultLoggerFactory  # noqa: E402
from dumptext.logging.helpers import resolve_level, setup_base_logger  # noqa: E402


class ResolveLevelTests(unittest.TestCase):
    def test_level_names_in_any_case(self) -> None:
        for raw, level in (("debug", logging.DEBUG), ("WARNING", logging.WARNING), (" error ", logging.ERROR)):
            with self.subTest(raw=raw):
                self.assertEqual(resolve_level(raw), level)

    def test_numeric_level(self) -> None:
        self.assertEqual(resolve_level("15"), 15)

    def test_unset_or_unknown_falls_back(self) -> None:
        for raw in (None, "", "verbose"):
            with self.subTest(raw=raw):
                self.assertEqual(resolve_level(raw), logging.INFO)
        self.assertEqual(resolve_level("verbose", default=logging.ERROR), logging.ERROR)


class FactoryFromEnvTests(unittest.TestCase):
    def setUp(self) -> None:
        self.out, self.err = io.StringIO(), io.StringIO()

    def tearDown(self) -> None:
        setup_base_logger()

    def _logger(self, env: dict) -> logging.Logger:
        with patch.dict(os.environ, env):
            factory = DefaultLoggerFactory.from_env(stream=self.out, error_stream=self.err)
        return factory.get_logger("runner")

    def test_plain_records_split_by_level(self) -> None:
        log = self._logger({"DUMPTEXT_JSON_LOGS": "0", "DUMPTEXT_LOG_LEVEL": ""})
        log.debug("hidden at INFO")
        log.info("Processing: ./a.md")
        log.warning("careful")
        self.assertEqual(self.out.getvalue(), "Processing: ./a.md\n")
        self.assertEqual(self.err.getvalue(), "WARNING: careful\n")

    def test_json_records_and_level_override(self) -> None:
        log = self._logger({"DUMPTEXT_JSON_LOGS": "1", "DUMPTEXT_LOG_LEVEL": "debug"})
        log.debug("hello", extra={"context": {"file": "a.md"}})
        log.error("boom")

        out_lines = self.out.getvalue().splitlines()
        err_lines = self.err.getvalue().splitlines()
        self.assertEqual(len(out_lines), 1)
        self.assertEqual(len(err_lines), 1)

        record = json.loads(out_lines[0])
        self.assertEqual(set(record), {"ts", "level", "module", "msg", "version", "ctx"})
        self.assertEqual(record["level"], "DEBUG")
        self.assertEqual(record["module"], "dumptext.runner")
        self.assertEqual(record["msg"], "hello")
        self.assertEqual(record["version"], __version__)
        self.assertEqual(record["ctx"], {"file": "a.md"})
        self.assertTrue(record["ts"].endswith("Z"))

        diag = json.loads(err_lines[0])
        self.assertEqual(diag["level"], "ERROR")
        self.assertNotIn("ctx", diag)

    def test_level_override_silences_progress(self) -> None:
        log = self._logger({"DUMPTEXT_JSON_LOGS": "0", "DUMPTEXT_LOG_LEVEL": "WARNING"})
        log.info("Processing: ./a.md")
        log.warning("still shown")
        self.assertEqual(self.out.getvalue(), "")
        self.assertEqual(self.err.getvalue(), "WARNING: still shown\n")


if __name__ == "__main__":
    unittest.main()
