"""Tests for file-only logging configuration."""

from __future__ import annotations

import logging
import tempfile
import unittest
from pathlib import Path

from panewalk.logging_setup import configure_logging, parse_level


class LoggingSetupTests(unittest.TestCase):
    def tearDown(self) -> None:
        configure_logging(None)

    def test_without_log_file_records_are_dropped(self) -> None:
        handler = configure_logging(None)

        self.assertIsInstance(handler, logging.NullHandler)
        self.assertFalse(logging.getLogger("panewalk").propagate)

    def test_log_file_receives_namespaced_records(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            log_file = Path(tmp) / "logs" / "panewalk.log"
            handler = configure_logging(log_file, "debug")

            logging.getLogger("panewalk.navigation").debug("descended into %s", "/tmp/x")
            handler.flush()
            configure_logging(None)

            content = log_file.read_text(encoding="utf-8")

        self.assertIn("DEBUG", content)
        self.assertIn("panewalk.navigation", content)
        self.assertIn("descended into /tmp/x", content)

    def test_repeated_configuration_replaces_handlers(self) -> None:
        configure_logging(None)
        configure_logging(None)

        self.assertEqual(len(logging.getLogger("panewalk").handlers), 1)

    def test_parse_level(self) -> None:
        self.assertEqual(parse_level("warning"), logging.WARNING)
        self.assertEqual(parse_level(" DEBUG "), logging.DEBUG)
        self.assertEqual(parse_level("nonsense"), logging.INFO)
        self.assertEqual(parse_level(None), logging.INFO)


if __name__ == "__main__":
    unittest.main()
