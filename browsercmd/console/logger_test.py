"""
Unit tests for the console logger module.
"""
from __future__ import annotations

import io
import re
import unittest

from rich.console import Console

from browsercmd.console.logger import BROWSERCMD_THEME, Logger, get_logger


def strip_ansi(text: str) -> str:
    """Remove ANSI escape codes from text."""
    ansi_escape = re.compile(r"\x1b\[[0-9;]*m")
    return ansi_escape.sub("", text)


class LoggerTestCase(unittest.TestCase):
    """Captures both consoles of a fresh Logger."""

    def setUp(self) -> None:
        """Set up test fixtures with captured consoles."""
        self.output = io.StringIO()
        self.errors = io.StringIO()
        self.logger = Logger()
        self.logger.console = Console(
            file=self.output, force_terminal=True, theme=BROWSERCMD_THEME
        )
        self.logger.err_console = Console(
            file=self.errors, force_terminal=True, theme=BROWSERCMD_THEME
        )


class TestLoggerDiagnostics(LoggerTestCase):
    """Tests for diagnostics written to stderr."""

    def test_error_goes_to_stderr(self) -> None:
        """error() writes to the diagnostics console."""
        self.logger.error("Error message")
        self.assertIn("✗", self.errors.getvalue())
        self.assertIn("Error message", self.errors.getvalue())
        self.assertEqual(self.output.getvalue(), "")


class TestLoggerDebug(LoggerTestCase):
    """Tests for verbose-gated debug output."""

    def test_debug_silent_by_default(self) -> None:
        """debug() prints nothing unless verbose."""
        self.logger.debug("hidden")
        self.assertEqual(self.errors.getvalue(), "")

    def test_debug_when_verbose(self) -> None:
        """debug() prints to stderr once verbose is on."""
        self.logger.verbose = True
        self.logger.debug("tokens: ['click']")
        self.assertIn("tokens:", strip_ansi(self.errors.getvalue()))
        self.assertEqual(self.output.getvalue(), "")


class TestLoggerStructuredOutput(LoggerTestCase):
    """Tests for structured output methods."""

    def test_header_prints_title_and_subtitle(self) -> None:
        """header() prints the title and optional subtitle."""
        self.logger.header("navigate", "r123456")
        output = strip_ansi(self.output.getvalue())
        self.assertIn("navigate", output)
        self.assertIn("r123456", output)

    def test_key_value_prints_pairs(self) -> None:
        """key_value() prints each key and value."""
        self.logger.key_value({"url": "https://example.com", "abort": "true"})
        output = strip_ansi(self.output.getvalue())
        self.assertIn("url:", output)
        self.assertIn("https://example.com", output)
        self.assertIn("abort:", output)

    def test_key_value_escapes_markup(self) -> None:
        """Values that look like rich markup are printed literally."""
        self.logger.key_value({"selector": "[data-id=save]"})
        self.assertIn("[data-id=save]", strip_ansi(self.output.getvalue()))


class TestGetLogger(unittest.TestCase):
    """Tests for the singleton accessor."""

    def test_returns_same_instance(self) -> None:
        """get_logger() returns the same Logger each call."""
        self.assertIs(get_logger(), get_logger())
        self.assertIsInstance(get_logger(), Logger)


if __name__ == "__main__":
    unittest.main()
