"""
cli_test provides tests for turning argv into an invocation payload.
"""
from __future__ import annotations

import os
import unittest
from unittest.mock import patch

from browsercmd import __version__
from browsercmd.action import Action
from browsercmd.cli import CLI, EmitCommand, ShowUsage, ShowVersion
from browsercmd.options import SESSION_ENV


class CLITest(unittest.TestCase):
    """
    CLITest provides tests for the CLI invocation parser.
    """

    def setUp(self) -> None:
        self.cli = CLI()

    def emit(self, *argv: str) -> EmitCommand:
        invocation = self.cli.parse(list(argv))
        self.assertIsInstance(invocation, EmitCommand)
        assert isinstance(invocation, EmitCommand)
        return invocation

    def test_empty_argv_shows_usage(self) -> None:
        self.assertEqual(self.cli.parse([]), ShowUsage(requested=False))
        self.assertEqual(self.cli.parse(["--json", "--headed"]), ShowUsage(requested=False))

    def test_help_tokens(self) -> None:
        for token in ["-h", "--help", "help"]:
            with self.subTest(token=token):
                self.assertEqual(self.cli.parse([token]), ShowUsage(requested=True))

    def test_version(self) -> None:
        self.assertEqual(self.cli.parse(["--version"]), ShowVersion())
        self.assertEqual(self.cli.version(), f"browsercmd {__version__}")

    def test_global_options_anywhere(self) -> None:
        invocation = self.emit("click", "--json", "#submit", "--headed")
        self.assertIs(invocation.command.action, Action.CLICK)
        self.assertEqual(invocation.command.to_message()["selector"], "#submit")
        self.assertTrue(invocation.options.json_output)
        self.assertTrue(invocation.options.headed)

    def test_session_flag_and_value_are_removed(self) -> None:
        invocation = self.emit("--session", "work", "back")
        self.assertIs(invocation.command.action, Action.BACK)
        self.assertEqual(invocation.options.session, "work")

    def test_session_from_environment(self) -> None:
        with patch.dict(os.environ, {SESSION_ENV: "ci"}):
            self.assertEqual(self.emit("reload").options.session, "ci")

    def test_full_flag_reaches_screenshot(self) -> None:
        message = self.emit("screenshot", "-f", "page.png").command.to_message()
        self.assertEqual(message["path"], "page.png")
        self.assertIs(message["fullPage"], True)

    def test_command_flags_survive(self) -> None:
        """
        test flags the compiler needs are not stripped as global options.
        """
        route = self.emit("network", "route", "**/ads", "--abort").command.to_message()
        self.assertIs(route["abort"], True)
        find = self.emit("find", "role", "button", "--exact", "--json").command
        self.assertIs(find.to_message()["exact"], True)

    def test_unknown_command_raises(self) -> None:
        with self.assertRaisesRegex(ValueError, "frobnicate"):
            self.cli.parse(["frobnicate", "now"])
        with self.assertRaises(ValueError):
            self.cli.parse(["click"])


if __name__ == "__main__":
    unittest.main()
