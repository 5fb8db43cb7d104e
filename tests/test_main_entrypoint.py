import io
import json
import unittest
from contextlib import redirect_stderr, redirect_stdout
from unittest.mock import patch

from browsercmd.__main__ import main
from browsercmd.action import Action
from browsercmd.command import SelectorCommand


class TestMainEntrypoint(unittest.TestCase):
    def run_main(self, *argv: str) -> tuple[int, str, str]:
        out, err = io.StringIO(), io.StringIO()
        code = 0
        with redirect_stdout(out), redirect_stderr(err):
            try:
                main(list(argv))
            except SystemExit as e:
                code = int(e.code or 0)
        return code, out.getvalue(), err.getvalue()

    def test_json_output_is_one_message_line(self) -> None:
        code, out, _ = self.run_main("--json", "open", "example.com")
        self.assertEqual(code, 0)
        lines = out.splitlines()
        self.assertEqual(len(lines), 1)
        message = json.loads(lines[0])
        self.assertEqual(message["action"], "navigate")
        self.assertEqual(message["url"], "https://example.com")
        self.assertRegex(message["id"], r"^r\d{1,6}$")

    def test_plan_output_names_action_and_fields(self) -> None:
        code, out, _ = self.run_main("scroll", "up")
        self.assertEqual(code, 0)
        self.assertIn("scroll", out)
        self.assertIn("direction:", out)
        self.assertIn("300", out)

    def test_no_command_prints_usage_and_fails(self) -> None:
        code, out, _ = self.run_main()
        self.assertEqual(code, 1)
        self.assertIn("usage: browsercmd", out)

    def test_help_prints_usage(self) -> None:
        code, out, _ = self.run_main("--help")
        self.assertEqual(code, 0)
        self.assertIn("usage: browsercmd", out)

    def test_version(self) -> None:
        code, out, _ = self.run_main("--version")
        self.assertEqual(code, 0)
        self.assertTrue(out.startswith("browsercmd "))

    def test_unrecognized_command_fails_with_hint(self) -> None:
        code, out, err = self.run_main("--json", "fill")
        self.assertEqual(code, 1)
        self.assertEqual(out, "")
        self.assertIn("not a recognized command: fill", err)
        self.assertIn("--help", err)

    def test_unexpected_error_is_reported(self) -> None:
        with patch("browsercmd.__main__.CLI.parse", side_effect=RuntimeError("boom")):
            code, _, err = self.run_main("back")
        self.assertEqual(code, 1)
        self.assertIn("unexpected error: RuntimeError: boom", err)

    def test_mismatched_message_shape_is_not_a_usage_error(self) -> None:
        def build_mismatched(*args: object, **kwargs: object) -> SelectorCommand:
            return SelectorCommand(id="r1", action=Action.NAVIGATE, selector="#x")

        with patch("browsercmd.compiler.Compiler.compile", side_effect=build_mismatched):
            code, _, err = self.run_main("click", "#x")
        self.assertEqual(code, 1)
        self.assertIn("unexpected error: TypeError", err)
        self.assertNotIn("--help", err)

    def test_debug_traces_tokens_to_stderr(self) -> None:
        code, out, err = self.run_main("--debug", "--json", "reload")
        self.assertEqual(code, 0)
        self.assertIn("tokens:", err)
        self.assertEqual(json.loads(out)["action"], "reload")


if __name__ == "__main__":
    unittest.main()
