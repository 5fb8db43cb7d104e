"""
plan_test provides tests for the human-readable plan printer.
"""
from __future__ import annotations

import unittest

from browsercmd.action import Action
from browsercmd.command import BareCommand, Route, Upload
from browsercmd.compiler.plan import Planner


class PlannerTest(unittest.TestCase):
    """
    PlannerTest provides tests for rendering compiled commands.
    """

    def setUp(self) -> None:
        self.planner = Planner()

    def test_fields_drop_header(self) -> None:
        command = Route(id="r1", action=Action.ROUTE, url="**/api", abort=True)
        self.assertEqual(
            self.planner.fields(command), {"url": "**/api", "abort": True, "body": None}
        )

    def test_format_value(self) -> None:
        self.assertEqual(self.planner.format_value(None), "-")
        self.assertEqual(self.planner.format_value(True), "true")
        self.assertEqual(self.planner.format_value(False), "false")
        self.assertEqual(self.planner.format_value(300), "300")
        self.assertEqual(self.planner.format_value(["a.png"]), '["a.png"]')

    def test_rows_in_wire_order(self) -> None:
        command = Upload(id="r42", action=Action.UPLOAD, selector="#f", files=("a", "b"))
        rows = self.planner.rows(command)
        self.assertEqual(list(rows), ["selector", "files"])
        self.assertEqual(rows, {"selector": "#f", "files": '["a", "b"]'})

    def test_rows_of_bare_command_are_empty(self) -> None:
        command = BareCommand(id="r9", action=Action.BACK)
        self.assertEqual(self.planner.rows(command), {})

    def test_rows_render_null_and_bool(self) -> None:
        command = Route(id="r1", action=Action.ROUTE, url="**/api", abort=False)
        self.assertEqual(
            self.planner.rows(command), {"url": "**/api", "abort": "false", "body": "-"}
        )


if __name__ == "__main__":
    unittest.main()
