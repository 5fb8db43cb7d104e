"""Plan printer: human-readable view of a compiled command.

The backend consumes the JSON wire form; people reading a terminal want
something flatter. The planner renders a command as `key: value` rows in
wire order, so it is easy to check what a command line compiled to.
"""
from __future__ import annotations

import json
from typing import Any

from browsercmd.command import Command


class Planner:
    """Renders compiled commands for humans."""

    def fields(self, command: Command) -> dict[str, Any]:
        """Wire fields of a command minus the id/action header."""
        message = command.to_message()
        return {k: v for k, v in message.items() if k not in ("id", "action")}

    def format_value(self, value: Any) -> str:
        """Render one field value; null shows as `-`, lists as JSON."""
        match value:
            case None:
                return "-"
            case bool():
                return "true" if value else "false"
            case list():
                return json.dumps(value)
            case _:
                return str(value)

    def rows(self, command: Command) -> dict[str, str]:
        """Field name to rendered value, in wire order."""
        return {
            key: self.format_value(value)
            for key, value in self.fields(command).items()
        }
