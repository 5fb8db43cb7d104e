"""Compiler: turns a CLI token list into one command message.

The compiler is a pure function of its inputs. It never raises on bad user
input and never logs; every failure (unknown command, unknown sub-verb,
missing required argument, unparseable required number) comes back as None.

Stages:
1. Parse: dispatch on the command name and read the family's arguments
   (with the `find` and `set` sub-grammars delegated to their own parsers)
2. Plan (optional): render the compiled command for humans
"""
from __future__ import annotations

from typing import Sequence

from browsercmd.command import Command, new_id
from browsercmd.compiler.find import LocatorParser
from browsercmd.compiler.parse import COMMAND_NAMES, CommandParser
from browsercmd.compiler.plan import Planner
from browsercmd.compiler.settings import SettingsParser
from browsercmd.options import Options

__all__ = [
    "COMMAND_NAMES",
    "CommandParser",
    "Compiler",
    "LocatorParser",
    "Planner",
    "SettingsParser",
    "compile_command",
]


class Compiler:
    """Runs a token list through the command grammar.

    Holds no per-call state, so one instance can be shared freely.
    """

    parser: CommandParser
    planner: Planner

    def __init__(self) -> None:
        """Initialize compiler with the default grammar."""
        self.parser = CommandParser()
        self.planner = Planner()

    def compile(
        self, tokens: Sequence[str], options: Options | None = None
    ) -> Command | None:
        """Compile tokens (global options already stripped) into a command.

        Args:
            tokens: The command name followed by its arguments.
            options: Global options; only `full` affects compilation.

        Returns:
            The command message, or None when nothing matches.
        """
        if not tokens:
            return None
        id = new_id()
        return self.parser.parse(
            id, tokens[0], list(tokens[1:]), Options() if options is None else options
        )


def compile_command(
    tokens: Sequence[str], options: Options | None = None
) -> Command | None:
    """Compile with a default Compiler."""
    return Compiler().compile(tokens, options)
