"""Command-line interface for browsercmd.

The CLI does three things with argv: pull out the global options, compile
what is left into one command message, and hand back a typed payload saying
what the entrypoint should do with it. It never talks to a browser; the
compiled message is emitted for whatever transport sits downstream.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from rich.markup import escape

from browsercmd import __version__
from browsercmd.command import Command
from browsercmd.compiler import Compiler
from browsercmd.console import logger
from browsercmd.options import Options, parse_options, strip_global_options

PROG = "browsercmd"

HELP_TOKENS = ("-h", "--help", "help")
VERSION_TOKEN = "--version"

USAGE = f"""\
usage: {PROG} [--json] [--full|-f] [--headed] [--debug] [--session NAME] <command> [args...]

Navigation:
  open|goto|navigate <url>      back | forward | reload | close|quit|exit
Interaction:
  click|dblclick|hover|focus|check|uncheck|highlight|scrollintoview <sel>
  fill <sel> <text...>          type <sel> <text...>
  select <sel> <value>          drag <src> <dst>        upload <sel> <files...>
  press|key|keydown|keyup <key> scroll [dir] [px]       eval <script...>
Capture:
  wait <ms|sel>                 screenshot [path]       pdf <path>
  snapshot [-i] [-c] [-d N] [-s SEL]
Queries:
  get text|html|value|count|box <sel>   get attr <sel> <name>   get url|title
  is visible|enabled|checked <sel>
  find role|text|label|placeholder|alt|title|testid|first|last <value> [action] [text...]
  find nth <index> <sel> [action] [text...]   (--name NAME, --exact)
Mouse:
  mouse move <x> <y> | down [btn] | up [btn] | wheel [dy] [dx]
Settings:
  set viewport <w> <h> | device <name> | geo <lat> <lng> | offline [on|off]
  set headers <json> | credentials <user> <pass> | media [dark|light] [reduced-motion]
Network and state:
  network route <url> [--abort] [--body B] | unroute [url] | requests [--clear] [--filter F]
  storage local|session [get|set|clear] [key] [value]
  cookies [get [name] | set <name> <value> | clear]
  state save|load <path>
Tabs, frames, dialogs:
  tab [list] | tab new [url] | tab close [n] | tab <n>   window new
  frame <sel> | frame main      dialog accept [text] | dialog dismiss
Debug:
  trace start|stop [path]       console [--clear]       errors [--clear]

Sessions default to $AGENT_BROWSER_SESSION, or "default".
"""


@dataclass(frozen=True, slots=True)
class ShowUsage:
    """Print usage. `requested` is False when argv held no command at all."""

    requested: bool


@dataclass(frozen=True, slots=True)
class ShowVersion:
    """Print the version and exit."""


@dataclass(frozen=True, slots=True)
class EmitCommand:
    """A compiled command, ready for the transport."""

    command: Command
    options: Options


Invocation = ShowUsage | ShowVersion | EmitCommand


class CLI:
    """Turns argv into a typed invocation payload."""

    compiler: Compiler

    def __init__(self, compiler: Compiler | None = None) -> None:
        self.compiler = Compiler() if compiler is None else compiler

    def parse(self, argv: Sequence[str]) -> Invocation:
        """Parse argv into an invocation.

        Raises:
            ValueError: If the tokens do not compile to a known command.
        """
        options = parse_options(argv)
        logger.verbose = options.debug

        tokens = strip_global_options(argv)
        logger.debug(escape(f"options: {options.model_dump()}"))
        logger.debug(escape(f"tokens: {tokens}"))

        if not tokens:
            return ShowUsage(requested=False)
        if tokens[0] in HELP_TOKENS:
            return ShowUsage(requested=True)
        if tokens[0] == VERSION_TOKEN:
            return ShowVersion()

        command = self.compiler.compile(tokens, options)
        if command is None:
            raise ValueError(f"not a recognized command: {' '.join(tokens)}")
        return EmitCommand(command=command, options=options)

    def version(self) -> str:
        return f"{PROG} {__version__}"
