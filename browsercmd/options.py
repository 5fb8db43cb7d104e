"""Global options: command-independent switches pulled from the raw tokens.

These settings are read by the renderer and the transport, never by the
backend protocol itself. They may appear anywhere on the command line and
are recognized by exact token match only.
"""
from __future__ import annotations

import os
from typing import Mapping, Sequence

from pydantic import BaseModel, ConfigDict

SESSION_ENV = "AGENT_BROWSER_SESSION"
DEFAULT_SESSION = "default"

JSON_FLAG = "--json"
FULL_FLAGS = ("--full", "-f")
HEADED_FLAG = "--headed"
DEBUG_FLAG = "--debug"
SESSION_FLAG = "--session"

OPTION_PREFIX = "--"


class Options(BaseModel):
    """Per-invocation global options; immutable once parsed."""

    model_config = ConfigDict(frozen=True)

    json_output: bool = False
    full: bool = False
    headed: bool = False
    debug: bool = False
    session: str = DEFAULT_SESSION


def default_session(env: Mapping[str, str] | None = None) -> str:
    """Session id from the environment, falling back to "default"."""
    source = os.environ if env is None else env
    return source.get(SESSION_ENV, DEFAULT_SESSION)


def parse_options(
    tokens: Sequence[str], env: Mapping[str, str] | None = None
) -> Options:
    """Scan tokens once, left to right, and collect the global options.

    Unrecognized tokens are ignored here. A trailing `--session` with no value
    leaves the session unchanged.
    """
    json_output = full = headed = debug = False
    session = default_session(env)

    i = 0
    while i < len(tokens):
        match tokens[i]:
            case "--json":
                json_output = True
            case "--full" | "-f":
                full = True
            case "--headed":
                headed = True
            case "--debug":
                debug = True
            case "--session":
                if i + 1 < len(tokens):
                    session = tokens[i + 1]
                    i += 1
        i += 1

    return Options(
        json_output=json_output,
        full=full,
        headed=headed,
        debug=debug,
        session=session,
    )


def strip_options(tokens: Sequence[str]) -> list[str]:
    """Drop every option-looking token, keeping the rest in order.

    Removes `--session` with the token after it, any token starting with
    `--`, and the short `-f`.
    """
    out: list[str] = []
    skip_next = False
    for token in tokens:
        if skip_next:
            skip_next = False
            continue
        if token == SESSION_FLAG:
            skip_next = True
            continue
        if not token.startswith(OPTION_PREFIX) and token not in FULL_FLAGS:
            out.append(token)
    return out


def strip_global_options(tokens: Sequence[str]) -> list[str]:
    """Drop only the recognized global options, keeping the rest in order.

    Unlike strip_options, command-level flags such as `--abort`, `--exact`
    or `--depth` survive, so the compiler can still see them.
    """
    recognized = {JSON_FLAG, HEADED_FLAG, DEBUG_FLAG, *FULL_FLAGS}
    out: list[str] = []
    skip_next = False
    for token in tokens:
        if skip_next:
            skip_next = False
            continue
        if token == SESSION_FLAG:
            skip_next = True
            continue
        if token not in recognized:
            out.append(token)
    return out
