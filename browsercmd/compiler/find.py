"""Locator sub-grammar: `find <kind> <value> [subaction] [fill...]`.

Semantic locators let the backend find an element the way a user would
describe it (by ARIA role, visible text, label, ...) and then run a
sub-action on it. `--name <v>` and `--exact` may appear anywhere in the
tail; they are pulled out before the positional slots are read.
"""
from __future__ import annotations

from typing import Sequence

from browsercmd.action import Action
from browsercmd.command import (
    Command,
    GetByLabel,
    GetByPlaceholder,
    GetByRole,
    GetByTestId,
    Nth,
    TextLocator,
)
from browsercmd.compiler.scan import arg, join_tail, parse_int, scan_flags

DEFAULT_SUBACTION = "click"

NAME_FLAG = "--name"
EXACT_FLAG = "--exact"

_TEXT_LOCATORS = {
    "text": Action.GET_BY_TEXT,
    "alt": Action.GET_BY_ALT_TEXT,
    "title": Action.GET_BY_TITLE,
}


def _subaction(token: str | None) -> str:
    return DEFAULT_SUBACTION if token is None else token


class LocatorParser:
    """Compiles the arguments of `find` into a locator command."""

    def parse(self, id: str, args: Sequence[str]) -> Command | None:
        """Return the locator command for `args`, or None on no match."""
        scan = scan_flags(args, switches=(EXACT_FLAG,), valued=(NAME_FLAG,))
        rest = scan.positionals

        kind = arg(rest, 0)
        value = arg(rest, 1)
        if kind is None or value is None:
            return None
        if kind == "nth":
            return self.parse_nth(id, rest)

        subaction = _subaction(arg(rest, 2))
        fill = join_tail(rest, 3)
        exact = scan.has(EXACT_FLAG)

        match kind:
            case "role":
                return GetByRole(
                    id=id,
                    action=Action.GET_BY_ROLE,
                    role=value,
                    subaction=subaction,
                    value=fill,
                    name=scan.value(NAME_FLAG),
                    exact=exact,
                )
            case "text" | "alt" | "title":
                return TextLocator(
                    id=id,
                    action=_TEXT_LOCATORS[kind],
                    text=value,
                    subaction=subaction,
                    exact=exact,
                )
            case "label":
                return GetByLabel(
                    id=id,
                    action=Action.GET_BY_LABEL,
                    label=value,
                    subaction=subaction,
                    value=fill,
                    exact=exact,
                )
            case "placeholder":
                return GetByPlaceholder(
                    id=id,
                    action=Action.GET_BY_PLACEHOLDER,
                    placeholder=value,
                    subaction=subaction,
                    value=fill,
                    exact=exact,
                )
            case "testid":
                return GetByTestId(
                    id=id,
                    action=Action.GET_BY_TEST_ID,
                    test_id=value,
                    subaction=subaction,
                    value=fill,
                )
            case "first" | "last":
                return Nth(
                    id=id,
                    action=Action.NTH,
                    selector=value,
                    index=0 if kind == "first" else -1,
                    subaction=subaction,
                    value=fill,
                )
            case _:
                return None

    def parse_nth(self, id: str, rest: Sequence[str]) -> Nth | None:
        """`nth <index> <selector>` (or `nth <selector> <index>`), then subaction/fill.

        The token right after `nth` is tried as the index first; otherwise the
        one after it must be. Sub-action and fill shift one slot right of the
        generic locator kinds.
        """
        first = arg(rest, 1)
        second = arg(rest, 2)
        if first is None or second is None:
            return None

        index = parse_int(first)
        selector = second
        if index is None:
            index = parse_int(second)
            selector = first
            if index is None:
                return None

        return Nth(
            id=id,
            action=Action.NTH,
            selector=selector,
            index=index,
            subaction=_subaction(arg(rest, 3)),
            value=join_tail(rest, 4),
        )
