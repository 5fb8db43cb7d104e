"""Token scanning helpers shared by every sub-grammar.

Two concerns live here:
- Positional access and flag extraction (scan-and-remove), so each family
  reads its positional slots from an argument tail with the flags taken out.
- Best-effort numeric coercion. Every helper returns None instead of raising,
  and the caller decides whether None means "use the default" (optional
  argument) or "no match" (required argument).
"""
from __future__ import annotations

import math
import re
from dataclasses import dataclass
from typing import Iterable, Sequence

_SIGNED = re.compile(r"[+-]?[0-9]+")
_UNSIGNED = re.compile(r"\+?[0-9]+")

I32_MIN = -(2**31)
I32_MAX = 2**31 - 1
U64_MAX = 2**64 - 1


def arg(args: Sequence[str], index: int) -> str | None:
    """Return args[index], or None past the end."""
    if 0 <= index < len(args):
        return args[index]
    return None


def join_from(args: Sequence[str], start: int) -> str:
    """Join args[start:] with single spaces (empty string when nothing is left)."""
    return " ".join(args[start:])


def join_tail(args: Sequence[str], start: int) -> str | None:
    """Like join_from, but None when there are no tokens at or after start."""
    if len(args) > start:
        return join_from(args, start)
    return None


def parse_int(token: str | None) -> int | None:
    """Parse a signed 32-bit integer: optional sign, ASCII digits only."""
    if token is None or not _SIGNED.fullmatch(token):
        return None
    value = int(token)
    if value < I32_MIN or value > I32_MAX:
        return None
    return value


def parse_uint(token: str | None) -> int | None:
    """Parse an unsigned 64-bit integer."""
    if token is None or not _UNSIGNED.fullmatch(token):
        return None
    value = int(token)
    if value > U64_MAX:
        return None
    return value


def parse_float(token: str | None) -> float | None:
    """Parse a finite ASCII float literal with no whitespace or underscores.

    NaN and infinities have no JSON form, so they count as unparseable.
    """
    if token is None or not token.isascii() or token != token.strip() or "_" in token:
        return None
    try:
        value = float(token)
    except ValueError:
        return None
    if not math.isfinite(value):
        return None
    return value


@dataclass(frozen=True, slots=True)
class FlagScan:
    """An argument tail split into positionals and recognized flags."""

    positionals: tuple[str, ...]
    switches: frozenset[str]
    values: dict[str, str]

    def has(self, flag: str) -> bool:
        return flag in self.switches

    def value(self, flag: str) -> str | None:
        return self.values.get(flag)

    def positional(self, index: int) -> str | None:
        return arg(self.positionals, index)


def scan_flags(
    args: Sequence[str],
    *,
    switches: Iterable[str] = (),
    valued: Iterable[str] = (),
) -> FlagScan:
    """Pull boolean switches and valued flags out of an argument tail.

    A switch is set if it appears anywhere. A valued flag takes the token
    right after its first occurrence; with nothing after it the flag is
    dropped and left unset. Every flag token and every consumed value is
    removed, and the rest keep their relative order as positionals.
    """
    switch_set = frozenset(switches)
    valued_set = frozenset(valued)

    consumed: set[int] = set()
    values: dict[str, str] = {}
    for flag in valued_set:
        if flag not in args:
            continue
        i = list(args).index(flag)
        if i + 1 < len(args):
            values[flag] = args[i + 1]
            consumed.add(i + 1)

    positionals = tuple(
        token
        for i, token in enumerate(args)
        if i not in consumed and token not in switch_set and token not in valued_set
    )
    present = frozenset(s for s in switch_set if s in args)
    return FlagScan(positionals=positionals, switches=present, values=values)
