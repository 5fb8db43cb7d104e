"""Typed command payloads.

Each compiled CLI invocation becomes exactly one of these immutable messages.
The backend only ever sees the wire form produced by `to_message()`, but the
typed classes keep the compiler honest: a variant can only be built with the
action tags that share its field shape.

Variants sharing a shape share a class (every single-selector action is a
`SelectorCommand`, for example), and `Command` is the closed union of all of
them.
"""
from __future__ import annotations

import json
import time
from dataclasses import dataclass, field, fields
from typing import Any, ClassVar

from browsercmd.action import Action


def new_id() -> str:
    """Generate a correlation id for a freshly compiled command.

    Ids are time-derived (`r` + wall-clock microseconds mod 10^6), not
    guaranteed unique.
    """
    return f"r{time.time_ns() // 1_000 % 1_000_000}"


def wire(key: str | None = None, *, omit_none: bool = False, **kwargs: Any) -> Any:
    """Declare a payload field with its wire name and null handling."""
    return field(metadata={"wire": key, "omit_none": omit_none}, **kwargs)


@dataclass(frozen=True, slots=True, kw_only=True)
class Message:
    """Fields every command carries: correlation id and action tag."""

    id: str
    action: Action

    actions: ClassVar[frozenset[Action]] = frozenset()

    def __post_init__(self) -> None:
        try:
            action = Action(self.action)
        except ValueError as e:
            raise TypeError(f"unknown action tag: {self.action!r}") from e
        if action not in self.actions:
            raise TypeError(
                f"{type(self).__name__} cannot carry action {action.value!r}"
            )
        object.__setattr__(self, "action", action)

    def to_message(self) -> dict[str, Any]:
        """Render the wire mapping consumed by the backend."""
        out: dict[str, Any] = {"id": self.id, "action": self.action.value}
        for f in fields(self):
            if f.name in ("id", "action"):
                continue
            value = getattr(self, f.name)
            if value is None and f.metadata.get("omit_none"):
                continue
            if isinstance(value, tuple):
                value = list(value)
            out[f.metadata.get("wire") or f.name] = value
        return out

    def to_json(self) -> str:
        """Compact JSON form of `to_message()`."""
        return json.dumps(self.to_message(), separators=(",", ":"), allow_nan=False)


# ─────────────────────────────────────────────────────────────────────────────
# Navigation and page-level actions
# ─────────────────────────────────────────────────────────────────────────────


@dataclass(frozen=True, slots=True, kw_only=True)
class BareCommand(Message):
    """An action with no arguments at all."""

    actions: ClassVar[frozenset[Action]] = frozenset(
        {
            Action.BACK,
            Action.FORWARD,
            Action.RELOAD,
            Action.CLOSE,
            Action.URL,
            Action.TITLE,
            Action.TAB_LIST,
            Action.WINDOW_NEW,
            Action.FRAME_MAIN,
        }
    )


@dataclass(frozen=True, slots=True, kw_only=True)
class Navigate(Message):
    url: str

    actions: ClassVar[frozenset[Action]] = frozenset({Action.NAVIGATE})


@dataclass(frozen=True, slots=True, kw_only=True)
class Evaluate(Message):
    script: str

    actions: ClassVar[frozenset[Action]] = frozenset({Action.EVALUATE})


@dataclass(frozen=True, slots=True, kw_only=True)
class Scroll(Message):
    direction: str = "down"
    amount: int = 300

    actions: ClassVar[frozenset[Action]] = frozenset({Action.SCROLL})


@dataclass(frozen=True, slots=True, kw_only=True)
class Wait(Message):
    """Wait for either a fixed timeout (ms) or a selector, never both."""

    timeout: int | None = wire(omit_none=True, default=None)
    selector: str | None = wire(omit_none=True, default=None)

    actions: ClassVar[frozenset[Action]] = frozenset({Action.WAIT})


@dataclass(frozen=True, slots=True, kw_only=True)
class Screenshot(Message):
    path: str | None = None
    full_page: bool = wire("fullPage", default=False)

    actions: ClassVar[frozenset[Action]] = frozenset({Action.SCREENSHOT})


@dataclass(frozen=True, slots=True, kw_only=True)
class PathCommand(Message):
    """An action whose only argument is a required file path."""

    path: str

    actions: ClassVar[frozenset[Action]] = frozenset(
        {Action.PDF, Action.STATE_SAVE, Action.STATE_LOAD}
    )


@dataclass(frozen=True, slots=True, kw_only=True)
class Snapshot(Message):
    """Accessibility snapshot; unset options are left out of the wire form."""

    interactive: bool | None = wire(omit_none=True, default=None)
    compact: bool | None = wire(omit_none=True, default=None)
    max_depth: int | None = wire("maxDepth", omit_none=True, default=None)
    selector: str | None = wire(omit_none=True, default=None)

    actions: ClassVar[frozenset[Action]] = frozenset({Action.SNAPSHOT})


# ─────────────────────────────────────────────────────────────────────────────
# Element interaction and queries
# ─────────────────────────────────────────────────────────────────────────────


@dataclass(frozen=True, slots=True, kw_only=True)
class SelectorCommand(Message):
    """An action aimed at a single element selector."""

    selector: str

    actions: ClassVar[frozenset[Action]] = frozenset(
        {
            Action.CLICK,
            Action.DBLCLICK,
            Action.HOVER,
            Action.FOCUS,
            Action.CHECK,
            Action.UNCHECK,
            Action.HIGHLIGHT,
            Action.SCROLL_INTO_VIEW,
            Action.GET_TEXT,
            Action.INNER_HTML,
            Action.INPUT_VALUE,
            Action.COUNT,
            Action.BOUNDING_BOX,
            Action.IS_VISIBLE,
            Action.IS_ENABLED,
            Action.IS_CHECKED,
            Action.FRAME,
        }
    )


@dataclass(frozen=True, slots=True, kw_only=True)
class Fill(Message):
    selector: str
    value: str

    actions: ClassVar[frozenset[Action]] = frozenset({Action.FILL})


@dataclass(frozen=True, slots=True, kw_only=True)
class TypeText(Message):
    selector: str
    text: str

    actions: ClassVar[frozenset[Action]] = frozenset({Action.TYPE})


@dataclass(frozen=True, slots=True, kw_only=True)
class Select(Message):
    selector: str
    value: str

    actions: ClassVar[frozenset[Action]] = frozenset({Action.SELECT})


@dataclass(frozen=True, slots=True, kw_only=True)
class Drag(Message):
    source: str
    target: str

    actions: ClassVar[frozenset[Action]] = frozenset({Action.DRAG})


@dataclass(frozen=True, slots=True, kw_only=True)
class Upload(Message):
    selector: str
    files: tuple[str, ...] = ()

    actions: ClassVar[frozenset[Action]] = frozenset({Action.UPLOAD})


@dataclass(frozen=True, slots=True, kw_only=True)
class KeyCommand(Message):
    key: str

    actions: ClassVar[frozenset[Action]] = frozenset(
        {Action.PRESS, Action.KEYDOWN, Action.KEYUP}
    )


@dataclass(frozen=True, slots=True, kw_only=True)
class GetAttribute(Message):
    selector: str
    attribute: str

    actions: ClassVar[frozenset[Action]] = frozenset({Action.GET_ATTRIBUTE})


# ─────────────────────────────────────────────────────────────────────────────
# Semantic locators
# ─────────────────────────────────────────────────────────────────────────────


@dataclass(frozen=True, slots=True, kw_only=True)
class GetByRole(Message):
    role: str
    subaction: str = "click"
    value: str | None = None
    name: str | None = None
    exact: bool = False

    actions: ClassVar[frozenset[Action]] = frozenset({Action.GET_BY_ROLE})


@dataclass(frozen=True, slots=True, kw_only=True)
class TextLocator(Message):
    """Locate by visible text, alt text or title attribute."""

    text: str
    subaction: str = "click"
    exact: bool = False

    actions: ClassVar[frozenset[Action]] = frozenset(
        {Action.GET_BY_TEXT, Action.GET_BY_ALT_TEXT, Action.GET_BY_TITLE}
    )


@dataclass(frozen=True, slots=True, kw_only=True)
class GetByLabel(Message):
    label: str
    subaction: str = "click"
    value: str | None = None
    exact: bool = False

    actions: ClassVar[frozenset[Action]] = frozenset({Action.GET_BY_LABEL})


@dataclass(frozen=True, slots=True, kw_only=True)
class GetByPlaceholder(Message):
    placeholder: str
    subaction: str = "click"
    value: str | None = None
    exact: bool = False

    actions: ClassVar[frozenset[Action]] = frozenset({Action.GET_BY_PLACEHOLDER})


@dataclass(frozen=True, slots=True, kw_only=True)
class GetByTestId(Message):
    test_id: str = wire("testId")
    subaction: str = "click"
    value: str | None = None

    actions: ClassVar[frozenset[Action]] = frozenset({Action.GET_BY_TEST_ID})


@dataclass(frozen=True, slots=True, kw_only=True)
class Nth(Message):
    """Index into the matches of a selector; -1 is the last match."""

    selector: str
    index: int
    subaction: str = "click"
    value: str | None = None

    actions: ClassVar[frozenset[Action]] = frozenset({Action.NTH})


# ─────────────────────────────────────────────────────────────────────────────
# Mouse
# ─────────────────────────────────────────────────────────────────────────────


@dataclass(frozen=True, slots=True, kw_only=True)
class MouseMove(Message):
    x: int
    y: int

    actions: ClassVar[frozenset[Action]] = frozenset({Action.MOUSE_MOVE})


@dataclass(frozen=True, slots=True, kw_only=True)
class MouseButton(Message):
    button: str = "left"

    actions: ClassVar[frozenset[Action]] = frozenset(
        {Action.MOUSE_DOWN, Action.MOUSE_UP}
    )


@dataclass(frozen=True, slots=True, kw_only=True)
class MouseWheel(Message):
    delta_x: int = wire("deltaX", default=0)
    delta_y: int = wire("deltaY", default=100)

    actions: ClassVar[frozenset[Action]] = frozenset({Action.MOUSE_WHEEL})


# ─────────────────────────────────────────────────────────────────────────────
# Browser settings
# ─────────────────────────────────────────────────────────────────────────────


@dataclass(frozen=True, slots=True, kw_only=True)
class Viewport(Message):
    width: int
    height: int

    actions: ClassVar[frozenset[Action]] = frozenset({Action.VIEWPORT})


@dataclass(frozen=True, slots=True, kw_only=True)
class Device(Message):
    device: str

    actions: ClassVar[frozenset[Action]] = frozenset({Action.DEVICE})


@dataclass(frozen=True, slots=True, kw_only=True)
class Geolocation(Message):
    latitude: float
    longitude: float

    actions: ClassVar[frozenset[Action]] = frozenset({Action.GEOLOCATION})


@dataclass(frozen=True, slots=True, kw_only=True)
class Offline(Message):
    offline: bool = True

    actions: ClassVar[frozenset[Action]] = frozenset({Action.OFFLINE})


@dataclass(frozen=True, slots=True, kw_only=True)
class Headers(Message):
    """Extra HTTP headers as an opaque JSON string; the backend parses it."""

    headers: str

    actions: ClassVar[frozenset[Action]] = frozenset({Action.HEADERS})


@dataclass(frozen=True, slots=True, kw_only=True)
class Credentials(Message):
    username: str
    password: str

    actions: ClassVar[frozenset[Action]] = frozenset({Action.CREDENTIALS})


@dataclass(frozen=True, slots=True, kw_only=True)
class Media(Message):
    color_scheme: str = wire("colorScheme", default="no-preference")
    reduced_motion: bool = wire("reducedMotion", default=False)

    actions: ClassVar[frozenset[Action]] = frozenset({Action.MEDIA})


# ─────────────────────────────────────────────────────────────────────────────
# Network, storage and cookies
# ─────────────────────────────────────────────────────────────────────────────


@dataclass(frozen=True, slots=True, kw_only=True)
class Route(Message):
    url: str
    abort: bool = False
    body: str | None = None

    actions: ClassVar[frozenset[Action]] = frozenset({Action.ROUTE})


@dataclass(frozen=True, slots=True, kw_only=True)
class Unroute(Message):
    url: str | None = None

    actions: ClassVar[frozenset[Action]] = frozenset({Action.UNROUTE})


@dataclass(frozen=True, slots=True, kw_only=True)
class Requests(Message):
    clear: bool = False
    filter: str | None = None

    actions: ClassVar[frozenset[Action]] = frozenset({Action.REQUESTS})


@dataclass(frozen=True, slots=True, kw_only=True)
class Storage(Message):
    storage_type: str = wire("storageType")
    operation: str = "get"
    key: str | None = None
    value: str | None = None

    actions: ClassVar[frozenset[Action]] = frozenset({Action.STORAGE})


@dataclass(frozen=True, slots=True, kw_only=True)
class Cookies(Message):
    operation: str = "get"
    name: str | None = wire(omit_none=True, default=None)
    value: str | None = wire(omit_none=True, default=None)

    actions: ClassVar[frozenset[Action]] = frozenset({Action.COOKIES})


# ─────────────────────────────────────────────────────────────────────────────
# Tabs, frames, dialogs, debugging
# ─────────────────────────────────────────────────────────────────────────────


@dataclass(frozen=True, slots=True, kw_only=True)
class TabNew(Message):
    url: str | None = None

    actions: ClassVar[frozenset[Action]] = frozenset({Action.TAB_NEW})


@dataclass(frozen=True, slots=True, kw_only=True)
class TabIndex(Message):
    index: int | None = None

    actions: ClassVar[frozenset[Action]] = frozenset(
        {Action.TAB_CLOSE, Action.TAB_SWITCH}
    )


@dataclass(frozen=True, slots=True, kw_only=True)
class Dialog(Message):
    response: str
    prompt_text: str | None = wire("promptText", omit_none=True, default=None)

    actions: ClassVar[frozenset[Action]] = frozenset({Action.DIALOG})


@dataclass(frozen=True, slots=True, kw_only=True)
class Trace(Message):
    path: str | None = None

    actions: ClassVar[frozenset[Action]] = frozenset(
        {Action.TRACE_START, Action.TRACE_STOP}
    )


@dataclass(frozen=True, slots=True, kw_only=True)
class Clearable(Message):
    """Read a buffered log (console messages, page errors), optionally clearing it."""

    clear: bool = False

    actions: ClassVar[frozenset[Action]] = frozenset({Action.CONSOLE, Action.ERRORS})


Command = (
    BareCommand
    | Navigate
    | Evaluate
    | Scroll
    | Wait
    | Screenshot
    | PathCommand
    | Snapshot
    | SelectorCommand
    | Fill
    | TypeText
    | Select
    | Drag
    | Upload
    | KeyCommand
    | GetAttribute
    | GetByRole
    | TextLocator
    | GetByLabel
    | GetByPlaceholder
    | GetByTestId
    | Nth
    | MouseMove
    | MouseButton
    | MouseWheel
    | Viewport
    | Device
    | Geolocation
    | Offline
    | Headers
    | Credentials
    | Media
    | Route
    | Unroute
    | Requests
    | Storage
    | Cookies
    | TabNew
    | TabIndex
    | Dialog
    | Trace
    | Clearable
)
