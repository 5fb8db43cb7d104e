"""Top-level command grammar.

Dispatches on the command name (first token) and reads each family's
positional arguments from the rest. Any missing required argument, unknown
sub-verb, or unparseable required number yields None ("no match"); optional
arguments that fail to parse fall back to their defaults instead.

`find` and `set` have their own sub-grammars (see find.py and settings.py).
"""
from __future__ import annotations

from typing import Sequence

from browsercmd.action import Action
from browsercmd.command import (
    BareCommand,
    Clearable,
    Command,
    Cookies,
    Dialog,
    Drag,
    Evaluate,
    Fill,
    GetAttribute,
    KeyCommand,
    MouseButton,
    MouseMove,
    MouseWheel,
    Navigate,
    PathCommand,
    Requests,
    Route,
    Screenshot,
    Scroll,
    Select,
    SelectorCommand,
    Snapshot,
    Storage,
    TabIndex,
    TabNew,
    Trace,
    TypeText,
    Unroute,
    Upload,
    Wait,
)
from browsercmd.compiler.find import LocatorParser
from browsercmd.compiler.scan import (
    arg,
    join_from,
    parse_int,
    parse_uint,
    scan_flags,
)
from browsercmd.compiler.settings import SettingsParser
from browsercmd.options import Options

DEFAULT_SCROLL_DIRECTION = "down"
DEFAULT_SCROLL_AMOUNT = 300
DEFAULT_MOUSE_BUTTON = "left"
DEFAULT_WHEEL_DELTA_Y = 100
DEFAULT_WHEEL_DELTA_X = 0

URL_SCHEME_PREFIX = "http"
DEFAULT_URL_SCHEME = "https://"

CLEAR_FLAG = "--clear"

# Commands whose only argument is a required selector; tag == command name.
_SELECTOR_COMMANDS = {
    "click": Action.CLICK,
    "dblclick": Action.DBLCLICK,
    "hover": Action.HOVER,
    "focus": Action.FOCUS,
    "check": Action.CHECK,
    "uncheck": Action.UNCHECK,
    "highlight": Action.HIGHLIGHT,
    "scrollintoview": Action.SCROLL_INTO_VIEW,
    "scrollinto": Action.SCROLL_INTO_VIEW,
}

_KEY_COMMANDS = {
    "press": Action.PRESS,
    "key": Action.PRESS,
    "keydown": Action.KEYDOWN,
    "keyup": Action.KEYUP,
}

_BARE_COMMANDS = {
    "back": Action.BACK,
    "forward": Action.FORWARD,
    "reload": Action.RELOAD,
    "close": Action.CLOSE,
    "quit": Action.CLOSE,
    "exit": Action.CLOSE,
}

_GET_SELECTOR_VERBS = {
    "text": Action.GET_TEXT,
    "html": Action.INNER_HTML,
    "value": Action.INPUT_VALUE,
    "count": Action.COUNT,
    "box": Action.BOUNDING_BOX,
}

_IS_VERBS = {
    "visible": Action.IS_VISIBLE,
    "enabled": Action.IS_ENABLED,
    "checked": Action.IS_CHECKED,
}

# Every command name the grammar recognizes, synonyms included.
COMMAND_NAMES = frozenset(
    {
        *_SELECTOR_COMMANDS,
        *_KEY_COMMANDS,
        *_BARE_COMMANDS,
        "open",
        "goto",
        "navigate",
        "fill",
        "type",
        "select",
        "drag",
        "upload",
        "scroll",
        "wait",
        "screenshot",
        "pdf",
        "snapshot",
        "eval",
        "get",
        "is",
        "find",
        "mouse",
        "set",
        "network",
        "storage",
        "cookies",
        "tab",
        "window",
        "frame",
        "dialog",
        "trace",
        "console",
        "errors",
        "state",
    }
)


def normalize_url(url: str) -> str:
    """Prefix `https://` unless the url already starts with `http`."""
    if url.startswith(URL_SCHEME_PREFIX):
        return url
    return f"{DEFAULT_URL_SCHEME}{url}"


class CommandParser:
    """Recognizes one command family per call and builds its message."""

    locators: LocatorParser
    settings: SettingsParser

    def __init__(self) -> None:
        self.locators = LocatorParser()
        self.settings = SettingsParser()

    def parse(
        self, id: str, name: str, args: Sequence[str], options: Options
    ) -> Command | None:
        """Compile command `name` with arguments `args` into a message."""
        match name:
            case "open" | "goto" | "navigate":
                url = arg(args, 0)
                if url is None:
                    return None
                return Navigate(id=id, action=Action.NAVIGATE, url=normalize_url(url))
            case _ if name in _BARE_COMMANDS:
                return BareCommand(id=id, action=_BARE_COMMANDS[name])
            case _ if name in _SELECTOR_COMMANDS:
                return self.selector(id, _SELECTOR_COMMANDS[name], arg(args, 0))
            case _ if name in _KEY_COMMANDS:
                key = arg(args, 0)
                if key is None:
                    return None
                return KeyCommand(id=id, action=_KEY_COMMANDS[name], key=key)
            case "fill":
                selector = arg(args, 0)
                if selector is None:
                    return None
                return Fill(
                    id=id, action=Action.FILL, selector=selector, value=join_from(args, 1)
                )
            case "type":
                selector = arg(args, 0)
                if selector is None:
                    return None
                return TypeText(
                    id=id, action=Action.TYPE, selector=selector, text=join_from(args, 1)
                )
            case "select":
                selector = arg(args, 0)
                value = arg(args, 1)
                if selector is None or value is None:
                    return None
                return Select(id=id, action=Action.SELECT, selector=selector, value=value)
            case "drag":
                source = arg(args, 0)
                target = arg(args, 1)
                if source is None or target is None:
                    return None
                return Drag(id=id, action=Action.DRAG, source=source, target=target)
            case "upload":
                selector = arg(args, 0)
                if selector is None:
                    return None
                return Upload(
                    id=id, action=Action.UPLOAD, selector=selector, files=tuple(args[1:])
                )
            case "scroll":
                direction = arg(args, 0)
                amount = parse_int(arg(args, 1))
                return Scroll(
                    id=id,
                    action=Action.SCROLL,
                    direction=DEFAULT_SCROLL_DIRECTION if direction is None else direction,
                    amount=DEFAULT_SCROLL_AMOUNT if amount is None else amount,
                )
            case "wait":
                return self.wait(id, args)
            case "screenshot":
                return Screenshot(
                    id=id,
                    action=Action.SCREENSHOT,
                    path=arg(args, 0),
                    full_page=options.full,
                )
            case "pdf":
                return self.path(id, Action.PDF, arg(args, 0))
            case "snapshot":
                return self.snapshot(id, args)
            case "eval":
                return Evaluate(id=id, action=Action.EVALUATE, script=join_from(args, 0))
            case "get":
                return self.get(id, args)
            case "is":
                action = _IS_VERBS.get(arg(args, 0) or "")
                if action is None:
                    return None
                return self.selector(id, action, arg(args, 1))
            case "find":
                return self.locators.parse(id, args)
            case "mouse":
                return self.mouse(id, args)
            case "set":
                return self.settings.parse(id, args)
            case "network":
                return self.network(id, args)
            case "storage":
                return self.storage(id, args)
            case "cookies":
                return self.cookies(id, args)
            case "tab":
                return self.tab(id, args)
            case "window":
                if arg(args, 0) != "new":
                    return None
                return BareCommand(id=id, action=Action.WINDOW_NEW)
            case "frame":
                if arg(args, 0) == "main":
                    return BareCommand(id=id, action=Action.FRAME_MAIN)
                return self.selector(id, Action.FRAME, arg(args, 0))
            case "dialog":
                return self.dialog(id, args)
            case "trace":
                match arg(args, 0):
                    case "start":
                        return Trace(id=id, action=Action.TRACE_START, path=arg(args, 1))
                    case "stop":
                        return Trace(id=id, action=Action.TRACE_STOP, path=arg(args, 1))
                    case _:
                        return None
            case "console":
                return self.clearable(id, Action.CONSOLE, args)
            case "errors":
                return self.clearable(id, Action.ERRORS, args)
            case "state":
                match arg(args, 0):
                    case "save":
                        return self.path(id, Action.STATE_SAVE, arg(args, 1))
                    case "load":
                        return self.path(id, Action.STATE_LOAD, arg(args, 1))
                    case _:
                        return None
            case _:
                return None

    # ─────────────────────────────────────────────────────────────────────
    # Shared shapes
    # ─────────────────────────────────────────────────────────────────────

    def selector(
        self, id: str, action: Action, selector: str | None
    ) -> SelectorCommand | None:
        if selector is None:
            return None
        return SelectorCommand(id=id, action=action, selector=selector)

    def path(self, id: str, action: Action, path: str | None) -> PathCommand | None:
        if path is None:
            return None
        return PathCommand(id=id, action=action, path=path)

    def clearable(self, id: str, action: Action, args: Sequence[str]) -> Clearable:
        scan = scan_flags(args, switches=(CLEAR_FLAG,))
        return Clearable(id=id, action=action, clear=scan.has(CLEAR_FLAG))

    # ─────────────────────────────────────────────────────────────────────
    # Families with their own argument rules
    # ─────────────────────────────────────────────────────────────────────

    def wait(self, id: str, args: Sequence[str]) -> Wait | None:
        """A token that parses as an unsigned integer is a timeout, else a selector.

        A selector made only of digits can therefore never be waited for.
        """
        token = arg(args, 0)
        if token is None:
            return None
        timeout = parse_uint(token)
        if timeout is not None:
            return Wait(id=id, action=Action.WAIT, timeout=timeout)
        return Wait(id=id, action=Action.WAIT, selector=token)

    def snapshot(self, id: str, args: Sequence[str]) -> Snapshot:
        """Scan snapshot flags left to right; unknown tokens are skipped."""
        interactive: bool | None = None
        compact: bool | None = None
        max_depth: int | None = None
        selector: str | None = None

        i = 0
        while i < len(args):
            match args[i]:
                case "-i" | "--interactive":
                    interactive = True
                case "-c" | "--compact":
                    compact = True
                case "-d" | "--depth":
                    depth = parse_int(arg(args, i + 1))
                    if depth is not None:
                        max_depth = depth
                        i += 1
                case "-s" | "--selector":
                    scope = arg(args, i + 1)
                    if scope is not None:
                        selector = scope
                        i += 1
            i += 1

        return Snapshot(
            id=id,
            action=Action.SNAPSHOT,
            interactive=interactive,
            compact=compact,
            max_depth=max_depth,
            selector=selector,
        )

    def get(self, id: str, args: Sequence[str]) -> Command | None:
        verb = arg(args, 0)
        match verb:
            case "url":
                return BareCommand(id=id, action=Action.URL)
            case "title":
                return BareCommand(id=id, action=Action.TITLE)
            case "attr":
                selector = arg(args, 1)
                attribute = arg(args, 2)
                if selector is None or attribute is None:
                    return None
                return GetAttribute(
                    id=id,
                    action=Action.GET_ATTRIBUTE,
                    selector=selector,
                    attribute=attribute,
                )
            case str() if verb in _GET_SELECTOR_VERBS:
                return self.selector(id, _GET_SELECTOR_VERBS[verb], arg(args, 1))
            case _:
                return None

    def mouse(self, id: str, args: Sequence[str]) -> Command | None:
        match arg(args, 0):
            case "move":
                x = parse_int(arg(args, 1))
                y = parse_int(arg(args, 2))
                if x is None or y is None:
                    return None
                return MouseMove(id=id, action=Action.MOUSE_MOVE, x=x, y=y)
            case "down" | "up" as verb:
                button = arg(args, 1)
                return MouseButton(
                    id=id,
                    action=Action.MOUSE_DOWN if verb == "down" else Action.MOUSE_UP,
                    button=DEFAULT_MOUSE_BUTTON if button is None else button,
                )
            case "wheel":
                delta_y = parse_int(arg(args, 1))
                delta_x = parse_int(arg(args, 2))
                return MouseWheel(
                    id=id,
                    action=Action.MOUSE_WHEEL,
                    delta_x=DEFAULT_WHEEL_DELTA_X if delta_x is None else delta_x,
                    delta_y=DEFAULT_WHEEL_DELTA_Y if delta_y is None else delta_y,
                )
            case _:
                return None

    def network(self, id: str, args: Sequence[str]) -> Command | None:
        match arg(args, 0):
            case "route":
                scan = scan_flags(args[1:], switches=("--abort",), valued=("--body",))
                url = scan.positional(0)
                if url is None:
                    return None
                return Route(
                    id=id,
                    action=Action.ROUTE,
                    url=url,
                    abort=scan.has("--abort"),
                    body=scan.value("--body"),
                )
            case "unroute":
                return Unroute(id=id, action=Action.UNROUTE, url=arg(args, 1))
            case "requests":
                scan = scan_flags(args[1:], switches=(CLEAR_FLAG,), valued=("--filter",))
                return Requests(
                    id=id,
                    action=Action.REQUESTS,
                    clear=scan.has(CLEAR_FLAG),
                    filter=scan.value("--filter"),
                )
            case _:
                return None

    def storage(self, id: str, args: Sequence[str]) -> Storage | None:
        """`storage <local|session> [operation] [key] [value]`."""
        storage_type = arg(args, 0)
        if storage_type not in ("local", "session"):
            return None
        operation = arg(args, 1)
        return Storage(
            id=id,
            action=Action.STORAGE,
            storage_type=storage_type,
            operation="get" if operation is None else operation,
            key=arg(args, 2),
            value=arg(args, 3),
        )

    def cookies(self, id: str, args: Sequence[str]) -> Cookies | None:
        """Defaults to `get`; an unknown verb also reads as a bare `get`."""
        match arg(args, 0):
            case None | "get":
                return Cookies(
                    id=id, action=Action.COOKIES, operation="get", name=arg(args, 1)
                )
            case "set":
                name = arg(args, 1)
                value = arg(args, 2)
                if name is None or value is None:
                    return None
                return Cookies(
                    id=id, action=Action.COOKIES, operation="set", name=name, value=value
                )
            case "clear":
                return Cookies(id=id, action=Action.COOKIES, operation="clear")
            case _:
                return Cookies(id=id, action=Action.COOKIES, operation="get")

    def tab(self, id: str, args: Sequence[str]) -> Command:
        """`tab new [url]`, `tab close [n]`, `tab <n>`; anything else lists tabs."""
        verb = arg(args, 0)
        match verb:
            case "new":
                return TabNew(id=id, action=Action.TAB_NEW, url=arg(args, 1))
            case "close":
                return TabIndex(
                    id=id, action=Action.TAB_CLOSE, index=parse_int(arg(args, 1))
                )
            case str() if parse_int(verb) is not None:
                return TabIndex(id=id, action=Action.TAB_SWITCH, index=parse_int(verb))
            case _:
                return BareCommand(id=id, action=Action.TAB_LIST)

    def dialog(self, id: str, args: Sequence[str]) -> Dialog | None:
        match arg(args, 0):
            case "accept":
                return Dialog(
                    id=id, action=Action.DIALOG, response="accept", prompt_text=arg(args, 1)
                )
            case "dismiss":
                return Dialog(id=id, action=Action.DIALOG, response="dismiss")
            case _:
                return None
