"""Action tags: what the automation backend is being asked to do.

Every compiled command carries exactly one of these tags. The string values
are the wire names the backend dispatches on, so they must not change.
"""
from __future__ import annotations

import enum


class Action(str, enum.Enum):
    """The closed set of backend operations a command can request."""

    # Navigation
    NAVIGATE = "navigate"
    BACK = "back"
    FORWARD = "forward"
    RELOAD = "reload"
    CLOSE = "close"

    # Element interaction
    CLICK = "click"
    DBLCLICK = "dblclick"
    FILL = "fill"
    TYPE = "type"
    HOVER = "hover"
    FOCUS = "focus"
    CHECK = "check"
    UNCHECK = "uncheck"
    SELECT = "select"
    DRAG = "drag"
    UPLOAD = "upload"
    HIGHLIGHT = "highlight"
    SCROLL = "scroll"
    SCROLL_INTO_VIEW = "scrollintoview"

    # Keyboard
    PRESS = "press"
    KEYDOWN = "keydown"
    KEYUP = "keyup"

    # Waiting and capture
    WAIT = "wait"
    SCREENSHOT = "screenshot"
    PDF = "pdf"
    SNAPSHOT = "snapshot"
    EVALUATE = "evaluate"

    # Queries
    GET_TEXT = "gettext"
    INNER_HTML = "innerhtml"
    INPUT_VALUE = "inputvalue"
    GET_ATTRIBUTE = "getattribute"
    URL = "url"
    TITLE = "title"
    COUNT = "count"
    BOUNDING_BOX = "boundingbox"
    IS_VISIBLE = "isvisible"
    IS_ENABLED = "isenabled"
    IS_CHECKED = "ischecked"

    # Semantic locators
    GET_BY_ROLE = "getbyrole"
    GET_BY_TEXT = "getbytext"
    GET_BY_LABEL = "getbylabel"
    GET_BY_PLACEHOLDER = "getbyplaceholder"
    GET_BY_ALT_TEXT = "getbyalttext"
    GET_BY_TITLE = "getbytitle"
    GET_BY_TEST_ID = "getbytestid"
    NTH = "nth"

    # Mouse
    MOUSE_MOVE = "mousemove"
    MOUSE_DOWN = "mousedown"
    MOUSE_UP = "mouseup"
    MOUSE_WHEEL = "mousewheel"

    # Browser settings
    VIEWPORT = "viewport"
    DEVICE = "device"
    GEOLOCATION = "geolocation"
    OFFLINE = "offline"
    HEADERS = "headers"
    CREDENTIALS = "credentials"
    MEDIA = "media"

    # Network
    ROUTE = "route"
    UNROUTE = "unroute"
    REQUESTS = "requests"

    # Storage and cookies
    STORAGE = "storage"
    COOKIES = "cookies"

    # Tabs, windows, frames, dialogs
    TAB_NEW = "tab_new"
    TAB_LIST = "tab_list"
    TAB_CLOSE = "tab_close"
    TAB_SWITCH = "tab_switch"
    WINDOW_NEW = "window_new"
    FRAME = "frame"
    FRAME_MAIN = "frame_main"
    DIALOG = "dialog"

    # Debugging and state
    TRACE_START = "trace_start"
    TRACE_STOP = "trace_stop"
    CONSOLE = "console"
    ERRORS = "errors"
    STATE_SAVE = "state_save"
    STATE_LOAD = "state_load"
