"""Browser settings sub-grammar: `set <setting> ...`.

Numeric settings (viewport size, geolocation) are required values, so a
token that does not parse makes the whole command a no-match.
"""
from __future__ import annotations

from typing import Sequence

from browsercmd.action import Action
from browsercmd.command import (
    Command,
    Credentials,
    Device,
    Geolocation,
    Headers,
    Media,
    Offline,
    Viewport,
)
from browsercmd.compiler.scan import arg, parse_float, parse_int

# Only these exact tokens turn `set offline` off.
OFFLINE_FALSE = ("off", "false")


class SettingsParser:
    """Compiles the arguments of `set` into a browser-settings command."""

    def parse(self, id: str, args: Sequence[str]) -> Command | None:
        """Return the settings command for `args`, or None on no match."""
        match arg(args, 0):
            case "viewport":
                width = parse_int(arg(args, 1))
                height = parse_int(arg(args, 2))
                if width is None or height is None:
                    return None
                return Viewport(
                    id=id, action=Action.VIEWPORT, width=width, height=height
                )
            case "device":
                device = arg(args, 1)
                if device is None:
                    return None
                return Device(id=id, action=Action.DEVICE, device=device)
            case "geo" | "geolocation":
                latitude = parse_float(arg(args, 1))
                longitude = parse_float(arg(args, 2))
                if latitude is None or longitude is None:
                    return None
                return Geolocation(
                    id=id,
                    action=Action.GEOLOCATION,
                    latitude=latitude,
                    longitude=longitude,
                )
            case "offline":
                return Offline(
                    id=id,
                    action=Action.OFFLINE,
                    offline=arg(args, 1) not in OFFLINE_FALSE,
                )
            case "headers":
                headers = arg(args, 1)
                if headers is None:
                    return None
                return Headers(id=id, action=Action.HEADERS, headers=headers)
            case "credentials" | "auth":
                username = arg(args, 1)
                password = arg(args, 2)
                if username is None or password is None:
                    return None
                return Credentials(
                    id=id,
                    action=Action.CREDENTIALS,
                    username=username,
                    password=password,
                )
            case "media":
                return self.parse_media(id, args[1:])
            case _:
                return None

    def parse_media(self, id: str, args: Sequence[str]) -> Media:
        """Pick a color scheme (dark before light) and the reduced-motion switch."""
        if "dark" in args:
            scheme = "dark"
        elif "light" in args:
            scheme = "light"
        else:
            scheme = "no-preference"
        return Media(
            id=id,
            action=Action.MEDIA,
            color_scheme=scheme,
            reduced_motion="reduced-motion" in args,
        )
