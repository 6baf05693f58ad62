"""Operating system families with distinct credential-cache conventions."""

from __future__ import annotations

import sys
from enum import StrEnum


class Platform(StrEnum):
    WINDOWS = "windows"
    MACOS = "macos"
    UNIX = "unix"
    UNSUPPORTED = "unsupported"


# sys.platform prefixes of POSIX systems other than macOS; Cygwin has POSIX
# HOME and XDG conventions even though it runs on Windows
_UNIX_PREFIXES = (
    "linux",
    "android",
    "ios",
    "freebsd",
    "openbsd",
    "netbsd",
    "dragonfly",
    "sunos",
    "aix",
    "haiku",
    "gnu",
    "cygwin",
    "emscripten",
)


def detect_platform(name: str | None = None) -> Platform:
    """Map a ``sys.platform`` string (default: the running one) to a :class:`Platform`."""
    name = sys.platform if name is None else name
    if name == "win32":
        return Platform.WINDOWS
    if name == "darwin":
        return Platform.MACOS
    if name.startswith(_UNIX_PREFIXES):
        return Platform.UNIX
    return Platform.UNSUPPORTED
