"""Severity levels and their colored tags.

Levels are small ordered integers. Values outside the named set are still
valid levels; they are rendered as bare decimals.
"""

from __future__ import annotations

from enum import IntEnum
from typing import Final


class Level(IntEnum):
    DEBUG = -1
    INFO = 0
    WARN = 1
    ERROR = 2
    PANIC = 3
    FATAL = 4


_ALIASES: Final[dict[str, Level]] = {
    "WARNING": Level.WARN,  # stdlib spelling
    "CRITICAL": Level.FATAL,
}

# ANSI foreground color per level, rendered bold
_LEVEL_TAGS: Final[dict[int, bytes]] = {
    Level.DEBUG: b"\x1b[32;1m[DEBG]\x1b[0m",
    Level.INFO: b"\x1b[34;1m[INFO]\x1b[0m",
    Level.WARN: b"\x1b[33;1m[WARN]\x1b[0m",
    Level.ERROR: b"\x1b[31;1m[ERRO]\x1b[0m",
    Level.PANIC: b"\x1b[31;1m[PANC]\x1b[0m",
    Level.FATAL: b"\x1b[31;1m[FATA]\x1b[0m",
}


def level_tag(level: int) -> bytes:
    """Return the rendered tag for ``level``.

    Known levels get a colored ``[XXXX]`` tag; anything else renders as its
    plain decimal value.
    """
    tag = _LEVEL_TAGS.get(int(level))
    if tag is not None:
        return tag
    return str(int(level)).encode("ascii")


def parse_level(name: str) -> int:
    """Parse a level name (case-insensitive) or a raw decimal level.

    Raises:
        ValueError: If ``name`` is neither a known level nor an integer.
    """
    key = name.strip().upper()
    if key in Level.__members__:
        return Level[key]
    if key in _ALIASES:
        return _ALIASES[key]
    try:
        value = int(key)
    except ValueError:
        raise ValueError(f"Unknown level '{name}'") from None
    try:
        return Level(value)
    except ValueError:
        return value
