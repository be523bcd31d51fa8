"""
Input events the session driver understands.

The terminal surface translates whatever its toolkit delivers into exactly
one of these before handing it to `SessionDriver.dispatch`.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Union

BACKSPACE = "backspace"
ESCAPE = "escape"


@dataclass(frozen=True)
class Resize:
    width: int
    height: int


@dataclass(frozen=True)
class Key:
    # a printable character, or None for named keys such as "backspace"
    char: Optional[str] = None
    name: Optional[str] = None


@dataclass(frozen=True)
class FocusGained:
    pass


@dataclass(frozen=True)
class FocusLost:
    pass


@dataclass(frozen=True)
class Paste:
    text: str = ""


@dataclass(frozen=True)
class Other:
    pass


Event = Union[Resize, Key, FocusGained, FocusLost, Paste, Other]
