"""
Render intents: what should be drawn, never how.

Session state and the countdown only produce these; the canvas in
`termtype.canvas` is the single place that applies them.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Union


class Tone(Enum):
    UNTYPED = "untyped"
    CORRECT = "correct"
    INCORRECT = "incorrect"
    MISSED_SPACE = "missed_space"
    TIMER = "timer"
    BAR = "bar"
    BLANK = "blank"


# drawn in place of the typed key when a word boundary was skipped
MISSED_SPACE_GLYPH = "█"


@dataclass(frozen=True)
class MoveTo:
    row: int
    col: int


@dataclass(frozen=True)
class PrintGlyph:
    char: str
    tone: Tone


@dataclass(frozen=True)
class PrintRepeated:
    char: str
    count: int
    tone: Tone


@dataclass(frozen=True)
class ClearScreen:
    pass


Intent = Union[MoveTo, PrintGlyph, PrintRepeated, ClearScreen]
