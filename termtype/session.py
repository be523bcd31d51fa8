from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import List, NamedTuple, Optional, Tuple

from .errors import CursorDesyncError
from .intents import (
    MISSED_SPACE_GLYPH,
    ClearScreen,
    Intent,
    MoveTo,
    PrintGlyph,
    Tone,
)
from .layout import WrappedText, wrap, wrap_width_for

logger = logging.getLogger(__name__)

# rows 0 and 1 hold the countdown bar and number
TIMER_ROWS = 2


class ScreenSize(NamedTuple):
    width: int
    height: int


class SessionStatus(Enum):
    RUNNING = "running"
    COMPLETED = "completed"
    ABORTED = "aborted"
    TIMED_OUT = "timed_out"


@dataclass
class CursorPosition:
    line: int = 0
    column: int = 0


class SessionState:
    """
    Cursor and status over one layout of the source text.

    Every mutating method returns the render intents the change calls for.
    Once the session has left RUNNING they all become no-ops.
    """

    def __init__(self, text: WrappedText, screen: ScreenSize) -> None:
        self.text = text
        self.screen = screen
        self.cursor = CursorPosition()
        self.status = SessionStatus.RUNNING

    @classmethod
    def start(cls, source_text: str, screen: ScreenSize, wrap_ratio: float = 0.5) -> "SessionState":
        text = wrap(source_text, wrap_width_for(screen.width, wrap_ratio))
        logger.info("laid out %d lines at width %d for %dx%d", len(text), text.width, *screen)
        return cls(text, screen)

    @property
    def running(self) -> bool:
        return self.status is SessionStatus.RUNNING

    # ---------------------------
    # Geometry
    # ---------------------------

    def top_row(self) -> int:
        return max(TIMER_ROWS, (self.screen.height - len(self.text)) // 2)

    def screen_position(self, pos: Optional[CursorPosition] = None) -> Tuple[int, int]:
        pos = pos or self.cursor
        if pos.line >= len(self.text):
            # sentinel: just past the last line
            return self.top_row() + len(self.text), 0
        line = self.text[pos.line]
        left = max(0, (self.screen.width - len(line)) // 2)
        return self.top_row() + pos.line, left + pos.column

    def expected_char(self) -> str:
        line, column = self.cursor.line, self.cursor.column
        if not 0 <= line < len(self.text) or not 0 <= column < len(self.text[line]):
            raise CursorDesyncError(
                f"cursor ({line}, {column}) is outside the {len(self.text)}-line text"
            )
        return self.text[line][column]

    # ---------------------------
    # Drawing
    # ---------------------------

    def draw(self) -> List[Intent]:
        intents: List[Intent] = [ClearScreen()]
        for index, line in enumerate(self.text):
            intents.append(MoveTo(*self.screen_position(CursorPosition(index, 0))))
            intents.extend(PrintGlyph(ch, Tone.UNTYPED) for ch in line)
        intents.append(MoveTo(*self.screen_position()))
        return intents

    # ---------------------------
    # Transitions
    # ---------------------------

    def type_char(self, char: str) -> List[Intent]:
        if not self.running:
            return []
        expected = self.expected_char()
        if char == expected:
            intents: List[Intent] = [PrintGlyph(char, Tone.CORRECT)]
        elif expected == " ":
            intents = [PrintGlyph(MISSED_SPACE_GLYPH, Tone.MISSED_SPACE)]
        else:
            intents = [PrintGlyph(char, Tone.INCORRECT)]

        if self.cursor.column == len(self.text[self.cursor.line]) - 1:
            self.cursor.line += 1
            self.cursor.column = 0
            if self.cursor.line == len(self.text):
                self.status = SessionStatus.COMPLETED
                logger.info("all %d lines typed", len(self.text))
                return intents
            intents.append(MoveTo(*self.screen_position()))
        else:
            self.cursor.column += 1
        return intents

    def backspace(self) -> List[Intent]:
        if not self.running:
            return []
        if self.cursor.line == 0 and self.cursor.column == 0:
            return []
        if self.cursor.column == 0:
            self.cursor.line -= 1
            self.cursor.column = len(self.text[self.cursor.line]) - 1
        else:
            self.cursor.column -= 1

        target = MoveTo(*self.screen_position())
        return [target, PrintGlyph(self.expected_char(), Tone.UNTYPED), target]

    def abort(self) -> List[Intent]:
        if self.running:
            self.status = SessionStatus.ABORTED
        return []

    def time_out(self) -> List[Intent]:
        if self.running:
            self.status = SessionStatus.TIMED_OUT
        return []
