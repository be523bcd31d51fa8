from __future__ import annotations

from typing import Dict, Iterable, List, Tuple

from rich.text import Text

from .errors import RenderError
from .intents import ClearScreen, Intent, MoveTo, PrintGlyph, PrintRepeated, Tone

Cell = Tuple[str, Tone]

BLANK: Cell = (" ", Tone.BLANK)

# palette key used for each tone
TONE_KEYS: Dict[Tone, str] = {
    Tone.UNTYPED: "upcoming",
    Tone.CORRECT: "ok",
    Tone.INCORRECT: "bad",
    Tone.MISSED_SPACE: "bad",
    Tone.TIMER: "hint",
    Tone.BAR: "bar_fg",
}


class Canvas:
    """
    A character grid standing in for the terminal.

    Intents are applied with terminal semantics: printing writes at the
    cursor and moves it one column right; anything outside the grid is
    clipped.
    """

    def __init__(self, width: int, height: int) -> None:
        self.width = width
        self.height = height
        self.row = 0
        self.col = 0
        self.cells: List[List[Cell]] = self._blank_rows()

    def _blank_rows(self) -> List[List[Cell]]:
        return [[BLANK] * self.width for _ in range(self.height)]

    def resize(self, width: int, height: int) -> None:
        self.width = width
        self.height = height
        self.row = self.col = 0
        self.cells = self._blank_rows()

    def apply(self, intents: Iterable[Intent]) -> None:
        for intent in intents:
            if isinstance(intent, MoveTo):
                self.row, self.col = intent.row, intent.col
            elif isinstance(intent, PrintGlyph):
                self._put(intent.char, intent.tone)
            elif isinstance(intent, PrintRepeated):
                for _ in range(intent.count):
                    self._put(intent.char, intent.tone)
            elif isinstance(intent, ClearScreen):
                self.cells = self._blank_rows()
            else:
                raise RenderError(f"cannot draw {intent!r}")

    def _put(self, char: str, tone: Tone) -> None:
        if 0 <= self.row < self.height and 0 <= self.col < self.width:
            self.cells[self.row][self.col] = (char, tone)
        self.col += 1

    def row_text(self, row: int) -> str:
        return "".join(ch for ch, _ in self.cells[row])

    def to_text(self, palette: Dict[str, str], cursor_visible: bool = True) -> Text:
        text = Text(no_wrap=True, overflow="crop")
        for r, row in enumerate(self.cells):
            if r:
                text.append("\n")
            for c, (ch, tone) in enumerate(row):
                key = TONE_KEYS.get(tone)
                style = palette.get(key, "") if key else ""
                if cursor_visible and (r, c) == (self.row, self.col):
                    style = f"{style} reverse".strip()
                text.append(ch, style=style)
        return text
