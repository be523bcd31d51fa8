from __future__ import annotations

import math
from dataclasses import dataclass
from typing import List

from .intents import Intent, MoveTo, PrintGlyph, PrintRepeated, Tone

NUMBER_ROW = 1
NUMBER_COL = 1
BAR_ROW = 0
# blanks written after the number so a shorter value hides older digits
NUMBER_PADDING = 5


def remaining(start: float, now: float, duration: float) -> float:
    """Seconds left, never below zero."""
    return max(0.0, duration - (now - start))


def progress_ratio(remaining: float, duration: float) -> float:
    """0.0 when no time is used up, 1.0 once the whole duration has passed."""
    if duration <= 0:
        return 1.0
    return min(1.0, max(0.0, 1.0 - remaining / duration))


@dataclass(frozen=True)
class Countdown:
    start: float
    duration: float

    def remaining(self, now: float) -> float:
        return remaining(self.start, now, self.duration)

    def progress(self, now: float) -> float:
        return progress_ratio(self.remaining(now), self.duration)

    def expired(self, now: float) -> bool:
        return self.remaining(now) <= 0.0

    def elapsed(self, now: float) -> float:
        return max(0.0, now - self.start)


def timer_intents(remaining: float, duration: float, width: int) -> List[Intent]:
    seconds = str(math.ceil(remaining))
    intents: List[Intent] = [MoveTo(NUMBER_ROW, NUMBER_COL)]
    intents.extend(PrintGlyph(ch, Tone.TIMER) for ch in seconds)
    intents.append(PrintRepeated(" ", NUMBER_PADDING, Tone.BLANK))

    filled = int(width * (1.0 - progress_ratio(remaining, duration)))
    intents.append(MoveTo(BAR_ROW, 0))
    intents.append(PrintRepeated(" ", width, Tone.BLANK))
    intents.append(MoveTo(BAR_ROW, 0))
    if filled:
        intents.append(PrintRepeated("#", filled, Tone.BAR))
    return intents
