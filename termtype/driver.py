from __future__ import annotations

import logging
import time
from dataclasses import replace
from typing import Callable, List, Optional

from .countdown import Countdown, timer_intents
from .events import BACKSPACE, ESCAPE, Event, FocusGained, FocusLost, Key, Other, Paste, Resize
from .intents import Intent, MoveTo
from .layout import require_text
from .metrics import TypingOutcome
from .session import ScreenSize, SessionState, SessionStatus

logger = logging.getLogger(__name__)


class SessionDriver:
    """
    Owns one typing session from first draw to outcome.

    The host loop calls `tick()` at a fixed cadence and `dispatch()` for each
    input event, then draws whatever intents come back. When `running` turns
    False, `outcome` holds the snapshot for the metrics calculator.
    """

    def __init__(
        self,
        source_text: str,
        screen: ScreenSize,
        duration: float,
        wrap_ratio: float = 0.5,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.source_text = require_text(source_text)
        self.wrap_ratio = wrap_ratio
        self.clock = clock
        self.session = SessionState.start(self.source_text, screen, wrap_ratio)
        self.countdown = Countdown(start=clock(), duration=duration)
        self.cursor_blinking = True
        self.outcome: Optional[TypingOutcome] = None

    @property
    def running(self) -> bool:
        return self.outcome is None

    @property
    def status(self) -> SessionStatus:
        return self.session.status

    def open(self) -> List[Intent]:
        """Initial frame: the whole text plus the full countdown."""
        return self.session.draw() + self.tick()

    def tick(self) -> List[Intent]:
        if not self.running:
            return []
        now = self.clock()
        left = self.countdown.remaining(now)
        intents = timer_intents(left, self.countdown.duration, self.session.screen.width)
        intents.append(MoveTo(*self.session.screen_position()))
        if left <= 0.0:
            self.session.time_out()
            self._finish(now)
        return intents

    def dispatch(self, event: Event) -> List[Intent]:
        if not self.running:
            return []

        if isinstance(event, Resize):
            return self._resize(ScreenSize(event.width, event.height))
        if isinstance(event, FocusGained):
            self.cursor_blinking = True
            return []
        if isinstance(event, FocusLost):
            self.cursor_blinking = False
            return []
        if isinstance(event, Paste):
            return []
        if isinstance(event, Key):
            intents = self._key(event)
        elif isinstance(event, Other):
            intents = self.session.abort()
        else:
            raise TypeError(f"unexpected event {event!r}")

        if not self.session.running:
            self._finish(self.clock())
        return intents

    def _key(self, event: Key) -> List[Intent]:
        if event.char is not None:
            return self.session.type_char(event.char)
        if event.name == BACKSPACE:
            return self.session.backspace()
        if event.name == ESCAPE:
            return self.session.abort()
        return []

    def _resize(self, screen: ScreenSize) -> List[Intent]:
        # progress is dropped: the new layout starts over from the origin
        logger.info("terminal resized to %dx%d, restarting layout", *screen)
        self.session = SessionState.start(self.source_text, screen, self.wrap_ratio)
        return self.session.draw() + self.tick()

    def _finish(self, now: float) -> None:
        self.outcome = TypingOutcome(
            cursor=replace(self.session.cursor),
            text=self.session.text,
            elapsed=self.countdown.elapsed(now),
            status=self.session.status,
        )
        logger.info(
            "session %s at line %d column %d after %.2fs",
            self.session.status.value,
            self.outcome.cursor.line,
            self.outcome.cursor.column,
            self.outcome.elapsed,
        )
