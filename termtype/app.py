from __future__ import annotations

import logging
from typing import Iterable, Optional

from textual import events
from textual.app import App, ComposeResult
from textual.widgets import Static

from . import events as session_events
from .canvas import Canvas
from .config import Settings
from .driver import SessionDriver
from .intents import Intent
from .metrics import TypingOutcome
from .session import ScreenSize

logger = logging.getLogger(__name__)


class TypingView(Static):
    """The whole screen: text block, countdown number and bar."""
    pass


def translate_key(event: events.Key) -> session_events.Key:
    if event.key == "backspace":
        return session_events.Key(name=session_events.BACKSPACE)
    if event.key == "escape":
        return session_events.Key(name=session_events.ESCAPE)
    if event.is_printable and event.character:
        return session_events.Key(char=event.character)
    return session_events.Key(name=event.key)


# ---------------------------
# App
# ---------------------------

class TypingTUI(App[Optional[TypingOutcome]]):
    """
    Hosts one SessionDriver: textual's message loop is the control loop.

    Keys, resizes, focus changes and pastes are translated into session
    events; a fixed-interval timer drives the countdown. The app exits with
    the driver's TypingOutcome as its return value.
    """

    CSS = """
    Screen {
        background: transparent;
        overflow: hidden;
    }

    TypingView {
        width: 100%;
        height: 100%;
    }
    """

    TITLE = "termtype"

    def __init__(self, source_text: str, settings: Optional[Settings] = None) -> None:
        super().__init__()
        self.source_text = source_text
        self.settings = settings or Settings()
        self.palette = self.settings.palette
        self.driver: Optional[SessionDriver] = None
        self.canvas: Optional[Canvas] = None
        self._exiting = False

    def compose(self) -> ComposeResult:
        self.view = TypingView()
        yield self.view

    def on_mount(self) -> None:
        self.screen.styles.background = self.palette["screen_bg"]
        screen = ScreenSize(self.size.width, self.size.height)
        logger.info("starting a %ss session on %dx%d", self.settings.duration_sec, *screen)
        self.canvas = Canvas(*screen)
        self.driver = SessionDriver(
            self.source_text,
            screen,
            self.settings.duration_sec,
            wrap_ratio=self.settings.wrap_ratio,
        )
        self._paint(self.driver.open())
        self.set_interval(self.settings.poll_interval, self._tick)

    def _tick(self) -> None:
        if self.driver is None:
            return
        self._paint(self.driver.tick())

    def on_resize(self, event: events.Resize) -> None:
        if self.driver is None or self.canvas is None:
            return
        width, height = event.size.width, event.size.height
        if (width, height) == (self.canvas.width, self.canvas.height):
            return
        self.canvas.resize(width, height)
        self._dispatch(session_events.Resize(width, height))

    def on_key(self, event: events.Key) -> None:
        event.stop()
        event.prevent_default()
        self._dispatch(translate_key(event))

    def on_app_focus(self, event: events.AppFocus) -> None:
        self._dispatch(session_events.FocusGained())

    def on_app_blur(self, event: events.AppBlur) -> None:
        self._dispatch(session_events.FocusLost())

    def on_paste(self, event: events.Paste) -> None:
        self._dispatch(session_events.Paste(event.text))

    async def action_quit(self) -> None:
        # ctrl+q ends the session like any unhandled input
        if self.driver is None:
            self.exit()
            return
        self._dispatch(session_events.Other())

    def _dispatch(self, event: session_events.Event) -> None:
        if self.driver is None:
            return
        self._paint(self.driver.dispatch(event))

    def _paint(self, intents: Iterable[Intent]) -> None:
        if self.driver is None or self.canvas is None:
            return
        self.canvas.apply(intents)
        self.view.update(self.canvas.to_text(self.palette, cursor_visible=self.driver.cursor_blinking))
        if not self.driver.running and not self._exiting:
            self._exiting = True
            self.exit(self.driver.outcome)
