"""Tests for termtype.driver – dispatch, ticks and termination."""

from __future__ import annotations

import pytest

from termtype.driver import SessionDriver
from termtype.errors import EmptyTextError
from termtype.events import BACKSPACE, ESCAPE, FocusGained, FocusLost, Key, Other, Paste, Resize
from termtype.intents import ClearScreen, MoveTo, PrintGlyph, PrintRepeated, Tone
from termtype.metrics import compute
from termtype.session import CursorPosition, ScreenSize, SessionStatus

TEXT = "the quick brown fox jumps"


class FakeClock:
    def __init__(self, now: float = 1000.0) -> None:
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


def make_driver(clock: FakeClock, screen=ScreenSize(30, 10), duration=30.0) -> SessionDriver:
    return SessionDriver(TEXT, screen, duration, clock=clock)


def press(driver: SessionDriver, text: str) -> list:
    intents = []
    for ch in text:
        intents.extend(driver.dispatch(Key(char=ch)))
    return intents


# ---------------------------------------------------------------------------
# Construction
# ---------------------------------------------------------------------------

class TestConstruction:
    def test_blank_text_fails_before_layout(self):
        with pytest.raises(EmptyTextError):
            SessionDriver("  \n ", ScreenSize(30, 10), 30.0, clock=FakeClock())

    def test_initial_layout(self):
        driver = make_driver(FakeClock())
        assert driver.session.text.lines == ("the quick brown", "fox jumps")
        assert driver.running
        assert driver.outcome is None

    def test_open_draws_text_then_timer(self):
        driver = make_driver(FakeClock())
        intents = driver.open()
        assert intents[0] == ClearScreen()
        assert PrintRepeated("#", 30, Tone.BAR) in intents
        # cursor goes back to the first character after the timer is drawn
        assert intents[-1] == MoveTo(4, 7)


# ---------------------------------------------------------------------------
# Dispatch
# ---------------------------------------------------------------------------

class TestDispatch:
    def test_chars_go_to_session(self):
        driver = make_driver(FakeClock())
        assert driver.dispatch(Key(char="t")) == [PrintGlyph("t", Tone.CORRECT)]
        assert driver.session.cursor == CursorPosition(0, 1)

    def test_backspace(self):
        driver = make_driver(FakeClock())
        press(driver, "th")
        driver.dispatch(Key(name=BACKSPACE))
        assert driver.session.cursor == CursorPosition(0, 1)

    def test_other_named_keys_ignored(self):
        driver = make_driver(FakeClock())
        assert driver.dispatch(Key(name="left")) == []
        assert driver.running

    def test_paste_ignored(self):
        driver = make_driver(FakeClock())
        assert driver.dispatch(Paste("the quick")) == []
        assert driver.session.cursor == CursorPosition(0, 0)

    def test_focus_toggles_blink_hint(self):
        driver = make_driver(FakeClock())
        driver.dispatch(FocusLost())
        assert not driver.cursor_blinking
        driver.dispatch(FocusGained())
        assert driver.cursor_blinking
        assert driver.running

    def test_unknown_event_type_rejected(self):
        driver = make_driver(FakeClock())
        with pytest.raises(TypeError):
            driver.dispatch("a")


class TestResize:
    def test_resets_to_origin_with_new_layout(self):
        driver = make_driver(FakeClock())
        press(driver, "the quick brown fo")
        intents = driver.dispatch(Resize(80, 24))
        assert driver.session.cursor == CursorPosition(0, 0)
        assert driver.session.screen == ScreenSize(80, 24)
        assert driver.session.text.lines == (TEXT,)
        assert intents[0] == ClearScreen()

    @pytest.mark.parametrize("width", [2, 9, 17, 44, 120])
    def test_round_trip_at_any_width(self, width):
        driver = make_driver(FakeClock())
        driver.dispatch(Resize(width, 20))
        assert driver.session.text.joined() == TEXT
        assert driver.session.cursor == CursorPosition(0, 0)

    def test_timer_keeps_running_across_resize(self):
        clock = FakeClock()
        driver = make_driver(clock)
        clock.advance(10)
        driver.dispatch(Resize(60, 20))
        assert driver.countdown.remaining(clock()) == pytest.approx(20.0)


# ---------------------------------------------------------------------------
# Termination
# ---------------------------------------------------------------------------

class TestTermination:
    def test_completion(self):
        clock = FakeClock()
        driver = make_driver(clock)
        clock.advance(6)
        press(driver, "the quick brownfox jumps")
        assert not driver.running
        assert driver.status is SessionStatus.COMPLETED
        assert driver.outcome.cursor == CursorPosition(2, 0)
        assert driver.outcome.elapsed == pytest.approx(6.0)

    def test_escape_aborts(self):
        driver = make_driver(FakeClock())
        press(driver, "the")
        driver.dispatch(Key(name=ESCAPE))
        assert driver.status is SessionStatus.ABORTED
        assert driver.outcome.cursor == CursorPosition(0, 3)

    def test_other_event_aborts(self):
        driver = make_driver(FakeClock())
        driver.dispatch(Other())
        assert driver.status is SessionStatus.ABORTED
        assert not driver.running

    def test_timeout_keeps_partial_progress(self):
        clock = FakeClock()
        driver = make_driver(clock, duration=30.0)
        press(driver, "the quick brownfox ")
        clock.advance(29.5)
        driver.tick()
        assert driver.running
        clock.advance(1.0)
        driver.tick()
        assert driver.status is SessionStatus.TIMED_OUT
        outcome = driver.outcome
        assert outcome.cursor == CursorPosition(1, 4)
        assert outcome.text.lines == ("the quick brown", "fox jumps")
        metrics = compute(outcome)
        assert metrics.words_typed == 4
        assert metrics.chars_typed == 19

    def test_outcome_is_a_snapshot(self):
        driver = make_driver(FakeClock())
        press(driver, "th")
        driver.dispatch(Key(name=ESCAPE))
        snapshot = driver.outcome
        driver.session.cursor.column = 9
        assert snapshot.cursor == CursorPosition(0, 2)

    def test_nothing_happens_after_finish(self):
        clock = FakeClock()
        driver = make_driver(clock)
        driver.dispatch(Key(name=ESCAPE))
        outcome = driver.outcome
        clock.advance(100)
        assert driver.tick() == []
        assert driver.dispatch(Key(char="t")) == []
        assert driver.dispatch(Resize(80, 24)) == []
        assert driver.outcome is outcome


class TestTick:
    def test_tick_restores_cursor(self):
        clock = FakeClock()
        driver = make_driver(clock)
        press(driver, "the")
        clock.advance(15)
        intents = driver.tick()
        assert intents[-1] == MoveTo(4, 10)
        assert PrintRepeated("#", 15, Tone.BAR) in intents

    def test_missed_ticks_catch_up(self):
        clock = FakeClock()
        driver = make_driver(clock, duration=10.0)
        clock.advance(25)
        driver.tick()
        assert driver.status is SessionStatus.TIMED_OUT
        assert driver.outcome.elapsed == pytest.approx(25.0)
