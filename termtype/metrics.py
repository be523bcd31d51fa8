from __future__ import annotations

import logging
from dataclasses import dataclass

from .errors import DegenerateSessionError
from .layout import WrappedText
from .session import CursorPosition, SessionStatus

logger = logging.getLogger(__name__)

CHARS_PER_WORD = 5


@dataclass(frozen=True)
class TypingOutcome:
    """Snapshot of a finished session, taken once when the loop exits."""

    cursor: CursorPosition
    text: WrappedText
    elapsed: float
    status: SessionStatus


@dataclass(frozen=True)
class SessionMetrics:
    elapsed: float
    words_typed: int
    chars_typed: int
    pure_wpm: float
    raw_wpm: float


def is_degenerate(elapsed: float) -> bool:
    """True when the session lasted less than one whole second."""
    return int(elapsed) == 0


def compute_wpm(words: float, elapsed_sec: float) -> float:
    if elapsed_sec <= 0:
        return 0.0
    return words * 60.0 / elapsed_sec


def compute(outcome: TypingOutcome, strict: bool = False) -> SessionMetrics:
    """
    Reduce a finished session to word and character counts and two rates.

    Only what sits before the cursor counts: whole lines before the cursor
    line, then the prefix of the cursor line up to the cursor column.
    A session too short to measure gets 0.0 rates, or raises
    DegenerateSessionError when `strict` is set.
    """
    words_typed = 0
    chars_typed = 0
    for index, line in enumerate(outcome.text):
        if index < outcome.cursor.line:
            words_typed += len(line.split())
            chars_typed += len(line)
            continue
        prefix = line[: outcome.cursor.column]
        words_typed += len(prefix.split())
        chars_typed += len(prefix)
        break

    if is_degenerate(outcome.elapsed):
        if strict:
            raise DegenerateSessionError(
                f"session lasted {outcome.elapsed:.3f}s, too short to measure"
            )
        logger.info("session lasted %.3fs, reporting zero rates", outcome.elapsed)
        pure_wpm = raw_wpm = 0.0
    else:
        pure_wpm = compute_wpm(words_typed, outcome.elapsed)
        raw_wpm = compute_wpm(chars_typed / CHARS_PER_WORD, outcome.elapsed)

    return SessionMetrics(
        elapsed=outcome.elapsed,
        words_typed=words_typed,
        chars_typed=chars_typed,
        pure_wpm=pure_wpm,
        raw_wpm=raw_wpm,
    )


def format_report(metrics: SessionMetrics) -> str:
    return "\n".join(
        [
            f" time typed: {int(metrics.elapsed)}",
            f"words typed: {metrics.words_typed}",
            f"chars typed: {metrics.chars_typed}",
            f"   pure wpm: {metrics.pure_wpm:.2f}",
            f"    raw wpm: {metrics.raw_wpm:.2f}",
        ]
    )
