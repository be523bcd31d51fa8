"""termtype: a terminal typing-speed test."""
from __future__ import annotations

from .errors import (
    CursorDesyncError,
    DegenerateSessionError,
    EmptyTextError,
    RenderError,
    TermtypeError,
)
from .layout import WrappedText, wrap
from .metrics import SessionMetrics, TypingOutcome, compute, format_report

__version__ = "0.1.0"

__all__ = [
    "CursorDesyncError",
    "DegenerateSessionError",
    "EmptyTextError",
    "RenderError",
    "SessionMetrics",
    "TermtypeError",
    "TypingOutcome",
    "WrappedText",
    "compute",
    "format_report",
    "wrap",
]
