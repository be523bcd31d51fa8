from __future__ import annotations


class TermtypeError(Exception):
    """Base class for every error raised by termtype."""


class EmptyTextError(TermtypeError, ValueError):
    """The source text has no words left after trimming."""


class CursorDesyncError(TermtypeError):
    """The cursor points outside the wrapped text.

    Only a broken transition can cause this, so it is never clamped away.
    """


class DegenerateSessionError(TermtypeError):
    """The session was too short to produce a typing rate."""


class RenderError(TermtypeError):
    """The render adapter was handed something it cannot draw."""
