from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, List, Tuple

from .errors import EmptyTextError


def normalize(text: str) -> str:
    """Trim the text and collapse every whitespace run to one space."""
    return " ".join(text.split())


def require_text(text: str) -> str:
    normalized = normalize(text)
    if not normalized:
        raise EmptyTextError("nothing to type: the source text is empty")
    return normalized


def wrap_width_for(columns: int, ratio: float = 0.5) -> int:
    """Wrap width for a terminal that is `columns` cells wide."""
    return max(1, int(columns * ratio))


@dataclass(frozen=True)
class WrappedText:
    lines: Tuple[str, ...]
    width: int

    def __len__(self) -> int:
        return len(self.lines)

    def __getitem__(self, index: int) -> str:
        return self.lines[index]

    def __iter__(self) -> Iterator[str]:
        return iter(self.lines)

    def joined(self) -> str:
        return " ".join(self.lines)


def wrap(source_text: str, max_width: int) -> WrappedText:
    """
    Greedy word wrap.

    A line is closed as soon as the next word would push it past `max_width`.
    A word longer than `max_width` is never split; it gets a line of its own.
    """
    if max_width < 1:
        raise ValueError(f"wrap width must be at least 1, got {max_width}")
    words = require_text(source_text).split(" ")

    lines: List[str] = []
    line = ""
    for word in words:
        if line and len(line) + 1 + len(word) > max_width:
            lines.append(line)
            line = ""
        line = f"{line} {word}" if line else word
    lines.append(line)
    return WrappedText(lines=tuple(lines), width=max_width)
