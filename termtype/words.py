from __future__ import annotations

import logging
import os
import random
from typing import Optional, TextIO

logger = logging.getLogger(__name__)

DEFAULT_WORD_COUNT = 50

WORDS = [
    "a", "about", "above", "after", "again", "air", "all", "almost", "also", "always",
    "am", "among", "an", "and", "another", "any", "are", "around", "as", "ask",
    "at", "away", "back", "be", "because", "been", "before", "being", "below", "best",
    "between", "big", "both", "but", "by", "call", "came", "can", "car", "case",
    "change", "child", "city", "close", "come", "company", "could", "country", "course", "day",
    "did", "different", "do", "does", "down", "each", "early", "end", "enough", "even",
    "every", "example", "eye", "face", "fact", "family", "far", "feel", "few", "find",
    "first", "for", "found", "from", "full", "get", "give", "go", "good", "great",
    "group", "grow", "had", "hand", "hard", "has", "have", "he", "head", "health",
    "hear", "help", "her", "here", "high", "him", "his", "home", "house", "how",
    "however", "I", "if", "in", "into", "is", "it", "its", "just", "keep",
    "kind", "know", "large", "last", "late", "learn", "left", "life", "like", "line",
    "little", "live", "long", "look", "love", "made", "make", "man", "many", "may",
    "me", "mean", "men", "might", "more", "most", "move", "much", "must", "my",
    "near", "need", "never", "new", "next", "night", "no", "not", "now", "number",
    "of", "off", "often", "old", "on", "once", "one", "only", "or", "other",
    "our", "out", "over", "own", "part", "people", "place", "point", "problem", "program",
    "public", "put", "question", "right", "room", "run", "said", "same", "saw", "say",
    "school", "see", "seem", "set", "she", "should", "show", "since", "small", "so",
    "some", "something", "sound", "still", "study", "such", "system", "take", "tell", "than",
    "that", "the", "their", "them", "then", "there", "these", "they", "thing", "think",
    "this", "those", "time", "to", "today", "together", "too", "town", "try", "two",
    "under", "up", "use", "very", "want", "was", "water", "way", "we", "week",
    "well", "went", "were", "what", "when", "where", "which", "while", "who", "why",
    "will", "with", "word", "work", "world", "would", "write", "year", "you", "your",
]


def sample_words(count: int = DEFAULT_WORD_COUNT, rng: Optional[random.Random] = None) -> str:
    """`count` random words from WORDS, repeats allowed, joined by spaces."""
    rng = rng or random.Random()
    return " ".join(rng.choice(WORDS) for _ in range(count))


def read_source_text(
    stream: TextIO,
    word_count: int = DEFAULT_WORD_COUNT,
    rng: Optional[random.Random] = None,
) -> str:
    """
    Piped input wins when there is any; otherwise sample the word list.
    """
    text = ""
    if not stream.isatty():
        text = stream.read().strip()
    if text:
        logger.info("using %d characters of piped text", len(text))
        return text
    return sample_words(word_count, rng)


def reattach_tty() -> None:
    """Point stdin back at the controlling terminal after reading a pipe."""
    fd = os.open("/dev/tty", os.O_RDONLY)
    try:
        os.dup2(fd, 0)
    finally:
        os.close(fd)
