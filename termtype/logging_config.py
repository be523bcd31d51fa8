"""
Logging setup for the `termtype` logger namespace.

stdout belongs to the TUI while a session runs, so console records go
through textual's handler (visible with `textual console`) instead of a
stream handler.
"""
from __future__ import annotations

import logging
from typing import Optional, Union

from textual.logging import TextualHandler


def setup_logging(level: Union[int, str] = logging.WARNING, log_file: Optional[str] = None) -> None:
    logger = logging.getLogger("termtype")
    logger.setLevel(level)

    # avoid duplicate handlers when called twice
    if logger.hasHandlers():
        logger.handlers.clear()

    formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%H:%M:%S",
    )

    console_handler = TextualHandler()
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, mode="w", encoding="utf-8")
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    logger.debug("logging initialised at %s", logging.getLevelName(logger.level))
