from __future__ import annotations

import logging
import random
import sys
from typing import Optional, TextIO

from .app import TypingTUI
from .config import load_settings
from .errors import EmptyTextError
from .layout import require_text
from .logging_config import setup_logging
from .metrics import compute, format_report
from .words import read_source_text, reattach_tty

logger = logging.getLogger("termtype")


def main(stdin: Optional[TextIO] = None, rng: Optional[random.Random] = None) -> int:
    settings = load_settings()
    setup_logging(settings.log_level, settings.log_file)

    stdin = stdin or sys.stdin
    piped = not stdin.isatty()
    try:
        text = require_text(read_source_text(stdin, settings.word_count, rng))
    except EmptyTextError as exc:
        print(f"termtype: {exc}", file=sys.stderr)
        return 2
    if piped:
        try:
            reattach_tty()
        except OSError as exc:
            print(f"termtype: no terminal to read keys from: {exc}", file=sys.stderr)
            return 2

    # textual restores the terminal before run() returns, on every exit path
    outcome = TypingTUI(text, settings).run(mouse=False)
    if outcome is None:
        logger.info("session closed without an outcome")
        return 1

    print(format_report(compute(outcome)))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
