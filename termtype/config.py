from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Dict, Optional

logger = logging.getLogger(__name__)

# past this the keystroke echo starts to feel laggy
MAX_POLL_INTERVAL = 0.15


def _default_config_path() -> Path:
    """
    Config file location:
    - $TERMTYPE_CONFIG if set
    - $XDG_CONFIG_HOME/termtype/config.json
    - ~/.config/termtype/config.json
    """
    explicit = os.environ.get("TERMTYPE_CONFIG")
    if explicit:
        return Path(explicit)
    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / "termtype" / "config.json"
    return Path.home() / ".config" / "termtype" / "config.json"


THEMES: Dict[str, Dict[str, str]] = {
    "slate": {
        "screen_bg": "transparent",
        "ok": "#a7f3d0",
        "bad": "#fca5a5",
        "upcoming": "#93c5fd",
        "hint": "#fde68a",
        "bar_fg": "#86efac",
    },
    "ember": {
        "screen_bg": "transparent",
        "ok": "#fcd34d",
        "bad": "#f87171",
        "upcoming": "#f3e8e1",
        "hint": "#fbbf24",
        "bar_fg": "#f97316",
    },
    "mint": {
        "screen_bg": "transparent",
        "ok": "#5eead4",
        "bad": "#fb7185",
        "upcoming": "#c7f9f1",
        "hint": "#d1fae5",
        "bar_fg": "#34d399",
    },
}


@dataclass
class Settings:
    duration_sec: float = 30.0
    word_count: int = 50
    poll_interval: float = 0.1
    wrap_ratio: float = 0.5
    theme: str = "slate"
    log_level: str = "WARNING"
    log_file: Optional[str] = None
    palettes: Dict[str, Dict[str, str]] = field(default_factory=lambda: dict(THEMES))

    @property
    def palette(self) -> Dict[str, str]:
        return self.palettes.get(self.theme, THEMES["slate"])


def load_config(path: Optional[Path] = None) -> Dict[str, object]:
    path = path or _default_config_path()
    if not path.exists():
        return {}
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, ValueError) as exc:
        logger.warning("ignoring unreadable config %s: %s", path, exc)
        return {}
    if not isinstance(data, dict):
        logger.warning("ignoring config %s: expected a JSON object", path)
        return {}
    return data


def _number(
    config: Dict[str, object], key: str, default: float, cast: Callable[[object], float] = float
) -> float:
    try:
        return cast(config.get(key, default))
    except (TypeError, ValueError):
        logger.warning("bad %s %r in config, using %r", key, config.get(key), default)
        return default


def load_settings(path: Optional[Path] = None) -> Settings:
    config = load_config(path)
    settings = Settings()

    palettes = dict(THEMES)
    extra_themes = config.get("themes")
    if isinstance(extra_themes, dict):
        for name, colors in extra_themes.items():
            if isinstance(colors, dict):
                palettes[name] = {**THEMES["slate"], **colors}
    settings.palettes = palettes

    theme = str(config.get("theme", settings.theme))
    if theme not in palettes:
        logger.warning("unknown theme %r, using slate", theme)
        theme = "slate"
    settings.theme = theme

    duration = _number(config, "duration_sec", settings.duration_sec)
    settings.duration_sec = duration if duration > 0 else Settings.duration_sec

    word_count = _number(config, "word_count", settings.word_count, cast=int)
    settings.word_count = word_count if word_count > 0 else Settings.word_count

    poll = _number(config, "poll_interval", settings.poll_interval)
    settings.poll_interval = min(MAX_POLL_INTERVAL, poll) if poll > 0 else Settings.poll_interval

    ratio = _number(config, "wrap_ratio", settings.wrap_ratio)
    settings.wrap_ratio = min(1.0, ratio) if ratio > 0 else Settings.wrap_ratio

    level = str(config.get("log_level", settings.log_level)).upper()
    if not isinstance(logging.getLevelName(level), int):
        logger.warning("unknown log_level %r, using WARNING", level)
        level = "WARNING"
    settings.log_level = level
    log_file = config.get("log_file")
    settings.log_file = str(log_file) if log_file else None
    return settings
