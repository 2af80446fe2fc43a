from __future__ import annotations

import json
import logging
import os
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Optional

from .curriculum import CURRICULA

logger = logging.getLogger(__name__)

APP_NAME = "layout-lessons"


def default_data_dir() -> Path:
    """
    Local-only storage:
    - macOS: ~/Library/Application Support/layout-lessons
    - elsewhere: $XDG_DATA_HOME/layout-lessons or ~/.local/share/layout-lessons
    """
    home = Path.home()
    if sys.platform == "darwin":
        return home / "Library" / "Application Support" / APP_NAME
    xdg = os.environ.get("XDG_DATA_HOME")
    if xdg:
        return Path(xdg) / APP_NAME
    return home / ".local" / "share" / APP_NAME


THEMES: Dict[str, Dict[str, str]] = {
    "slate": {
        "screen_bg": "transparent",
        "card_bg": "#111827",
        "stats_bg": "#0f172a",
        "prompt_bg": "#0b1220",
        "border": "#1f2937",
        "title": "#e5e7eb",
        "muted": "#64748b",
        "hint": "#93c5fd",
        "ok": "#a7f3d0",
        "bad": "#fb7185",
        "current": "#e5e7eb",
        "upcoming": "#64748b",
        "selected": "#60a5fa",
        "bar_fg": "#60a5fa",
        "bar_bg": "#1e293b",
    },
    "ember": {
        "screen_bg": "transparent",
        "card_bg": "#1f140f",
        "stats_bg": "#21140e",
        "prompt_bg": "#1a1210",
        "border": "#3b1d14",
        "title": "#fef3c7",
        "muted": "#d6a08a",
        "hint": "#fbbf24",
        "ok": "#fcd34d",
        "bad": "#f87171",
        "current": "#fde68a",
        "upcoming": "#a8866f",
        "selected": "#f97316",
        "bar_fg": "#f97316",
        "bar_bg": "#3b1d14",
    },
    "mint": {
        "screen_bg": "transparent",
        "card_bg": "#0b1f24",
        "stats_bg": "#0b1c22",
        "prompt_bg": "#0a1b1f",
        "border": "#12323a",
        "title": "#d1fae5",
        "muted": "#7dd3c7",
        "hint": "#5eead4",
        "ok": "#a7f3d0",
        "bad": "#fb7185",
        "current": "#d1fae5",
        "upcoming": "#5f9e97",
        "selected": "#34d399",
        "bar_fg": "#34d399",
        "bar_bg": "#12323a",
    },
}


@dataclass
class Settings:
    theme: str = "slate"
    curriculum: str = "bone"
    lesson_length: int = 40
    word_length: int = 4
    focus_multiplier: float = 3.0
    history_chart_size: int = 20
    palettes: Dict[str, Dict[str, str]] = field(default_factory=lambda: dict(THEMES))

    @property
    def palette(self) -> Dict[str, str]:
        return self.palettes[self.theme]


def load_config(path: Path) -> Dict[str, object]:
    if not path.exists():
        return {}
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as exc:
        logger.warning("ignoring config %s: %s", path, exc)
        return {}
    if not isinstance(data, dict):
        logger.warning("ignoring config %s: expected a JSON object", path)
        return {}
    return data


def _int_setting(config: Dict[str, object], key: str, default: int, minimum: int) -> int:
    raw = config.get(key, default)
    try:
        value = int(raw)  # type: ignore[arg-type]
    except (TypeError, ValueError):
        logger.warning("config %s=%r is not an integer, using %d", key, raw, default)
        return default
    if value < minimum:
        logger.warning("config %s=%d is below %d, using %d", key, value, minimum, default)
        return default
    return value


def settings_from_config(config: Dict[str, object]) -> Settings:
    settings = Settings()

    palettes = dict(THEMES)
    extra_themes = config.get("themes")
    if isinstance(extra_themes, dict):
        for name, colors in extra_themes.items():
            if isinstance(colors, dict):
                palettes[str(name)] = {**palettes.get("slate", {}), **colors}
    settings.palettes = palettes

    theme = str(config.get("theme", settings.theme))
    if theme in palettes:
        settings.theme = theme
    else:
        logger.warning("unknown theme %r, using %s", theme, settings.theme)

    curriculum = str(config.get("curriculum", settings.curriculum))
    if curriculum in CURRICULA:
        settings.curriculum = curriculum
    else:
        logger.warning("unknown curriculum %r, using %s", curriculum, settings.curriculum)

    settings.lesson_length = _int_setting(config, "lesson_length", settings.lesson_length, 0)
    settings.word_length = _int_setting(config, "word_length", settings.word_length, 1)
    settings.history_chart_size = _int_setting(config, "history_chart_size", settings.history_chart_size, 1)

    raw_multiplier = config.get("focus_multiplier", settings.focus_multiplier)
    try:
        multiplier = float(raw_multiplier)  # type: ignore[arg-type]
    except (TypeError, ValueError):
        multiplier = -1.0
    if multiplier > 0:
        settings.focus_multiplier = multiplier
    else:
        logger.warning("config focus_multiplier=%r must be a positive number", raw_multiplier)
    return settings


def load_settings(path: Optional[Path] = None) -> Settings:
    if path is None:
        path = default_data_dir() / "config.json"
    return settings_from_config(load_config(path))
