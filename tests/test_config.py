"""Tests for layout_lessons.config."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

from layout_lessons import config
from layout_lessons.config import THEMES, Settings, load_config, load_settings, settings_from_config


class TestLoadConfig:
    def test_missing_file(self, tmp_path: Path):
        assert load_config(tmp_path / "config.json") == {}

    def test_malformed_file(self, tmp_path: Path):
        path = tmp_path / "config.json"
        path.write_text("{oops", encoding="utf-8")
        assert load_config(path) == {}

    def test_not_an_object(self, tmp_path: Path):
        path = tmp_path / "config.json"
        path.write_text("[1, 2]", encoding="utf-8")
        assert load_config(path) == {}

    def test_reads_values(self, tmp_path: Path):
        path = tmp_path / "config.json"
        path.write_text('{"theme": "mint", "word_length": 5}', encoding="utf-8")
        settings = load_settings(path)
        assert settings.theme == "mint"
        assert settings.word_length == 5


class TestSettingsFromConfig:
    def test_defaults(self):
        settings = settings_from_config({})
        assert settings == Settings()
        assert settings.palette == THEMES["slate"]

    def test_unknown_theme_and_curriculum(self):
        settings = settings_from_config({"theme": "neon", "curriculum": "dvorak"})
        assert settings.theme == "slate"
        assert settings.curriculum == "bone"

    @pytest.mark.parametrize(
        "key, value, expected",
        [
            ("word_length", 0, 4),
            ("word_length", "six", 4),
            ("lesson_length", -5, 40),
            ("lesson_length", 0, 0),
            ("history_chart_size", 0, 20),
            ("focus_multiplier", 0, 3.0),
            ("focus_multiplier", "x", 3.0),
            ("focus_multiplier", 2.5, 2.5),
        ],
    )
    def test_value_validation(self, key, value, expected):
        assert getattr(settings_from_config({key: value}), key) == expected

    def test_extra_theme_merges_over_slate(self):
        settings = settings_from_config({"theme": "paper", "themes": {"paper": {"ok": "#00ff00"}}})
        assert settings.theme == "paper"
        assert settings.palette["ok"] == "#00ff00"
        assert settings.palette["bad"] == THEMES["slate"]["bad"]


@pytest.mark.skipif(sys.platform == "darwin", reason="macOS uses Application Support")
class TestDataDir:
    def test_xdg(self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path):
        monkeypatch.setenv("XDG_DATA_HOME", str(tmp_path))
        assert config.default_data_dir() == tmp_path / "layout-lessons"

    def test_home_fallback(self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path):
        monkeypatch.delenv("XDG_DATA_HOME", raising=False)
        monkeypatch.setenv("HOME", str(tmp_path))
        assert config.default_data_dir() == tmp_path / ".local" / "share" / "layout-lessons"
