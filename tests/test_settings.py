"""Tests for settings loading: defaults, JSON file, validation, env override."""

from __future__ import annotations

import json
import logging
from pathlib import Path

import pytest

from pomobuddy.settings import (
    Settings, load_settings, settings_path, SETTINGS_PATH, SETTINGS_ENV_VAR,
)
from pomobuddy.timer.engine import Phase


class TestSettingsDefaults:

    def test_timer_defaults(self):
        s = Settings()
        assert s.work_duration == 60 * 60
        assert s.short_break_duration == 5 * 60
        assert s.long_break_duration == 15 * 60
        assert s.long_break_interval == 4

    def test_audio_defaults(self):
        s = Settings()
        assert s.sound_enabled is True
        assert s.sound_volume == 70

    def test_always_on_top_default(self):
        assert Settings().always_on_top is False

    def test_durations_mapping(self):
        s = Settings(work_duration=1500)
        assert s.durations() == {
            Phase.WORK: 1500,
            Phase.SHORT_BREAK: 300,
            Phase.LONG_BREAK: 900,
        }


class TestLoadSettings:

    def _write(self, tmp_path, data) -> Path:
        path = tmp_path / "settings.json"
        path.write_text(json.dumps(data), encoding="utf-8")
        return path

    def test_missing_file_gives_defaults(self, tmp_path):
        assert load_settings(tmp_path / "nope.json") == Settings()

    def test_reads_values(self, tmp_path):
        path = self._write(tmp_path, {
            "work_duration": 1500,
            "sound_volume": 20,
            "always_on_top": True,
        })
        s = load_settings(path)
        assert s.work_duration == 1500
        assert s.sound_volume == 20
        assert s.always_on_top is True
        assert s.short_break_duration == 300

    def test_unknown_keys_ignored(self, tmp_path):
        path = self._write(tmp_path, {"theme": "dark", "sound_enabled": False})
        s = load_settings(path)
        assert s.sound_enabled is False
        assert not hasattr(s, "theme")

    @pytest.mark.parametrize("key,value", [
        ("work_duration", 0),
        ("work_duration", -60),
        ("short_break_duration", "300"),
        ("long_break_interval", 2.5),
        ("sound_volume", 101),
        ("sound_volume", True),
        ("sound_enabled", "yes"),
    ])
    def test_invalid_values_fall_back(self, tmp_path, caplog, key, value):
        path = self._write(tmp_path, {key: value})
        with caplog.at_level(logging.WARNING, logger="pomobuddy.settings"):
            s = load_settings(path)
        assert getattr(s, key) == getattr(Settings(), key)
        assert key in caplog.text

    def test_malformed_json(self, tmp_path, caplog):
        path = tmp_path / "settings.json"
        path.write_text("{not json", encoding="utf-8")
        with caplog.at_level(logging.WARNING, logger="pomobuddy.settings"):
            assert load_settings(path) == Settings()
        assert "Could not read settings" in caplog.text

    def test_non_object_json(self, tmp_path):
        path = self._write(tmp_path, [1, 2, 3])
        assert load_settings(path) == Settings()


class TestSettingsPath:

    def test_default_path(self, monkeypatch):
        monkeypatch.delenv(SETTINGS_ENV_VAR, raising=False)
        assert settings_path() == SETTINGS_PATH

    def test_env_override(self, tmp_path, monkeypatch):
        path = tmp_path / "custom.json"
        path.write_text(json.dumps({"long_break_interval": 3}), encoding="utf-8")
        monkeypatch.setenv(SETTINGS_ENV_VAR, str(path))
        assert settings_path() == path
        assert load_settings().long_break_interval == 3
