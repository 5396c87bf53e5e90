"""Tests for startup settings: defaults, JSON loading and fallbacks."""

from __future__ import annotations

import json
import logging

from studytimer.settings import SETTINGS_ENV_VAR, Settings, load_settings
from studytimer.timer.store import TimerSettings


class TestSettingsDefaults:
    def test_timer_defaults(self):
        s = Settings()
        assert s.focus_minutes == 25
        assert s.short_break_minutes == 5
        assert s.long_break_minutes == 15
        assert s.rounds_per_cycle == 4

    def test_auto_continue_default(self):
        assert Settings().auto_continue is True

    def test_sound_defaults(self):
        s = Settings()
        assert s.sound_enabled is True
        assert s.sound_volume == 70

    def test_timer_settings_conversion(self):
        assert Settings().timer_settings() == TimerSettings(25, 5, 15, 4)

    def test_timer_settings_clamped(self):
        s = Settings(focus_minutes=500, short_break_minutes=45, rounds_per_cycle=0)
        t = s.timer_settings()
        assert t.focus_minutes == 60
        assert t.short_break_minutes == 30
        assert t.rounds_per_cycle == 1


class TestLoadSettings:
    def test_no_path_returns_defaults(self, monkeypatch):
        monkeypatch.delenv(SETTINGS_ENV_VAR, raising=False)
        assert load_settings() == Settings()

    def test_missing_file_returns_defaults(self, tmp_path):
        s = load_settings(tmp_path / "nonexistent.json")
        assert s == Settings()

    def test_reads_values(self, tmp_path):
        path = tmp_path / "settings.json"
        path.write_text(json.dumps({
            "focus_minutes": 50,
            "rounds_per_cycle": 2,
            "auto_continue": False,
        }), encoding="utf-8")
        s = load_settings(path)
        assert s.focus_minutes == 50
        assert s.rounds_per_cycle == 2
        assert s.auto_continue is False
        assert s.short_break_minutes == 5

    def test_env_var_path(self, tmp_path, monkeypatch):
        path = tmp_path / "settings.json"
        path.write_text(json.dumps({"long_break_minutes": 30}), encoding="utf-8")
        monkeypatch.setenv(SETTINGS_ENV_VAR, str(path))
        assert load_settings().long_break_minutes == 30

    def test_invalid_json_returns_defaults(self, tmp_path, caplog):
        path = tmp_path / "settings.json"
        path.write_text("NOT VALID JSON", encoding="utf-8")
        with caplog.at_level(logging.WARNING, logger="studytimer.settings"):
            s = load_settings(path)
        assert s == Settings()
        assert "unreadable settings file" in caplog.text

    def test_non_object_returns_defaults(self, tmp_path):
        path = tmp_path / "settings.json"
        path.write_text("[1, 2, 3]", encoding="utf-8")
        assert load_settings(path) == Settings()

    def test_bad_value_type_returns_defaults(self, tmp_path):
        path = tmp_path / "settings.json"
        path.write_text(json.dumps({"focus_minutes": "lots"}), encoding="utf-8")
        assert load_settings(path) == Settings()

    def test_extra_keys_ignored(self, tmp_path):
        path = tmp_path / "settings.json"
        data = {"focus_minutes": 30, "unknown_future_key": True}
        path.write_text(json.dumps(data), encoding="utf-8")
        s = load_settings(path)
        assert s.focus_minutes == 30
        assert not hasattr(s, "unknown_future_key")

    def test_file_is_never_written(self, tmp_path):
        path = tmp_path / "settings.json"
        path.write_text(json.dumps({"focus_minutes": 30}), encoding="utf-8")
        before = path.read_text(encoding="utf-8")
        s = load_settings(path)
        s.focus_minutes = 45
        assert path.read_text(encoding="utf-8") == before

    def test_non_numeric_volume_returns_defaults(self, tmp_path, caplog):
        path = tmp_path / "settings.json"
        path.write_text(json.dumps({"sound_volume": "loud"}), encoding="utf-8")
        with caplog.at_level(logging.WARNING, logger="studytimer.settings"):
            s = load_settings(path)
        assert s == Settings()
        assert "sound_volume" in caplog.text

    def test_non_bool_flag_returns_defaults(self, tmp_path):
        path = tmp_path / "settings.json"
        path.write_text(json.dumps({"auto_continue": "no"}), encoding="utf-8")
        assert load_settings(path) == Settings()

    def test_bool_for_minutes_returns_defaults(self, tmp_path):
        path = tmp_path / "settings.json"
        path.write_text(json.dumps({"focus_minutes": True}), encoding="utf-8")
        assert load_settings(path) == Settings()

    def test_infinite_minutes_returns_defaults(self, tmp_path, caplog):
        path = tmp_path / "settings.json"
        path.write_text('{"focus_minutes": Infinity}', encoding="utf-8")
        with caplog.at_level(logging.WARNING, logger="studytimer.settings"):
            s = load_settings(path)
        assert s == Settings()
        assert "Ignoring settings file" in caplog.text

    def test_float_minutes_truncated(self, tmp_path):
        path = tmp_path / "settings.json"
        path.write_text(json.dumps({"focus_minutes": 30.7}), encoding="utf-8")
        assert load_settings(path).focus_minutes == 30
