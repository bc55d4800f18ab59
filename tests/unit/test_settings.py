"""
Tests for Settings.
"""
import json

import pytest

from bindery.utils.settings import DEFAULT_SETTINGS, SETTINGS_ENV_VAR, Settings, resolve_settings_path


class TestSettings:

    def test_missing_file_uses_defaults(self, tmp_path):
        settings = Settings(str(tmp_path / "missing.json"))
        assert settings.settings == DEFAULT_SETTINGS
        assert not (tmp_path / "missing.json").exists()

    def test_loads_file_over_defaults(self, tmp_path):
        path = tmp_path / "settings.json"
        path.write_text(json.dumps({"module_name": "host", "conflict_policy": "error"}))

        settings = Settings(str(path))

        assert settings.module_name == "host"
        assert settings.conflict_policy == "error"
        assert settings.disabled_features == []

    def test_unknown_keys_ignored(self, tmp_path):
        path = tmp_path / "settings.json"
        path.write_text(json.dumps({"colour": "blue"}))
        assert "colour" not in Settings(str(path)).settings

    def test_invalid_json_falls_back_to_defaults(self, tmp_path):
        path = tmp_path / "settings.json"
        path.write_text("{not json")
        assert Settings(str(path)).settings == DEFAULT_SETTINGS

    def test_non_object_falls_back_to_defaults(self, tmp_path):
        path = tmp_path / "settings.json"
        path.write_text("[1, 2]")
        assert Settings(str(path)).settings == DEFAULT_SETTINGS

    def test_save_round_trip(self, tmp_path):
        path = tmp_path / "nested" / "settings.json"
        settings = Settings(str(path))
        settings.set("disabled_features", ["clock"])
        settings.save_settings()

        assert Settings(str(path)).disabled_features == ["clock"]

    def test_set_unknown_key(self):
        with pytest.raises(KeyError):
            Settings.defaults().set("colour", "blue")

    def test_defaults_are_not_shared(self):
        first = Settings.defaults()
        first.settings["disabled_features"].append("clock")
        assert Settings.defaults().disabled_features == []

    def test_defaults_cannot_be_saved(self):
        with pytest.raises(ValueError):
            Settings.defaults().save_settings()


class TestResolveSettingsPath:

    def test_explicit_path_wins(self, tmp_path, monkeypatch):
        monkeypatch.setenv(SETTINGS_ENV_VAR, str(tmp_path / "env.json"))
        assert resolve_settings_path(str(tmp_path / "arg.json")) == tmp_path / "arg.json"

    def test_env_var(self, tmp_path, monkeypatch):
        monkeypatch.setenv(SETTINGS_ENV_VAR, str(tmp_path / "env.json"))
        assert resolve_settings_path() == tmp_path / "env.json"
