"""Tests for configuration loading and tolerance presets."""

import pytest

from stylecmd import config as config_module
from stylecmd.config import TOLERANCE_PRESETS, InterpreterConfig, config_from_dict, load_config


class TestInterpreterConfig:
    """Tests for InterpreterConfig."""

    def test_defaults(self):
        config = InterpreterConfig()
        assert config.tolerance == "DEFAULT"
        assert config.debounce_ms == 500
        assert config.foreground_threshold == 50
        assert config.target_max_distance == 2
        assert config.use_phonetic

    def test_preset_is_applied(self):
        config = InterpreterConfig(tolerance="strict")
        assert config.tolerance == "STRICT"
        assert config.target_max_distance == TOLERANCE_PRESETS["STRICT"]["target_max_distance"]
        assert config.color_min_similarity == 0.8
        assert not config.use_phonetic

    @pytest.mark.parametrize("kwargs", [
        {"tolerance": "sloppy"},
        {"debounce_ms": -1},
        {"foreground_threshold": 101},
    ])
    def test_invalid(self, kwargs):
        with pytest.raises(ValueError):
            InterpreterConfig(**kwargs)


class TestConfigFromDict:
    """Tests for config_from_dict."""

    def test_sections(self):
        config = config_from_dict({
            "matching": {"tolerance": "LENIENT"},
            "persistence": {"debounce_ms": 250, "directory": "/tmp/themes"},
            "foreground": {"threshold": 60, "dark": "0 0% 0%", "light": "0 0% 100%"},
            "logging": {"level": "debug", "file": "logs/style.log"},
        })
        assert config.tolerance == "LENIENT"
        assert config.target_max_distance == 3
        assert config.debounce_ms == 250
        assert config.persist_dir == "/tmp/themes"
        assert config.foreground_threshold == 60.0
        assert config.dark_foreground == "0 0% 0%"
        assert config.light_foreground == "0 0% 100%"
        assert config.log_level == "DEBUG"
        assert config.log_file == "logs/style.log"

    @pytest.mark.parametrize("data", [None, {}, {"matching": None, "logging": None}])
    def test_empty(self, data):
        config = config_from_dict(data)
        assert config.tolerance == "DEFAULT"
        assert config.persist_dir is None


class TestLoadConfig:
    """Tests for the config file lookup order."""

    def test_explicit_path(self, tmp_path):
        path = tmp_path / "settings.yaml"
        path.write_text("matching:\n  tolerance: STRICT\n")
        assert load_config(str(path)).tolerance == "STRICT"

    def test_env_var(self, tmp_path, monkeypatch):
        path = tmp_path / "env.yaml"
        path.write_text("persistence:\n  debounce_ms: 42\n")
        monkeypatch.setenv("STYLECMD_CONFIG", str(path))
        assert load_config().debounce_ms == 42

    def test_explicit_path_wins_over_env(self, tmp_path, monkeypatch):
        explicit = tmp_path / "explicit.yaml"
        explicit.write_text("persistence:\n  debounce_ms: 1\n")
        env = tmp_path / "env.yaml"
        env.write_text("persistence:\n  debounce_ms: 2\n")
        monkeypatch.setenv("STYLECMD_CONFIG", str(env))
        assert load_config(str(explicit)).debounce_ms == 1

    def test_missing_files_give_defaults(self, tmp_path, monkeypatch):
        monkeypatch.setattr(config_module, "DEFAULT_CONFIG_PATH", tmp_path / "absent.yaml")
        config = load_config(str(tmp_path / "nope.yaml"))
        assert config == InterpreterConfig()

    def test_bundled_settings(self):
        config = load_config()
        assert config.tolerance == "DEFAULT"
        assert config.debounce_ms == 500
