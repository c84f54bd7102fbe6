"""YAML configuration: defaults, env and explicit overrides, validation."""
import pytest

from recentmenu.config import load_config, logging_settings, recent_settings, reset_config
from recentmenu.core.exceptions import ConfigError


def test_defaults():
    settings = recent_settings(load_config())
    assert settings["max_files_shown"] == 10
    assert settings["max_display_length"] == 40
    assert settings["prefs_key"] == "recentfiles"
    assert settings["menu_label"] == "Open Recent"
    assert settings["prefs_file"] is None


def test_cached_until_reset():
    assert load_config() is load_config()
    first = load_config()
    reset_config()
    assert load_config() is not first


def test_override_file_merges(tmp_path):
    path = tmp_path / "override.yaml"
    path.write_text("recent_files:\n  max_files_shown: 4\n", encoding="utf-8")
    settings = recent_settings(load_config(override_path=path))
    assert settings["max_files_shown"] == 4
    assert settings["max_display_length"] == 40


def test_env_config(tmp_path, monkeypatch):
    path = tmp_path / "env.yaml"
    path.write_text("recent_files:\n  menu_label: Recent Images\n", encoding="utf-8")
    monkeypatch.setenv("RECENTMENU_CONFIG", str(path))
    assert recent_settings()["menu_label"] == "Recent Images"


def test_missing_override_file(tmp_path):
    with pytest.raises(ConfigError):
        load_config(override_path=tmp_path / "nope.yaml")


def test_invalid_yaml(tmp_path):
    path = tmp_path / "bad.yaml"
    path.write_text("recent_files: [unclosed\n", encoding="utf-8")
    with pytest.raises(ConfigError):
        load_config(override_path=path)


@pytest.mark.parametrize("section", [
    {"max_files_shown": -1},
    {"max_files_shown": "10"},
    {"max_display_length": True},
    {"prefs_key": ""},
    {"menu_label": None},
    {"prefs_file": 5},
])
def test_invalid_values(section):
    config = load_config()
    bad = dict(config["recent_files"], **section)
    with pytest.raises(ConfigError):
        recent_settings({"recent_files": bad})


def test_logging_defaults():
    assert logging_settings(load_config()) == {"level": None, "log_dir": None}


def test_logging_override(tmp_path):
    path = tmp_path / "log.yaml"
    path.write_text("logging:\n  level: debug\n  log_dir: /tmp/recent-logs\n", encoding="utf-8")
    assert logging_settings(load_config(override_path=path)) == {"level": "DEBUG", "log_dir": "/tmp/recent-logs"}


@pytest.mark.parametrize("section", [{"level": "LOUD"}, {"level": 10}, {"log_dir": 3}])
def test_invalid_logging_values(section):
    with pytest.raises(ConfigError):
        logging_settings({"logging": section})
