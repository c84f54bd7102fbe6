"""
Load configuration from YAML.
Default: recentmenu/config/default.yaml. Override: --config <file> or RECENTMENU_CONFIG.
"""
import os
from pathlib import Path
from typing import Any

import yaml

from recentmenu.core.config import (
    ENV_CONFIG,
    MAX_DISPLAY_LENGTH,
    MAX_FILES_SHOWN,
    RECENT_FILES_KEY,
    RECENT_MENU_NAME,
)
from recentmenu.core.exceptions import ConfigError

_CACHE: dict[str, Any] | None = None
_CONFIG_DIR = Path(__file__).resolve().parent


def _deep_merge(base: dict, override: dict) -> dict:
    """Merge override into base (recursive). base is not mutated."""
    out = dict(base)
    for k, v in override.items():
        if k in out and isinstance(out[k], dict) and isinstance(v, dict):
            out[k] = _deep_merge(out[k], v)
        else:
            out[k] = v
    return out


def _load_yaml(path: Path) -> dict:
    if not path.exists():
        return {}
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError("Invalid YAML in %s: %s" % (path, e)) from e
    return data if isinstance(data, dict) else {}


def _defaults() -> dict:
    """Built-in defaults (no file)."""
    return {
        "recent_files": {
            "max_files_shown": MAX_FILES_SHOWN,
            "max_display_length": MAX_DISPLAY_LENGTH,
            "prefs_key": RECENT_FILES_KEY,
            "menu_label": RECENT_MENU_NAME,
            "prefs_file": None,
        },
        "logging": {"level": None, "log_dir": None},
    }


def load_config(override_path: str | Path | None = None) -> dict:
    """
    Load config: default.yaml + env RECENTMENU_CONFIG + optional override file.
    Returns merged dict. Cached after first call unless override_path is given.
    """
    global _CACHE
    if override_path is not None:
        _CACHE = None

    if _CACHE is not None:
        return _CACHE

    base = _defaults()
    default_file = _CONFIG_DIR / "default.yaml"
    if default_file.exists():
        base = _deep_merge(base, _load_yaml(default_file))

    env_path = os.environ.get(ENV_CONFIG)
    if env_path and Path(env_path).exists():
        base = _deep_merge(base, _load_yaml(Path(env_path)))

    if override_path is not None:
        p = Path(override_path)
        if not p.exists():
            raise ConfigError("Config file not found: %s" % p)
        base = _deep_merge(base, _load_yaml(p))

    _CACHE = base
    return base


def reset_config() -> None:
    """Clear cache (e.g. for tests)."""
    global _CACHE
    _CACHE = None


def recent_settings(config: dict | None = None) -> dict:
    """Validated recent_files section."""
    if config is None:
        config = load_config()
    section = dict(config.get("recent_files") or {})

    for name in ("max_files_shown", "max_display_length"):
        value = section.get(name)
        if isinstance(value, bool) or not isinstance(value, int) or value < 0:
            raise ConfigError("recent_files.%s must be a non-negative integer, got %r" % (name, value))
    for name in ("prefs_key", "menu_label"):
        value = section.get(name)
        if not isinstance(value, str) or not value:
            raise ConfigError("recent_files.%s must be a non-empty string, got %r" % (name, value))
    prefs_file = section.get("prefs_file")
    if prefs_file is not None and not isinstance(prefs_file, str):
        raise ConfigError("recent_files.prefs_file must be a path string, got %r" % (prefs_file,))
    return section


_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def logging_settings(config: dict | None = None) -> dict:
    """Validated logging section: level name (upper case) or None, log_dir or None."""
    if config is None:
        config = load_config()
    section = dict(config.get("logging") or {})
    level = section.get("level")
    if level is not None:
        if not isinstance(level, str) or level.strip().upper() not in _LEVELS:
            raise ConfigError("logging.level must be one of %s, got %r" % (", ".join(_LEVELS), level))
        level = level.strip().upper()
    log_dir = section.get("log_dir")
    if log_dir is not None and not isinstance(log_dir, str):
        raise ConfigError("logging.log_dir must be a path string, got %r" % (log_dir,))
    return {"level": level, "log_dir": log_dir}
