"""
Preference stores: ordered string lists persisted under a named key.
JsonPrefs keeps every key in one JSON object on disk; MemoryPrefs is the in-process variant.
"""
import json
import os
import tempfile
from pathlib import Path
from typing import Iterable, Optional, Protocol

from .config import ENV_PREFS_DIR, PREFS_DIR_NAME, PREFS_FILE
from .exceptions import PrefsError
from .logger import get_logger

logger = get_logger("prefs")


class PrefsStore(Protocol):
    def get_list(self, key: str) -> list[str]: ...

    def put_list(self, key: str, values: Iterable[str]) -> None: ...

    def clear(self, key: str) -> None: ...


def default_prefs_path() -> Path:
    """$RECENTMENU_PREFS_DIR/prefs.json, else ~/.recentmenu/prefs.json."""
    base = os.environ.get(ENV_PREFS_DIR)
    if base:
        return Path(base) / PREFS_FILE
    return Path.home() / PREFS_DIR_NAME / PREFS_FILE


class MemoryPrefs:
    """Dict-backed store. Values are copied in and out."""

    def __init__(self, initial: Optional[dict[str, Iterable[str]]] = None) -> None:
        self._data: dict[str, list[str]] = {k: list(v) for k, v in (initial or {}).items()}

    def get_list(self, key: str) -> list[str]:
        return list(self._data.get(key, ()))

    def put_list(self, key: str, values: Iterable[str]) -> None:
        self._data[key] = list(values)

    def clear(self, key: str) -> None:
        self._data.pop(key, None)


class JsonPrefs:
    """
    File store: {"key": ["value", ...], ...}.
    A missing file reads as empty; an unreadable or malformed file raises PrefsError.
    Every write rewrites the whole file atomically.
    """

    def __init__(self, path: Optional[os.PathLike | str] = None) -> None:
        self.path = Path(path) if path is not None else default_prefs_path()

    def _read(self) -> dict:
        if not self.path.exists():
            return {}
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise PrefsError("Malformed preferences file %s: %s" % (self.path, e)) from e
        except OSError as e:
            raise PrefsError("Cannot read preferences file %s: %s" % (self.path, e)) from e
        if not isinstance(data, dict):
            raise PrefsError("Preferences file %s does not hold an object" % self.path)
        return data

    def _write(self, data: dict) -> None:
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp = tempfile.mkstemp(prefix=".prefs-", suffix=".json", dir=self.path.parent)
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as f:
                    json.dump(data, f, ensure_ascii=False, indent=2)
                os.replace(tmp, self.path)
            except BaseException:
                Path(tmp).unlink(missing_ok=True)
                raise
        except OSError as e:
            raise PrefsError("Cannot write preferences file %s: %s" % (self.path, e)) from e

    def get_list(self, key: str) -> list[str]:
        value = self._read().get(key)
        if value is None:
            return []
        if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
            raise PrefsError("Preference %r in %s is not a list of strings" % (key, self.path))
        return list(value)

    def put_list(self, key: str, values: Iterable[str]) -> None:
        data = self._read()
        data[key] = list(values)
        self._write(data)
        logger.debug("Saved %d value(s) under %r", len(data[key]), key)

    def clear(self, key: str) -> None:
        data = self._read()
        if key in data:
            del data[key]
            self._write(data)
