"""
Pytest configuration and shared fixtures.

Headless Qt on Linux: set QT_QPA_PLATFORM=offscreen so that QMenu/QAction tests
work in CI without a display. Where offscreen is not available, run under Xvfb:

  xvfb-run -a pytest tests/test_recent_menu.py -v
"""
import os
import sys

import pytest

# Must set before any PySide6/Qt import
if sys.platform.startswith("linux"):
    os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from recentmenu.config import reset_config
from recentmenu.core.commands import CommandService


class RecordingRegistry(CommandService):
    """CommandService that records every registry call as (name, payload)."""

    def __init__(self, event_bus=None):
        super().__init__(event_bus)
        self.calls = []

    def add_command(self, info):
        self.calls.append(("add_command", info))
        super().add_commands([info])

    def add_commands(self, infos):
        infos = list(infos)
        self.calls.append(("add_commands", infos))
        super().add_commands(infos)

    def remove_command(self, info):
        self.calls.append(("remove_command", info))
        super().remove_commands([info])

    def remove_commands(self, infos):
        infos = list(infos)
        self.calls.append(("remove_commands", infos))
        super().remove_commands(infos)

    def update_command(self, info, context=None):
        self.calls.append(("update_command", info))
        super().update_command(info, context)

    def names(self):
        return [name for name, _ in self.calls]


@pytest.fixture
def registry():
    return RecordingRegistry()


@pytest.fixture(autouse=True)
def _clean_config(monkeypatch):
    """Each test loads config from scratch, without the caller's environment."""
    monkeypatch.delenv("RECENTMENU_CONFIG", raising=False)
    monkeypatch.delenv("RECENTMENU_PREFS_DIR", raising=False)
    reset_config()
    yield
    reset_config()
