"""recentmenu: persisted "File > Open Recent" list linked to registrable reopen commands."""

__version__ = "0.1.0"

from recentmenu.core.commands import CommandInfo, CommandService
from recentmenu.core.event_bus import EventBus
from recentmenu.core.events import FileOpenedEvent, FileSavedEvent
from recentmenu.core.prefs import JsonPrefs, MemoryPrefs
from recentmenu.core.recent_files import RecentCommandFactory, RecentFileService

__all__ = [
    "__version__",
    "CommandInfo",
    "CommandService",
    "EventBus",
    "FileOpenedEvent",
    "FileSavedEvent",
    "JsonPrefs",
    "MemoryPrefs",
    "RecentCommandFactory",
    "RecentFileService",
]
