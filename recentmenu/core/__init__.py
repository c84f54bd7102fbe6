from .commands import CommandInfo, CommandRegistry, CommandService
from .config import MAX_FILES_SHOWN, MAX_DISPLAY_LENGTH, RECENT_FILES_KEY, RECENT_MENU_NAME
from .event_bus import EventBus
from .events import (
    EVENT_FILE_OPENED, EVENT_FILE_SAVED, FileEvent, FileOpenedEvent, FileSavedEvent, publish_file_event,
)
from .exceptions import RecentMenuError, ConfigError, PrefsError
from .logger import get_logger, setup_logging
from .menu import MenuEntry, MenuPath
from .prefs import PrefsStore, JsonPrefs, MemoryPrefs, default_prefs_path
from .recent_files import RecentCommandFactory, RecentFileService

__all__ = [
    "CommandInfo", "CommandRegistry", "CommandService",
    "MAX_FILES_SHOWN", "MAX_DISPLAY_LENGTH", "RECENT_FILES_KEY", "RECENT_MENU_NAME",
    "EventBus",
    "EVENT_FILE_OPENED", "EVENT_FILE_SAVED", "FileEvent", "FileOpenedEvent", "FileSavedEvent",
    "publish_file_event",
    "RecentMenuError", "ConfigError", "PrefsError",
    "get_logger", "setup_logging",
    "MenuEntry", "MenuPath",
    "PrefsStore", "JsonPrefs", "MemoryPrefs", "default_prefs_path",
    "RecentCommandFactory", "RecentFileService",
]
