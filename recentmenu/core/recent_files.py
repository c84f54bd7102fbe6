"""
Recently used files and their "File > Open Recent" commands.

RecentFileService keeps an ordered list of paths (most recent last) in step
with one CommandInfo per path registered in a command registry. Every change
to the list is written back to the preference store in full.
There is a limited number of files presented (max_files_shown) regardless of
the list length; the stored history itself is not truncated.
"""
import threading
from typing import Callable, Optional

from .commands import CommandInfo, CommandRegistry
from .config import (
    FILE_LABEL,
    INPUT_FILE,
    MAX_DISPLAY_LENGTH,
    MAX_FILES_SHOWN,
    OPEN_ACTION,
    RECENT_FILES_KEY,
    RECENT_MENU_NAME,
    REOPEN_ACTION,
)
from .events import EVENT_FILE_OPENED, EVENT_FILE_SAVED, FileOpenedEvent, FileSavedEvent
from .logger import get_logger
from .menu import MenuPath
from .prefs import PrefsStore
from ..utils.file_utils import limit_path

logger = get_logger("recent_files")

# All recent entries share one weight; the menu keeps them in insertion order.
RECENT_WEIGHT = 0


class RecentCommandFactory:
    """Builds the command that reopens a path: File > Open Recent > <short path>."""

    def __init__(
        self,
        command_service=None,
        shorten: Callable[[str, int], str] = limit_path,
        max_display_length: int = MAX_DISPLAY_LENGTH,
        menu_label: str = RECENT_MENU_NAME,
    ) -> None:
        self._command_service = command_service
        self._shorten = shorten
        self.max_display_length = max_display_length
        self.menu_label = menu_label

    def create(self, path: str) -> CommandInfo:
        menu_path = MenuPath.from_names(FILE_LABEL, self.menu_label, self._shorten(path, self.max_display_length))
        menu_path.leaf.weight = RECENT_WEIGHT
        # use the same icon as File > Open
        return CommandInfo(
            REOPEN_ACTION,
            presets={INPUT_FILE: path},
            menu_path=menu_path,
            icon_path=self._open_icon_path(),
        )

    def _open_icon_path(self) -> Optional[str]:
        if self._command_service is None:
            return None
        open_info = self._command_service.get_command(OPEN_ACTION)
        return open_info.icon_path if open_info is not None else None


class RecentFileService:
    """
    Owner of the recent-files list and its linked commands.

    All collaborators are passed in: prefs (get_list/put_list/clear),
    command_service (CommandRegistry), an optional factory and an optional
    EventBus delivering file_opened/file_saved notifications.
    """

    def __init__(
        self,
        prefs: PrefsStore,
        command_service: CommandRegistry,
        factory: Optional[RecentCommandFactory] = None,
        event_bus=None,
        key: str = RECENT_FILES_KEY,
        max_files_shown: int = MAX_FILES_SHOWN,
    ) -> None:
        self._prefs = prefs
        self._command_service = command_service
        self._factory = factory if factory is not None else RecentCommandFactory(command_service)
        self._event_bus = event_bus
        self._key = key
        self.max_files_shown = max_files_shown
        self._lock = threading.RLock()

        with self._lock:
            self._recent_files: list[str] = []
            self._recent_commands: dict[str, CommandInfo] = {}
            for path in prefs.get_list(key):
                if path in self._recent_commands:
                    # duplicate in a hand-edited store: keep the most recent occurrence
                    self._recent_files.remove(path)
                else:
                    self._recent_commands[path] = self._factory.create(path)
                self._recent_files.append(path)
            command_service.add_commands(list(self._recent_commands.values()))
        logger.debug("Loaded %d recent file(s) from %r", len(self._recent_files), key)

        if event_bus is not None:
            event_bus.subscribe(EVENT_FILE_OPENED, self._on_bus_event)
            event_bus.subscribe(EVENT_FILE_SAVED, self._on_bus_event)

    # -- list operations --

    def add(self, path: str) -> None:
        """Adds or refreshes a path on the list of recent files."""
        with self._lock:
            present = path in self._recent_commands
            files = [p for p in self._recent_files if p != path]
            files.append(path)
            # list is replaced only once the store has accepted it
            self._persist(files)
            self._recent_files = files

            if present:
                # path already present; refresh the linked command in place
                self._command_service.update_command(self._recent_commands[path], self._event_bus)
            else:
                info = self._factory.create(path)
                self._recent_commands[path] = info
                self._command_service.add_command(info)
        logger.debug("%s recent file %r", "Refreshed" if present else "Added", path)

    def remove(self, path: str) -> bool:
        """Removes a path from the list of recent files. Returns True if it was listed."""
        with self._lock:
            found = path in self._recent_files
            files = [p for p in self._recent_files if p != path]
            # written even when absent so the store matches memory
            self._persist(files)
            self._recent_files = files

            info = self._recent_commands.pop(path, None)
            if info is not None:
                self._command_service.remove_command(info)
        logger.debug("Remove recent file %r: %s", path, "done" if found else "not found")
        return found

    def clear(self) -> None:
        """Clears the list of recent files and unregisters all their commands."""
        with self._lock:
            self._prefs.clear(self._key)
            self._recent_files = []
            infos = list(self._recent_commands.values())
            if infos:
                self._command_service.remove_commands(infos)
            self._recent_commands.clear()
        logger.debug("Cleared %d recent file(s)", len(infos))

    def recent_files(self) -> tuple[str, ...]:
        """All recent files, most recent last."""
        with self._lock:
            return tuple(self._recent_files)

    def shown(self) -> tuple[str, ...]:
        """The max_files_shown most recent files, most recent last."""
        with self._lock:
            if self.max_files_shown <= 0:
                return ()
            return tuple(self._recent_files[-self.max_files_shown:])

    def get_command(self, path: str) -> Optional[CommandInfo]:
        with self._lock:
            return self._recent_commands.get(path)

    def __len__(self) -> int:
        with self._lock:
            return len(self._recent_files)

    def __contains__(self, path: object) -> bool:
        with self._lock:
            return path in self._recent_commands

    # -- events --

    def on_event(self, event) -> None:
        """Opened and saved files both become the most recent entry."""
        if isinstance(event, (FileOpenedEvent, FileSavedEvent)):
            self.add(event.path)
        else:
            raise TypeError("Unsupported recent-files event: %r" % (event,))

    def _on_bus_event(self, event_name: str, data) -> None:
        self.on_event(data)

    def close(self) -> None:
        """Stop listening to the event bus. Registered commands are left in place."""
        if self._event_bus is not None:
            self._event_bus.unsubscribe(EVENT_FILE_OPENED, self._on_bus_event)
            self._event_bus.unsubscribe(EVENT_FILE_SAVED, self._on_bus_event)

    # -- helpers --

    def _persist(self, files: list[str]) -> None:
        self._prefs.put_list(self._key, files)
