"""
Command descriptors and the in-memory command registry.
A CommandInfo binds an action id to preset inputs, a menu path and an icon;
CommandService holds the registered set and announces changes on the EventBus.
"""
import threading
import time
from typing import Any, Iterable, Optional, Protocol

from .events import EVENT_COMMANDS_ADDED, EVENT_COMMANDS_REMOVED, EVENT_COMMAND_UPDATED
from .logger import get_logger
from .menu import MenuPath

logger = get_logger("commands")


class CommandInfo:
    """
    Registrable description of a runnable command.
    Identity matters: registries track the instance, so refreshing a command
    goes through update() instead of building a new one.
    """

    def __init__(
        self,
        action: str,
        presets: Optional[dict[str, Any]] = None,
        menu_path: Optional[MenuPath] = None,
        icon_path: Optional[str] = None,
    ):
        self.action = action
        self.presets = dict(presets or {})
        self.menu_path = menu_path if menu_path is not None else MenuPath()
        self.icon_path = icon_path
        self.use_count = 0
        self.last_used: Optional[float] = None

    @property
    def label(self) -> str:
        leaf = self.menu_path.leaf
        return leaf.name if leaf is not None else self.action

    def update(self, event_bus=None) -> None:
        """Refresh usage state; announce the change on event_bus if given."""
        self.use_count += 1
        self.last_used = time.time()
        if event_bus is not None:
            event_bus.emit(EVENT_COMMAND_UPDATED, self)

    def __repr__(self) -> str:
        return "CommandInfo(%r, %r)" % (self.action, self.menu_path.menu_string())


class CommandRegistry(Protocol):
    """What the recent-files service needs from a command registry."""

    def add_command(self, info: CommandInfo) -> None: ...

    def add_commands(self, infos: Iterable[CommandInfo]) -> None: ...

    def remove_command(self, info: CommandInfo) -> None: ...

    def remove_commands(self, infos: Iterable[CommandInfo]) -> None: ...

    def update_command(self, info: CommandInfo, context: Any = None) -> None: ...

    def get_command(self, action: str) -> Optional[CommandInfo]: ...


class CommandService:
    """
    In-memory CommandRegistry. Commands are kept in registration order.
    Batch registration is best-effort: invalid commands are logged and skipped.
    """

    def __init__(self, event_bus=None) -> None:
        self._event_bus = event_bus
        self._commands: list[CommandInfo] = []
        self._lock = threading.Lock()

    def add_command(self, info: CommandInfo) -> None:
        self.add_commands([info])

    def add_commands(self, infos: Iterable[CommandInfo]) -> None:
        added = []
        with self._lock:
            for info in infos:
                if not getattr(info, "action", None):
                    logger.warning("Skipping command without action: %r", info)
                    continue
                if any(c is info for c in self._commands):
                    continue
                self._commands.append(info)
                added.append(info)
        if added:
            logger.debug("Registered %d command(s)", len(added))
            self._emit(EVENT_COMMANDS_ADDED, added)

    def remove_command(self, info: CommandInfo) -> None:
        self.remove_commands([info])

    def remove_commands(self, infos: Iterable[CommandInfo]) -> None:
        targets = list(infos)
        with self._lock:
            removed = [c for c in self._commands if any(c is t for t in targets)]
            self._commands = [c for c in self._commands if not any(c is r for r in removed)]
        if removed:
            logger.debug("Unregistered %d command(s)", len(removed))
            self._emit(EVENT_COMMANDS_REMOVED, removed)

    def update_command(self, info: CommandInfo, context: Any = None) -> None:
        """Refresh a registered command; context is handed to CommandInfo.update()."""
        info.update(context if context is not None else self._event_bus)

    def get_command(self, action: str) -> Optional[CommandInfo]:
        """First registered command for action, or None."""
        with self._lock:
            for c in self._commands:
                if c.action == action:
                    return c
        return None

    def commands(self, action: Optional[str] = None) -> list[CommandInfo]:
        with self._lock:
            if action is None:
                return list(self._commands)
            return [c for c in self._commands if c.action == action]

    def __contains__(self, info: object) -> bool:
        with self._lock:
            return any(c is info for c in self._commands)

    def __len__(self) -> int:
        with self._lock:
            return len(self._commands)

    def _emit(self, event_name: str, data) -> None:
        if self._event_bus is not None:
            self._event_bus.emit(event_name, data)
