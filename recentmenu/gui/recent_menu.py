"""
QtCommandMenu: a CommandRegistry that places each CommandInfo as a QAction
under its menu path (File > Open Recent > ...). Submenus are created on demand.
Only the max_shown most recently touched reopen actions are visible.
"""
from typing import Any, Callable, Iterable, Optional

from PySide6.QtGui import QAction, QIcon
from PySide6.QtWidgets import QMenu

from recentmenu.core.commands import CommandInfo
from recentmenu.core.config import INPUT_FILE, MAX_FILES_SHOWN, REOPEN_ACTION
from recentmenu.core.logger import get_logger

logger = get_logger("gui.recent_menu")


class QtCommandMenu:
    def __init__(
        self,
        root,
        trigger: Optional[Callable[[CommandInfo], None]] = None,
        max_shown: int = MAX_FILES_SHOWN,
    ) -> None:
        """root is a QMenuBar or QMenu; trigger(info) runs when an action is chosen."""
        self._root = root
        self._trigger = trigger
        self.max_shown = max_shown
        self._menus: dict[tuple[str, ...], QMenu] = {}
        # registration order; _recency holds the same commands, least recently touched first
        self._entries: list[tuple[CommandInfo, QAction, QMenu]] = []
        self._recency: list[CommandInfo] = []

    # -- CommandRegistry --

    def add_command(self, info: CommandInfo) -> None:
        if self.action_for(info) is not None:
            return
        names = info.menu_path.names()
        menu = self._menu_for(tuple(names[:-1]))
        action = QAction(info.label, menu)
        if info.icon_path:
            action.setIcon(QIcon(info.icon_path))
        action.setToolTip(str(info.presets.get(INPUT_FILE, info.label)))
        action.triggered.connect(lambda checked=False, i=info: self._run(i))
        menu.addAction(action)
        self._entries.append((info, action, menu))
        self._recency.append(info)
        self._apply_cap()

    def add_commands(self, infos: Iterable[CommandInfo]) -> None:
        for info in infos:
            self.add_command(info)

    def remove_command(self, info: CommandInfo) -> None:
        for i, (registered, action, menu) in enumerate(self._entries):
            if registered is info:
                del self._entries[i]
                self._recency = [c for c in self._recency if c is not info]
                menu.removeAction(action)
                action.deleteLater()
                self._apply_cap()
                return

    def remove_commands(self, infos: Iterable[CommandInfo]) -> None:
        for info in list(infos):
            self.remove_command(info)

    def update_command(self, info: CommandInfo, context: Any = None) -> None:
        info.update(context)
        if self.action_for(info) is None:
            return
        self._recency = [c for c in self._recency if c is not info]
        self._recency.append(info)
        self._apply_cap()

    # -- queries --

    def get_command(self, action: str) -> Optional[CommandInfo]:
        """First registered command for action, or None."""
        for registered, _, _ in self._entries:
            if registered.action == action:
                return registered
        return None

    def action_for(self, info: CommandInfo) -> Optional[QAction]:
        for registered, action, _ in self._entries:
            if registered is info:
                return action
        return None

    def menu(self, *names: str) -> Optional[QMenu]:
        """Submenu created for the given path, e.g. menu('File', 'Open Recent')."""
        return self._menus.get(tuple(names))

    def visible_labels(self) -> list[str]:
        return [action.text() for _, action, _ in self._entries if action.isVisible()]

    # -- helpers --

    def _menu_for(self, names: tuple[str, ...]) -> QMenu:
        parent = self._root
        for depth in range(1, len(names) + 1):
            key = names[:depth]
            menu = self._menus.get(key)
            if menu is None:
                menu = parent.addMenu(key[-1])
                self._menus[key] = menu
            parent = menu
        return parent

    def _apply_cap(self) -> None:
        recent = [c for c in self._recency if c.action == REOPEN_ACTION]
        shown = recent[-self.max_shown:] if self.max_shown > 0 else []
        for info, action, _ in self._entries:
            if info.action == REOPEN_ACTION:
                action.setVisible(any(info is s for s in shown))

    def _run(self, info: CommandInfo) -> None:
        logger.debug("Triggered %s", info.label)
        if self._trigger is not None:
            self._trigger(info)
