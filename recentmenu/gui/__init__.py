"""Qt binding for registered commands."""

from recentmenu.gui.recent_menu import QtCommandMenu

__all__ = ["QtCommandMenu"]
