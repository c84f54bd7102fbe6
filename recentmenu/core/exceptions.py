"""recentmenu exceptions."""


class RecentMenuError(Exception):
    """Base exception for recentmenu."""


class ConfigError(RecentMenuError):
    """Invalid configuration value."""


class PrefsError(RecentMenuError):
    """Preference store could not be read or written."""
