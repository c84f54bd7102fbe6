"""
Recent-files constants. No loading logic (see recentmenu.config).
Menu labels, preference key, display limits, env names.
"""
# ---------------------------------------------------------------------------
# Display limits
# ---------------------------------------------------------------------------
MAX_FILES_SHOWN = 10
MAX_DISPLAY_LENGTH = 40  # maximum pathname length shown in a menu leaf

# ---------------------------------------------------------------------------
# Menu placement
# ---------------------------------------------------------------------------
FILE_LABEL = "File"
RECENT_MENU_NAME = "Open Recent"

# ---------------------------------------------------------------------------
# Actions: reference "open" command and the reopen action bound to recent entries
# ---------------------------------------------------------------------------
OPEN_ACTION = "recentmenu.open"
REOPEN_ACTION = "recentmenu.open_file"
INPUT_FILE = "input_file"

# ---------------------------------------------------------------------------
# Persistence
# ---------------------------------------------------------------------------
RECENT_FILES_KEY = "recentfiles"
PREFS_FILE = "prefs.json"
PREFS_DIR_NAME = ".recentmenu"

# ---------------------------------------------------------------------------
# Env var names
# ---------------------------------------------------------------------------
ENV_LOG_LEVEL = "RECENTMENU_LOG_LEVEL"
ENV_LOG_DIR = "RECENTMENU_LOG_DIR"
ENV_PREFS_DIR = "RECENTMENU_PREFS_DIR"
ENV_CONFIG = "RECENTMENU_CONFIG"
