#===============================================================================
#  Desktop_App_Launcher | constants.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Created     : 2026-10-12
#  Last Update : 2026-10-19
#
#  Summary
#  -------
#  Central place for desktop-entry format rules, picker sizing and
#  file/folder naming conventions.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

APP_TITLE = "Run application"
APP_CONFIG_DIR_NAME = "applauncher"
SETTINGS_FILE_NAME = "launcher_settings.json"

# --- Desktop entry format ---
ENTRY_SUFFIX = ".desktop"
ENTRY_SECTION = "[Desktop Entry]"
ID_JOINER = "-"
APPLICATION_TYPE = "Application"
TRUE_VALUES = ("1", "true")

# Field codes stripped from Exec lines (no file/URL substitution is performed)
PLACEHOLDER_TOKENS = frozenset({"%f", "%F", "%u", "%U"})

# --- XDG fallbacks ---
DEFAULT_DATA_HOME = "~/.local/share"
DEFAULT_DATA_DIRS = "/usr/local/share:/usr/share"
DEFAULT_CONFIG_HOME = "~/.config"

# --- Picker dialog ---
PICKER_WIDTH = 560
PICKER_HEIGHT = 420
PICKER_BG = "#101010"
PICKER_ACCENT = "#0078D7"
ANNOTATION_COLOR = "rgba(255,255,255,0.6)"

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(message)s"
