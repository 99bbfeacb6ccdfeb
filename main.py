#===============================================================================
#  Desktop_App_Launcher  |  Run an installed application
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Created     : 2026-10-12
#  Last Update : 2026-10-19
#
#  Summary
#  -------
#  Discovers freedesktop .desktop application entries, shows their names in
#  a fuzzy-searchable picker and runs the chosen one.
#  Supports:
#    - XDG directory precedence (user entries override system ones)
#    - Hidden/NoDisplay entries (shown with --all)
#    - TryExec checks against PATH
#    - In-process cache refreshed when .desktop files change
#
#  Folder Conventions
#  ------------------
#    $XDG_DATA_HOME/applications/**.desktop     -> user entries (first)
#    $XDG_DATA_DIRS/applications/**.desktop     -> system entries
#    $XDG_CONFIG_HOME/applauncher/launcher_settings.json -> settings
#
#  Copyright & License Notes
#  -------------------------
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#
#  This source code is provided "AS IS", without warranty of any kind, express
#  or implied, including but not limited to the warranties of merchantability,
#  fitness for a particular purpose, and noninfringement.
#
#  Third-Party Components
#  ----------------------
#  This project uses third-party libraries (PySide6) which are licensed
#  separately by their respective authors. Ensure compliance with their
#  license terms when distributing this software.
#===============================================================================

import sys

from applauncher.cli import main


if __name__ == "__main__":
    sys.exit(main())
