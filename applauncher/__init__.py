#===============================================================================
#  Desktop_App_Launcher | __init__.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Created     : 2026-10-12
#  Last Update : 2026-10-19
#
#  Summary
#  -------
#  Finds .desktop applications, lets the user fuzzy-pick one, runs it.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

__version__ = "1.0.0"
