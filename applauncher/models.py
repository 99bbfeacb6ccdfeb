#===============================================================================
#  Desktop_App_Launcher | models.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Created     : 2026-10-12
#  Last Update : 2026-10-19
#
#  Summary
#  -------
#  Shared data models used across the launcher: located files, parsed entries
#  and the outcome of parsing one file.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union


@dataclass(frozen=True)
class DesktopEntryRef:
    """A located .desktop file."""
    identifier: str     # desktop file id, e.g. "kde-org.kde.konsole.desktop"
    path: str           # absolute path


@dataclass(frozen=True)
class ParsedEntry:
    """One launchable application, keyed by name in the cache."""
    name: str
    exec: str                       # raw Exec line, placeholders included
    comment: Optional[str] = None
    visible: bool = True            # False when Hidden/NoDisplay is set
    path: str = ""                  # source file


class RejectReason(Enum):
    MISSING_SECTION = "missing-section"
    WRONG_TYPE = "wrong-type"
    MISSING_NAME = "missing-name"
    MISSING_EXEC = "missing-exec"
    TRY_EXEC_NOT_FOUND = "try-exec-not-found"
    UNREADABLE = "unreadable"


@dataclass(frozen=True)
class Accepted:
    entry: ParsedEntry


@dataclass(frozen=True)
class Rejected:
    reason: RejectReason


ParseOutcome = Union[Accepted, Rejected]
