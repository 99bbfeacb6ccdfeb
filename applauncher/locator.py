#===============================================================================
#  Desktop_App_Launcher | locator.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Created     : 2026-10-12
#  Last Update : 2026-10-19
#
#  Summary
#  -------
#  Filesystem discovery of .desktop files across the XDG application
#  directories. Earlier directories override later ones.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Iterable, List, Optional, Set

from .constants import (
    DEFAULT_DATA_DIRS,
    DEFAULT_DATA_HOME,
    ENTRY_SUFFIX,
    ID_JOINER,
)
from .models import DesktopEntryRef

logger = logging.getLogger(__name__)


def default_search_dirs(environ: Optional[dict] = None) -> List[str]:
    """Return the application directories in XDG precedence order.

    The user directory ($XDG_DATA_HOME/applications) comes first, followed by
    <dir>/applications for every entry of $XDG_DATA_DIRS.
    """
    env = os.environ if environ is None else environ

    data_home = env.get("XDG_DATA_HOME") or DEFAULT_DATA_HOME
    data_dirs = env.get("XDG_DATA_DIRS") or DEFAULT_DATA_DIRS

    out: List[str] = []
    for base in [data_home] + data_dirs.split(os.pathsep):
        if not base:
            continue
        d = str(Path(os.path.expanduser(base)) / "applications")
        if d not in out:
            out.append(d)
    return out


def desktop_file_id(path: Path, base_dir: Path) -> str:
    """Desktop file id: path relative to its search dir, separators -> '-'."""
    rel = path.relative_to(base_dir)
    return ID_JOINER.join(rel.parts)


def _is_readable_file(p: Path) -> bool:
    try:
        return p.is_file() and os.access(p, os.R_OK)
    except OSError:
        return False


def _walk_entry_files(base_dir: Path) -> List[Path]:
    found: List[Path] = []
    for root, dirnames, filenames in os.walk(base_dir):
        # os.walk order is filesystem dependent; sort for repeatable scans
        dirnames.sort()
        for f in sorted(filenames):
            if f.endswith(ENTRY_SUFFIX):
                found.append(Path(root) / f)
    return found


def scan_entry_dirs(directories: Iterable[str]) -> List[DesktopEntryRef]:
    """Scan directories in order and return de-duplicated entry references.

    Rules:
    - Directories that do not exist are skipped
    - Files are found recursively by suffix
    - When two files share a desktop file id, the first directory wins
    - Unreadable files are treated as absent
    """
    refs: List[DesktopEntryRef] = []
    seen: Set[str] = set()

    for directory in directories:
        base = Path(os.path.expanduser(str(directory)))
        if not base.is_dir():
            continue

        for item in _walk_entry_files(base):
            ident = desktop_file_id(item, base)
            if ident in seen:
                logger.debug(f"Shadowed desktop file {item} ({ident})")
                continue
            if not _is_readable_file(item):
                continue
            seen.add(ident)
            refs.append(DesktopEntryRef(identifier=ident, path=str(item.absolute())))

    return refs
