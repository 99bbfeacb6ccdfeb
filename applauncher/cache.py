#===============================================================================
#  Desktop_App_Launcher | cache.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Created     : 2026-10-12
#  Last Update : 2026-10-19
#
#  Summary
#  -------
#  In-process cache of parsed entries, refreshed when the set of .desktop
#  files changes or one of them is modified after the last refresh.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

import logging
import os
import time
from typing import Callable, Dict, Iterable, List, Optional

from .locator import scan_entry_dirs
from .models import DesktopEntryRef, ParsedEntry
from .parser import parse_all

logger = logging.getLogger(__name__)


class EntryCache:
    """Name -> ParsedEntry mapping plus the files and time it was built from.

    Not thread safe; one interactive session refreshes it serially.
    """

    def __init__(self, clock: Callable[[], float] = time.time):
        self._clock = clock
        self.entries: Dict[str, ParsedEntry] = {}
        self.source_files: List[str] = []
        self.last_refresh: Optional[float] = None

    def invalidate(self) -> None:
        self.entries = {}
        self.source_files = []
        self.last_refresh = None

    def is_stale(self, refs: List[DesktopEntryRef]) -> bool:
        if self.last_refresh is None:
            return True

        paths = [r.path for r in refs]
        if paths != self.source_files:
            return True

        for p in paths:
            try:
                if os.path.getmtime(p) > self.last_refresh:
                    return True
            except OSError:
                return True
        return False

    def get(self, directories: Iterable[str]) -> Dict[str, ParsedEntry]:
        # clock is read before any file
        now = self._clock()
        refs = scan_entry_dirs(directories)
        if not self.is_stale(refs):
            return self.entries

        entries = parse_all(refs)
        # timestamp is written last
        self.entries = entries
        self.source_files = [r.path for r in refs]
        self.last_refresh = now
        logger.debug(f"Loaded {len(entries)} applications from {len(refs)} desktop files")
        return self.entries
