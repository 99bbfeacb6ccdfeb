#===============================================================================
#  Desktop_App_Launcher | actions.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Created     : 2026-10-12
#  Last Update : 2026-10-19
#
#  Summary
#  -------
#  Pluggable behaviour for the picker: how a name is annotated and how a
#  chosen entry is launched. Subclass AppActions to customise either.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

from typing import Optional

from .cache import EntryCache
from .launcher import run_entry
from .models import ParsedEntry


class AppActions:
    """Capability interface used by run_app_launcher."""

    def annotate(self, name: str) -> Optional[str]:
        raise NotImplementedError

    def launch(self, entry: ParsedEntry) -> None:
        raise NotImplementedError


class DefaultActions(AppActions):
    """Annotate with the entry's Comment, launch through the shell."""

    def __init__(self, cache: EntryCache):
        self.cache = cache

    def annotate(self, name: str) -> Optional[str]:
        entry = self.cache.entries.get(name)
        if entry is None or not entry.comment:
            return None
        return f" - {entry.comment}"

    def launch(self, entry: ParsedEntry) -> None:
        run_entry(entry)
