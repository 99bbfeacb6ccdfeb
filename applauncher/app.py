#===============================================================================
#  Desktop_App_Launcher | app.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Created     : 2026-10-12
#  Last Update : 2026-10-19
#
#  Summary
#  -------
#  The "run application" command: refresh the cache, let the user pick a
#  name, launch the matching entry.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

import logging
from typing import Callable, Dict, Iterable, List, Optional

from .actions import AppActions, DefaultActions
from .cache import EntryCache
from .models import ParsedEntry

logger = logging.getLogger(__name__)

Picker = Callable[[List[str], Callable[[str], Optional[str]]], Optional[str]]


def candidate_names(entries: Dict[str, ParsedEntry], include_hidden: bool = False) -> List[str]:
    """Names offered to the picker, sorted case-insensitively."""
    return sorted(
        (n for n, e in entries.items() if include_hidden or e.visible),
        key=str.lower,
    )


def run_app_launcher(
    cache: EntryCache,
    directories: Iterable[str],
    include_hidden: bool = False,
    picker: Optional[Picker] = None,
    actions: Optional[AppActions] = None,
) -> Optional[ParsedEntry]:
    """Pick an application and launch it. Returns the launched entry, or None."""
    if picker is None:
        # Qt is only needed once a dialog is actually shown
        from .picker import select_app
        picker = select_app
    if actions is None:
        actions = DefaultActions(cache)

    entries = cache.get(directories)
    names = candidate_names(entries, include_hidden)

    choice = picker(names, actions.annotate)
    if choice is None:
        logger.debug("Selection cancelled")
        return None

    entry = entries.get(choice)
    if entry is None:
        logger.warning(f"No application named {choice!r}")
        return None

    actions.launch(entry)
    return entry
