#===============================================================================
#  Desktop_App_Launcher | launcher.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Created     : 2026-10-12
#  Last Update : 2026-10-19
#
#  Summary
#  -------
#  Launches a parsed entry through the shell, detached from the launcher.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

import logging
import subprocess

from .constants import PLACEHOLDER_TOKENS
from .models import ParsedEntry

logger = logging.getLogger(__name__)


def build_command(exec_line: str) -> str:
    """Drop %f/%F/%u/%U field codes and collapse whitespace."""
    return " ".join(t for t in exec_line.split() if t not in PLACEHOLDER_TOKENS)


def run_entry(entry: ParsedEntry) -> None:
    """Start the entry's command and return immediately.

    The child gets its own session and no stdio from us; its exit status is
    never collected. Spawn errors (OSError) propagate to the caller.
    """
    cmd = build_command(entry.exec)
    logger.info(f"Launching {entry.name!r}: {cmd}")
    subprocess.Popen(
        cmd,
        shell=True,
        stdin=subprocess.DEVNULL,
        stdout=subprocess.DEVNULL,
        stderr=subprocess.DEVNULL,
        start_new_session=True,
    )
