#===============================================================================
#  Desktop_App_Launcher | parser.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Created     : 2026-10-12
#  Last Update : 2026-10-19
#
#  Summary
#  -------
#  Reads the [Desktop Entry] section of a .desktop file and turns it into a
#  ParsedEntry, or a Rejected outcome naming the first check that failed.
#
#  Only the handful of keys needed to launch an app are read: Type, Name,
#  Comment, Exec, TryExec, Hidden and NoDisplay. Values are trimmed but not
#  unescaped. Localized keys (Name[de]=...) are ignored.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

import logging
import re
import shutil
from pathlib import Path
from typing import Dict, Iterable, Optional

from .constants import APPLICATION_TYPE, ENTRY_SECTION, TRUE_VALUES
from .models import (
    Accepted,
    DesktopEntryRef,
    ParsedEntry,
    ParseOutcome,
    Rejected,
    RejectReason,
)

logger = logging.getLogger(__name__)

SECTION_RE = re.compile(r"^" + re.escape(ENTRY_SECTION) + r"[ \t\r]*$", re.MULTILINE)
NEXT_SECTION_RE = re.compile(r"^\[", re.MULTILINE)


def _section_span(text: str) -> Optional[str]:
    """Return the body of the [Desktop Entry] section, or None if missing."""
    m = SECTION_RE.search(text)
    if not m:
        return None
    body_start = m.end()
    nxt = NEXT_SECTION_RE.search(text, body_start)
    return text[body_start:nxt.start() if nxt else len(text)]


def _field(section: str, key: str) -> Optional[str]:
    m = re.search(r"^" + re.escape(key) + r" *= *(.*)$", section, re.MULTILINE)
    if not m:
        return None
    return m.group(1).strip()


def _is_true(value: Optional[str]) -> bool:
    return value is not None and value in TRUE_VALUES


def try_exec_resolves(command: str) -> bool:
    """TryExec check: absolute paths are tested directly, others via PATH."""
    return shutil.which(command) is not None


def parse_entry_text(text: str, source: str = "<string>") -> ParseOutcome:
    """Parse one desktop entry.

    Checks run in a fixed order and stop at the first rejection:
      1) [Desktop Entry] header present (warning when missing)
      2) Hidden / NoDisplay -> visible flag only, never a rejection
      3) Type must be exactly "Application"
      4) Name must be present (warning when missing)
      5) Comment, optional
      6) Exec must be present
      7) TryExec, if present, must resolve on PATH
    """
    section = _section_span(text)
    if section is None:
        logger.warning(f"{source}: no {ENTRY_SECTION} section, skipping")
        return Rejected(RejectReason.MISSING_SECTION)

    visible = not (_is_true(_field(section, "Hidden")) or _is_true(_field(section, "NoDisplay")))

    if _field(section, "Type") != APPLICATION_TYPE:
        return Rejected(RejectReason.WRONG_TYPE)

    name = _field(section, "Name")
    if not name:
        logger.warning(f"{source}: application entry has no Name, skipping")
        return Rejected(RejectReason.MISSING_NAME)

    comment = _field(section, "Comment") or None

    exec_line = _field(section, "Exec")
    if not exec_line:
        return Rejected(RejectReason.MISSING_EXEC)

    try_exec = _field(section, "TryExec")
    if try_exec and not try_exec_resolves(try_exec):
        logger.debug(f"{source}: TryExec {try_exec!r} not found")
        return Rejected(RejectReason.TRY_EXEC_NOT_FOUND)

    return Accepted(
        ParsedEntry(
            name=name,
            exec=exec_line,
            comment=comment,
            visible=visible,
            path=source,
        )
    )


def parse_ref(ref: DesktopEntryRef) -> ParseOutcome:
    try:
        text = Path(ref.path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        logger.debug(f"Cannot read {ref.path}: {e}")
        return Rejected(RejectReason.UNREADABLE)
    return parse_entry_text(text, source=ref.path)


def parse_entry(ref: DesktopEntryRef) -> Optional[ParsedEntry]:
    outcome = parse_ref(ref)
    if isinstance(outcome, Accepted):
        return outcome.entry
    return None


def parse_all(refs: Iterable[DesktopEntryRef]) -> Dict[str, ParsedEntry]:
    """Parse every ref and key accepted entries by display name.

    refs arrive in directory precedence order, so on a display name clash
    the first entry is kept.
    """
    entries: Dict[str, ParsedEntry] = {}
    for ref in refs:
        entry = parse_entry(ref)
        if entry is None:
            continue
        if entry.name in entries:
            logger.debug(
                f"Duplicate name {entry.name!r} in {ref.path}, keeping {entries[entry.name].path}"
            )
            continue
        entries[entry.name] = entry
    return entries
