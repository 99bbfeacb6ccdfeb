#===============================================================================
#  Desktop_App_Launcher | settings.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Created     : 2026-10-12
#  Last Update : 2026-10-19
#
#  Summary
#  -------
#  Load/save of user settings (search directories, hidden entries, log level).
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional

from .constants import APP_CONFIG_DIR_NAME, DEFAULT_CONFIG_HOME, SETTINGS_FILE_NAME

logger = logging.getLogger(__name__)


def default_settings() -> Dict[str, Any]:
    return {
        "directories": [],          # empty -> XDG application dirs
        "include_hidden": False,    # show Hidden/NoDisplay entries
        "log_level": "WARNING",
    }


def default_settings_path(environ: Optional[dict] = None) -> Path:
    env = os.environ if environ is None else environ
    config_home = env.get("XDG_CONFIG_HOME") or DEFAULT_CONFIG_HOME
    return Path(os.path.expanduser(config_home)) / APP_CONFIG_DIR_NAME / SETTINGS_FILE_NAME


def _valid_value(value: Any, default: Any) -> bool:
    if not isinstance(value, type(default)):
        return False
    if isinstance(default, list):
        return all(isinstance(v, str) for v in value)
    return True


def load_settings(settings_path: Path) -> Dict[str, Any]:
    """Load settings from disk (or return defaults)."""
    d = default_settings()
    if not settings_path.exists():
        return d
    try:
        data = json.loads(settings_path.read_text(encoding="utf-8"))
    except (OSError, ValueError) as e:
        logger.warning(f"Ignoring unreadable settings file {settings_path}: {e}")
        return d
    if not isinstance(data, dict):
        logger.warning(f"Ignoring settings file {settings_path}: expected a JSON object")
        return d
    for k, default in d.items():
        if k not in data:
            data[k] = default
        elif not _valid_value(data[k], default):
            logger.warning(
                f"Ignoring {k!r} in {settings_path}: expected {type(default).__name__}, got {data[k]!r}"
            )
            data[k] = default
    return data


def save_settings(settings_path: Path, settings: Dict[str, Any]) -> None:
    """Persist settings to disk."""
    settings_path.parent.mkdir(parents=True, exist_ok=True)
    settings_path.write_text(json.dumps(settings, indent=2), encoding="utf-8")
