#===============================================================================
#  Desktop_App_Launcher | cli.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Created     : 2026-10-12
#  Last Update : 2026-10-19
#
#  Summary
#  -------
#  Command line entry point. Settings come from launcher_settings.json;
#  flags override them.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from .app import candidate_names, run_app_launcher
from .cache import EntryCache
from .constants import LOG_FORMAT
from .locator import default_search_dirs
from .settings import default_settings_path, load_settings

logger = logging.getLogger(__name__)


def build_arg_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="applauncher",
        description="Pick an installed desktop application and run it.",
    )
    p.add_argument("-a", "--all", action="store_true", help="include entries marked Hidden/NoDisplay")
    p.add_argument(
        "-d", "--dir", action="append", dest="dirs", metavar="DIR",
        help="search directory (repeatable, replaces the XDG defaults)",
    )
    p.add_argument("-l", "--list", action="store_true", help="print name<TAB>exec for each entry and exit")
    p.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    p.add_argument("--settings", type=Path, default=None, help="alternate settings file")
    return p


def main(argv: Optional[List[str]] = None) -> int:
    args = build_arg_parser().parse_args(argv)

    settings = load_settings(args.settings or default_settings_path())

    level = logging.DEBUG if args.verbose else getattr(logging, str(settings["log_level"]).upper(), logging.WARNING)
    logging.basicConfig(level=level, format=LOG_FORMAT)

    directories = args.dirs or settings["directories"] or default_search_dirs()
    include_hidden = args.all or bool(settings["include_hidden"])
    logger.debug(f"Search directories: {directories}")

    cache = EntryCache()

    if args.list:
        entries = cache.get(directories)
        for name in candidate_names(entries, include_hidden):
            print(f"{name}\t{entries[name].exec}")
        return 0

    try:
        run_app_launcher(cache, directories, include_hidden=include_hidden)
    except OSError as e:
        logger.error(f"Launch failed: {e}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
