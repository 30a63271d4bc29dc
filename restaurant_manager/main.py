# main.py
from __future__ import annotations

import argparse
import logging
import sqlite3
import sys
from contextlib import ExitStack

from restaurant_manager.config import DEFAULT_DB_PATH, load_settings
from restaurant_manager.data.repo import Repo
from restaurant_manager.exceptions import ValidationError
from restaurant_manager.logging_config import configure_logging
from restaurant_manager.logic.records import RecordService
from restaurant_manager.models.restaurant import Restaurant

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="restaurant-manager",
        description="Employee, menu and payroll records for one restaurant.",
    )
    p.add_argument("--gui", action="store_true", help="open the desktop window instead of the console menu")
    p.add_argument("--db", metavar="PATH", nargs="?", const=str(DEFAULT_DB_PATH),
                   help="SQLite file to load from and save to (default location if PATH is omitted)")
    p.add_argument("--name", help="restaurant name")
    p.add_argument("--log-level", metavar="LEVEL", help="DEBUG, INFO, WARNING, ...")
    return p


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    settings = load_settings()
    configure_logging(args.log_level or settings.log_level)

    try:
        restaurant = Restaurant(args.name or settings.restaurant_name)
    except ValidationError as e:
        print(e, file=sys.stderr)
        return 2
    db_path = args.db or settings.db_path

    with ExitStack() as stack:
        repo = None
        if db_path:
            try:
                repo = stack.enter_context(Repo(db_path))
            except (sqlite3.Error, OSError, ValueError) as e:
                logger.error("cannot open database %s: %s", db_path, e)
                print(f"Connection failed: {e}", file=sys.stderr)
                return 1
        service = RecordService(restaurant, repo)

        if args.gui:
            # PySide6 is only imported when the window is requested
            from restaurant_manager.gui.app import run_gui
            return run_gui(service)

        from restaurant_manager.cli.menu import main_menu
        main_menu(service)
    return 0


if __name__ == "__main__":
    sys.exit(main())
