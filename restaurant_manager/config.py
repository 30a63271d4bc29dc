# config.py
"""Runtime defaults. Environment variables override them; CLI flags override both."""
from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

# relative to the working directory, not the installed package
DATA_DIR = Path("data")
DEFAULT_DB_PATH = DATA_DIR / "restaurant.sqlite3"

DEFAULT_RESTAURANT_NAME = "Emery's"
DEFAULT_LOG_LEVEL = "INFO"


@dataclass(frozen=True)
class Settings:
    restaurant_name: str = DEFAULT_RESTAURANT_NAME
    db_path: Optional[str] = None     # None: in-memory only
    log_level: str = DEFAULT_LOG_LEVEL


def load_settings(environ=None) -> Settings:
    env = os.environ if environ is None else environ
    name = (env.get("RESTAURANT_NAME") or "").strip() or DEFAULT_RESTAURANT_NAME
    db_path = (env.get("RESTAURANT_DB") or "").strip() or None
    level = (env.get("LOG_LEVEL") or DEFAULT_LOG_LEVEL).strip().upper()
    return Settings(restaurant_name=name, db_path=db_path, log_level=level)
