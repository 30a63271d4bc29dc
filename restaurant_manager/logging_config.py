# logging_config.py
from __future__ import annotations

import logging
import os
import sys
from typing import Optional

_LOGGING_CONFIGURED = False

LOG_FORMAT = "%(asctime)s %(levelname)-7s %(name)s: %(message)s"


def configure_logging(level: Optional[str] = None) -> None:
    """
    Install one stderr handler on the root logger. Later calls are no-ops.
    stdout stays reserved for the console menu.
    """
    global _LOGGING_CONFIGURED
    if _LOGGING_CONFIGURED:
        return

    level = (level or os.getenv("LOG_LEVEL", "INFO")).upper()
    root_logger = logging.getLogger()
    root_logger.handlers.clear()

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root_logger.addHandler(handler)
    numeric = logging.getLevelName(level)
    root_logger.setLevel(numeric if isinstance(numeric, int) else logging.INFO)

    _LOGGING_CONFIGURED = True
