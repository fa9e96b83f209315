"""golazo logging configuration.

The dashboard owns the terminal, so logs go to a rotating file
(default: `~/.golazo/logs/golazo.log`) instead of stderr.
"""

from __future__ import annotations

import logging
import os
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

DEFAULT_LOG_PATH = Path("~/.golazo/logs/golazo.log")
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def setup_logging(level: Optional[str] = None, log_path: Optional[str] = None) -> Path:
    """Configure golazo logging.

    Args:
        level: Optional override for `GOLAZO_LOG_LEVEL` (default INFO).
        log_path: Optional override for the log file location.

    Returns:
        The log file path in use.
    """
    if level:
        os.environ["GOLAZO_LOG_LEVEL"] = level
    resolved_level = (os.environ.get("GOLAZO_LOG_LEVEL") or "INFO").upper()

    path = Path(log_path).expanduser() if log_path else DEFAULT_LOG_PATH.expanduser()
    path.parent.mkdir(parents=True, exist_ok=True)

    handler = RotatingFileHandler(path, maxBytes=2_000_000, backupCount=3, encoding="utf-8")
    handler.setFormatter(logging.Formatter(LOG_FORMAT))

    root = logging.getLogger("golazo")
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(resolved_level)
    root.propagate = False
    return path
