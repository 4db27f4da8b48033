# src/config/logging_config.py

"""Logging for one storefront session.

Textual draws the whole terminal on stdout, so nothing may be printed
there while the app runs.  Everything goes to a per-launch file instead
(``run_<timestamp>.log`` under ``Settings.LOGS_DIR``, which
``STOREFRONT_LOGS_DIR`` overrides).  Only records at
``Settings.CONSOLE_LOG_LEVEL`` or above are echoed to stderr, which is
where a crash report is still readable once the screen is torn down.

Image fetches run in worker threads, so the file format names the
thread next to the logger.
"""

import logging
import sys
from datetime import datetime
from pathlib import Path

from src.config.settings import Settings

_FILE_FORMAT = (
    "%(asctime)s | %(levelname)-8s | %(name)s | %(threadName)s | "
    "%(module)s:%(lineno)d | %(message)s"
)
_CONSOLE_FORMAT = "storefront %(levelname)s: %(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _session_file_handler(log_file: Path) -> logging.Handler:
    handler = logging.FileHandler(log_file, encoding="utf-8")
    handler.setLevel(logging.DEBUG)
    handler.setFormatter(logging.Formatter(_FILE_FORMAT, datefmt=_DATE_FORMAT))
    return handler


def _stderr_handler() -> logging.Handler:
    # stdout belongs to Textual
    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(Settings.CONSOLE_LOG_LEVEL)
    handler.setFormatter(logging.Formatter(_CONSOLE_FORMAT))
    return handler


def setup_logging(logs_dir: Path | None = None) -> Path:
    """Attach the session handlers to the ``storefront`` logger.

    Args:
        logs_dir: Directory for the session log; defaults to
            ``Settings.LOGS_DIR``.

    Returns:
        Path of the log file for this launch.  Repeated calls leave the
        existing handlers in place.
    """
    directory = logs_dir if logs_dir is not None else Settings.LOGS_DIR
    directory.mkdir(parents=True, exist_ok=True)
    log_file = directory / f"run_{datetime.now():%Y%m%d_%H%M%S}.log"

    app_logger = logging.getLogger("storefront")
    app_logger.setLevel(logging.DEBUG)
    if app_logger.handlers:
        return log_file

    app_logger.addHandler(_session_file_handler(log_file))
    app_logger.addHandler(_stderr_handler())
    app_logger.info("Session log: %s", log_file)
    return log_file
