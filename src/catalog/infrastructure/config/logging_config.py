"""Logging configuration for the ``catalog`` package.

Every module logs through ``logging.getLogger(__name__)``, so all records
end up under the ``catalog`` logger configured here. Console output goes
to stderr to keep stdout for command results.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

_DETAILED_FORMAT = (
    "%(asctime)s | %(levelname)-8s | %(name)s | %(module)s:%(funcName)s:%(lineno)d | "
    "%(message)s"
)

_CONSOLE_FORMAT = "%(asctime)s | %(levelname)-8s | %(message)s"

_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(level: str = "INFO", log_file: Path | None = None) -> logging.Logger:
    """Initialise the ``catalog`` logger once per process.

    Args:
        level: Threshold for console output.
        log_file: Optional file that receives every record at DEBUG and up.

    Returns:
        The configured ``catalog`` logger.
    """
    root_logger = logging.getLogger("catalog")
    root_logger.setLevel(logging.DEBUG)

    # Prevent duplicate handlers on repeated calls (e.g. tests)
    if root_logger.handlers:
        return root_logger

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(level.upper())
    console_handler.setFormatter(
        logging.Formatter(_CONSOLE_FORMAT, datefmt=_DATE_FORMAT)
    )
    root_logger.addHandler(console_handler)

    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(
            logging.Formatter(_DETAILED_FORMAT, datefmt=_DATE_FORMAT)
        )
        root_logger.addHandler(file_handler)

    root_logger.debug("Logging initialised (console level %s)", level.upper())
    return root_logger
