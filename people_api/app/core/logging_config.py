"""
Logging configuration for the People API.

``setup_logging`` attaches a console handler (and optionally a file
handler) to the root logger and sets the level of the ``people_api``
package logger.  Handlers are attached once per process, while the
level is applied on every call, so an application created again with a
different ``LOG_LEVEL`` logs at the new level.
"""

import logging
from pathlib import Path
from typing import Optional


PACKAGE_LOGGER = "people_api"

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _has_file_handler(logger: logging.Logger, path: Path) -> bool:
    return any(
        isinstance(handler, logging.FileHandler) and Path(handler.baseFilename) == path
        for handler in logger.handlers
    )


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> int:
    """Configure logging for the application.

    Parameters
    ----------
    level : str
        Logging level name (e.g. ``"DEBUG"``, ``"INFO"``).  Case
        insensitive; unknown names fall back to ``INFO``.
    logfile : Optional[str]
        Path to a file to log messages to.  Each path gets at most one
        file handler.

    Returns
    -------
    int
        The numeric level applied to the ``people_api`` logger.
    """
    numeric_level = getattr(logging, level.upper(), logging.INFO)
    if not isinstance(numeric_level, int):
        numeric_level = logging.INFO
    logging.getLogger(PACKAGE_LOGGER).setLevel(numeric_level)

    root = logging.getLogger()
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    # A server such as uvicorn, or pytest, may already have installed
    # root handlers; only add a console handler when there are none.
    if not root.handlers:
        root.setLevel(numeric_level)
        console_handler = logging.StreamHandler()
        console_handler.setFormatter(formatter)
        root.addHandler(console_handler)

    if logfile:
        log_path = Path(logfile).resolve()
        if not _has_file_handler(root, log_path):
            file_handler = logging.FileHandler(log_path, encoding="utf-8")
            file_handler.setFormatter(formatter)
            root.addHandler(file_handler)

    return numeric_level
