"""
Logging configuration shared by both services.

``setup_logging(level, logfile)`` sets the root level from a level name
(unknown names mean ``INFO``) and, the first time only, attaches a
console handler plus a file handler when ``logfile`` is given.  Later
calls just adjust the level, so repeated ``create_*_app`` calls in
tests do not stack duplicate handlers.
"""

import logging
from pathlib import Path
from typing import Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _file_handler(logfile: str) -> logging.Handler:
    log_path = Path(logfile).resolve()
    log_path.parent.mkdir(parents=True, exist_ok=True)
    return logging.FileHandler(log_path, encoding="utf-8")


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> None:
    root = logging.getLogger()
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    if root.handlers:
        return

    handlers = [logging.StreamHandler()]
    if logfile:
        handlers.append(_file_handler(logfile))

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)
    for handler in handlers:
        handler.setFormatter(formatter)
        root.addHandler(handler)
