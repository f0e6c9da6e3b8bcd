"""
Logging configuration for the Movies API.

``setup_logging`` attaches a console handler, and a file handler when
``LOG_FILE`` is set, to the root logger.  Handlers are named so that a
repeated call (tests build several apps in one process) recognises its
own handlers instead of bailing out on any handler it finds, such as
those installed by pytest or uvicorn.
"""

import logging
from pathlib import Path
from typing import Optional

from .config import settings

CONSOLE_HANDLER_NAME = "movies_api.console"
FILE_HANDLER_NAME = "movies_api.file"

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(level: Optional[str] = None, logfile: Optional[str] = None) -> None:
    """Configure the root logger for the service.

    Parameters
    ----------
    level : Optional[str]
        Logging level name, case insensitive.  Defaults to
        ``settings.log_level``; unknown names fall back to ``INFO``.
    logfile : Optional[str]
        Path of a log file.  Defaults to ``settings.log_file``; no file
        handler is added when both are empty.
    """
    root = logging.getLogger()
    level = level or settings.log_level
    root.setLevel(getattr(logging, level.upper(), logging.INFO))

    installed = {handler.name for handler in root.handlers}
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    if CONSOLE_HANDLER_NAME not in installed:
        console_handler = logging.StreamHandler()
        console_handler.set_name(CONSOLE_HANDLER_NAME)
        console_handler.setFormatter(formatter)
        root.addHandler(console_handler)

    logfile = logfile or settings.log_file
    if logfile and FILE_HANDLER_NAME not in installed:
        file_handler = logging.FileHandler(Path(logfile).resolve(), encoding="utf-8")
        file_handler.set_name(FILE_HANDLER_NAME)
        file_handler.setFormatter(formatter)
        root.addHandler(file_handler)
