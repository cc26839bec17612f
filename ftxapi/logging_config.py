"""
Handler setup for applications built on the client.

The library only ever logs through ``logging.getLogger("ftxapi")`` and its
children and never attaches handlers itself.  ``setup_logging`` is what
``cli.py`` calls: request traces go to a rotating file, while the console
only shows what an operator needs to see.
"""

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional, Union

LOGGER_NAME = "ftxapi"
LOG_FILE_NAME = "ftxapi.log"

FILE_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s.%(funcName)s:%(lineno)d | %(message)s"
CONSOLE_FORMAT = "%(levelname)-8s | %(message)s"

_ROTATE_AT = 5 * 1024 * 1024
_KEEP = 5


def _file_handler(path: Path, level: int) -> logging.Handler:
    handler = RotatingFileHandler(path, maxBytes=_ROTATE_AT, backupCount=_KEEP, encoding="utf-8")
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(FILE_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
    return handler


def _console_handler(level: int) -> logging.Handler:
    handler = logging.StreamHandler()
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(CONSOLE_FORMAT))
    return handler


def setup_logging(
    log_level: int = logging.DEBUG,
    log_dir: Optional[Union[str, Path]] = None,
    console_level: int = logging.INFO,
) -> logging.Logger:
    """
    Attach file and console handlers to the ``ftxapi`` logger and return it.

    Parameters
    ----------
    log_level : int
        Threshold of the rotating file handler and of the logger itself.
    log_dir : str or Path, optional
        Directory for ``ftxapi.log``; ``./logs`` when omitted.
    console_level : int
        Threshold of the console handler.

    Calling this again returns the logger untouched, so handlers are never
    duplicated.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(min(log_level, console_level))
    if logger.handlers:
        return logger

    directory = Path(log_dir) if log_dir is not None else Path.cwd() / "logs"
    directory.mkdir(parents=True, exist_ok=True)
    log_path = directory / LOG_FILE_NAME

    logger.addHandler(_file_handler(log_path, log_level))
    logger.addHandler(_console_handler(console_level))
    logger.debug("Writing request traces to %s", log_path)
    return logger
