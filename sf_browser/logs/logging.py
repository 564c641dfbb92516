"""Logging helpers shared across the browser."""
from __future__ import annotations

import logging
from pathlib import Path

ROOT_LOGGER_NAME = "sf_browser"
LOG_FILENAME = "sf_browser.log"
_LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def _root_logger() -> logging.Logger:
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    if not logger.handlers:
        logger.addHandler(logging.NullHandler())
        logger.setLevel(logging.INFO)
        logger.propagate = False
    return logger


def get_logger(name: str = ROOT_LOGGER_NAME) -> logging.Logger:
    """
    Return a logger in the ``sf_browser`` family.

    Until :func:`enable_file_logging` is called the family only has a
    ``NullHandler``, so nothing is written anywhere.
    """
    _root_logger()
    if name != ROOT_LOGGER_NAME and not name.startswith(ROOT_LOGGER_NAME + "."):
        name = f"{ROOT_LOGGER_NAME}.{name}"
    return logging.getLogger(name)


def enable_file_logging(log_dir: Path, filename: str = LOG_FILENAME, level: int = logging.INFO) -> Path:
    """Attach a file handler to the ``sf_browser`` logger family and return the log path."""
    logger = _root_logger()
    log_dir.mkdir(parents=True, exist_ok=True)
    path = log_dir / filename
    for handler in logger.handlers:
        if isinstance(handler, logging.FileHandler) and Path(handler.baseFilename).resolve() == path.resolve():
            return path
    handler = logging.FileHandler(path, encoding="utf-8")
    handler.setFormatter(logging.Formatter(_LOG_FORMAT))
    logger.addHandler(handler)
    logger.setLevel(level)
    return path


EXPORT_LOGGER = get_logger("sf_browser.export")
UI_LOGGER = get_logger("sf_browser.ui")


__all__ = ["get_logger", "enable_file_logging", "EXPORT_LOGGER", "UI_LOGGER"]
