"""
Logging configuration for SkillVouch.

``setup_logging`` installs one console handler (and a file handler when
``ENABLE_FILE_LOGGING`` is set) on the root logger, then applies
per-module levels. Modules obtain loggers through ``get_logger(__name__)``.
"""

import logging
from pathlib import Path
from typing import Optional

from skillvouch.server.core.config import settings

LOG_FILE_NAME = "skillvouch.log"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

SIMPLE_FORMAT = "%(levelname)s - %(name)s - %(message)s"
DETAILED_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - [%(filename)s:%(lineno)d] - %(funcName)s() - %(message)s"
JSON_FORMAT = (
    '{"timestamp": "%(asctime)s", "level": "%(levelname)s", "logger": "%(name)s", '
    '"module": "%(filename)s", "line": %(lineno)d, "message": "%(message)s"}'
)

FORMATS = {
    "simple": SIMPLE_FORMAT,
    "detailed": DETAILED_FORMAT,
    "json": JSON_FORMAT,
}

# Applied after the handlers are installed; third-party entries keep
# SQL echo and connection chatter out of the console.
MODULE_LOG_LEVELS = {
    "skillvouch": "INFO",
    "skillvouch.core.database.health": "INFO",
    "skillvouch.ai": "DEBUG",
    "skillvouch.server.api": "DEBUG",
    "sqlalchemy.engine": "WARNING",
    "sqlalchemy.pool": "WARNING",
    "aiomysql": "WARNING",
    "httpx": "WARNING",
    "asyncio": "WARNING",
    "uvicorn.access": "WARNING",
}


def _file_handler(directory: str, formatter: logging.Formatter) -> logging.Handler:
    path = Path(directory)
    path.mkdir(parents=True, exist_ok=True)
    handler = logging.FileHandler(path / LOG_FILE_NAME)
    handler.setLevel(logging.DEBUG)
    handler.setFormatter(formatter)
    return handler


def setup_logging(
    log_level: Optional[str] = None,
    log_format: Optional[str] = None,
    enable_file: bool = True,
) -> None:
    """
    Configure the root logger.

    Args:
        log_level: Console level; defaults to ``SKILLVOUCH_LOG_LEVEL``
        log_format: ``simple``, ``detailed`` or ``json``; defaults to
            ``LOG_FORMAT``. Unknown names fall back to ``detailed``.
        enable_file: Allow the file handler. It is only added when
            ``ENABLE_FILE_LOGGING`` is also set.
    """
    level = (log_level or settings.log_level).upper()
    fmt = log_format or settings.log_format
    formatter = logging.Formatter(FORMATS.get(fmt, DETAILED_FORMAT), datefmt=DATE_FORMAT)

    root = logging.getLogger()
    root.setLevel(logging.DEBUG)
    for handler in list(root.handlers):
        root.removeHandler(handler)

    console = logging.StreamHandler()
    console.setLevel(level)
    console.setFormatter(formatter)
    root.addHandler(console)

    to_file = enable_file and settings.enable_file_logging
    if to_file:
        root.addHandler(_file_handler(settings.log_file_dir, formatter))

    for name, module_level in MODULE_LOG_LEVELS.items():
        logging.getLogger(name).setLevel(module_level)

    root.info(f"Logging configured: level={level}, format={fmt}, file_logging={to_file}")


def get_logger(name: str) -> logging.Logger:
    """Return the logger for ``name`` (usually ``__name__``)."""
    return logging.getLogger(name)
