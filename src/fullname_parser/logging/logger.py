"""
Logging setup for the full name parser.

Everything goes through ``get_logger``:

* one ``fullname_parser`` base logger owns the console handler and, when
  ``logging.to_file`` is set in ``config/fullname_parser.yml``, the master
  log file (``logs/fullname_parser.log`` by default)
* module loggers are children of it; with file logging on each one also
  writes ``logs/<module>.log``
* ``logging.rotate`` swaps plain files for size-capped rotating ones
* ``debug: true`` in the config, or ``set_debug()``, drops every level to DEBUG
"""

from __future__ import annotations

import logging
from logging import Logger, StreamHandler
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Dict, List, Optional

from fullname_parser.config import get_config

PROJECT_ROOT = Path(__file__).resolve().parents[3]
BASE_LOGGER_NAME = "fullname_parser"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

ROTATE_MAX_BYTES = 5 * 1024 * 1024
ROTATE_BACKUPS = 5


class _Settings:
    """The ``logging`` config section, read once."""

    def __init__(self, section: dict, debug: bool):
        self.to_file = bool(section.get("to_file", False))
        self.rotate = bool(section.get("rotate", False))
        self.master_file = section.get("file") or "fullname_parser.log"
        self.log_dir = Path(section.get("dir") or "logs")
        if not self.log_dir.is_absolute():
            self.log_dir = PROJECT_ROOT / self.log_dir

        configured = getattr(logging, str(section.get("level", "INFO")).upper(), logging.INFO)
        self.level = logging.DEBUG if debug else configured


_settings: Optional[_Settings] = None
_loggers: Dict[str, Logger] = {}


def _formatter() -> logging.Formatter:
    return logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)


def _file_handler(filename: str) -> logging.Handler:
    _settings.log_dir.mkdir(parents=True, exist_ok=True)
    path = _settings.log_dir / filename

    if _settings.rotate:
        handler: logging.Handler = RotatingFileHandler(
            path, maxBytes=ROTATE_MAX_BYTES, backupCount=ROTATE_BACKUPS, encoding="utf-8"
        )
    else:
        handler = logging.FileHandler(path, encoding="utf-8")

    handler.setLevel(_settings.level)
    handler.setFormatter(_formatter())
    return handler


def _base_logger() -> Logger:
    global _settings

    base = logging.getLogger(BASE_LOGGER_NAME)
    if _settings is not None:
        return base

    cfg = get_config()
    _settings = _Settings(cfg.logging, bool(getattr(cfg, "debug", False)))

    base.setLevel(_settings.level)
    base.propagate = False

    console = StreamHandler()
    console.setLevel(_settings.level)
    console.setFormatter(_formatter())
    base.addHandler(console)

    if _settings.to_file:
        base.addHandler(_file_handler(_settings.master_file))

    _loggers[BASE_LOGGER_NAME] = base
    return base


def get_logger(name: Optional[str] = None) -> Logger:
    """
    Logger under the ``fullname_parser`` hierarchy.

    ``get_logger(__name__)`` and ``get_logger("main")`` both work; names
    outside the package are prefixed with it.
    """
    base = _base_logger()
    full_name = name or BASE_LOGGER_NAME
    if full_name != BASE_LOGGER_NAME and not full_name.startswith(BASE_LOGGER_NAME + "."):
        full_name = f"{BASE_LOGGER_NAME}.{full_name}"

    if full_name in _loggers:
        return _loggers[full_name]

    logger = logging.getLogger(full_name)
    logger.setLevel(base.level)
    if _settings.to_file:
        logger.addHandler(_file_handler(f"{full_name.replace('.', '_')}.log"))

    _loggers[full_name] = logger
    return logger


def set_debug(enabled: bool = True) -> None:
    """Move every logger and handler created so far to DEBUG (or back to INFO)."""
    base = _base_logger()
    level = logging.DEBUG if enabled else logging.INFO
    _settings.level = level

    for handler in base.handlers:
        handler.setLevel(level)
    for logger in _loggers.values():
        logger.setLevel(level)
        for handler in logger.handlers:
            handler.setLevel(level)


def list_active_loggers() -> List[str]:
    """Names handed out by get_logger, for checking configuration in tests."""
    return sorted(_loggers)
