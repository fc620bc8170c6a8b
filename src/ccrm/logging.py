"""Logging setup for CCRM.

All components log through children of the ``ccrm`` logger. Where the log
file lives and how verbose it is both come from the ``AppConfig`` the CLI
builds at startup; this module reads no environment variables itself.
"""

from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ccrm.config import AppConfig

ROOT_LOGGER = "ccrm"
LOG_FILE = "ccrm.log"
MAX_BYTES = 1024 * 1024  # 1MB
BACKUP_COUNT = 3

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _reset_handlers(logger: logging.Logger) -> None:
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()


def setup_logging(
    config: AppConfig,
    console: bool = False,
    verbose: bool = False,
    max_bytes: int = MAX_BYTES,
    backup_count: int = BACKUP_COUNT,
) -> logging.Logger:
    """Attach a rotating file handler (and optionally a console one) to ``ccrm``.

    Calling this again replaces the previous handlers, so a new config takes
    effect without duplicating output.

    Args:
        config: Supplies ``log_dir`` and ``log_level``.
        console: Also echo records to stderr.
        verbose: Force DEBUG regardless of ``config.log_level``.
        max_bytes: Size at which the log file rotates.
        backup_count: Rotated files to keep.

    Returns:
        The ``ccrm`` logger.
    """
    level_name = "DEBUG" if verbose else config.log_level
    level = logging.getLevelName(level_name.upper())
    if not isinstance(level, int):
        level = logging.INFO

    config.log_dir.mkdir(parents=True, exist_ok=True)
    log_path = config.log_dir / LOG_FILE

    logger = logging.getLogger(ROOT_LOGGER)
    logger.setLevel(level)
    _reset_handlers(logger)

    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)
    handlers: list[logging.Handler] = [
        RotatingFileHandler(
            log_path, maxBytes=max_bytes, backupCount=backup_count, encoding="utf-8"
        )
    ]
    if console:
        handlers.append(logging.StreamHandler())

    for handler in handlers:
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    logger.debug("Logging to %s at %s", log_path, logging.getLevelName(level))
    return logger


def get_logger(name: str) -> logging.Logger:
    """Return ``ccrm.<name>``; names already under ``ccrm`` pass through."""
    if name != ROOT_LOGGER and not name.startswith(f"{ROOT_LOGGER}."):
        name = f"{ROOT_LOGGER}.{name}"
    return logging.getLogger(name)
