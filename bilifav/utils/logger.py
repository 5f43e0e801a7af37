"""Logging setup shared by every bilifav module.

All loggers write to stdout and to one dated file per log directory
(``bilifav_YYYYMMDD.log``). The file is opened once and shared.
"""

import logging
import sys
from datetime import date
from pathlib import Path

from bilifav.settings import settings

_FORMATTER = logging.Formatter(
    "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
    "%H:%M:%S",
)
_LOGGERS_CACHE: dict[str, logging.Logger] = {}
_FILE_HANDLERS: dict[Path, logging.FileHandler] = {}


def setup_logger(
    name: str,
    level: int | None = None,
    log_dir: Path | None = None,
) -> logging.Logger:
    """Return the logger for name, configuring it on first use.

    Args:
        name: Logger name (e.g., 'clients.favorites').
        level: Logging level. If None, uses LOG_LEVEL.
        log_dir: Directory of the shared log file. If None, uses LOG_DIR.

    Returns:
        Configured logger instance. Later calls with the same name
        return it unchanged.
    """
    if name in _LOGGERS_CACHE:
        return _LOGGERS_CACHE[name]

    logger = logging.getLogger(name)
    logger.setLevel(settings.logging.numeric_level if level is None else level)
    logger.handlers.clear()
    logger.propagate = False

    console = logging.StreamHandler(sys.stdout)
    console.setFormatter(_FORMATTER)
    logger.addHandler(console)

    file_handler = _shared_file_handler(Path(log_dir or settings.logging.log_dir))
    if file_handler:
        logger.addHandler(file_handler)

    _LOGGERS_CACHE[name] = logger
    return logger


def log_file_path(log_dir: Path, day: date | None = None) -> Path:
    """Dated log file inside log_dir."""
    return log_dir / f"bilifav_{(day or date.today()):%Y%m%d}.log"


def _shared_file_handler(log_dir: Path) -> logging.FileHandler | None:
    """File handler for log_dir, created once; None if it cannot be opened."""
    if log_dir in _FILE_HANDLERS:
        return _FILE_HANDLERS[log_dir]

    try:
        log_dir.mkdir(parents=True, exist_ok=True)
        handler = logging.FileHandler(log_file_path(log_dir), encoding="utf-8")
    except OSError as e:
        print(f"Warning: Could not create log file: {e}", file=sys.stderr)
        return None

    handler.setFormatter(_FORMATTER)
    _FILE_HANDLERS[log_dir] = handler
    return handler
