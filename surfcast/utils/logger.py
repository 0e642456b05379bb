"""Logging configuration for the surfcast project."""

import logging
import os
from pathlib import Path

import colorlog

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
LOG_COLORS = {
    "DEBUG": "cyan",
    "INFO": "green",
    "WARNING": "yellow",
    "ERROR": "red",
    "CRITICAL": "red,bg_white",
}

# Environment variable that overrides the console level, e.g. "DEBUG"
LOG_LEVEL_ENV = "SURFCAST_LOG_LEVEL"


def _console_handler(level: int) -> logging.Handler:
    handler = logging.StreamHandler()
    handler.setLevel(level)
    handler.setFormatter(
        colorlog.ColoredFormatter(
            f"%(log_color)s{LOG_FORMAT}", datefmt=DATE_FORMAT, log_colors=LOG_COLORS
        )
    )
    return handler


def _file_handler(log_file: Path, level: int) -> logging.Handler:
    log_file.parent.mkdir(parents=True, exist_ok=True)
    handler = logging.FileHandler(log_file)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    return handler


def _env_console_level(default: int) -> int:
    name = os.environ.get(LOG_LEVEL_ENV, "").upper()
    level = logging.getLevelName(name) if name else default
    return level if isinstance(level, int) else default


def setup_logger(
    name: str,
    log_file: Path | None = None,
    console_level: int = logging.INFO,
    file_level: int = logging.DEBUG,
) -> logging.Logger:
    """Return a logger with a colored console handler and optional log file.

    Handlers are only attached the first time a name is seen. The console
    level can be raised or lowered with the SURFCAST_LOG_LEVEL env var.

    Args:
        name: Logger name, usually the calling module's __name__.
        log_file: File to also write records to. Parent dirs are created.
        console_level: Console level when SURFCAST_LOG_LEVEL is unset.
        file_level: Level for the log file.

    Returns:
        Configured logger instance.
    """
    logger = logging.getLogger(name)
    if logger.handlers:
        return logger

    # Handlers do the filtering
    logger.setLevel(logging.DEBUG)
    logger.addHandler(_console_handler(_env_console_level(console_level)))

    if log_file is not None:
        logger.addHandler(_file_handler(log_file, file_level))
        logger.debug(f"Writing surfcast logs to {log_file}")

    return logger
