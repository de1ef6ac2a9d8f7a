"""Logging configuration for liteconn."""

import logging
import logging.handlers
import sys
from pathlib import Path

import colorlog

from .config import Settings, settings
from .types import Environment

BASE_LOG_FORMAT = (
    "%(asctime)s %(levelname)8s %(message)s (%(name)s@%(filename)s:%(lineno)d)"
)
COLOR_LOG_FORMAT = (
    "%(asctime)s %(log_color)s%(levelname)8s%(reset)s %(message)s "
    "\033[90m(%(name)s@%(filename)s:%(lineno)d)\033[0m"
)
DATE_FORMAT = "%m-%d %H:%M:%S"


def setup_logging(
    app_settings: Settings | None = None,
    level: int | str | None = None,
    use_colors: bool = True,
    log_dir: Path | None = None,
) -> None:
    """Configure logging from the driver settings.

    The console always gets a handler. Production also writes a rotating
    ``liteconn.log`` and testing overwrites ``test/test.log``; development
    logs to the console only.

    Args:
        app_settings: Settings to use (defaults to the global settings)
        level: Overrides ``log_level`` from the settings
        use_colors: Whether to use colored console output
        log_dir: Directory for log files (defaults to ./logs)
    """
    app_settings = app_settings or settings
    log_dir = log_dir or Path("logs")

    handlers = [_create_console_handler(use_colors)]
    if app_settings.is_production:
        handlers.append(_create_rotating_handler(log_dir))
    elif app_settings.is_testing:
        handlers.append(_create_test_handler(log_dir / "test"))

    logging.basicConfig(
        level=level if level is not None else app_settings.log_level,
        handlers=handlers,
        force=True,
    )


def _create_console_handler(use_colors: bool) -> logging.Handler:
    console_handler = logging.StreamHandler(sys.stdout)

    if use_colors:
        console_handler.setFormatter(
            colorlog.ColoredFormatter(
                COLOR_LOG_FORMAT,
                datefmt=DATE_FORMAT,
                log_colors={
                    "DEBUG": "cyan",
                    "INFO": "green",
                    "WARNING": "yellow",
                    "ERROR": "red",
                    "CRITICAL": "red,bg_white",
                },
            )
        )
    else:
        console_handler.setFormatter(
            logging.Formatter(BASE_LOG_FORMAT, datefmt=DATE_FORMAT)
        )
    return console_handler


def _create_rotating_handler(log_dir: Path) -> logging.Handler:
    log_dir.mkdir(parents=True, exist_ok=True)
    handler = logging.handlers.RotatingFileHandler(
        log_dir / "liteconn.log",
        maxBytes=5 * 1024 * 1024,  # 5MB
        backupCount=4,
        encoding="utf-8",
    )
    handler.setFormatter(logging.Formatter(BASE_LOG_FORMAT, datefmt=DATE_FORMAT))
    return handler


def _create_test_handler(log_dir: Path) -> logging.Handler:
    log_dir.mkdir(parents=True, exist_ok=True)
    handler = logging.FileHandler(log_dir / "test.log", mode="w")
    handler.setFormatter(logging.Formatter(BASE_LOG_FORMAT, datefmt=DATE_FORMAT))
    return handler


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance.

    Args:
        name: Logger name (typically __name__)
    """
    return logging.getLogger(name)


def setup_test_logging() -> None:
    """Setup debug logging for tests with an overwritten log file."""
    setup_logging(Settings(environment=Environment.TESTING))
