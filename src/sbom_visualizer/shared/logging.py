"""
Logging utilities for SBOM visualizer.

Every module logs through ``logging.getLogger(__name__)``; all of them hang
off the ``sbom_visualizer`` logger configured here.
"""

import logging
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler

LOGGER_NAME = "sbom_visualizer"
PLAIN_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
PLAIN_DATEFMT = "%Y-%m-%d %H:%M:%S"


def resolve_log_level(verbose: bool = False, quiet: bool = False) -> str:
    """Map the global CLI flags onto a logging level name (quiet wins)."""
    if quiet:
        return "WARNING"
    if verbose:
        return "DEBUG"
    return "INFO"


def _plain_formatter() -> logging.Formatter:
    return logging.Formatter(fmt=PLAIN_FORMAT, datefmt=PLAIN_DATEFMT)


def _console_handler(use_rich: bool) -> logging.Handler:
    if not use_rich:
        handler = logging.StreamHandler()
        handler.setFormatter(_plain_formatter())
        return handler

    handler = RichHandler(
        console=Console(stderr=True), show_time=True, show_path=False, markup=True
    )
    handler.setFormatter(logging.Formatter(fmt="%(message)s", datefmt="[%X]"))
    return handler


def setup_logging(
    level: str = "INFO", log_file: Path | None = None, use_rich: bool = True
) -> logging.Logger:
    """Configure the package logger.

    Calling this again replaces the previously installed handlers.

    Args:
        level: Logging level name (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Optional file that receives a plain-text copy of the log
        use_rich: Render console output with RichHandler

    Returns:
        The configured ``sbom_visualizer`` logger
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(getattr(logging, level.upper()))

    for handler in logger.handlers[:]:
        logger.removeHandler(handler)
        handler.close()

    logger.addHandler(_console_handler(use_rich))

    if log_file:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setFormatter(_plain_formatter())
        logger.addHandler(file_handler)

    return logger


def get_logger(name: str = LOGGER_NAME) -> logging.Logger:
    """Get a logger under the package namespace (defaults to the package logger)."""
    return logging.getLogger(name)
