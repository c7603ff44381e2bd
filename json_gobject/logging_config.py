"""Logging configuration for json-gobject.

All diagnostics go to stderr through a rich handler so that generated
code printed on stdout stays pipeable.
"""

import logging
import time
from contextlib import contextmanager
from typing import Iterator

from rich.console import Console
from rich.logging import RichHandler

ROOT_LOGGER_NAME = "json_gobject"

DEFAULT_FORMAT = "%(message)s"
DEBUG_FORMAT = "%(name)s: %(message)s"


def setup_logging(verbose: bool = False, debug: bool = False) -> logging.Logger:
    """Configure the package logger.

    Args:
        verbose: Enable INFO level output.
        debug: Enable DEBUG level output (takes precedence over verbose).

    Returns:
        The configured package logger.
    """
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    logger.handlers.clear()

    if debug:
        level = logging.DEBUG
        log_format = DEBUG_FORMAT
    elif verbose:
        level = logging.INFO
        log_format = DEFAULT_FORMAT
    else:
        level = logging.WARNING
        log_format = DEFAULT_FORMAT

    logger.setLevel(level)

    handler = RichHandler(
        console=Console(stderr=True),
        show_path=debug,
        show_time=debug,
        rich_tracebacks=True,
        markup=False,
    )
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(log_format))
    logger.addHandler(handler)
    logger.propagate = False

    return logger


def get_logger(name: str = ROOT_LOGGER_NAME) -> logging.Logger:
    """Get a logger below the package logger."""
    return logging.getLogger(name)


@contextmanager
def log_timing(operation: str, logger: logging.Logger) -> Iterator[None]:
    """Log how long the wrapped block took.

    Examples:
        >>> with log_timing("Translate schema", logger):
        ...     classes = translate_document(document, "app")
    """
    start = time.perf_counter()
    logger.debug("Starting: %s", operation)

    try:
        yield
    finally:
        elapsed_ms = (time.perf_counter() - start) * 1000
        logger.info("%s completed in %.2fms", operation, elapsed_ms)
