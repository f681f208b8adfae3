"""Logging configuration for the fastafrag package.

This module provides a centralized logging configuration that allows users
to control output verbosity through environment variables or programmatic
configuration. It also owns the diagnostic sink, a separate logger that
records sequences skipped during fragmentation.

Example:
    Set logging level via environment variable::

        export FASTAFRAG_LOG_LEVEL=DEBUG

    Or configure programmatically::

        from fastafrag.logging_config import setup_logging
        setup_logging(level="DEBUG")
"""

import logging
import os
import sys
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, Optional


# Default log format
DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
SIMPLE_FORMAT = "%(levelname)s: %(message)s"
DIAGNOSTIC_FORMAT = "%(message)s"

# Package logger
logger = logging.getLogger("fastafrag")

# Skipped-sequence sink; silent unless diagnostic_log() attaches a file
diagnostic_logger = logging.getLogger("fastafrag.diagnostics")
diagnostic_logger.addHandler(logging.NullHandler())
diagnostic_logger.setLevel(logging.INFO)
diagnostic_logger.propagate = False


def setup_logging(
    level: Optional[str] = None,
    format_string: Optional[str] = None,
    stream: Optional[object] = None,
) -> logging.Logger:
    """Configure logging for the fastafrag package.

    This function sets up the root logger for the fastafrag package. It can
    be called multiple times to reconfigure logging.

    Args:
        level: Logging level as string (DEBUG, INFO, WARNING, ERROR, CRITICAL).
            If not provided, uses FASTAFRAG_LOG_LEVEL environment variable,
            defaulting to INFO.
        format_string: Custom format string for log messages. If not provided,
            uses a simple format for INFO level and detailed format otherwise.
        stream: Output stream for logs. Defaults to sys.stderr.

    Returns:
        The configured logger instance for the fastafrag package.
    """
    # Resolve log level
    if level is None:
        level = os.getenv("FASTAFRAG_LOG_LEVEL", "INFO")
    level = level.upper()

    numeric_level = getattr(logging, level, logging.INFO)

    # Choose format based on level
    if format_string is None:
        format_string = SIMPLE_FORMAT if numeric_level >= logging.INFO else DEFAULT_FORMAT

    logger.setLevel(numeric_level)

    # Remove existing handlers to avoid duplicates
    logger.handlers.clear()

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setLevel(numeric_level)
    handler.setFormatter(logging.Formatter(format_string))

    logger.addHandler(handler)

    # Prevent propagation to root logger
    logger.propagate = False

    return logger


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Get a logger instance for use within the fastafrag package.

    Args:
        name: Optional sub-logger name. If provided, returns a child logger
            of the main fastafrag logger (e.g., 'fastafrag.fragment').

    Returns:
        A logging.Logger instance configured for the fastafrag package.
    """
    if name:
        return logging.getLogger(f"fastafrag.{name}")
    return logger


def get_diagnostic_logger() -> logging.Logger:
    """Return the logger that receives skipped-sequence entries."""
    return diagnostic_logger


@contextmanager
def diagnostic_log(path: Optional[Path]) -> Iterator[logging.Logger]:
    """Route diagnostic entries to ``path`` for the duration of the block.

    The file is created (truncated) on entry and closed on every exit path.
    When ``path`` is None nothing is attached and entries are dropped.

    Args:
        path: Destination of the diagnostic log, or None.

    Yields:
        The diagnostic logger.

    Raises:
        OSError: If the log file cannot be created.

    Example:
        >>> with diagnostic_log(Path("skipped.log")) as diag:
        ...     diag.info(">seq1\\nSkipped because sequence is too short\\n")
    """
    if path is None:
        yield diagnostic_logger
        return

    handler = logging.FileHandler(path, mode="w", encoding="utf-8")
    handler.setFormatter(logging.Formatter(DIAGNOSTIC_FORMAT))
    diagnostic_logger.addHandler(handler)
    try:
        yield diagnostic_logger
    finally:
        diagnostic_logger.removeHandler(handler)
        handler.close()


# Initialize logging with defaults on module import
setup_logging()
