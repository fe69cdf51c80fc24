#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2fxml/logging_utils.py
"""Logging setup for the md2fxml command line entry point.

The library itself only creates module loggers under the ``md2fxml``
namespace; handlers are attached here, and only by the CLI, so an embedding
application keeps full control of its own logging tree.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional

PACKAGE_LOGGER = "md2fxml"


def resolve_level(log_level: int | str) -> int:
    """Turn a numeric level or a level name into a logging level."""
    if isinstance(log_level, int):
        return log_level
    return getattr(logging, str(log_level).upper(), logging.WARNING)


def configure_logging(
    log_level: int | str,
    log_file: Optional[str] = None,
    trace_mode: bool = False,
) -> logging.Logger:
    """Attach console (and optionally file) handlers to the package logger.

    Parameters
    ----------
    log_level : int | str
        Numeric logging level or string name (e.g., "DEBUG").
    log_file : str, optional
        Path of a log file that receives the same records as stderr.
    trace_mode : bool, default False
        Include timestamps and logger names in every record.

    Returns
    -------
    logging.Logger
        The configured ``md2fxml`` logger.

    """
    level = resolve_level(log_level)

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.setLevel(level)
    package_logger.propagate = False
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
        handler.close()

    if trace_mode:
        formatter = logging.Formatter(
            "[%(asctime)s] [%(levelname)s] [%(name)s] %(message)s", datefmt="%Y-%m-%d %H:%M:%S"
        )
    else:
        formatter = logging.Formatter("%(levelname)s: %(message)s")

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(formatter)
    package_logger.addHandler(console_handler)

    if log_file:
        try:
            file_handler = logging.FileHandler(log_file, mode="a", encoding="utf-8")
        except OSError as exc:
            package_logger.warning("Could not create log file %s: %s", log_file, exc)
        else:
            file_handler.setFormatter(formatter)
            package_logger.addHandler(file_handler)
            package_logger.debug("Logging to file: %s", log_file)

    return package_logger
