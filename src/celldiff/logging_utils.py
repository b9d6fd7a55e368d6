#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/celldiff/logging_utils.py
"""Logging setup for the celldiff command line tool.

Library modules only create module loggers under the ``celldiff`` namespace
and never install handlers. The CLI calls :func:`configure_logging` once per
run, which attaches a console handler (and optionally a log file) to the
``celldiff`` package logger. Records still propagate, so a host application
or pytest's ``caplog`` keeps seeing them.

Handlers installed here are tagged. Calling :func:`configure_logging` again
replaces them and leaves every other handler alone.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional

PACKAGE_LOGGER_NAME = "celldiff"

CONSOLE_FORMAT = "%(levelname)s: %(message)s"
TRACE_FORMAT = "[%(asctime)s] [%(levelname)s] [%(name)s:%(lineno)d] %(message)s"
TRACE_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_HANDLER_TAG = "_celldiff_handler"


def _resolve_level(log_level: int | str) -> int:
    """Turn a level name or number into a number, defaulting to INFO."""
    if isinstance(log_level, int):
        return log_level
    level = logging.getLevelName(str(log_level).upper())
    return level if isinstance(level, int) else logging.INFO


def _trace_formatter() -> logging.Formatter:
    return logging.Formatter(TRACE_FORMAT, datefmt=TRACE_DATE_FORMAT)


def _install(logger: logging.Logger, handler: logging.Handler, level: int, formatter: logging.Formatter) -> None:
    setattr(handler, _HANDLER_TAG, True)
    handler.setLevel(level)
    handler.setFormatter(formatter)
    logger.addHandler(handler)


def remove_installed_handlers(logger: Optional[logging.Logger] = None) -> None:
    """Detach and close the handlers added by :func:`configure_logging`.

    Parameters
    ----------
    logger : logging.Logger, optional
        Logger to clean up (defaults to the ``celldiff`` package logger)

    """
    logger = logger or logging.getLogger(PACKAGE_LOGGER_NAME)
    for handler in list(logger.handlers):
        if getattr(handler, _HANDLER_TAG, False):
            logger.removeHandler(handler)
            handler.close()


def configure_logging(
    log_level: int | str,
    log_file: Optional[str] = None,
    trace_mode: bool = False,
) -> logging.Logger:
    """Send celldiff log records to stderr and, optionally, a file.

    Parameters
    ----------
    log_level : int | str
        Console level as a number or a name such as ``"INFO"``. Unknown
        names fall back to INFO.
    log_file : str, optional
        File that also receives log records (appended to). The file always
        gets timestamps and logger names. A path that cannot be opened is
        reported as a warning and the console handler is kept.
    trace_mode : bool, default False
        Use the timestamped format on the console too, and write DEBUG
        records to ``log_file`` whatever the console level is.

    Returns
    -------
    logging.Logger
        The ``celldiff`` package logger

    """
    console_level = _resolve_level(log_level)
    file_level = logging.DEBUG if trace_mode else console_level

    package_logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    remove_installed_handlers(package_logger)
    package_logger.setLevel(console_level)

    console_formatter = _trace_formatter() if trace_mode else logging.Formatter(CONSOLE_FORMAT)
    _install(package_logger, logging.StreamHandler(sys.stderr), console_level, console_formatter)

    if log_file:
        try:
            file_handler = logging.FileHandler(log_file, mode="a", encoding="utf-8")
        except OSError as exc:
            package_logger.warning("Could not open log file %s: %s", log_file, exc)
        else:
            _install(package_logger, file_handler, file_level, _trace_formatter())
            package_logger.setLevel(min(console_level, file_level))
            package_logger.debug("Logging to file %s at level %s", log_file, logging.getLevelName(file_level))

    return package_logger
