"""Logging configuration helpers for applications using strtools.

The library only emits records through module loggers named after their
modules (``strtools.urls``, ``strtools.encoding``, ...) and never installs
handlers on import.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional

LIBRARY_LOGGER_NAME = "strtools"
_PLAIN_FORMAT = "%(levelname)s: %(message)s"
_TRACE_FORMAT = "[%(asctime)s] [%(levelname)s] [%(name)s] %(message)s"
_TRACE_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def resolve_log_level(log_level: int | str) -> int:
    """Resolve a numeric level or a case-insensitive level name, defaulting to INFO."""
    if isinstance(log_level, int):
        return log_level
    resolved = getattr(logging, str(log_level).upper(), logging.INFO)
    return resolved if isinstance(resolved, int) else logging.INFO


def _make_formatter(trace_mode: bool) -> logging.Formatter:
    if trace_mode:
        return logging.Formatter(_TRACE_FORMAT, datefmt=_TRACE_DATE_FORMAT)
    return logging.Formatter(_PLAIN_FORMAT)


def _release_handlers(target: logging.Logger) -> None:
    """Detach and close every handler on ``target`` so open log files are released."""
    for handler in list(target.handlers):
        target.removeHandler(handler)
        handler.close()


def _attach(target: logging.Logger, handler: logging.Handler, level: int, formatter: logging.Formatter) -> None:
    handler.setLevel(level)
    handler.setFormatter(formatter)
    target.addHandler(handler)


def configure_logging(
    log_level: int | str,
    log_file: Optional[str] = None,
    trace_mode: bool = False,
    library_only: bool = False,
) -> logging.Logger:
    """Install a stderr handler, and optionally a file handler, on a logger.

    Handlers left by an earlier call are closed before the new ones are
    attached, so calling this repeatedly does not pile up open files.

    Parameters
    ----------
    log_level : int | str
        Numeric logging level or level name such as ``"DEBUG"``.
    log_file : str, optional
        File that receives a copy of every record. A file that cannot be
        opened is reported as a warning and skipped.
    trace_mode : bool, default False
        Add timestamps and logger names to each record.
    library_only : bool, default False
        Configure the ``strtools`` logger and stop its records from
        propagating, instead of configuring the root logger.

    Returns
    -------
    logging.Logger
        The logger that received the handlers.

    """
    level = resolve_log_level(log_level)
    target = logging.getLogger(LIBRARY_LOGGER_NAME) if library_only else logging.getLogger()

    _release_handlers(target)
    target.setLevel(level)
    if library_only:
        target.propagate = False

    formatter = _make_formatter(trace_mode)
    _attach(target, logging.StreamHandler(sys.stderr), level, formatter)

    if not log_file:
        return target

    try:
        file_handler = logging.FileHandler(log_file, mode="a", encoding="utf-8")
    except OSError as exc:
        target.warning("Could not create log file %s: %s", log_file, exc)
        return target

    _attach(target, file_handler, level, formatter)
    target.info("Logging to file: %s", log_file)
    return target
