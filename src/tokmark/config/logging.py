# topmark:header:start
#
#   project      : TokMark
#   file         : logging.py
#   file_relpath : src/tokmark/config/logging.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Custom TokMark logging with TRACE logging.

This module extends the standard logging module with a TRACE level below DEBUG,
a logger class exposing ``trace()``, and a chalk-colored formatter.

Log records are written to **stderr**: stdout is reserved for decorated source
text, which callers commonly pipe into other tools.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import TYPE_CHECKING, Final, cast

from yachalk import chalk

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping

TRACE_LEVEL: Final[int] = logging.DEBUG - 5

LOG_LEVEL_ENV_VAR: Final[str] = "TOKMARK_LOG_LEVEL"


class TokmarkLogger(logging.Logger):
    """Logger class for TokMark with support for a TRACE log level below DEBUG."""

    def trace(
        self,
        msg: object,
        *args: object,
        extra: Mapping[str, object] | None = None,
    ) -> None:
        """Log 'msg % args' with severity 'TRACE'.

        Args:
            msg (object): The message to be logged.
            *args (object): Variable length argument list for the message.
            extra (Mapping[str, object] | None): Optional dictionary of extra information to pass
                to the logger.
        """
        if self.isEnabledFor(TRACE_LEVEL):
            self._log(
                TRACE_LEVEL,
                msg=msg,
                args=args,
                extra=extra,
                stacklevel=2,
            )


if not hasattr(logging, "TRACE"):
    logging.addLevelName(TRACE_LEVEL, "TRACE")
    logging.TRACE = TRACE_LEVEL  # type: ignore

logging.setLoggerClass(TokmarkLogger)


LOG_FORMAT = "[%(levelname)s] %(message)s"
DEBUG_LOG_FORMAT = "[%(levelname)s] [%(name)s:%(lineno)d] %(message)s"

_LEVEL_NAMES: Final[dict[str, int]] = {
    "TRACE": TRACE_LEVEL,
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "WARN": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
    "FATAL": logging.CRITICAL,
    "NOTSET": logging.NOTSET,
}


class ChalkFormatter(logging.Formatter):
    """Formatter that colors log records with chalk based on severity level."""

    def _colorizer(self, level: int) -> Callable[[str], str]:
        if level >= logging.CRITICAL:
            return chalk.red_bright
        if level >= logging.ERROR:
            return chalk.red
        if level >= logging.WARNING:
            return chalk.yellow
        if level >= logging.INFO:
            return chalk.green
        if level >= logging.DEBUG:
            return chalk.gray
        if level >= TRACE_LEVEL:
            return chalk.blue
        return chalk.dim.red

    def format(self, record: logging.LogRecord) -> str:
        """Format the specified record with colors based on log level.

        Args:
            record (logging.LogRecord): The LogRecord to be formatted.

        Returns:
            str: The colorized formatted log message.
        """
        return self._colorizer(record.levelno)(super().format(record))


def parse_log_level(value: str | None) -> int | None:
    """Return a logging level for a level name or number, or None if unknown.

    Args:
        value (str | None): Level name (``"TRACE"``, ``"debug"``...) or a numeric string.

    Returns:
        int | None: The numeric level, or None if ``value`` is empty or unknown.
    """
    if not value:
        return None
    v = value.strip().upper()
    if v.isdigit():
        return int(v)
    return _LEVEL_NAMES.get(v)


def resolve_env_log_level() -> int | None:
    """Return a logging level from ``TOKMARK_LOG_LEVEL`` or None if unset."""
    return parse_log_level(os.environ.get(LOG_LEVEL_ENV_VAR))


def setup_logging(level: int | None = None) -> None:
    """Configure the ``tokmark`` logger with a level and colored stderr output.

    If ``level`` is None, ``TOKMARK_LOG_LEVEL`` is consulted via
    [`resolve_env_log_level`][tokmark.config.logging.resolve_env_log_level].
    Default is CRITICAL when unspecified.

    Only the package logger is configured so embedding applications keep control
    over the root logger.
    """
    if level is None:
        level = resolve_env_log_level()
    if level is None:
        level = logging.CRITICAL

    pkg_logger = logging.getLogger("tokmark")
    pkg_logger.setLevel(level)

    # Remove existing handlers to prevent duplicate log messages on re-setup
    for handler in pkg_logger.handlers[:]:
        pkg_logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    formatter = ChalkFormatter(LOG_FORMAT if level >= logging.INFO else DEBUG_LOG_FORMAT)
    handler.setFormatter(formatter)
    pkg_logger.addHandler(handler)
    pkg_logger.propagate = False


def get_logger(name: str) -> TokmarkLogger:
    """Retrieve a TokmarkLogger instance with the specified name.

    Args:
        name (str): The name of the logger.

    Returns:
        TokmarkLogger: A TokmarkLogger instance.
    """
    return cast("TokmarkLogger", logging.getLogger(name))
