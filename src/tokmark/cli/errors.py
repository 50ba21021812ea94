# topmark:header:start
#
#   project      : TokMark
#   file         : errors.py
#   file_relpath : src/tokmark/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions for the TokMark CLI.

Usage:
    Commands raise these exceptions (or convert core errors with
    `cli_error_from()`) to signal failures with standardized messages and exit codes.

Styling:
    Exceptions prefer the project console if available (see `show()`); if no console
    is present in the Click context, they fall back to Click's default styling.
"""

from __future__ import annotations

from typing import IO, Any

import click

from tokmark.cli.exit_codes import ExitCode
from tokmark.errors import BoundsError, ConfigError, TokenizeError


class TokmarkCliError(click.ClickException):
    """Base class for all TokMark CLI errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:  # pragma: no cover - trivial
        """Return the plain error message text (colorized in `show()`)."""
        return str(getattr(self, "message", ""))

    def show(self, file: IO[Any] | None = None) -> None:  # pragma: no cover - Click prints errors
        """Display the error using the project console if available.

        Falls back to Click's default error display when no console is present.
        """
        ctx = click.get_current_context(silent=True)
        console = ctx.obj.get("console") if ctx is not None and isinstance(ctx.obj, dict) else None
        if console is not None:
            console.error(console.styled(f"Error: {self.format_message()}", fg="bright_red"))
            return
        super().show(file)


class TokmarkUsageError(TokmarkCliError):
    """Error for command-line invocation errors (invalid flags/args)."""

    exit_code = ExitCode.USAGE_ERROR


class TokmarkConfigError(TokmarkCliError):
    """Error for malformed or unreadable style configurations."""

    exit_code = ExitCode.CONFIG_ERROR


class TokmarkFileNotFoundError(TokmarkCliError):
    """Error when the input path does not exist."""

    exit_code = ExitCode.FILE_NOT_FOUND


class TokmarkIOError(TokmarkCliError):
    """Error for I/O errors reading the input."""

    exit_code = ExitCode.IO_ERROR


class TokmarkDataError(TokmarkCliError):
    """Error for input that cannot be decoded or tokenized."""

    exit_code = ExitCode.DATA_ERROR


class TokmarkSoftwareError(TokmarkCliError):
    """Error for callback contract violations during reconstruction."""

    exit_code = ExitCode.SOFTWARE_ERROR


def cli_error_from(exc: Exception) -> TokmarkCliError:
    """Map a core exception onto the matching CLI error."""
    if isinstance(exc, ConfigError):
        return TokmarkConfigError(str(exc))
    if isinstance(exc, TokenizeError):
        return TokmarkDataError(str(exc))
    if isinstance(exc, BoundsError):
        return TokmarkSoftwareError(str(exc))
    return TokmarkCliError(str(exc))
