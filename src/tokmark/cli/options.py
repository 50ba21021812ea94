# topmark:header:start
#
#   project      : TokMark
#   file         : options.py
#   file_relpath : src/tokmark/cli/options.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Common CLI options and their resolution logic.

This module centralizes reusable options (verbosity, color) so commands and the
group stay thin. The helpers here are Click-aware.
"""

from __future__ import annotations

import logging
import os
from enum import Enum
from typing import Callable, ParamSpec, TypeVar

import click

from tokmark.config.logging import TRACE_LEVEL, resolve_env_log_level

P = ParamSpec("P")
R = TypeVar("R")


class ColorMode(str, Enum):
    """User intent for colorized terminal output."""

    AUTO = "auto"
    ALWAYS = "always"
    NEVER = "never"


def resolve_color_mode(*, cli_mode: ColorMode | None, no_color: bool = False) -> bool | None:
    """Determine whether color output should be enabled.

    Args:
        cli_mode (ColorMode | None): Explicit color mode from ``--color``.
        no_color (bool): Whether ``--no-color`` was passed; forces color off.

    Returns:
        bool | None: True/False when decided, None to let Click auto-detect a terminal.

    Behavior:
        Honors ``--color``/``--no-color``, then ``FORCE_COLOR`` and ``NO_COLOR``.
    """
    if no_color or cli_mode == ColorMode.NEVER:
        return False
    if cli_mode == ColorMode.ALWAYS:
        return True
    force_color = os.getenv("FORCE_COLOR")
    if force_color and force_color != "0":
        return True
    if os.getenv("NO_COLOR") is not None:
        return False
    return None


def resolve_log_level(verbose: int, quiet: int) -> int | None:
    """Map ``-v``/``-q`` counts onto a logging level.

    Without flags, ``TOKMARK_LOG_LEVEL`` decides (None if unset). Each ``-v`` lowers
    the threshold: WARNING, INFO, DEBUG, TRACE. ``-q`` silences everything below
    CRITICAL.
    """
    if quiet:
        return logging.CRITICAL
    if not verbose:
        return resolve_env_log_level()
    levels: list[int] = [logging.WARNING, logging.INFO, logging.DEBUG, TRACE_LEVEL]
    return levels[min(verbose, len(levels)) - 1]


def common_verbose_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add -v/--verbose and -q/--quiet options to a command.

    Args:
        f: The Click command function to decorate.

    Returns:
        The decorated function with verbosity options added.
    """
    f = click.option(
        "-v",
        "--verbose",
        count=True,
        help="Increase log verbosity. Repeat up to four times for TRACE output.",
    )(f)
    f = click.option(
        "-q",
        "--quiet",
        count=True,
        help="Only log critical errors.",
    )(f)
    return f


def common_color_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add --color and --no-color options to a command.

    Args:
        f: The Click command function to decorate.

    Returns:
        The decorated function with color options added.
    """
    f = click.option(
        "--color",
        "color_mode",
        type=click.Choice([m.value for m in ColorMode]),
        default=None,
        help="Color output: auto (default), always, or never.",
    )(f)
    f = click.option(
        "--no-color",
        "no_color",
        is_flag=True,
        help="Disable color output (equivalent to --color=never).",
    )(f)
    return f
