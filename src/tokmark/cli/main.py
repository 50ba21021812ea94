# topmark:header:start
#
#   project      : TokMark
#   file         : main.py
#   file_relpath : src/tokmark/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""TokMark CLI entry point.

Group-level options (verbosity, color) are initialized once and placed into
``ctx.obj`` together with the console; subcommands read them from there.
"""

from __future__ import annotations

import click

from tokmark.cli.commands.languages import languages_command
from tokmark.cli.commands.render import render_command
from tokmark.cli.commands.themes import themes_command
from tokmark.cli.commands.version import version_command
from tokmark.cli.console import ClickConsole
from tokmark.cli.options import (
    ColorMode,
    common_color_options,
    common_verbose_options,
    resolve_color_mode,
    resolve_log_level,
)
from tokmark.config.logging import get_logger, setup_logging

logger = get_logger(__name__)


def init_common_state(
    ctx: click.Context,
    *,
    verbose: int,
    quiet: int,
    color_mode: ColorMode | None,
    no_color: bool,
) -> None:
    """Initialize shared state (logging & color) on the Click context.

    Args:
        ctx (click.Context): Current Click context; will have ``obj`` and ``color`` set.
        verbose (int): Count of ``-v`` flags.
        quiet (int): Count of ``-q`` flags.
        color_mode (ColorMode | None): Explicit color mode from ``--color`` (or ``None``).
        no_color (bool): Whether ``--no-color`` was passed; forces color off.
    """
    ctx.obj = ctx.obj or {}

    log_level: int | None = resolve_log_level(verbose, quiet)
    ctx.obj["log_level"] = log_level
    setup_logging(level=log_level)

    enable_color: bool | None = resolve_color_mode(cli_mode=color_mode, no_color=no_color)
    ctx.obj["color_enabled"] = enable_color
    ctx.color = enable_color

    ctx.obj["console"] = ClickConsole(enable_color=enable_color)


@click.group(
    cls=click.Group,
    context_settings={"help_option_names": ["-h", "--help"]},
    invoke_without_command=True,
    help="TokMark: decorate source tokens with a style configuration.",
)
@common_verbose_options
@common_color_options
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: int,
    quiet: int,
    color_mode: ColorMode | None,
    no_color: bool,
) -> None:
    """Entry point for the TokMark CLI."""
    init_common_state(
        ctx,
        verbose=verbose,
        quiet=quiet,
        color_mode=color_mode,
        no_color=no_color,
    )

    if ctx.invoked_subcommand is None:
        console = ctx.obj["console"]
        console.print("Hint: use 'tokmark render [PATH]' to decorate a source file.")
        console.print()
        console.print(ctx.get_help())


cli.add_command(render_command)

cli.add_command(themes_command)

cli.add_command(languages_command)

cli.add_command(version_command)

if __name__ == "__main__":
    cli()
