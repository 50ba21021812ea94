# topmark:header:start
#
#   project      : TokMark
#   file         : themes.py
#   file_relpath : src/tokmark/cli/commands/themes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""TokMark `themes` command.

Lists the built-in themes, or dumps one as a TOML style file that can be edited
and passed back with ``tokmark render --config``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from tokmark.cli.console import get_console
from tokmark.cli.errors import cli_error_from
from tokmark.config.io import to_toml
from tokmark.errors import ConfigError
from tokmark.themes import get_theme, theme_names

if TYPE_CHECKING:
    from tokmark.cli.console import ConsoleLike


@click.command(
    name="themes",
    help="List built-in themes, or dump one as TOML.",
)
@click.option(
    "--dump",
    "dump_name",
    type=click.Choice(theme_names()),
    default=None,
    help="Print the named theme as a TOML style file.",
)
def themes_command(*, dump_name: str | None) -> None:
    """List built-in themes or dump one as TOML.

    Args:
        dump_name (str | None): Theme to dump; lists all themes when None.
    """
    console: ConsoleLike = get_console()

    if dump_name is None:
        for name in theme_names():
            console.print(name)
        return

    try:
        console.print(to_toml(get_theme(dump_name)), nl=False)
    except ConfigError as exc:
        raise cli_error_from(exc) from exc
