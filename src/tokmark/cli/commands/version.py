# topmark:header:start
#
#   project      : TokMark
#   file         : version.py
#   file_relpath : src/tokmark/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""TokMark `version` command.

Prints the current TokMark version as installed in the active Python environment.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

import click

from tokmark.cli.console import get_console
from tokmark.constants import TOKMARK_VERSION

if TYPE_CHECKING:
    from tokmark.cli.console import ConsoleLike


@click.command(
    name="version",
    help="Show the current version of TokMark.",
)
@click.option(
    "--json",
    "as_json",
    is_flag=True,
    default=False,
    help="Print the version as a JSON object.",
)
def version_command(*, as_json: bool = False) -> None:
    """Show the current version of TokMark.

    Args:
        as_json (bool): Print ``{"version": ...}`` instead of plain text.
    """
    console: ConsoleLike = get_console()
    if as_json:
        console.print(json.dumps({"version": TOKMARK_VERSION}))
    else:
        console.print(TOKMARK_VERSION)
