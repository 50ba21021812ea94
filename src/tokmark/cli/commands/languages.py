# topmark:header:start
#
#   project      : TokMark
#   file         : languages.py
#   file_relpath : src/tokmark/cli/commands/languages.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""TokMark `languages` command: list registered tokenizers and their extensions."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from tokmark.cli.console import get_console
from tokmark.tokenizers.registry import registered_tokenizers

if TYPE_CHECKING:
    from tokmark.cli.console import ConsoleLike


@click.command(
    name="languages",
    help="List the registered tokenizers and the file extensions they handle.",
)
def languages_command() -> None:
    """List registered tokenizers."""
    console: ConsoleLike = get_console()
    for name, cls in sorted(registered_tokenizers().items()):
        extensions: str = ", ".join(cls.extensions) or "-"
        console.print(f"{console.styled(name, bold=True)}: {extensions}  ({cls.description})")
