# topmark:header:start
#
#   project      : TokMark
#   file         : render.py
#   file_relpath : src/tokmark/cli/commands/render.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""TokMark `render` command.

Decorates one source file (or stdin) and prints the result.

Style resolution:
    1. ``--theme`` selects a built-in theme (default: ``ansi`` unless ``--config``
       is given).
    2. ``--config`` loads a TOML style file (or the ``[tool.tokmark.style]``
       table of a ``pyproject.toml``); when combined with ``--theme`` it is
       layered on top of the theme.

Language resolution:
    ``--language``, else the input file extension, else ``javascript``.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import TYPE_CHECKING, Any

import click

from tokmark.api import decorate
from tokmark.cli.console import get_console
from tokmark.cli.errors import (
    TokmarkDataError,
    TokmarkFileNotFoundError,
    TokmarkIOError,
    TokmarkUsageError,
    cli_error_from,
)
from tokmark.config.io import load_style_file
from tokmark.config.logging import get_logger
from tokmark.constants import DEFAULT_ENCODING, STDIN_MARKER
from tokmark.errors import TokmarkError
from tokmark.themes import extend_style, get_theme, theme_names
from tokmark.tokenizers.registry import (
    DEFAULT_TOKENIZER,
    registered_tokenizers,
    tokenizer_name_for_path,
)

if TYPE_CHECKING:
    from tokmark.api import DecorationResult
    from tokmark.cli.console import ConsoleLike

logger = get_logger(__name__)

DEFAULT_THEME: str = "ansi"


def read_source(path: Path) -> str:
    """Read the source text from ``path`` or from stdin for ``-``.

    Bytes are decoded without newline translation so CRLF sources are
    decorated and printed with their line endings intact.

    Raises:
        TokmarkFileNotFoundError: If the file does not exist.
        TokmarkDataError: If the input is not valid UTF-8.
        TokmarkIOError: For other read errors.
    """
    try:
        if str(path) == STDIN_MARKER:
            data: bytes = click.get_binary_stream("stdin").read()
        else:
            data = path.read_bytes()
    except FileNotFoundError as exc:
        raise TokmarkFileNotFoundError(f"No such file: {path}") from exc
    except OSError as exc:
        raise TokmarkIOError(f"Cannot read {path}: {exc}") from exc

    try:
        return data.decode(DEFAULT_ENCODING)
    except UnicodeDecodeError as exc:
        raise TokmarkDataError(f"Cannot decode {path} as {DEFAULT_ENCODING}: {exc}") from exc


def resolve_style(
    theme: str | None,
    config_path: Path | None,
    *,
    color: bool | None = None,
) -> dict[str, Any]:
    """Build the raw style configuration from a theme and/or a style file.

    ``color`` is the resolved ``--color`` decision; the ``ansi`` theme emits its
    escape codes (or none) accordingly instead of probing stdout itself.
    """
    if config_path is None:
        return get_theme(theme or DEFAULT_THEME, color=color)

    style: dict[str, Any] = load_style_file(config_path)
    if theme is not None:
        style = extend_style(get_theme(theme, color=color), style)
    return style


def resolve_language(language: str | None, path: Path) -> str:
    """Return the tokenizer name for ``path`` unless ``language`` is explicit."""
    if language:
        return language
    if str(path) != STDIN_MARKER:
        detected: str | None = tokenizer_name_for_path(path)
        if detected is not None:
            return detected
        logger.info("No tokenizer registered for %s; using %s", path.name, DEFAULT_TOKENIZER)
    return DEFAULT_TOKENIZER


def emit_result(console: ConsoleLike, result: DecorationResult, *, fragments: bool) -> None:
    """Print the decorated code, or one JSON object per fragment."""
    if fragments:
        for fragment in result.fragments:
            console.print(json.dumps(fragment.to_dict(), ensure_ascii=False))
        return
    console.print(result.code or "", nl=False)


@click.command(
    name="render",
    help="Decorate the tokens of PATH (or stdin) and print the result.",
)
@click.argument(
    "path",
    required=False,
    default=STDIN_MARKER,
    type=click.Path(dir_okay=False, allow_dash=True, path_type=Path),
)
@click.option(
    "--language",
    "-l",
    type=click.Choice(sorted(registered_tokenizers()), case_sensitive=False),
    default=None,
    help="Tokenizer to use (default: from the file extension, else javascript).",
)
@click.option(
    "--theme",
    "-t",
    type=click.Choice(theme_names()),
    default=None,
    help=f"Built-in theme ({', '.join(theme_names())}). Default: {DEFAULT_THEME}.",
)
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="TOML style file (or pyproject.toml with [tool.tokmark.style]).",
)
@click.option(
    "--fragments",
    is_flag=True,
    default=False,
    help="Print fragments as JSON lines instead of the joined text.",
)
@click.pass_context
def render_command(
    ctx: click.Context,
    *,
    path: Path,
    language: str | None,
    theme: str | None,
    config_path: Path | None,
    fragments: bool,
) -> None:
    """Decorate a source file and print the result.

    Args:
        ctx (click.Context): Current Click context (color decision, console).
        path (Path): Input file, or ``-`` for stdin.
        language (str | None): Explicit tokenizer name.
        theme (str | None): Built-in theme name.
        config_path (Path | None): TOML style file.
        fragments (bool): Print fragments as JSON lines.
    """
    console: ConsoleLike = get_console(ctx)
    obj: dict[str, Any] = ctx.obj if isinstance(ctx.obj, dict) else {}
    color: bool | None = obj.get("color_enabled")

    if config_path is not None and not config_path.exists():
        raise TokmarkUsageError(f"Style file not found: {config_path}")

    try:
        style: dict[str, Any] = resolve_style(theme, config_path, color=color)
        source: str = read_source(path)
        result: DecorationResult = decorate(
            source,
            style,
            tokenizer=resolve_language(language, path),
            nojoin=fragments,
        )
    except TokmarkError as exc:
        logger.debug("render failed: %s", exc)
        raise cli_error_from(exc) from exc

    for error in result.errors:
        console.warn(f"Warning: recovered from syntax error: {error}")

    emit_result(console, result, fragments=fragments)
