# topmark:header:start
#
#   project      : TokMark
#   file         : merger.py
#   file_relpath : src/tokmark/pipeline/merger.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Merge token and comment streams into one offset-ordered sequence."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from tokmark.config.logging import get_logger
from tokmark.tokens import Token

if TYPE_CHECKING:
    from collections.abc import Iterable

    from tokmark.config.logging import TokmarkLogger

logger: TokmarkLogger = get_logger(__name__)


def merge(tokens: Iterable[Any], comments: Iterable[Any] = ()) -> list[Token]:
    """Merge tokens and comments into a single sequence ordered by start offset.

    Entries are keyed by their start offset; the last entry written for an offset
    wins. Comments are written after tokens, so a comment replaces a token that
    starts at the same offset.

    Args:
        tokens (Iterable[Any]): Tokens (``Token`` instances, mappings or attribute objects).
        comments (Iterable[Any]): Comments, same shape as tokens.

    Returns:
        list[Token]: Entries sorted by ``start``.
    """
    by_start: dict[int, Token] = {}
    for entry in (*tokens, *comments):
        token: Token = Token.from_obj(entry)
        replaced: Token | None = by_start.get(token.start)
        if replaced is not None:
            logger.debug(
                "Entry %r at offset %d replaced by %r", replaced.value, token.start, token.value
            )
        by_start[token.start] = token

    return [by_start[start] for start in sorted(by_start)]
