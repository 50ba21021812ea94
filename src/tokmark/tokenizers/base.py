# topmark:header:start
#
#   project      : TokMark
#   file         : base.py
#   file_relpath : src/tokmark/tokenizers/base.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tokenizer adapter contract.

A tokenizer adapter wraps a real lexer and exposes its output in the shape the
pipeline consumes: ordered tokens and ordered comments, each carrying ``type``,
``value`` and a half-open character ``range`` into the source text.

Adapters are expected to be *tolerant*: when the lexer can recover from a syntax
error, the best-effort token stream is returned. Unrecoverable input raises
[`TokenizeError`][tokmark.errors.TokenizeError].
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, ClassVar, Protocol, runtime_checkable

if TYPE_CHECKING:
    from tokmark.tokens import Token


@dataclass(frozen=True)
class TokenStream:
    """Tokenizer output.

    Attributes:
        ast (Any): Syntax tree produced alongside the tokens (adapter specific,
            None when unavailable).
        tokens (list[Token]): Code tokens ordered by start offset.
        comments (list[Token]): Comments ordered by start offset.
        errors (list[str]): Recovered syntax errors reported by the lexer.
    """

    ast: Any
    tokens: list[Token]
    comments: list[Token]
    errors: list[str] = field(default_factory=list)


@runtime_checkable
class Tokenizer(Protocol):
    """Protocol for tokenizer adapters."""

    name: ClassVar[str]
    extensions: ClassVar[tuple[str, ...]]
    description: ClassVar[str]

    def tokenize(self, source: str) -> TokenStream:
        """Tokenize ``source``.

        Args:
            source (str): Source text.

        Returns:
            TokenStream: Tokens and comments with ranges into ``source``.
        """
        ...
