# topmark:header:start
#
#   project      : TokMark
#   file         : api.py
#   file_relpath : src/tokmark/api.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Public API: decorate source text in one call.

Example:
    ```python
    from tokmark import decorate

    result = decorate(
        "function foo() { return 1; }",
        {"Keyword": {"_before": "[", "_after": "]"}},
    )
    assert result.code == "[function] foo() { [return] 1; }"
    ```

The style configuration is normalized before the source is tokenized, so a
malformed configuration fails without any text being processed.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from tokmark.config.logging import get_logger
from tokmark.pipeline.assembler import assemble
from tokmark.pipeline.merger import merge
from tokmark.pipeline.reconstructor import reconstruct
from tokmark.style.normalizer import normalize
from tokmark.tokenizers.registry import DEFAULT_TOKENIZER, get_tokenizer

if TYPE_CHECKING:
    from tokmark.config.logging import TokmarkLogger
    from tokmark.pipeline.reconstructor import Fragment
    from tokmark.style.normalizer import DecoratorLookup
    from tokmark.tokenizers.base import Tokenizer, TokenStream
    from tokmark.tokens import Token

logger: TokmarkLogger = get_logger(__name__)


@dataclass(frozen=True)
class DecorationResult:
    """Result of [`decorate`][tokmark.api.decorate].

    Attributes:
        ast (Any): Syntax tree from the tokenizer (pass-through).
        tokens (list[Token]): Tokens from the tokenizer (pass-through).
        comments (list[Token]): Comments from the tokenizer (pass-through).
        fragments (list[Fragment]): Output fragments in source order.
        code (str | None): Assembled text; None when assembly was suppressed.
        errors (list[str]): Syntax errors the tokenizer recovered from.
    """

    ast: Any
    tokens: list[Token]
    comments: list[Token]
    fragments: list[Fragment]
    code: str | None
    errors: list[str]


def _resolve_tokenizer(tokenizer: str | Tokenizer | None) -> Tokenizer:
    if tokenizer is None:
        return get_tokenizer(DEFAULT_TOKENIZER)
    if isinstance(tokenizer, str):
        return get_tokenizer(tokenizer)
    return tokenizer


def decorate(
    source: str,
    config: Any,
    *,
    tokenizer: str | Tokenizer | None = None,
    nojoin: bool = False,
) -> DecorationResult:
    """Decorate the tokens and comments of ``source`` according to ``config``.

    Args:
        source (str): Source text.
        config (Any): Raw style configuration (nested mapping) or a normalized
            [`DecoratorLookup`][tokmark.style.normalizer.DecoratorLookup].
        tokenizer (str | Tokenizer | None): Registered tokenizer name or adapter
            instance; defaults to ``"javascript"``.
        nojoin (bool): If True, skip assembly and leave ``code`` as None.

    Returns:
        DecorationResult: Tokenizer output, fragments and decorated code.

    Raises:
        ConfigError: If ``config`` is malformed (raised before tokenizing).
        TokenizeError: If the tokenizer cannot process ``source``.
        BoundsError: If a callback skips outside of the token sequence.
        KeyError: If ``tokenizer`` names an unknown adapter.
    """
    lookup: DecoratorLookup = normalize(config)
    adapter: Tokenizer = _resolve_tokenizer(tokenizer)

    stream: TokenStream = adapter.tokenize(source)
    entries: list[Token] = merge(stream.tokens, stream.comments)
    logger.debug("Decorating %d entries with %s", len(entries), adapter.name)

    fragments: list[Fragment] = reconstruct(source, entries, lookup)
    code: str | None = None if nojoin else assemble(fragments)

    return DecorationResult(
        ast=stream.ast,
        tokens=stream.tokens,
        comments=stream.comments,
        fragments=fragments,
        code=code,
        errors=stream.errors,
    )
