# topmark:header:start
#
#   project      : TokMark
#   file         : javascript.py
#   file_relpath : src/tokmark/tokenizers/javascript.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""JavaScript tokenizer adapter backed by ``esprima``.

Token types are esprima's (``Keyword``, ``Identifier``, ``Punctuator``,
``String``, ``Numeric``, ``Boolean``, ``Null``, ``Template``,
``RegularExpression``); comments are typed ``Line`` or ``Block``.

A leading shebang line (``#!/usr/bin/env node``) is blanked with spaces before
parsing: offsets keep matching the original text and the shebang itself is
emitted verbatim by the reconstructor.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, Any, ClassVar, Final

import esprima
from esprima.error_handler import Error as EsprimaError

from tokmark.config.logging import get_logger
from tokmark.errors import TokenizeError
from tokmark.tokenizers.base import TokenStream
from tokmark.tokens import BLOCK_COMMENT, LINE_COMMENT, Token

if TYPE_CHECKING:
    from tokmark.config.logging import TokmarkLogger

logger: TokmarkLogger = get_logger(__name__)

SHEBANG_RE: Final[re.Pattern[str]] = re.compile(r"^#!.*")

_COMMENT_TYPES: Final[dict[str, str]] = {
    "Line": LINE_COMMENT,
    "LineComment": LINE_COMMENT,
    "Block": BLOCK_COMMENT,
    "BlockComment": BLOCK_COMMENT,
}


def blank_shebang(source: str) -> str:
    """Replace a leading shebang line with spaces of the same length."""
    return SHEBANG_RE.sub(lambda m: " " * len(m.group(0)), source, count=1)


def _comment(obj: Any) -> Token:
    token: Token = Token.from_obj(obj)
    return Token(
        type=_COMMENT_TYPES.get(token.type, token.type),
        value=token.value,
        range=token.range,
    )


class JavaScriptTokenizer:
    """Tokenize JavaScript (ES2017 scripts or modules) with esprima.

    Args:
        module (bool): Parse as an ES module instead of a script.
        tolerant (bool): Let esprima recover from minor syntax errors.
    """

    name: ClassVar[str] = "javascript"
    extensions: ClassVar[tuple[str, ...]] = (".js", ".mjs", ".cjs")
    description: ClassVar[str] = "JavaScript via esprima"

    def __init__(self, *, module: bool = False, tolerant: bool = True) -> None:
        self.module = module
        self.tolerant = tolerant

    def tokenize(self, source: str) -> TokenStream:
        """Parse ``source`` and return its tokens and comments.

        Raises:
            TokenizeError: If esprima cannot parse the source.
        """
        options: dict[str, Any] = {
            "tokens": True,
            "comment": True,
            "range": True,
            "tolerant": self.tolerant,
        }
        parse = esprima.parseModule if self.module else esprima.parseScript
        try:
            ast = parse(blank_shebang(source), options)
        except EsprimaError as exc:
            raise TokenizeError(f"Cannot tokenize JavaScript source: {exc}") from exc

        tokens: list[Token] = [Token.from_obj(t) for t in (ast.tokens or [])]
        comments: list[Token] = [_comment(c) for c in (ast.comments or [])]
        errors: list[str] = [str(e) for e in (getattr(ast, "errors", None) or [])]
        for error in errors:
            logger.warning("Recovered JavaScript syntax error: %s", error)

        logger.debug("esprima produced %d token(s) and %d comment(s)", len(tokens), len(comments))
        return TokenStream(ast=ast, tokens=tokens, comments=comments, errors=errors)
