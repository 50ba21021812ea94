# topmark:header:start
#
#   project      : TokMark
#   file         : python.py
#   file_relpath : src/tokmark/tokenizers/python.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Python tokenizer adapter backed by the standard library ``tokenize`` module.

``tokenize`` reports ``(row, col)`` positions; they are converted to absolute
character offsets. Token types are mapped onto the names used by the JavaScript
adapter so one style configuration can serve both languages:

| tokenize           | TokMark      |
| ------------------ | ------------ |
| NAME (keyword)     | Keyword      |
| NAME (other)       | Identifier   |
| OP                 | Punctuator   |
| NUMBER             | Numeric      |
| STRING             | String       |
| FSTRING_*          | Template     |
| COMMENT            | Line comment |

Layout tokens (NEWLINE, NL, INDENT, DEDENT, ENDMARKER) carry no text worth
decorating and are dropped.
"""

from __future__ import annotations

import ast
import io
import keyword
import tokenize
from typing import TYPE_CHECKING, Any, ClassVar, Final

from tokmark.config.logging import get_logger
from tokmark.errors import TokenizeError
from tokmark.tokenizers.base import TokenStream
from tokmark.tokens import LINE_COMMENT, Token

if TYPE_CHECKING:
    from tokmark.config.logging import TokmarkLogger

logger: TokmarkLogger = get_logger(__name__)

_TYPE_NAMES: Final[dict[str, str]] = {
    "OP": "Punctuator",
    "NUMBER": "Numeric",
    "STRING": "String",
    "FSTRING_START": "Template",
    "FSTRING_MIDDLE": "Template",
    "FSTRING_END": "Template",
    "ERRORTOKEN": "Invalid",
}

_LAYOUT: Final[frozenset[str]] = frozenset({"NEWLINE", "NL", "INDENT", "DEDENT", "ENDMARKER"})


def _line_offsets(source: str) -> list[int]:
    """Return the offset of the first character of each line (1-based rows → index row-1)."""
    offsets: list[int] = [0]
    for line in io.StringIO(source).readlines():
        offsets.append(offsets[-1] + len(line))
    return offsets


class PythonTokenizer:
    """Tokenize Python source with ``tokenize``.

    Args:
        tolerant (bool): Return the tokens read so far when the source ends inside
            an unterminated construct, instead of raising.
        parse_ast (bool): Also parse the source with ``ast`` (``None`` on syntax errors).
    """

    name: ClassVar[str] = "python"
    extensions: ClassVar[tuple[str, ...]] = (".py", ".pyi")
    description: ClassVar[str] = "Python via the tokenize module"

    def __init__(self, *, tolerant: bool = True, parse_ast: bool = True) -> None:
        self.tolerant = tolerant
        self.parse_ast = parse_ast

    def _type_for(self, tok: tokenize.TokenInfo) -> str | None:
        type_name: str = tokenize.tok_name[tok.type]
        if type_name in _LAYOUT:
            return None
        if type_name == "NAME":
            return "Keyword" if keyword.iskeyword(tok.string) else "Identifier"
        if type_name == "ERRORTOKEN" and not tok.string.strip():
            return None
        return _TYPE_NAMES.get(type_name, type_name.title())

    def tokenize(self, source: str) -> TokenStream:
        """Tokenize ``source`` and return its tokens and comments.

        Raises:
            TokenizeError: If tokenization fails and ``tolerant`` is False, or on
                inconsistent indentation.
        """
        offsets: list[int] = _line_offsets(source)
        tokens: list[Token] = []
        comments: list[Token] = []
        errors: list[str] = []

        def offset(row: int, col: int) -> int:
            return offsets[min(row - 1, len(offsets) - 1)] + col

        try:
            for tok in tokenize.generate_tokens(io.StringIO(source).readline):
                if tokenize.tok_name[tok.type] == "COMMENT":
                    comments.append(
                        Token(LINE_COMMENT, tok.string, (offset(*tok.start), offset(*tok.end)))
                    )
                    continue
                tok_type: str | None = self._type_for(tok)
                if tok_type is None:
                    continue
                tokens.append(Token(tok_type, tok.string, (offset(*tok.start), offset(*tok.end))))
        except tokenize.TokenError as exc:
            if not self.tolerant:
                raise TokenizeError(f"Cannot tokenize Python source: {exc}") from exc
            errors.append(str(exc))
            logger.warning("Recovered Python tokenize error: %s", exc)
        except SyntaxError as exc:
            raise TokenizeError(f"Cannot tokenize Python source: {exc}") from exc

        tree: Any = None
        if self.parse_ast:
            try:
                tree = ast.parse(source)
            except (SyntaxError, ValueError) as exc:
                logger.debug("No AST for Python source: %s", exc)

        logger.debug("tokenize produced %d token(s) and %d comment(s)", len(tokens), len(comments))
        return TokenStream(ast=tree, tokens=tokens, comments=comments, errors=errors)
