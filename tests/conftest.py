# topmark:header:start
#
#   project      : TokMark
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Pytest configuration for the TokMark test suite.

Provides:
    - an autouse fixture that keeps TokMark logging predictable (no env override,
      records propagate to ``caplog``);
    - `scan()`, a tiny regex tokenizer producing esprima-like tokens so pipeline
      tests do not depend on a real parser;
    - `ScanTokenizer`, the same scanner packaged as a tokenizer adapter.
"""

from __future__ import annotations

import logging
import re
from typing import ClassVar, Final

import pytest

from tokmark.config.logging import LOG_LEVEL_ENV_VAR
from tokmark.tokenizers.base import TokenStream
from tokmark.tokens import BLOCK_COMMENT, LINE_COMMENT, Token

KEYWORDS: Final[frozenset[str]] = frozenset(
    {"function", "return", "var", "let", "const", "if", "else", "new", "while", "for"}
)

_SCAN_RE: Final[re.Pattern[str]] = re.compile(
    r"(?P<line>//[^\n]*)"
    r"|(?P<block>/\*.*?\*/)"
    r"|(?P<number>\d+(?:\.\d+)?)"
    r"|(?P<word>[A-Za-z_$][\w$]*)"
    r"|(?P<string>'[^'\n]*'|\"[^\"\n]*\")"
    r"|(?P<punct>[^\s\w])",
    re.S,
)


def scan(source: str) -> tuple[list[Token], list[Token]]:
    """Split ``source`` into ``(tokens, comments)`` the way esprima would type them.

    Args:
        source (str): JavaScript-like source text.

    Returns:
        tuple[list[Token], list[Token]]: Tokens and comments ordered by offset.
    """
    tokens: list[Token] = []
    comments: list[Token] = []
    for m in _SCAN_RE.finditer(source):
        kind: str | None = m.lastgroup
        text: str = m.group(0)
        span: tuple[int, int] = m.span()
        if kind == "line":
            comments.append(Token(LINE_COMMENT, text[2:], span))
        elif kind == "block":
            comments.append(Token(BLOCK_COMMENT, text[2:-2], span))
        elif kind == "number":
            tokens.append(Token("Numeric", text, span))
        elif kind == "word":
            tokens.append(Token("Keyword" if text in KEYWORDS else "Identifier", text, span))
        elif kind == "string":
            tokens.append(Token("String", text, span))
        else:
            tokens.append(Token("Punctuator", text, span))
    return tokens, comments


class ScanTokenizer:
    """Tokenizer adapter around `scan()` that records its calls."""

    name: ClassVar[str] = "scan"
    extensions: ClassVar[tuple[str, ...]] = (".scan",)
    description: ClassVar[str] = "Regex scanner used in tests"

    def __init__(self) -> None:
        self.calls: list[str] = []

    def tokenize(self, source: str) -> TokenStream:
        """Scan ``source`` and return its tokens and comments."""
        self.calls.append(source)
        tokens, comments = scan(source)
        return TokenStream(ast=None, tokens=tokens, comments=comments)


@pytest.fixture(autouse=True)
def reset_tokmark_logging(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure TokMark's log level is not forced via env and records reach ``caplog``.

    The CLI calls `setup_logging()`, which installs a stderr handler on the
    ``tokmark`` logger and disables propagation; undo that before every test.

    Args:
        monkeypatch (pytest.MonkeyPatch): Pytest monkeypatch fixture.
    """
    monkeypatch.delenv(LOG_LEVEL_ENV_VAR, raising=False)
    pkg_logger = logging.getLogger("tokmark")
    for handler in pkg_logger.handlers[:]:
        pkg_logger.removeHandler(handler)
    pkg_logger.setLevel(logging.NOTSET)
    pkg_logger.propagate = True


@pytest.fixture
def scan_tokenizer() -> ScanTokenizer:
    """Return a fresh `ScanTokenizer`."""
    return ScanTokenizer()
