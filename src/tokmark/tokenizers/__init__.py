# topmark:header:start
#
#   project      : TokMark
#   file         : __init__.py
#   file_relpath : src/tokmark/tokenizers/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tokenizer adapters turning source text into tokens and comments."""

from __future__ import annotations

from tokmark.tokenizers.base import Tokenizer, TokenStream
from tokmark.tokenizers.javascript import JavaScriptTokenizer
from tokmark.tokenizers.python import PythonTokenizer
from tokmark.tokenizers.registry import (
    DEFAULT_TOKENIZER,
    get_tokenizer,
    register_tokenizer,
    registered_tokenizers,
    tokenizer_name_for_path,
    unregister_tokenizer,
)

__all__ = [
    "DEFAULT_TOKENIZER",
    "JavaScriptTokenizer",
    "PythonTokenizer",
    "TokenStream",
    "Tokenizer",
    "get_tokenizer",
    "register_tokenizer",
    "registered_tokenizers",
    "tokenizer_name_for_path",
    "unregister_tokenizer",
]
