# topmark:header:start
#
#   project      : TokMark
#   file         : __init__.py
#   file_relpath : src/tokmark/style/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Style configuration: model, parsing and normalization into decorators."""

from __future__ import annotations

from tokmark.style.model import (
    KEY_AFTER,
    KEY_BEFORE,
    KEY_DEFAULT,
    Callback,
    Decorator,
    Replacement,
    StringShorthand,
    StyleCallback,
    StyleNode,
    StyleVariant,
    Surround,
    parse_style,
)
from tokmark.style.normalizer import Ancestry, DecoratorLookup, TypeRule, normalize

__all__ = [
    "KEY_AFTER",
    "KEY_BEFORE",
    "KEY_DEFAULT",
    "Ancestry",
    "Callback",
    "Decorator",
    "DecoratorLookup",
    "Replacement",
    "StringShorthand",
    "StyleCallback",
    "StyleNode",
    "StyleVariant",
    "Surround",
    "TypeRule",
    "normalize",
    "parse_style",
]
