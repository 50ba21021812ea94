# topmark:header:start
#
#   project      : TokMark
#   file         : __init__.py
#   file_relpath : src/tokmark/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""TokMark package.

TokMark decorates the tokens and comments of a source text according to a
hierarchically-inheriting style configuration. Each selected token is wrapped
with ``before``/``after`` strings or replaced by a callback, which makes it a
small core for syntax highlighters and token-level rewriting tools.
"""

from __future__ import annotations

from tokmark.api import DecorationResult, decorate
from tokmark.errors import BoundsError, ConfigError, TokenizeError, TokmarkError
from tokmark.pipeline import Fragment, assemble, merge, reconstruct
from tokmark.style import DecoratorLookup, Replacement, Surround, normalize
from tokmark.tokens import Token

__all__ = [
    "BoundsError",
    "ConfigError",
    "DecorationResult",
    "DecoratorLookup",
    "Fragment",
    "Replacement",
    "Surround",
    "Token",
    "TokenizeError",
    "TokmarkError",
    "assemble",
    "decorate",
    "merge",
    "normalize",
    "reconstruct",
]
