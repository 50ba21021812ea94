# topmark:header:start
#
#   project      : TokMark
#   file         : tokens.py
#   file_relpath : src/tokmark/tokens.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Token and comment entries consumed by the reconstruction pass.

Tokens and comments share one shape: a ``type`` (e.g. ``"Keyword"``,
``"Punctuator"``, ``"Line"``), the literal ``value`` and a half-open
``range`` of character offsets into the source text.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Final

# Comment types produced by the tokenizer adapters.
LINE_COMMENT: Final[str] = "Line"
BLOCK_COMMENT: Final[str] = "Block"


@dataclass(frozen=True)
class Token:
    """A lexical token (or comment) with its source span.

    Attributes:
        type (str): Token type name, e.g. ``"Keyword"`` or ``"Line"`` for comments.
        value (str): Literal token text as reported by the tokenizer.
        range (tuple[int, int]): Half-open ``(start, end)`` offsets into the source.
    """

    type: str
    value: str
    range: tuple[int, int]

    @property
    def start(self) -> int:
        """Offset of the first character of the token."""
        return self.range[0]

    @property
    def end(self) -> int:
        """Offset one past the last character of the token."""
        return self.range[1]

    @classmethod
    def from_obj(cls, obj: Any) -> Token:
        """Build a Token from a mapping or an attribute object.

        Third-party tokenizers expose tokens either as dicts or as lightweight
        objects; both are accepted as long as they carry ``type``, ``value`` and
        ``range``.

        Args:
            obj (Any): A `Token`, a mapping, or an object with matching attributes.

        Returns:
            Token: A frozen token.

        Raises:
            ValueError: If ``range`` is missing or is not a pair of offsets.
        """
        if isinstance(obj, Token):
            return obj
        if isinstance(obj, Mapping):
            tok_type = obj.get("type")
            value = obj.get("value")
            rng = obj.get("range")
        else:
            tok_type = getattr(obj, "type", None)
            value = getattr(obj, "value", None)
            rng = getattr(obj, "range", None)

        if rng is None or len(rng) != 2:
            raise ValueError(f"Token without a (start, end) range: {obj!r}")
        start, end = int(rng[0]), int(rng[1])
        return cls(type=str(tok_type), value="" if value is None else str(value), range=(start, end))
