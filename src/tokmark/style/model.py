# topmark:header:start
#
#   project      : TokMark
#   file         : model.py
#   file_relpath : src/tokmark/style/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Style configuration model.

A raw style configuration is a nested mapping whose values are one of:

- a **string shorthand** ``"before:after"`` (either side may be empty);
- a **mapping** with optional ``_before``/``_after`` strings, an optional
  ``_default`` child and named children keyed by token type or token value;
- a **callback** ``(text, index, entries) -> str | Replacement``.

[`parse_style`][tokmark.style.model.parse_style] turns raw values into the tagged
variants [`StringShorthand`][tokmark.style.model.StringShorthand],
[`StyleNode`][tokmark.style.model.StyleNode] and
[`Callback`][tokmark.style.model.Callback]. Parsing never mutates the caller's
data.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING, Any, Final, Union

from tokmark.errors import ConfigError

if TYPE_CHECKING:
    from tokmark.tokens import Token

KEY_BEFORE: Final[str] = "_before"
KEY_AFTER: Final[str] = "_after"
KEY_DEFAULT: Final[str] = "_default"

RESERVED_KEYS: Final[frozenset[str]] = frozenset({KEY_BEFORE, KEY_AFTER, KEY_DEFAULT})

SHORTHAND_SEPARATOR: Final[str] = ":"


@dataclass(frozen=True)
class Replacement:
    """Structured callback result replacing a run of entries.

    Attributes:
        replacement (str): Text emitted in place of the consumed entries.
        skip (int): Number of entries consumed *after* the triggering entry
            (``0`` replaces the triggering entry only).
    """

    replacement: str
    skip: int = 0


# (matched_text, index_in_sequence, full_sequence) -> str | Replacement | {"replacement", "skip"}
StyleCallback = Callable[
    [str, int, "Sequence[Token]"], Union[str, Replacement, Mapping[str, Any]]
]


@dataclass(frozen=True)
class Surround:
    """Decorator wrapping a text slice with fixed ``before``/``after`` strings."""

    before: str = ""
    after: str = ""

    def __call__(self, text: str) -> str:
        """Return ``before + text + after``."""
        return f"{self.before}{text}{self.after}"


Decorator = Union[Surround, StyleCallback]


@dataclass(frozen=True)
class StringShorthand:
    """A ``"before:after"`` style string, not yet split."""

    text: str

    def split(self, path: tuple[str, ...] = ()) -> tuple[str | None, str | None]:
        """Split the shorthand on its single ``:`` separator.

        ``"<<"`` and ``"<<:"`` set ``before`` only; ``":>>"`` sets ``after`` only.

        Args:
            path (tuple[str, ...]): Config path of the node, used in error messages.

        Returns:
            tuple[str | None, str | None]: ``(before, after)``; empty sides are None.

        Raises:
            ConfigError: If the shorthand is empty or has more than one separator.
        """
        if not self.text:
            raise ConfigError(
                'Illegal string config: empty string. Should be of format "before:after"',
                value=self.text,
                path=path,
            )
        if self.text.count(SHORTHAND_SEPARATOR) > 1:
            raise ConfigError(
                f'Illegal string config: {self.text!r}. Should be of format "before:after"',
                value=self.text,
                path=path,
            )
        before, _, after = self.text.partition(SHORTHAND_SEPARATOR)
        return (before or None, after or None)


@dataclass(frozen=True)
class StyleNode:
    """A mapping node of the style tree.

    Attributes:
        before (str | None): Own ``_before`` value; None (or empty) inherits.
        after (str | None): Own ``_after`` value; None (or empty) inherits.
        default (StyleVariant | None): The ``_default`` child, if any.
        children (Mapping[str, StyleVariant]): Named children (token types at the
            top level, token values one level down).
        leaf (bool): True when the node was produced from a string shorthand; such
            nodes decorate even if both sides are empty (fully inherited).
    """

    before: str | None = None
    after: str | None = None
    default: StyleVariant | None = None
    children: Mapping[str, StyleVariant] = field(default_factory=lambda: MappingProxyType({}))
    leaf: bool = False

    @property
    def is_leaf(self) -> bool:
        """Return True if this node decorates text rather than grouping children."""
        return self.leaf or bool(self.before) or bool(self.after)


@dataclass(frozen=True)
class Callback:
    """A user callback used instead of plain wrapping."""

    func: StyleCallback


StyleVariant = Union[StringShorthand, StyleNode, Callback]


def _attr(raw: Mapping[str, Any], key: str, path: tuple[str, ...]) -> str | None:
    value = raw.get(key)
    if value is None or isinstance(value, str):
        return value
    raise ConfigError(
        f"{key} must be a string, got {type(value).__name__}: {value!r}",
        value=value,
        path=(*path, key),
    )


def parse_style(raw: Any, path: tuple[str, ...] = ()) -> StyleVariant:
    """Convert a raw configuration value into a tagged style variant.

    Args:
        raw (Any): A string, mapping, callable or already-parsed variant.
        path (tuple[str, ...]): Key path of ``raw`` in the config tree.

    Returns:
        StyleVariant: The parsed node. Mappings are parsed recursively.

    Raises:
        ConfigError: If ``raw`` (or any nested value) is neither string, mapping,
            nor callable, or if ``_before``/``_after`` are not strings.
    """
    if isinstance(raw, (StringShorthand, StyleNode, Callback)):
        return raw
    if isinstance(raw, str):
        return StringShorthand(raw)
    if isinstance(raw, Surround):
        return StyleNode(before=raw.before, after=raw.after, leaf=True)
    if isinstance(raw, Mapping):
        default = raw.get(KEY_DEFAULT)
        children: dict[str, StyleVariant] = {
            str(key): parse_style(value, (*path, str(key)))
            for key, value in raw.items()
            if key not in RESERVED_KEYS
        }
        return StyleNode(
            before=_attr(raw, KEY_BEFORE, path),
            after=_attr(raw, KEY_AFTER, path),
            default=None if default is None else parse_style(default, (*path, KEY_DEFAULT)),
            children=MappingProxyType(children),
        )
    if callable(raw):
        return Callback(raw)
    raise ConfigError(
        f"Nodes need to be either str, mapping or callable. {raw!r} is neither.",
        value=raw,
        path=path,
    )
