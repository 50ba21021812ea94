# topmark:header:start
#
#   project      : TokMark
#   file         : normalizer.py
#   file_relpath : src/tokmark/style/normalizer.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Normalize raw style configurations into a decorator lookup.

Normalization runs in two passes over the parsed style tree:

1. **Objectize**: string shorthands become [`StyleNode`][tokmark.style.model.StyleNode]
   leaves, and missing ``_before``/``_after`` values are resolved from the nearest
   ancestor ``_default`` node, then from the root ``_default`` node. Ancestor
   defaults travel down the traversal as an immutable
   [`Ancestry`][tokmark.style.normalizer.Ancestry] record; a node's ``_default`` is
   resolved before its siblings so they can inherit from it.
2. **Functionize**: resolved leaves become [`Surround`][tokmark.style.model.Surround]
   decorators; callbacks are kept as custom decorators.

The caller's configuration is never mutated, so one raw config may be normalized
repeatedly or concurrently.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING, Any

from tokmark.config.logging import get_logger
from tokmark.errors import ConfigError
from tokmark.style.model import (
    KEY_DEFAULT,
    Callback,
    StringShorthand,
    StyleNode,
    Surround,
    parse_style,
)

if TYPE_CHECKING:
    from tokmark.config.logging import TokmarkLogger
    from tokmark.style.model import Decorator, StyleVariant
    from tokmark.tokens import Token

logger: TokmarkLogger = get_logger(__name__)


@dataclass(frozen=True)
class Ancestry:
    """Resolved ``_default`` decorators visible from a node.

    Attributes:
        parent_default (Surround | None): Resolved ``_default`` of the immediate parent.
        root_default (Surround | None): Resolved ``_default`` of the config root.
    """

    parent_default: Surround | None = None
    root_default: Surround | None = None

    def resolve(self, attr: str) -> str:
        """Return the inherited value of ``attr`` (``"before"`` or ``"after"``)."""
        for source in (self.parent_default, self.root_default):
            if source is not None and getattr(source, attr):
                return getattr(source, attr)
        return ""

    def child(self, parent_default: Surround | None) -> Ancestry:
        """Return the ancestry seen by the children of a node."""
        return Ancestry(parent_default=parent_default, root_default=self.root_default)


@dataclass(frozen=True)
class TypeRule:
    """Decorators for all tokens of one type.

    Attributes:
        by_value (Mapping[str, Decorator]): Decorators keyed by exact token value.
        fallback (Decorator | None): Decorator used when no value entry matches.
    """

    by_value: Mapping[str, Decorator] = field(default_factory=lambda: MappingProxyType({}))
    fallback: Decorator | None = None

    def select(self, value: str) -> Decorator | None:
        """Return the decorator for a token value, or None if undecorated."""
        return self.by_value.get(value, self.fallback)


class DecoratorLookup(Mapping[str, TypeRule]):
    """Read-only mapping from token type to its [`TypeRule`][tokmark.style.normalizer.TypeRule]."""

    def __init__(self, rules: Mapping[str, TypeRule] | None = None) -> None:
        self._rules: Mapping[str, TypeRule] = MappingProxyType(dict(rules or {}))

    def __getitem__(self, key: str) -> TypeRule:
        return self._rules[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._rules)

    def __len__(self) -> int:
        return len(self._rules)

    def __repr__(self) -> str:
        return f"DecoratorLookup({dict(self._rules)!r})"

    def decorator_for(self, token: Token) -> Decorator | None:
        """Return the decorator for ``token``, or None if its type is not configured."""
        rule: TypeRule | None = self._rules.get(token.type)
        if rule is None:
            return None
        return rule.select(token.value)


def _objectize(variant: StyleVariant, path: tuple[str, ...]) -> StyleNode | Callback:
    """Turn a shorthand into a leaf node; other variants pass through."""
    if isinstance(variant, StringShorthand):
        before, after = variant.split(path)
        return StyleNode(before=before, after=after, leaf=True)
    return variant


def _resolve(node: StyleNode, ancestry: Ancestry) -> Surround:
    return Surround(
        before=node.before or ancestry.resolve("before"),
        after=node.after or ancestry.resolve("after"),
    )


def _warn_ignored_children(node: StyleNode, path: tuple[str, ...]) -> None:
    ignored: list[str] = list(node.children)
    if node.default is not None:
        ignored.insert(0, KEY_DEFAULT)
    if ignored:
        logger.warning(
            "Ignoring child keys %s of leaf style node %s",
            ", ".join(ignored),
            ".".join(path),
        )


def _resolve_default(
    variant: StyleVariant | None,
    ancestry: Ancestry,
    path: tuple[str, ...],
) -> tuple[Decorator | None, Surround | None]:
    """Resolve a ``_default`` node.

    A ``_default`` never inherits from itself: only the root default feeds it.

    Returns:
        tuple[Decorator | None, Surround | None]: The decorator applied to
            unmatched tokens, and the surround children inherit from (None for
            callbacks).
    """
    if variant is None:
        return None, None
    node = _objectize(variant, path)
    if isinstance(node, Callback):
        return node.func, None
    _warn_ignored_children(node, path)
    resolved: Surround = _resolve(node, Ancestry(root_default=ancestry.root_default))
    return resolved, resolved


def _functionize_value(
    variant: StyleVariant,
    ancestry: Ancestry,
    path: tuple[str, ...],
) -> Decorator | None:
    node = _objectize(variant, path)
    if isinstance(node, Callback):
        return node.func
    if not node.is_leaf:
        # Value-level groups decorate nothing; lookups fall back to the type's _default.
        logger.debug("Style node %s has no _before/_after; skipped", ".".join(path))
        return None
    _warn_ignored_children(node, path)
    return _resolve(node, ancestry)


def _build_type_rule(
    type_name: str,
    variant: StyleVariant,
    ancestry: Ancestry,
) -> TypeRule | None:
    path: tuple[str, ...] = (type_name,)
    node = _objectize(variant, path)

    if isinstance(node, Callback):
        return TypeRule(fallback=node.func)

    if node.is_leaf:
        _warn_ignored_children(node, path)
        return TypeRule(fallback=_resolve(node, ancestry))

    fallback, inherited = _resolve_default(node.default, ancestry, (*path, KEY_DEFAULT))
    child_ancestry: Ancestry = ancestry.child(inherited)

    by_value: dict[str, Decorator] = {}
    for value, child in node.children.items():
        decorator = _functionize_value(child, child_ancestry, (*path, value))
        if decorator is not None:
            by_value[value] = decorator

    if fallback is None and not by_value:
        return None
    return TypeRule(by_value=MappingProxyType(by_value), fallback=fallback)


def normalize(config: Any) -> DecoratorLookup:
    """Normalize a raw style configuration into a [`DecoratorLookup`][tokmark.style.normalizer.DecoratorLookup].

    Either the whole tree normalizes or ``ConfigError`` is raised; nothing is
    applied partially and the input is left untouched.

    Args:
        config (Any): A nested style mapping, or an already normalized lookup
            (returned unchanged).

    Returns:
        DecoratorLookup: Decorators keyed by token type.

    Raises:
        ConfigError: If the configuration is malformed.
    """
    if isinstance(config, DecoratorLookup):
        return config
    if not isinstance(config, Mapping):
        raise ConfigError(
            f"Style configuration must be a mapping, got {type(config).__name__}",
            value=config,
        )

    root = parse_style(config)
    assert isinstance(root, StyleNode)

    _, root_default = _resolve_default(root.default, Ancestry(), (KEY_DEFAULT,))
    ancestry = Ancestry(parent_default=root_default, root_default=root_default)

    rules: dict[str, TypeRule] = {}
    for type_name, variant in root.children.items():
        rule: TypeRule | None = _build_type_rule(type_name, variant, ancestry)
        if rule is None:
            logger.debug("Token type %s has no decorators", type_name)
            continue
        logger.trace(
            "Token type %s: %d value decorator(s), fallback=%r",
            type_name,
            len(rule.by_value),
            rule.fallback,
        )
        rules[type_name] = rule

    logger.debug("Normalized style configuration for %d token type(s)", len(rules))
    return DecoratorLookup(rules)
