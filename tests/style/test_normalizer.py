# topmark:header:start
#
#   project      : TokMark
#   file         : test_normalizer.py
#   file_relpath : tests/style/test_normalizer.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for style normalization and before/after inheritance."""

from __future__ import annotations

import copy
import logging
from typing import Any

import pytest

from tokmark.errors import ConfigError
from tokmark.style.model import Surround
from tokmark.style.normalizer import DecoratorLookup, normalize
from tokmark.tokens import Token


def kw(value: str) -> Token:
    """Return a Keyword token (range is irrelevant for lookups)."""
    return Token("Keyword", value, (0, len(value)))


def test_empty_config_has_no_rules() -> None:
    """An empty configuration decorates nothing."""
    lookup = normalize({})
    assert len(lookup) == 0
    assert lookup.decorator_for(kw("function")) is None


def test_type_default_applies_to_every_value() -> None:
    """A type-level _default wraps every token of that type."""
    lookup = normalize({"Keyword": {"_default": {"_before": "<", "_after": ">"}}})
    assert lookup.decorator_for(kw("function")) == Surround("<", ">")
    assert lookup.decorator_for(kw("return")) == Surround("<", ">")
    assert lookup.decorator_for(Token("Identifier", "foo", (0, 3))) is None


def test_value_inherits_from_sibling_default() -> None:
    """A value node resolves its missing side from the type's _default."""
    lookup = normalize(
        {"Keyword": {"function": {"_before": "[["}, "_default": {"_after": "]]"}}}
    )
    assert lookup.decorator_for(kw("function")) == Surround("[[", "]]")
    assert lookup.decorator_for(kw("return")) == Surround("", "]]")


def test_root_default_feeds_types_and_values() -> None:
    """The root _default is the last inheritance source, for types and values."""
    lookup = normalize(
        {
            "_default": {"_before": "*", "_after": "*"},
            "Keyword": {"function": {"_after": "!"}},
            "String": {"_before": "'"},
            "Numeric": {"_default": ":#"},
        }
    )
    assert lookup.decorator_for(kw("function")) == Surround("*", "!")
    assert lookup.decorator_for(Token("String", "'a'", (0, 3))) == Surround("'", "*")
    assert lookup.decorator_for(Token("Numeric", "1", (0, 1))) == Surround("*", "#")


def test_root_default_does_not_decorate_unconfigured_types() -> None:
    """A root _default only feeds inheritance."""
    lookup = normalize({"_default": "<:>", "Keyword": {"function": ":!"}})
    assert lookup.decorator_for(Token("Identifier", "foo", (0, 3))) is None
    assert lookup.decorator_for(kw("return")) is None
    assert lookup.decorator_for(kw("function")) == Surround("<", "!")


def test_parent_default_wins_over_root_default() -> None:
    """The nearest _default is consulted before the root _default."""
    lookup = normalize(
        {
            "_default": {"_before": "R", "_after": "R"},
            "Keyword": {"_default": {"_before": "P"}, "function": {"_after": "!"}},
        }
    )
    # The type default itself only inherits from the root.
    assert lookup.decorator_for(kw("return")) == Surround("P", "R")
    assert lookup.decorator_for(kw("function")) == Surround("P", "!")


def test_shorthand_equivalent_to_mapping() -> None:
    """'<<:>>' and {_before: '<<', _after: '>>'} normalize identically."""
    a = normalize({"Keyword": "<<:>>"})
    b = normalize({"Keyword": {"_before": "<<", "_after": ">>"}})
    assert a.decorator_for(kw("if")) == b.decorator_for(kw("if")) == Surround("<<", ">>")


def test_shorthand_sides_inherit() -> None:
    """Empty shorthand sides inherit like missing attributes."""
    lookup = normalize({"Keyword": {"_default": "(:)", "if": "<", "for": ":>", "new": ":"}})
    assert lookup.decorator_for(kw("if")) == Surround("<", ")")
    assert lookup.decorator_for(kw("for")) == Surround("(", ">")
    assert lookup.decorator_for(kw("new")) == Surround("(", ")")


@pytest.mark.parametrize(
    "config",
    [
        {"Keyword": "a:b:c"},
        {"Keyword": ""},
        {"Keyword": {"function": "a:b:c"}},
        {"Keyword": 5},
        {"Keyword": {"_default": None, "function": ["<", ">"]}},
        {"_default": "::"},
    ],
)
def test_malformed_config_rejected(config: dict[str, Any]) -> None:
    """Malformed shorthands and unsupported leaves raise ConfigError."""
    with pytest.raises(ConfigError):
        normalize(config)


def test_non_mapping_root_rejected() -> None:
    """The configuration root must be a mapping."""
    with pytest.raises(ConfigError):
        normalize("Keyword")


def test_callbacks_are_kept() -> None:
    """Callbacks survive normalization untouched, at type and value level."""

    def shout(text: str, index: int, entries: object) -> str:
        return text.upper()

    def tag(text: str, index: int, entries: object) -> str:
        return f"#{text}"

    lookup = normalize({"Keyword": {"function": shout, "_default": tag}, "String": tag})
    assert lookup.decorator_for(kw("function")) is shout
    assert lookup.decorator_for(kw("return")) is tag
    assert lookup.decorator_for(Token("String", "'a'", (0, 3))) is tag


def test_callback_default_does_not_feed_inheritance() -> None:
    """A callback _default decorates unmatched values but has no before/after to inherit."""

    def tag(text: str, index: int, entries: object) -> str:
        return f"#{text}"

    lookup = normalize({"Keyword": {"_default": tag, "function": {"_before": "<"}}})
    assert lookup.decorator_for(kw("function")) == Surround("<", "")
    assert lookup.decorator_for(kw("if")) is tag


def test_value_group_without_attributes_falls_back() -> None:
    """A value node with neither _before nor _after falls back to the type default."""
    lookup = normalize({"Keyword": {"function": {}, "_default": "<:>"}})
    assert lookup.decorator_for(kw("function")) == Surround("<", ">")


def test_leaf_children_are_ignored_with_warning(caplog: pytest.LogCaptureFixture) -> None:
    """Children of a leaf node are ignored and reported."""
    with caplog.at_level(logging.WARNING, logger="tokmark"):
        lookup = normalize({"Keyword": {"_before": "[", "_after": "]", "function": "<:>"}})
    assert lookup.decorator_for(kw("function")) == Surround("[", "]")
    assert "Ignoring child keys function" in caplog.text


def test_normalize_does_not_mutate_input() -> None:
    """The caller's configuration is left untouched and can be reused."""
    config: dict[str, Any] = {
        "_default": "*:*",
        "Keyword": {"function": {"_before": "[["}, "_default": {"_after": "]]"}},
        "String": "<:>",
    }
    snapshot = copy.deepcopy(config)
    first = normalize(config)
    second = normalize(config)
    assert config == snapshot
    assert dict(first) == dict(second)


def test_normalized_lookup_passes_through() -> None:
    """Normalizing a DecoratorLookup returns it unchanged."""
    lookup = normalize({"Keyword": "<:>"})
    assert normalize(lookup) is lookup
    assert isinstance(lookup, DecoratorLookup)
    assert "Keyword" in lookup
    assert list(lookup) == ["Keyword"]


def test_lookup_is_read_only() -> None:
    """The lookup and its rules cannot be mutated."""
    lookup = normalize({"Keyword": {"function": "<:>"}})
    with pytest.raises(TypeError):
        lookup["Keyword"].by_value["return"] = Surround()  # type: ignore[index]
