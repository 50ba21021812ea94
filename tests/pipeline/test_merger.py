# topmark:header:start
#
#   project      : TokMark
#   file         : test_merger.py
#   file_relpath : tests/pipeline/test_merger.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for merging token and comment streams."""

from __future__ import annotations

from types import SimpleNamespace

import pytest

from tests.conftest import scan
from tokmark.pipeline.merger import merge
from tokmark.tokens import Token

pytestmark: pytest.MarkDecorator = pytest.mark.pipeline


def test_merge_orders_by_start_offset() -> None:
    """Comments are interleaved with tokens in source order."""
    tokens, comments = scan("a /* c */ b // d\ne")
    merged = merge(tokens, comments)
    assert [t.value for t in merged] == ["a", " c ", "b", " d", "e"]
    assert [t.start for t in merged] == sorted(t.start for t in merged)


def test_merge_without_comments() -> None:
    """Comments default to an empty stream."""
    tokens, _ = scan("x = 1;")
    assert merge(tokens) == tokens


def test_comment_wins_on_same_start() -> None:
    """When a token and a comment share a start offset the comment is kept."""
    token = Token("Punctuator", "/", (0, 1))
    comment = Token("Line", " hi", (0, 5))
    merged = merge([token], [comment])
    assert merged == [comment]


def test_later_token_wins_on_same_start() -> None:
    """Within one stream the last entry written for an offset wins."""
    first = Token("Identifier", "a", (3, 4))
    second = Token("Keyword", "a", (3, 4))
    assert merge([first, second]) == [second]


def test_merge_accepts_mappings_and_objects() -> None:
    """Tokenizer output may be dicts or attribute objects."""
    merged = merge(
        [{"type": "Keyword", "value": "var", "range": [0, 3]}],
        [SimpleNamespace(type="Block", value="x", range=(4, 9))],
    )
    assert merged == [Token("Keyword", "var", (0, 3)), Token("Block", "x", (4, 9))]


def test_merge_rejects_entries_without_range() -> None:
    """Entries must carry a (start, end) range."""
    with pytest.raises(ValueError, match="range"):
        merge([{"type": "Keyword", "value": "var"}])


def test_merge_empty() -> None:
    """Two empty streams merge to an empty sequence."""
    assert merge([], []) == []
