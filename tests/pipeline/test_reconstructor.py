# topmark:header:start
#
#   project      : TokMark
#   file         : test_reconstructor.py
#   file_relpath : tests/pipeline/test_reconstructor.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for single-pass reconstruction of decorated text."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import pytest

from tests.conftest import scan
from tokmark.errors import BoundsError
from tokmark.pipeline.assembler import assemble
from tokmark.pipeline.merger import merge
from tokmark.pipeline.reconstructor import Fragment, reconstruct
from tokmark.style.model import Replacement
from tokmark.style.normalizer import normalize
from tokmark.tokens import Token

if TYPE_CHECKING:
    from collections.abc import Sequence

pytestmark: pytest.MarkDecorator = pytest.mark.pipeline


def render(source: str, config: Any) -> str:
    """Scan, merge, reconstruct and assemble ``source`` with ``config``."""
    tokens, comments = scan(source)
    return assemble(reconstruct(source, merge(tokens, comments), normalize(config)))


def test_empty_config_is_identity() -> None:
    """With no decorators the output equals the input."""
    source = "function foo() {\n  // hi\n  return 1; /* x */\n}\n"
    assert render(source, {}) == source


def test_empty_source() -> None:
    """An empty source yields no fragments."""
    assert reconstruct("", [], normalize({"Keyword": "<:>"})) == []


def test_keywords_wrapped() -> None:
    """Keywords are wrapped, everything else stays verbatim."""
    out = render("function foo() { return 1; }", {"Keyword": {"_before": "[", "_after": "]"}})
    assert out == "[function] foo() { [return] 1; }"


def test_whitespace_and_comments_preserved() -> None:
    """Gaps between decorated entries are copied verbatim, comments are decorated."""
    source = "var  a = 1;\t// note\n/* b */ a"
    out = render(source, {"Keyword": "<:>", "Line": "«:»", "Block": "«:»"})
    assert out == "<var>  a = 1;\t«// note»\n«/* b */» a"


def test_fragments_partition_source() -> None:
    """Fragment spans are contiguous and cover the whole source."""
    source = "  var x = 'a'; // end"
    tokens, comments = scan(source)
    fragments = reconstruct(
        source, merge(tokens, comments), normalize({"Keyword": "<:>", "String": "{:}"})
    )
    assert fragments[0].start == 0
    assert fragments[-1].end == len(source)
    for left, right in zip(fragments, fragments[1:]):
        assert left.end == right.start
    verbatim = [f for f in fragments if not f.decorated]
    assert all(f.text == source[f.start : f.end] for f in verbatim)
    assert [f.text for f in fragments if f.decorated] == ["<var>", "{'a'}"]


def test_replacement_consumes_following_entries() -> None:
    """A callback may replace its entry and the next ``skip`` entries."""

    def console_log(text: str, index: int, entries: Sequence[Token]) -> Replacement | str:
        following = [entries[index + i].value for i in range(1, 3)]
        if following == [".", "log"]:
            return Replacement("print", skip=2)
        return text

    source = "console.log('hi'); console.error('x');"
    out = render(source, {"Identifier": {"console": console_log}})
    assert out == "print('hi'); console.error('x');"


def test_replacement_skip_three() -> None:
    """skip=3 consumes exactly three entries after the trigger."""

    def collapse(text: str, index: int, entries: Sequence[Token]) -> Replacement:
        return Replacement("X", skip=3)

    assert render("a b c d e", {"Identifier": {"a": collapse}}) == "X e"


def test_skip_counts_comments() -> None:
    """Skips index into the merged token and comment sequence."""

    def collapse(text: str, index: int, entries: Sequence[Token]) -> Replacement:
        return Replacement("X", skip=2)

    out = render("a /* c */ b c d", {"Identifier": {"a": collapse, "_default": "<:>"}})
    assert out == "X <c> <d>"


def test_mapping_result_is_accepted() -> None:
    """Callbacks may return a plain mapping with replacement and skip."""

    def swap(text: str, index: int, entries: Sequence[Token]) -> dict[str, Any]:
        return {"replacement": "b = a", "skip": 2}

    assert render("a = b;", {"Identifier": {"a": swap}}) == "b = a;"


def test_string_result_replaces_single_entry() -> None:
    """A plain string result replaces only the triggering entry."""

    def upper(text: str, index: int, entries: Sequence[Token]) -> str:
        return text.upper()

    assert render("let x = y;", {"Identifier": upper}) == "let X = Y;"


def test_callback_receives_index_and_entries() -> None:
    """Callbacks see the merged sequence and the index of their entry."""
    seen: list[tuple[str, int, str]] = []

    def spy(text: str, index: int, entries: Sequence[Token]) -> str:
        seen.append((text, index, entries[index].value))
        return text

    render("// c\nreturn x", {"Keyword": spy, "Identifier": spy})
    assert seen == [("return", 1, "return"), ("x", 2, "x")]


@pytest.mark.parametrize("skip", [1, 5])
def test_skip_past_end_raises(skip: int) -> None:
    """Skipping beyond the last entry is a bounds error."""

    def greedy(text: str, index: int, entries: Sequence[Token]) -> Replacement:
        return Replacement("X", skip=skip)

    with pytest.raises(BoundsError):
        render("a", {"Identifier": greedy})


@pytest.mark.parametrize("skip", [-1, True, 1.5, "1"])
def test_invalid_skip_raises(skip: object) -> None:
    """Negative and non-integer skips are bounds errors."""

    def bad(text: str, index: int, entries: Sequence[Token]) -> dict[str, Any]:
        return {"replacement": "X", "skip": skip}

    with pytest.raises(BoundsError):
        render("a b c", {"Identifier": {"a": bad}})


def test_invalid_callback_result_raises() -> None:
    """Callbacks must return a string or a replacement structure."""

    def broken(text: str, index: int, entries: Sequence[Token]) -> Any:
        return 42

    with pytest.raises(TypeError):
        render("a", {"Identifier": broken})


def test_overlapping_entries_raise() -> None:
    """Decorated entries may not start inside already emitted text."""
    entries = [Token("Identifier", "abc", (0, 3)), Token("Identifier", "bc", (1, 3))]
    with pytest.raises(BoundsError):
        reconstruct("abc", entries, normalize({"Identifier": "<:>"}))


def test_zero_width_entries_are_ignored() -> None:
    """Entries with an empty range produce no fragment."""
    entries = [Token("Identifier", "", (1, 1)), Token("Identifier", "b", (2, 3))]
    fragments = reconstruct("a b", entries, normalize({"Identifier": "<:>"}))
    assert fragments == [Fragment("a ", 0, 2), Fragment("<b>", 2, 3, decorated=True)]


def test_undecorated_types_are_verbatim() -> None:
    """Tokens whose type is not configured are never wrapped."""
    assert render("foo(1)", {"Keyword": "<:>"}) == "foo(1)"


def test_reconstruct_is_deterministic() -> None:
    """Running twice with the same inputs yields identical fragments."""
    source = "if (a) { return 'b'; } // c"
    tokens, comments = scan(source)
    entries = merge(tokens, comments)
    lookup = normalize({"Keyword": "[:]", "String": "{:}", "Line": "«:»"})
    assert reconstruct(source, entries, lookup) == reconstruct(source, entries, lookup)


def test_fragment_to_dict() -> None:
    """Fragments serialize to plain dicts."""
    assert Fragment("<a>", 0, 1, decorated=True).to_dict() == {
        "text": "<a>",
        "start": 0,
        "end": 1,
        "decorated": True,
    }
