# topmark:header:start
#
#   project      : TokMark
#   file         : reconstructor.py
#   file_relpath : src/tokmark/pipeline/reconstructor.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Single-pass reconstruction of decorated source text.

The reconstructor walks the merged token/comment sequence once, keeping a cursor
(``last_emitted_end``) of how far the source has been emitted. For every entry
with a decorator it emits:

1. a verbatim fragment for the gap between the cursor and the entry start, then
2. a decorated fragment for the entry itself.

Callbacks may return a [`Replacement`][tokmark.style.model.Replacement] with a
``skip`` count to consume the following entries as one unit; the cursor then
jumps to the end of the last consumed entry. Whatever follows the last decorated
entry is emitted verbatim.

Fragment source spans partition ``[0, len(source))``: concatenating the verbatim
fragments and the spans of decorated fragments reproduces the source layout.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from tokmark.config.logging import get_logger
from tokmark.errors import BoundsError
from tokmark.style.model import Replacement, Surround

if TYPE_CHECKING:
    from collections.abc import Sequence

    from tokmark.config.logging import TokmarkLogger
    from tokmark.style.normalizer import DecoratorLookup
    from tokmark.tokens import Token

logger: TokmarkLogger = get_logger(__name__)


@dataclass(frozen=True)
class Fragment:
    """One contiguous piece of output text.

    Attributes:
        text (str): Output text (verbatim source or decorated/replaced text).
        start (int): Start offset of the source span this fragment consumes.
        end (int): End offset (exclusive) of the consumed source span.
        decorated (bool): False for verbatim source slices.
    """

    text: str
    start: int
    end: int
    decorated: bool = False

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-friendly representation."""
        return {
            "text": self.text,
            "start": self.start,
            "end": self.end,
            "decorated": self.decorated,
        }


def _unpack_result(result: object, index: int, count: int) -> tuple[str, int]:
    """Return ``(replacement, skip)`` for a callback result.

    Raises:
        TypeError: If the callback returned something other than a string or a
            replacement structure.
        BoundsError: If ``skip`` is not a non-negative integer within the sequence.
    """
    if isinstance(result, str):
        return result, 0

    if isinstance(result, Replacement):
        replacement, skip = result.replacement, result.skip
    elif isinstance(result, Mapping) and "replacement" in result:
        replacement, skip = result["replacement"], result.get("skip", 0)
    else:
        raise TypeError(
            f"Callback for entry {index} must return str or Replacement, got {result!r}"
        )

    if not isinstance(replacement, str):
        raise TypeError(f"Callback replacement for entry {index} must be str, got {replacement!r}")
    if isinstance(skip, bool) or not isinstance(skip, int):
        raise BoundsError(f"Callback skip for entry {index} must be an int, got {skip!r}")
    if skip < 0:
        raise BoundsError(f"Callback requested a negative skip ({skip}) at entry {index}")
    if index + skip >= count:
        raise BoundsError(
            f"Callback at entry {index} requested skip={skip}, "
            f"but only {count - index - 1} entries follow"
        )
    return replacement, skip


def reconstruct(
    source: str,
    entries: Sequence[Token],
    lookup: DecoratorLookup,
) -> list[Fragment]:
    """Decorate ``source`` according to ``lookup`` and return the output fragments.

    Args:
        source (str): The source text the entries refer to.
        entries (Sequence[Token]): Tokens and comments ordered by start offset
            (see [`merge`][tokmark.pipeline.merger.merge]).
        lookup (DecoratorLookup): Normalized decorators.

    Returns:
        list[Fragment]: Fragments in source order; their texts joined form the output.

    Raises:
        BoundsError: If a callback skips outside of ``entries`` or if a decorated
            entry overlaps text that was already emitted.
    """
    fragments: list[Fragment] = []
    last_emitted_end: int = 0
    count: int = len(entries)

    index: int = 0
    while index < count:
        entry: Token = entries[index]
        decorator = lookup.decorator_for(entry)

        # Undecorated entries are emitted verbatim as part of the next gap.
        if decorator is None or entry.start >= entry.end:
            index += 1
            continue

        if entry.start < last_emitted_end:
            raise BoundsError(
                f"Entry {index} ({entry.type} {entry.value!r}) starts at {entry.start}, "
                f"before already emitted offset {last_emitted_end}"
            )
        if entry.start > last_emitted_end:
            fragments.append(
                Fragment(source[last_emitted_end : entry.start], last_emitted_end, entry.start)
            )

        text: str = source[entry.start : entry.end]
        skip: int = 0
        if isinstance(decorator, Surround):
            output: str = decorator(text)
        else:
            output, skip = _unpack_result(decorator(text, index, entries), index, count)

        end: int = entries[index + skip].end if skip else entry.end
        if end < entry.start:
            raise BoundsError(
                f"Callback at entry {index} consumed up to offset {end}, before the entry start"
            )
        if skip:
            logger.debug("Entry %d replaced together with the next %d entries", index, skip)

        fragments.append(Fragment(output, entry.start, end, decorated=True))
        last_emitted_end = end
        index += skip + 1

    if last_emitted_end < len(source):
        fragments.append(Fragment(source[last_emitted_end:], last_emitted_end, len(source)))

    logger.trace("Reconstructed %d fragment(s) from %d entries", len(fragments), count)
    return fragments
