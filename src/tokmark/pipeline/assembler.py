# topmark:header:start
#
#   project      : TokMark
#   file         : assembler.py
#   file_relpath : src/tokmark/pipeline/assembler.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Join reconstruction fragments into the final text."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable

    from tokmark.pipeline.reconstructor import Fragment


def assemble(fragments: Iterable[Fragment]) -> str:
    """Concatenate fragment texts in order."""
    return "".join(fragment.text for fragment in fragments)
