# topmark:header:start
#
#   project      : TokMark
#   file         : __init__.py
#   file_relpath : src/tokmark/pipeline/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""TokMark decoration pipeline.

Stages, in order:

- [`merge`][tokmark.pipeline.merger.merge]: tokens + comments → one ordered sequence.
- [`reconstruct`][tokmark.pipeline.reconstructor.reconstruct]: sequence + decorators
  → fragments.
- [`assemble`][tokmark.pipeline.assembler.assemble]: fragments → text.
"""

from __future__ import annotations

from tokmark.pipeline.assembler import assemble
from tokmark.pipeline.merger import merge
from tokmark.pipeline.reconstructor import Fragment, reconstruct

__all__ = ["Fragment", "assemble", "merge", "reconstruct"]
