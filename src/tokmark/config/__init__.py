# topmark:header:start
#
#   project      : TokMark
#   file         : __init__.py
#   file_relpath : src/tokmark/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Ambient configuration for TokMark: logging setup and style file loading.

Modules:
    - [`tokmark.config.logging`][tokmark.config.logging]: TRACE-aware logger and
      colored formatter.
    - [`tokmark.config.io`][tokmark.config.io]: TOML style configuration loaders.
"""

from __future__ import annotations
