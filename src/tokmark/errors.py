# topmark:header:start
#
#   project      : TokMark
#   file         : errors.py
#   file_relpath : src/tokmark/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions raised by the TokMark core.

Usage:
    Configuration and bounds errors are programmer errors and are raised as soon
    as they are detected; no partial output is produced. Tokenizer errors are
    raised by the adapters in [`tokmark.tokenizers`][tokmark.tokenizers].

    The CLI translates these exceptions into Click exceptions with dedicated
    exit codes (see [`tokmark.cli.errors`][tokmark.cli.errors]).
"""

from __future__ import annotations


class TokmarkError(Exception):
    """Base class for all TokMark errors."""


class ConfigError(TokmarkError):
    """Error for malformed style configurations.

    Raised for malformed ``"before:after"`` shorthands, non-string
    ``_before``/``_after`` attributes, style nodes that are neither string,
    mapping nor callable, and unreadable style files.

    Attributes:
        value (object): The offending configuration value (if any).
        path (tuple[str, ...]): Key path of the offending node inside the config tree.
    """

    def __init__(
        self,
        message: str,
        *,
        value: object = None,
        path: tuple[str, ...] = (),
    ) -> None:
        self.value = value
        self.path = path
        if path:
            message = f"{message} (at {'.'.join(path)})"
        super().__init__(message)


class TokenizeError(TokmarkError):
    """Error for source text the tokenizer adapter cannot recover from."""


class BoundsError(TokmarkError):
    """Error for reconstruction requests outside of the token sequence.

    Raised when a callback asks to skip past the end of the merged sequence,
    requests a negative (or non-integer) skip, or when the sequence contains
    overlapping entries.
    """
