# topmark:header:start
#
#   project      : TokMark
#   file         : constants.py
#   file_relpath : src/tokmark/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""TokMark Constants."""

from __future__ import annotations

from importlib.metadata import version as get_version

TOKMARK_VERSION: str = get_version("tokmark")

# Encoding used for source and style files read by the CLI.
DEFAULT_ENCODING: str = "utf-8"

# Argument meaning "read from standard input" in CLI commands.
STDIN_MARKER: str = "-"
