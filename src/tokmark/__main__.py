# topmark:header:start
#
#   project      : TokMark
#   file         : __main__.py
#   file_relpath : src/tokmark/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Module entry point for running TokMark via ``python -m tokmark``.

Equivalent to running the ``tokmark`` console script.

Examples:
    Highlight a script in the terminal::

        python -m tokmark render --theme ansi app.js
"""

from __future__ import annotations

from tokmark.cli.main import cli

if __name__ == "__main__":
    cli()
