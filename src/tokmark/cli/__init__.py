# topmark:header:start
#
#   project      : TokMark
#   file         : __init__.py
#   file_relpath : src/tokmark/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""TokMark command line interface (Click).

The CLI is a thin shell around [`tokmark.api.decorate`][tokmark.api.decorate]: it
reads source text from a file or stdin, loads a style (built-in theme and/or TOML
style file) and prints the decorated result.
"""
