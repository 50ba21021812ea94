# topmark:header:start
#
#   project      : TokMark
#   file         : __init__.py
#   file_relpath : src/tokmark/cli/commands/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""TokMark CLI subcommands."""
