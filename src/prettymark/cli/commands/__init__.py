# topmark:header:start
#
#   project      : PrettyMark
#   file         : __init__.py
#   file_relpath : src/prettymark/cli/commands/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""PrettyMark CLI subcommands."""
