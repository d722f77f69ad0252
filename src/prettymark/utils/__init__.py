# topmark:header:start
#
#   project      : PrettyMark
#   file         : __init__.py
#   file_relpath : src/prettymark/utils/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Utility helpers shared by the CLI."""
