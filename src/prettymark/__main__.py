# topmark:header:start
#
#   project      : PrettyMark
#   file         : __main__.py
#   file_relpath : src/prettymark/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Allow ``python -m prettymark``."""

from __future__ import annotations

from prettymark.cli.main import cli

if __name__ == "__main__":
    cli()
