# topmark:header:start
#
#   project      : PrettyMark
#   file         : keys.py
#   file_relpath : src/prettymark/config/keys.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Canonical TOML key names for PrettyMark configuration.

Keys defined here are the external configuration API as it appears in
``prettymark.toml`` and in ``[tool.prettymark]`` inside ``pyproject.toml``.
Renaming or removing a key is a breaking change.
"""

from __future__ import annotations

from typing import Final


class Toml:
    """TOML keys used by PrettyMark configuration."""

    # Literal written at the start of every output line
    KEY_PREFIX: Final[str] = "prefix"

    # Whether files written by the CLI end with a newline
    KEY_FINAL_NEWLINE: Final[str] = "final_newline"

    # Suffixes collected when a directory is passed to the CLI
    KEY_EXTENSIONS: Final[str] = "extensions"

    ALL_KEYS: Final[frozenset[str]] = frozenset({KEY_PREFIX, KEY_FINAL_NEWLINE, KEY_EXTENSIONS})
