# topmark:header:start
#
#   project      : PrettyMark
#   file         : constants.py
#   file_relpath : src/prettymark/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""PrettyMark Constants."""

from __future__ import annotations

from importlib.metadata import version as get_version
from typing import Final

PRETTYMARK_VERSION: str = get_version("prettymark")

# Configuration discovery
PYPROJECT_TOML_NAME: Final[str] = "pyproject.toml"
PRETTYMARK_TOML_NAME: Final[str] = "prettymark.toml"
PYPROJECT_TOOL_SECTION: Final[str] = "prettymark"

DEFAULT_MARKDOWN_EXTENSIONS: Final[tuple[str, ...]] = (".md", ".markdown")

# Canonical markers emitted by the printer
RULE_MARKER: Final[str] = "---"
HEADING_MARKER: Final[str] = "#"
BULLET_MARKER: Final[str] = "-"
QUOTE_MARKER: Final[str] = ">"
CODE_FENCE: Final[str] = "```"
EMPHASIS_MARKER: Final[str] = "*"
STRONG_MARKER: Final[str] = "**"
CODE_SPAN_MARKER: Final[str] = "`"
HARD_BREAK_MARKER: Final[str] = "\\"

# Name of the environment variable consulted for the runtime log level
LOG_LEVEL_ENV_VAR: Final[str] = "PRETTYMARK_LOG_LEVEL"
