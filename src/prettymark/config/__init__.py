# topmark:header:start
#
#   project      : PrettyMark
#   file         : __init__.py
#   file_relpath : src/prettymark/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration layer for PrettyMark.

Configuration is read from ``[tool.prettymark]`` in ``pyproject.toml`` and
from ``prettymark.toml`` (which wins when both exist), then overridden by CLI
options. The result is an immutable `Config` snapshot.
"""

from __future__ import annotations

from prettymark.config.model import Config, discover_config_files, load_config

__all__ = [
    "Config",
    "discover_config_files",
    "load_config",
]
