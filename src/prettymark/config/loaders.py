# topmark:header:start
#
#   project      : PrettyMark
#   file         : loaders.py
#   file_relpath : src/prettymark/config/loaders.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Load TOML configuration sources.

Parsing is done with `tomlkit` and returned as plain `dict` structures.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from prettymark.config.logging import get_logger
from prettymark.constants import PYPROJECT_TOML_NAME, PYPROJECT_TOOL_SECTION

if TYPE_CHECKING:
    from pathlib import Path

    from prettymark.config.logging import PrettymarkLogger

TomlTable = dict[str, Any]

logger: PrettymarkLogger = get_logger(__name__)


def load_toml_dict(path: Path) -> TomlTable:
    """Load and parse a TOML file from the filesystem.

    Args:
        path (Path): Path to a TOML document.

    Returns:
        TomlTable: The parsed TOML content.

    Notes:
        - Errors are logged and an empty dict is returned on failure.
        - Encoding is assumed to be UTF-8.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
        doc: tomlkit.TOMLDocument = tomlkit.parse(text)
        data_any: Any = doc.unwrap()
        return cast("TomlTable", data_any) if isinstance(data_any, dict) else {}
    except OSError as e:
        logger.error("Error loading TOML from %s: %s", path, e)
        return {}
    except TomlkitParseError as e:
        logger.error("Error decoding TOML from %s: %s", path, e)
        return {}


def load_tool_table(path: Path) -> TomlTable:
    """Return the PrettyMark settings held in ``path``.

    For ``pyproject.toml`` this is the ``[tool.prettymark]`` table (empty if
    absent); any other file is a PrettyMark config file as a whole.

    Args:
        path (Path): Path to ``pyproject.toml`` or a PrettyMark TOML file.

    Returns:
        TomlTable: The settings table.
    """
    data: TomlTable = load_toml_dict(path)
    if path.name != PYPROJECT_TOML_NAME:
        return data
    tool: Any = data.get("tool", {})
    section: Any = tool.get(PYPROJECT_TOOL_SECTION, {}) if isinstance(tool, dict) else {}
    if not isinstance(section, dict):
        logger.error("[tool.%s] is not a table in %s", PYPROJECT_TOOL_SECTION, path)
        return {}
    logger.debug("Loaded [tool.%s] from %s", PYPROJECT_TOOL_SECTION, path)
    return cast("TomlTable", section)
