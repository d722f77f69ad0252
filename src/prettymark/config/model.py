# topmark:header:start
#
#   project      : PrettyMark
#   file         : model.py
#   file_relpath : src/prettymark/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration model, discovery and merge policy.

`Config` is an immutable snapshot. Layers are applied in order, later layers
winning:

1. built-in defaults;
2. the discovered project files: ``pyproject.toml`` (``[tool.prettymark]``)
   then ``prettymark.toml``, both taken from the nearest ancestor directory
   of the starting directory that holds either of them;
3. explicit config files (``--config``);
4. CLI overrides.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import TYPE_CHECKING, Any

from prettymark.config.keys import Toml
from prettymark.config.loaders import load_tool_table
from prettymark.config.logging import get_logger
from prettymark.constants import (
    DEFAULT_MARKDOWN_EXTENSIONS,
    PRETTYMARK_TOML_NAME,
    PYPROJECT_TOML_NAME,
)
from prettymark.errors import ConfigError

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence

    from prettymark.config.logging import PrettymarkLogger

logger: PrettymarkLogger = get_logger(__name__)


@dataclass(frozen=True)
class Config:
    """Immutable PrettyMark settings.

    Attributes:
        prefix (str): Literal written at the start of every output line.
        final_newline (bool): Whether files written by the CLI end with a newline.
        extensions (tuple[str, ...]): Suffixes collected when expanding directories.
        sources (tuple[Path, ...]): Config files that contributed to this snapshot.
    """

    prefix: str = ""
    final_newline: bool = True
    extensions: tuple[str, ...] = DEFAULT_MARKDOWN_EXTENSIONS
    sources: tuple[Path, ...] = field(default=(), compare=False)

    def merged_with(self, table: Mapping[str, Any], source: Path | None = None) -> Config:
        """Return a new snapshot with the values of ``table`` applied.

        Unknown keys are logged and ignored.

        Args:
            table (Mapping[str, Any]): Settings keyed by `Toml` key names.
            source (Path | None): File the table was read from, for diagnostics.

        Returns:
            Config: The merged snapshot.

        Raises:
            ConfigError: If a value has the wrong type.
        """
        where: str = f" in {source}" if source is not None else ""
        changes: dict[str, Any] = {}

        for key in table:
            if key not in Toml.ALL_KEYS:
                logger.warning("Ignoring unknown config key '%s'%s", key, where)

        if Toml.KEY_PREFIX in table:
            prefix = table[Toml.KEY_PREFIX]
            if not isinstance(prefix, str):
                raise ConfigError(f"'{Toml.KEY_PREFIX}' must be a string{where}")
            changes["prefix"] = prefix

        if Toml.KEY_FINAL_NEWLINE in table:
            final_newline = table[Toml.KEY_FINAL_NEWLINE]
            if not isinstance(final_newline, bool):
                raise ConfigError(f"'{Toml.KEY_FINAL_NEWLINE}' must be a boolean{where}")
            changes["final_newline"] = final_newline

        if Toml.KEY_EXTENSIONS in table:
            extensions = table[Toml.KEY_EXTENSIONS]
            if not isinstance(extensions, list) or not all(
                isinstance(x, str) for x in extensions  # pyright: ignore[reportUnknownVariableType]
            ):
                raise ConfigError(f"'{Toml.KEY_EXTENSIONS}' must be a list of strings{where}")
            changes["extensions"] = tuple(
                x if x.startswith(".") else f".{x}"
                for x in extensions  # pyright: ignore[reportUnknownVariableType]
            )

        if source is not None:
            changes["sources"] = (*self.sources, source)
        return replace(self, **changes)


def discover_config_files(start: Path) -> list[Path]:
    """Find the project config files that apply to ``start``.

    Walks from ``start`` towards the filesystem root and stops at the first
    directory holding ``pyproject.toml`` or ``prettymark.toml``.

    Args:
        start (Path): Directory to start from.

    Returns:
        list[Path]: ``pyproject.toml`` and/or ``prettymark.toml`` from that
            directory, in merge order; empty if none was found.
    """
    start = start.resolve()
    for directory in (start, *start.parents):
        found: list[Path] = [
            directory / name
            for name in (PYPROJECT_TOML_NAME, PRETTYMARK_TOML_NAME)
            if (directory / name).is_file()
        ]
        if found:
            logger.debug("Discovered config files: %s", ", ".join(str(p) for p in found))
            return found
    return []


def load_config(
    *,
    start: Path | None = None,
    config_paths: Sequence[Path] = (),
    no_config: bool = False,
    overrides: Mapping[str, Any] | None = None,
) -> Config:
    """Build a `Config` from defaults, discovered files, explicit files and overrides.

    Args:
        start (Path | None): Directory used for discovery; defaults to the CWD.
        config_paths (Sequence[Path]): Extra config files, merged after discovery.
        no_config (bool): If True, skip discovery (explicit files still apply).
        overrides (Mapping[str, Any] | None): Final overrides keyed by `Toml` key names.

    Returns:
        Config: The merged configuration snapshot.

    Raises:
        ConfigError: If a config value has the wrong type.
    """
    config = Config()
    paths: list[Path] = [] if no_config else discover_config_files(start or Path.cwd())
    paths.extend(config_paths)
    for path in paths:
        config = config.merged_with(load_tool_table(path), source=path)
    if overrides:
        config = config.merged_with(overrides)
    logger.debug("Effective config: %s", config)
    return config
