# topmark:header:start
#
#   project      : PrettyMark
#   file         : format.py
#   file_relpath : src/prettymark/cli/commands/format.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""PrettyMark ``format`` command.

Formats Markdown files into their canonical form. Performs a dry run by
default and rewrites files when ``--apply`` is given.

Input modes supported:
  • **Paths mode**: one or more files and/or directories (directories are
    searched recursively for the configured extensions).
  • **Content on STDIN**: no PATH, or a single ``-``; the formatted document
    is written to STDOUT.

Examples:
  Preview which files would change (dry run):

    $ prettymark format docs

  Apply changes (write in place):

    $ prettymark format --apply README.md docs

  Format STDIN to STDOUT as a Rust doc comment:

    $ cat notes.md | prettymark format --prefix '/// ' -
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from prettymark.api import format_document
from prettymark.cli.errors import (
    PrettymarkConfigError,
    PrettymarkEncodingError,
    PrettymarkFileNotFoundError,
    PrettymarkIOError,
    PrettymarkUsageError,
)
from prettymark.cli.exit_codes import ExitCode
from prettymark.cli.options import CONTEXT_SETTINGS, common_config_options
from prettymark.config.keys import Toml
from prettymark.config.logging import get_logger
from prettymark.config.model import load_config
from prettymark.errors import ConfigError
from prettymark.utils.diff import render_patch, unified_diff

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from prettymark.cli.console import ConsoleLike
    from prettymark.config.logging import PrettymarkLogger
    from prettymark.config.model import Config

logger: PrettymarkLogger = get_logger(__name__)

STDIN_MARKER = "-"


def collect_files(paths: Iterable[str], extensions: Sequence[str]) -> list[Path]:
    """Expand PATHS into the list of files to format.

    Files are taken as given; directories contribute every file below them
    whose suffix is in ``extensions``. Duplicates are dropped, order is kept.

    Args:
        paths (Iterable[str]): Paths from the command line.
        extensions (Sequence[str]): Suffixes (with leading dot) to collect from directories.

    Returns:
        list[Path]: Files to format.

    Raises:
        PrettymarkFileNotFoundError: If a path does not exist.
    """
    suffixes: set[str] = {ext.lower() for ext in extensions}
    seen: set[Path] = set()
    out: list[Path] = []

    def add(p: Path) -> None:
        key = p.resolve()
        if key not in seen:
            seen.add(key)
            out.append(p)

    for raw in paths:
        p = Path(raw)
        if p.is_dir():
            for child in sorted(p.rglob("*")):
                if child.is_file() and child.suffix.lower() in suffixes:
                    add(child)
        elif p.is_file():
            add(p)
        else:
            raise PrettymarkFileNotFoundError(f"No such file or directory: {raw}")
    logger.debug("Collected %d file(s)", len(out))
    return out


def _read_text(path: Path) -> str:
    try:
        with path.open("r", encoding="utf-8", newline="") as fp:
            return fp.read()
    except UnicodeDecodeError as exc:
        raise PrettymarkEncodingError(f"{path}: not valid UTF-8 ({exc.reason})") from exc
    except OSError as exc:
        raise PrettymarkIOError(f"{path}: cannot read file ({exc.strerror})") from exc


def _write_text(path: Path, text: str) -> None:
    try:
        with path.open("w", encoding="utf-8", newline="") as fp:
            fp.write(text)
    except OSError as exc:
        raise PrettymarkIOError(f"{path}: cannot write file ({exc.strerror})") from exc


@click.command(
    name="format",
    help="Format Markdown files into canonical CommonMark.",
    context_settings=CONTEXT_SETTINGS,
    epilog="""\
Examples:

  # Preview which files would change (dry-run)
  prettymark format docs

  # Apply: rewrite files in-place
  prettymark format --apply README.md docs

  # Filter STDIN to STDOUT
  prettymark format - < notes.md
""",
)
@click.argument("paths", nargs=-1, type=str)
@common_config_options
@click.option(
    "--apply", "apply_changes", is_flag=True, help="Write changes to files (off by default)."
)
@click.option("--diff", is_flag=True, help="Show unified diffs of the changes.")
def format_command(
    *,
    paths: tuple[str, ...],
    config_paths: tuple[str, ...],
    no_config: bool,
    prefix: str | None,
    apply_changes: bool,
    diff: bool,
) -> None:
    """Format Markdown files, or STDIN to STDOUT.

    Args:
        paths (tuple[str, ...]): Files/directories to format; empty or ``-`` for STDIN.
        config_paths (tuple[str, ...]): Extra config files to merge.
        no_config (bool): If True, skip config discovery.
        prefix (str | None): Line prefix override.
        apply_changes (bool): Write changes to files; otherwise perform a dry run.
        diff (bool): Show unified diffs of the changes.

    Raises:
        PrettymarkUsageError: If ``-`` is combined with other paths or with ``--apply``.
        PrettymarkConfigError: If a config value is invalid.

    Exit Status:
      SUCCESS (0): No changes required or all changes were written.
      WOULD_CHANGE (2): Dry run found files that would change with ``--apply``.
      USAGE_ERROR (64): Invalid invocation.
      ENCODING_ERROR (65): A file is not valid UTF-8.
      FILE_NOT_FOUND (66): A path does not exist.
      IO_ERROR (74): A file could not be read or written.
      CONFIG_ERROR (78): Invalid configuration value.
    """
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ConsoleLike = ctx.obj["console"]
    verbosity: int = ctx.obj.get("verbosity_level", 0)

    overrides: dict[str, object] = {}
    if prefix is not None:
        overrides[Toml.KEY_PREFIX] = prefix
    try:
        config: Config = load_config(
            config_paths=[Path(p) for p in config_paths],
            no_config=no_config,
            overrides=overrides,
        )
    except ConfigError as exc:
        raise PrettymarkConfigError(str(exc)) from exc

    use_stdin: bool = not paths or paths == (STDIN_MARKER,)
    if not use_stdin and STDIN_MARKER in paths:
        raise PrettymarkUsageError("'-' (STDIN) cannot be combined with other paths.")

    if use_stdin:
        if apply_changes:
            raise PrettymarkUsageError("--apply cannot be used when reading from STDIN.")
        original: str = click.get_text_stream("stdin").read()
        formatted: str = format_document(original, config)
        if diff:
            _emit_diff(console, original, formatted, "<stdin>")
        else:
            console.print(formatted, nl=False)
        return

    files: list[Path] = collect_files(paths, config.extensions)
    if not files:
        console.warn(f"No files with extensions {', '.join(config.extensions)} found.")
        return

    changed: int = 0
    for path in files:
        original = _read_text(path)
        formatted = format_document(original, config)
        if formatted == original:
            if verbosity > 0:
                console.print(f"{path}: unchanged")
            continue

        changed += 1
        if diff:
            _emit_diff(console, original, formatted, str(path))
        if apply_changes:
            _write_text(path, formatted)
            logger.info("Reformatted %s", path)
        if verbosity >= 0:
            verb = "reformatted" if apply_changes else "would reformat"
            console.print(console.styled(f"{path}: {verb}", fg="yellow"))

    if verbosity >= 0:
        unchanged = len(files) - changed
        verb = "reformatted" if apply_changes else "would be reformatted"
        console.print(f"{changed} file(s) {verb}, {unchanged} file(s) unchanged.")

    if changed and not apply_changes:
        ctx.exit(ExitCode.WOULD_CHANGE)


def _emit_diff(console: ConsoleLike, original: str, formatted: str, path: str) -> None:
    patch: list[str] = unified_diff(original, formatted, path)
    if not patch:
        return
    if console.enable_color:
        console.print(render_patch(patch), nl=False)
    else:
        plain: str = "".join(line if line.endswith("\n") else f"{line}\n" for line in patch)
        console.print(plain, nl=False)
