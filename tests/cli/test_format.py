# topmark:header:start
#
#   project      : PrettyMark
#   file         : test_format.py
#   file_relpath : tests/cli/test_format.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI tests for `prettymark format`.

Covers STDIN filtering, the dry-run / `--apply` contract and its exit codes,
diff output, directory expansion and config discovery.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from tests.cli.conftest import (
    assert_CONFIG_ERROR,
    assert_ENCODING_ERROR,
    assert_FILE_NOT_FOUND,
    assert_SUCCESS,
    assert_USAGE_ERROR,
    assert_WOULD_CHANGE,
    run_cli,
    run_cli_in,
)
from tests.conftest import mark_cli

if TYPE_CHECKING:
    from pathlib import Path

    from click.testing import Result

UNFORMATTED = "Title\n=====\n\n* Lorem _ipsum_\n* dolor\n"
FORMATTED = "# Title\n\n- Lorem *ipsum*\n\n- dolor\n"


@mark_cli
@pytest.mark.parametrize("argv", [["format"], ["format", "-"]], ids=["no-paths", "dash"])
def test_stdin_to_stdout(isolation: Path, argv: list[str]) -> None:
    """It should write the formatted document to STDOUT."""
    result: Result = run_cli(argv, input_text=UNFORMATTED)

    assert_SUCCESS(result)

    assert result.stdout == FORMATTED


@mark_cli
def test_stdin_with_prefix(isolation: Path) -> None:
    """It should prefix every line, blank ones included."""
    result: Result = run_cli(["format", "--prefix", "/// ", "-"], input_text="a\n\nb\n")

    assert_SUCCESS(result)

    assert result.stdout == "/// a\n/// \n/// b\n"


@mark_cli
def test_stdin_empty_document(isolation: Path) -> None:
    """It should write nothing for an empty document."""
    result: Result = run_cli(["format"], input_text="\n\n")

    assert_SUCCESS(result)

    assert result.stdout == ""


@mark_cli
def test_stdin_rejects_apply(isolation: Path) -> None:
    """It should refuse to apply changes when reading from STDIN."""
    result: Result = run_cli(["format", "--apply", "-"], input_text="a")

    assert_USAGE_ERROR(result)


@mark_cli
def test_dash_mixed_with_paths(isolation: Path) -> None:
    """It should refuse `-` combined with other paths."""
    (isolation / "a.md").write_text(FORMATTED, encoding="utf-8")
    result: Result = run_cli(["format", "-", "a.md"], input_text="a")

    assert_USAGE_ERROR(result)


@mark_cli
def test_dry_run_reports_and_keeps_file(isolation: Path) -> None:
    """It should exit WOULD_CHANGE and leave the file untouched."""
    target = isolation / "a.md"
    target.write_text(UNFORMATTED, encoding="utf-8")

    result: Result = run_cli(["--no-color", "format", "a.md"])

    assert_WOULD_CHANGE(result)

    assert "a.md: would reformat" in result.output
    assert "1 file(s) would be reformatted, 0 file(s) unchanged." in result.output
    assert target.read_text(encoding="utf-8") == UNFORMATTED


@mark_cli
def test_apply_rewrites_file(isolation: Path) -> None:
    """It should rewrite the file in place and exit SUCCESS."""
    target = isolation / "a.md"
    target.write_text(UNFORMATTED, encoding="utf-8")

    result: Result = run_cli(["--no-color", "format", "--apply", "a.md"])

    assert_SUCCESS(result)

    assert "a.md: reformatted" in result.output
    assert "1 file(s) reformatted, 0 file(s) unchanged." in result.output
    assert target.read_text(encoding="utf-8") == FORMATTED

    # A second run finds nothing to do.
    again: Result = run_cli(["--no-color", "format", "a.md"])
    assert_SUCCESS(again)
    assert "0 file(s) would be reformatted, 1 file(s) unchanged." in again.output


@mark_cli
def test_unchanged_listed_only_when_verbose(isolation: Path) -> None:
    """It should list unchanged files with `-v`."""
    (isolation / "a.md").write_text(FORMATTED, encoding="utf-8")

    quiet_default: Result = run_cli(["--no-color", "format", "a.md"])
    verbose: Result = run_cli(["--no-color", "-v", "format", "a.md"])

    assert_SUCCESS(quiet_default)
    assert_SUCCESS(verbose)
    assert "a.md: unchanged" not in quiet_default.output
    assert "a.md: unchanged" in verbose.output


@mark_cli
def test_quiet_suppresses_output(isolation: Path) -> None:
    """It should print nothing with `-q` but still signal WOULD_CHANGE."""
    (isolation / "a.md").write_text(UNFORMATTED, encoding="utf-8")

    result: Result = run_cli(["-q", "format", "a.md"])

    assert_WOULD_CHANGE(result)

    assert result.output == ""


@mark_cli
def test_diff_without_color(isolation: Path) -> None:
    """It should print a plain unified diff of the changes."""
    (isolation / "a.md").write_text("Lorem _ipsum_\n", encoding="utf-8")

    result: Result = run_cli(["--no-color", "format", "--diff", "a.md"])

    assert_WOULD_CHANGE(result)

    assert "--- a.md (original)" in result.output
    assert "+++ a.md (formatted)" in result.output
    assert "-Lorem _ipsum_" in result.output
    assert "+Lorem *ipsum*" in result.output
    assert "\x1b[" not in result.output


@mark_cli
def test_missing_path(isolation: Path) -> None:
    """It should exit FILE_NOT_FOUND for a path that does not exist."""
    result: Result = run_cli(["format", "missing.md"])

    assert_FILE_NOT_FOUND(result)

    assert "missing.md" in result.output


@mark_cli
def test_invalid_utf8(isolation: Path) -> None:
    """It should exit ENCODING_ERROR for a file that is not UTF-8."""
    (isolation / "bad.md").write_bytes(b"caf\xe9\n")

    result: Result = run_cli(["format", "bad.md"])

    assert_ENCODING_ERROR(result)


@mark_cli
def test_directory_expansion(tmp_path: Path) -> None:
    """It should collect files below a directory by extension."""
    project = tmp_path / "proj"
    docs = project / "docs"
    (docs / "sub").mkdir(parents=True)
    (project / "prettymark.toml").write_text("", encoding="utf-8")
    (docs / "a.md").write_text(UNFORMATTED, encoding="utf-8")
    (docs / "sub" / "b.markdown").write_text(FORMATTED, encoding="utf-8")
    (docs / "notes.txt").write_text(UNFORMATTED, encoding="utf-8")

    result: Result = run_cli_in(project, ["--no-color", "format", "docs"])

    assert_WOULD_CHANGE(result)

    assert "a.md: would reformat" in result.output
    assert "notes.txt" not in result.output
    assert "1 file(s) would be reformatted, 1 file(s) unchanged." in result.output


@mark_cli
def test_directory_without_markdown_files(isolation: Path) -> None:
    """It should warn and exit SUCCESS when a directory holds no Markdown files."""
    (isolation / "empty").mkdir()

    result: Result = run_cli(["--no-color", "format", "empty"])

    assert_SUCCESS(result)

    assert "No files with extensions .md, .markdown found." in result.output


@mark_cli
def test_diff_with_color(isolation: Path) -> None:
    """It should colorize the diff through yachalk when color is enabled."""
    (isolation / "a.md").write_text("Lorem _ipsum_\n", encoding="utf-8")

    result: Result = run_cli(["format", "--diff", "a.md"])

    assert_WOULD_CHANGE(result)

    assert "+Lorem *ipsum*" in result.output


@mark_cli
def test_config_file_sets_prefix(isolation: Path) -> None:
    """It should pick up `prettymark.toml` from the working directory."""
    (isolation / "prettymark.toml").write_text('prefix = "// "\n', encoding="utf-8")

    result: Result = run_cli(["format"], input_text="a\n\nb")

    assert_SUCCESS(result)

    assert result.stdout == "// a\n// \n// b\n"


@mark_cli
def test_pyproject_section_and_no_config(isolation: Path) -> None:
    """It should read `[tool.prettymark]` and ignore it with `--no-config`."""
    (isolation / "prettymark.toml").unlink()
    (isolation / "pyproject.toml").write_text(
        "[tool.prettymark]\nfinal_newline = false\n", encoding="utf-8"
    )

    configured: Result = run_cli(["format"], input_text="a")
    ignored: Result = run_cli(["format", "--no-config"], input_text="a")

    assert_SUCCESS(configured)
    assert_SUCCESS(ignored)
    assert configured.stdout == "a"
    assert ignored.stdout == "a\n"


@mark_cli
def test_explicit_config_and_prefix_override(isolation: Path) -> None:
    """It should merge `--config` files and let `--prefix` win over them."""
    extra = isolation / "extra.toml"
    extra.write_text('prefix = "# "\n', encoding="utf-8")

    from_file: Result = run_cli(["format", "--config", str(extra)], input_text="a")
    overridden: Result = run_cli(
        ["format", "--config", str(extra), "--prefix", "> "], input_text="a"
    )

    assert from_file.stdout == "# a\n"
    assert overridden.stdout == "> a\n"


@mark_cli
def test_invalid_config_value(isolation: Path) -> None:
    """It should exit CONFIG_ERROR when a config value has the wrong type."""
    (isolation / "prettymark.toml").write_text("prefix = 1\n", encoding="utf-8")

    result: Result = run_cli(["format"], input_text="a")

    assert_CONFIG_ERROR(result)

    assert "prefix" in result.output
