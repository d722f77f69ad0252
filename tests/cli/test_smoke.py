# topmark:header:start
#
#   project      : PrettyMark
#   file         : test_smoke.py
#   file_relpath : tests/cli/test_smoke.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI smoke tests for PrettyMark.

Provides minimal coverage that the CLI entry point is callable and that
`--help` and `version` commands succeed.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from prettymark.constants import PRETTYMARK_VERSION
from tests.cli.conftest import assert_SUCCESS, assert_USAGE_ERROR, run_cli
from tests.conftest import mark_cli

if TYPE_CHECKING:
    from click.testing import Result


@mark_cli
def test_cli_entry() -> None:
    """It should show usage information and exit code SUCCESS when `--help` is passed."""
    result: Result = run_cli(["--help"])

    assert_SUCCESS(result)

    assert "Usage" in result.output
    assert "format" in result.output


@mark_cli
def test_no_subcommand_prints_hint() -> None:
    """It should print a hint and the help text when no command is given."""
    result: Result = run_cli(["--no-color"])

    assert_SUCCESS(result)

    assert result.output.startswith("Hint: use 'prettymark format")
    assert "Usage" in result.output


@mark_cli
def test_version() -> None:
    """It should output the installed version exactly when color is disabled."""
    result: Result = run_cli(["--no-color", "version"])

    assert_SUCCESS(result)

    assert result.output.strip() == PRETTYMARK_VERSION


@mark_cli
def test_version_verbose() -> None:
    """It should add a heading line with `-v`."""
    result: Result = run_cli(["--no-color", "-v", "version"])

    assert_SUCCESS(result)

    assert result.output.splitlines() == ["PrettyMark version:", f"    {PRETTYMARK_VERSION}"]


@mark_cli
def test_verbose_and_quiet_are_exclusive() -> None:
    """It should reject `-v` combined with `-q` with USAGE_ERROR."""
    result: Result = run_cli(["-v", "-q", "version"])

    assert_USAGE_ERROR(result)

    assert "mutually exclusive" in result.output
