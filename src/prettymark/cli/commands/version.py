# topmark:header:start
#
#   project      : PrettyMark
#   file         : version.py
#   file_relpath : src/prettymark/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""PrettyMark ``version`` command."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from prettymark.constants import PRETTYMARK_VERSION

if TYPE_CHECKING:
    from prettymark.cli.console import ConsoleLike


@click.command(
    name="version",
    help="Show the current version of PrettyMark.",
)
def version_command() -> None:
    """Print the PrettyMark version installed in the current Python environment."""
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ConsoleLike = ctx.obj["console"]

    if ctx.obj.get("verbosity_level", 0) > 0:
        console.print(console.styled("PrettyMark version:", bold=True, underline=True))
        console.print(f"    {console.styled(PRETTYMARK_VERSION, bold=True)}")
    else:
        console.print(console.styled(PRETTYMARK_VERSION, bold=True))
