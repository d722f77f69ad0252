# topmark:header:start
#
#   project      : PrettyMark
#   file         : diff.py
#   file_relpath : src/prettymark/utils/diff.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Unified diff generation and colorized rendering.

Used by ``prettymark format --diff`` to show what formatting would change.
"""

from __future__ import annotations

import difflib
from typing import TYPE_CHECKING

from yachalk import chalk

if TYPE_CHECKING:
    from collections.abc import Sequence


def unified_diff(original: str, formatted: str, path: str) -> list[str]:
    """Return the unified diff between ``original`` and ``formatted``.

    Args:
        original (str): Current file content.
        formatted (str): Formatted content.
        path (str): Path shown in the diff headers.

    Returns:
        list[str]: Diff lines including their line endings; empty if the
            contents are identical.
    """
    return list(
        difflib.unified_diff(
            original.splitlines(keepends=True),
            formatted.splitlines(keepends=True),
            fromfile=f"{path} (original)",
            tofile=f"{path} (formatted)",
        )
    )


def render_patch(patch: Sequence[str] | str) -> str:
    """Render a colorized preview of a unified diff.

    Args:
        patch (Sequence[str] | str): A unified diff as **either** a sequence of
            lines **or** a single multiline string.

    Returns:
        str: The formatted, colorized diff preview.
    """
    if isinstance(patch, str):
        lines: list[str] = patch.splitlines(keepends=False)
    else:
        lines = [line.rstrip("\n") for line in patch]

    def process_line(line: str) -> str:
        # Show carriage returns explicitly
        content = line.replace("\r", "\\r")
        match line[:1]:
            case "-":
                return chalk.bold.red(content)
            case "+":
                return chalk.bold.green(content)
            case "@":
                return chalk.cyan(content)
            case _:
                return chalk.bold.white(content)

    return "".join(f"{process_line(line)}\n" for line in lines)
