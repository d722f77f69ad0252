# topmark:header:start
#
#   project      : PrettyMark
#   file         : errors.py
#   file_relpath : src/prettymark/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions for the PrettyMark CLI.

Raise these in CLI commands to signal errors with standardized messages and
exit codes. They prefer the project console when one is present in the Click
context (see `show()`) and otherwise fall back to Click's default styling.
"""

from __future__ import annotations

from typing import IO, Any

import click

from prettymark.cli.exit_codes import ExitCode


class PrettymarkCliError(click.ClickException):
    """Base class for all PrettyMark CLI errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:  # pragma: no cover - trivial
        """Return the plain error message text (colorization happens in `show()`)."""
        return str(getattr(self, "message", ""))

    def show(self, file: IO[Any] | None = None) -> None:  # pragma: no cover - Click prints errors
        """Display the error using the project console if available."""
        ctx = click.get_current_context(silent=True)
        if ctx is not None and isinstance(ctx.obj, dict):
            console = ctx.obj.get("console")  # pyright: ignore[reportUnknownMemberType]
            if console is not None:
                console.error(self.format_message())
                return
        super().show(file)


class PrettymarkUsageError(PrettymarkCliError):
    """Error for command-line invocation errors (invalid flags/args)."""

    exit_code = ExitCode.USAGE_ERROR


class PrettymarkConfigError(PrettymarkCliError):
    """Error for configuration errors (invalid values in config files)."""

    exit_code = ExitCode.CONFIG_ERROR


class PrettymarkFileNotFoundError(PrettymarkCliError):
    """Error when an input path does not exist."""

    exit_code = ExitCode.FILE_NOT_FOUND


class PrettymarkIOError(PrettymarkCliError):
    """Error for I/O errors reading/writing files."""

    exit_code = ExitCode.IO_ERROR


class PrettymarkEncodingError(PrettymarkCliError):
    """Error for text decoding errors (input is not UTF-8)."""

    exit_code = ExitCode.ENCODING_ERROR
