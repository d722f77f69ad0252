# topmark:header:start
#
#   project      : PrettyMark
#   file         : options.py
#   file_relpath : src/prettymark/cli/options.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Common CLI option utilities.

This module centralizes reusable options (verbosity, config sources) and their
resolution logic, so commands and groups can stay thin.
"""

from __future__ import annotations

from typing import Callable, ParamSpec, TypeVar

import click

from prettymark.cli.errors import PrettymarkUsageError

P = ParamSpec("P")
R = TypeVar("R")

#: Click context settings shared by the group and its commands.
CONTEXT_SETTINGS = {
    "help_option_names": ["-h", "--help"],
}


def resolve_verbosity(verbose_count: int, quiet_count: int) -> int:
    """Resolve the program-output verbosity from ``-v`` / ``-q`` counts.

    Args:
        verbose_count (int): Number of times ``-v`` is passed.
        quiet_count (int): Number of times ``-q`` is passed.

    Returns:
        int: ``verbose_count`` when verbose, ``-quiet_count`` when quiet, 0 otherwise.

    Raises:
        PrettymarkUsageError: If both flags are used simultaneously.
    """
    if verbose_count > 0 and quiet_count > 0:
        raise PrettymarkUsageError("The '--verbose' and '--quiet' options are mutually exclusive.")
    if verbose_count > 0:
        return verbose_count
    return -quiet_count


def common_verbose_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``--verbose`` and ``--quiet`` options to a command.

    Args:
        f (Callable[P, R]): The Click command function to decorate.

    Returns:
        Callable[P, R]: The decorated function.
    """
    f = click.option(
        "-v",
        "--verbose",
        count=True,
        help="Increase verbosity (also list unchanged files).",
    )(f)
    f = click.option(
        "-q",
        "--quiet",
        count=True,
        help="Suppress per-file output.",
    )(f)
    return f


def common_config_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``--config``, ``--no-config`` and ``--prefix`` options to a command.

    Args:
        f (Callable[P, R]): The Click command function to decorate.

    Returns:
        Callable[P, R]: The decorated function.
    """
    f = click.option(
        "--config",
        "config_paths",
        type=click.Path(exists=True, dir_okay=False, resolve_path=True),
        multiple=True,
        help="Additional config file(s), merged after discovered ones.",
    )(f)
    f = click.option(
        "--no-config",
        is_flag=True,
        help="Do not discover pyproject.toml / prettymark.toml.",
    )(f)
    f = click.option(
        "--prefix",
        type=str,
        default=None,
        help="Literal written at the start of every output line (overrides config).",
    )(f)
    return f
