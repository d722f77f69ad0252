# topmark:header:start
#
#   project      : PrettyMark
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Pytest configuration for the PrettyMark test suite.

Sets up TRACE logging for test runs and provides small shared helpers.
"""

from __future__ import annotations

import io
from collections.abc import Callable
from typing import TYPE_CHECKING, Any, TypeVar, cast

import pytest

from prettymark.config import logging
from prettymark.printer import PrettyPrinter
from prettymark.writer import IndentWriter

if TYPE_CHECKING:
    from collections.abc import Iterable
    from pathlib import Path

    from prettymark.events import Event

F = TypeVar("F", bound=Callable[..., object])

DecoratorType = Callable[[F], F]


def as_typed_mark(mark: Any) -> DecoratorType[Any]:
    """Wrap a pytest mark so static type checkers preserve the function type.

    Args:
        mark (Any): A pytest mark decorator such as `pytest.mark.cli`.

    Returns:
        DecoratorType[Any]: A decorator that preserves the wrapped function's type.
    """

    def _decorator(func: F) -> F:
        return cast("F", mark(func))

    return _decorator


mark_cli: DecoratorType[Any] = as_typed_mark(pytest.mark.cli)


def render(events: Iterable[Event], prefix: str = "") -> str:
    """Push ``events`` into a fresh printer and return the output text."""
    printer: PrettyPrinter[io.StringIO] = PrettyPrinter(io.StringIO(), prefix)
    printer.push_events(events)
    return printer.finish().getvalue()


def string_writer(prefix: str = "") -> IndentWriter[io.StringIO]:
    """Return an `IndentWriter` bound to a fresh in-memory buffer."""
    return IndentWriter(io.StringIO(), prefix)


@pytest.fixture(autouse=True)
def silence_prettymark_logging(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure the runtime log level is not forced via env during tests.

    Args:
        monkeypatch (pytest.MonkeyPatch): Used to remove ``PRETTYMARK_LOG_LEVEL``.
    """
    monkeypatch.delenv("PRETTYMARK_LOG_LEVEL", raising=False)


@pytest.hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:  # pylint: disable=unused-argument
    """Set the logging level to TRACE so per-event tracing is exercised.

    Args:
        config (pytest.Config): The pytest configuration object.
    """
    logging.setup_logging(level=logging.TRACE_LEVEL)


@pytest.fixture
def isolation(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run the test in an empty temporary project directory.

    Keeps config discovery from picking up the repository's own pyproject.toml.

    Args:
        tmp_path (Path): The pytest-provided temporary directory.
        monkeypatch (pytest.MonkeyPatch): Used to change the working directory.

    Returns:
        Path: The isolated working directory.
    """
    cwd: Path = tmp_path / "proj"
    cwd.mkdir()
    # An empty project config stops discovery from walking further up.
    (cwd / "prettymark.toml").write_text("", encoding="utf-8")
    monkeypatch.chdir(cwd)
    return cwd
