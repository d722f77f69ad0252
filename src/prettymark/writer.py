# topmark:header:start
#
#   project      : PrettyMark
#   file         : writer.py
#   file_relpath : src/prettymark/writer.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Nested-context writer used by the pretty printer.

`IndentWriter` owns the output sink, a document-wide line prefix and a stack of
open block contexts (frames). It exposes the primitives the printer needs:
literal text, hard and soft breaks, a deferred non-breaking space, and
`write_indent` which re-creates the leading text of a line inside nested
lists and block quotes.

Whitespace is deferred: spaces requested through `write_non_breaking_space`
(and the alignment spaces of list frames) are only written once more literal
text follows on the same line. A line break drops them, so the output never
carries trailing spaces after a marker such as ``>`` or ``#``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Generic, Protocol, TypeVar

from prettymark.constants import QUOTE_MARKER
from prettymark.errors import SinkWriteError

if TYPE_CHECKING:
    from collections.abc import Sequence


class Sink(Protocol):
    """Destination accepting incrementally appended text (``io.StringIO``, an open file, ...)."""

    def write(self, text: str, /) -> object: ...


S = TypeVar("S", bound=Sink)


@dataclass(frozen=True)
class ListItem:
    """An open list.

    Attributes:
        ordinal (int | None): Ordinal the next item of an ordered list renders with;
            None for a bullet list.
    """

    ordinal: int | None = None

    @property
    def marker_width(self) -> int:
        """Width of the marker (and trailing space) of the item rendered last.

        Bullets render as ``"- "``; ordered items as ``"<n>. "`` where ``n`` is
        one less than the pending ordinal.
        """
        if self.ordinal is None:
            return 2
        return len(str(max(self.ordinal - 1, 0))) + 2

    def advanced(self) -> ListItem:
        """Return the frame for the item after this one."""
        if self.ordinal is None:
            return self
        return ListItem(self.ordinal + 1)


@dataclass(frozen=True)
class BlockQuote:
    """An open block quote."""


Frame = ListItem | BlockQuote


class IndentWriter(Generic[S]):
    """Writes text to a sink while tracking nested block contexts.

    Args:
        sink (S): Output destination; only its ``write`` method is used.
        prefix (str): Literal written at the start of every physical line,
            e.g. ``"/// "`` to embed the document in a doc comment.
    """

    def __init__(self, sink: S, prefix: str = "") -> None:
        self._sink: S = sink
        self._prefix: str = prefix
        self._frames: list[Frame] = []
        self._pending_spaces: int = 0
        # The first line has no preceding break, so its prefix is written lazily.
        self._needs_prefix: bool = bool(prefix)

    @property
    def prefix(self) -> str:
        return self._prefix

    @property
    def frames(self) -> Sequence[Frame]:
        """Open frames, outermost first."""
        return tuple(self._frames)

    @property
    def depth(self) -> int:
        return len(self._frames)

    @property
    def pending_spaces(self) -> int:
        """Deferred spaces not yet written."""
        return self._pending_spaces

    def push_frame(self, frame: Frame) -> None:
        self._frames.append(frame)

    def pop_frame(self) -> Frame | None:
        """Remove and return the innermost frame, or None if no frame is open."""
        if not self._frames:
            return None
        return self._frames.pop()

    def write_text(self, text: str) -> None:
        """Write literal text, materializing any deferred spaces first.

        Empty text writes nothing and leaves deferred spaces pending.

        Raises:
            SinkWriteError: If the sink rejects the text.
        """
        if not text:
            return
        if self._needs_prefix:
            self._needs_prefix = False
            self._emit(self._prefix)
        if self._pending_spaces:
            self._emit(" " * self._pending_spaces)
            self._pending_spaces = 0
        self._emit(text)

    def write_hard_break(self) -> None:
        """End the current line; deferred spaces are dropped."""
        self._needs_prefix = False
        self._pending_spaces = 0
        self._emit("\n")

    def write_soft_break(self) -> None:
        """Write an insignificant line break, rendered as a single space."""
        self._pending_spaces = 0
        # TODO: wrap long lines at soft breaks once a target width is configurable.
        self.write_text(" ")

    def write_non_breaking_space(self) -> None:
        """Request a space that is only written if more text follows on this line."""
        self._pending_spaces += 1

    def write_indent(self) -> None:
        """Write the leading text of a fresh line.

        The prefix comes first, then each frame from outermost to innermost:
        a block quote writes ``>`` and defers one space, a list defers the
        width of its item marker. Deferred spaces accumulate across frames.

        Raises:
            SinkWriteError: If the sink rejects the text.
        """
        self._needs_prefix = False
        if self._prefix:
            self._emit(self._prefix)
        for frame in self._frames:
            match frame:
                case BlockQuote():
                    self.write_text(QUOTE_MARKER)
                    self._pending_spaces += 1
                case ListItem():
                    self._pending_spaces += frame.marker_width

    def into_inner(self) -> S:
        """Return the sink."""
        return self._sink

    def _emit(self, text: str) -> None:
        try:
            self._sink.write(text)
        except (OSError, ValueError) as exc:
            raise SinkWriteError(f"output sink rejected {len(text)} character(s): {exc}") from exc
