# topmark:header:start
#
#   project      : PrettyMark
#   file         : printer.py
#   file_relpath : src/prettymark/printer.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Event-driven pretty printer for CommonMark documents.

`PrettyPrinter` receives one `Event` at a time and translates it into calls on
an `IndentWriter`. Besides the writer, its only state is the deferred
``needs_break`` flag: closing a block sets it, and the next block start turns
it into exactly one blank line. Nothing is written for a block close itself,
so a document never ends with a trailing break.

Example:
    ```python
    from prettymark.parser import parse
    from prettymark.printer import PrettyPrinter

    printer = PrettyPrinter.new_with_prefix(prefix="/// ")
    printer.push_events(parse("Lorem _ipsum_!\\n\\nDolor `sit`."))
    assert printer.finish().getvalue() == "/// Lorem *ipsum*!\\n/// \\n/// Dolor `sit`."
    ```
"""

from __future__ import annotations

import io
import re
from typing import TYPE_CHECKING, Generic, cast

from prettymark.config.logging import get_logger
from prettymark.constants import (
    BULLET_MARKER,
    CODE_FENCE,
    CODE_SPAN_MARKER,
    EMPHASIS_MARKER,
    HARD_BREAK_MARKER,
    HEADING_MARKER,
    QUOTE_MARKER,
    RULE_MARKER,
    STRONG_MARKER,
)
from prettymark.events import EventKind, Tag, TagKind
from prettymark.writer import BlockQuote, IndentWriter, ListItem, S

if TYPE_CHECKING:
    from collections.abc import Iterable

    from prettymark.config.logging import PrettymarkLogger
    from prettymark.events import Event

logger: PrettymarkLogger = get_logger(__name__)

# Block starts that are separated from the preceding block by a blank line
_BLOCK_TAGS: frozenset[TagKind] = frozenset(
    {
        TagKind.PARAGRAPH,
        TagKind.RULE,
        TagKind.HEADING,
        TagKind.BLOCK_QUOTE,
        TagKind.LIST,
        TagKind.CODE_BLOCK,
    }
)

# Block ends that only request a blank line before the next block
_BREAK_ONLY_END_TAGS: frozenset[TagKind] = frozenset(
    {
        TagKind.PARAGRAPH,
        TagKind.RULE,
        TagKind.HEADING,
        TagKind.ITEM,
    }
)

_INLINE_OPEN_MARKERS: dict[TagKind, str] = {
    TagKind.EMPHASIS: EMPHASIS_MARKER,
    TagKind.STRONG: STRONG_MARKER,
    TagKind.INLINE_CODE: CODE_SPAN_MARKER,
    TagKind.LINK: "[",
    TagKind.IMAGE: "![",
}

_INLINE_CLOSE_MARKERS: dict[TagKind, str] = {
    TagKind.EMPHASIS: EMPHASIS_MARKER,
    TagKind.STRONG: STRONG_MARKER,
    TagKind.INLINE_CODE: CODE_SPAN_MARKER,
}

_POINTY_SPECIALS = re.compile(r"[<>\\]")
_TITLE_SPECIALS = re.compile(r'[\\"]')


def _is_bare_destination(destination: str) -> bool:
    # A bare destination has no spaces, controls or backslashes and balanced parentheses.
    depth = 0
    for ch in destination:
        if ch.isspace() or ord(ch) < 0x20 or ch == "\\":
            return False
        if ch == "(":
            depth += 1
        elif ch == ")":
            depth -= 1
            if depth < 0:
                return False
    return depth == 0 and not destination.startswith("<")


def link_destination(destination: str) -> str:
    """Return ``destination`` spelled so that it parses back unchanged.

    Destinations that cannot be written bare are wrapped in ``<...>`` with
    ``<``, ``>`` and ``\\`` backslash-escaped.
    """
    if not destination or _is_bare_destination(destination):
        return destination
    return "<" + _POINTY_SPECIALS.sub(r"\\\g<0>", destination) + ">"


def link_suffix(tag: Tag) -> str:
    """Return the closing text of a link or image: ``](dest)`` or ``](dest "title")``."""
    destination = link_destination(tag.destination)
    if not tag.title:
        return f"]({destination})"
    title = _TITLE_SPECIALS.sub(r"\\\g<0>", tag.title)
    return f']({destination} "{title}")'


class PrettyPrinter(Generic[S]):
    """Event-driven pretty printer for CommonMark documents.

    The printer can be driven by pushing events into it, which are usually
    obtained from [`parse`][prettymark.parser.parse]. A printer instance
    handles one document; create a new one per document.

    Args:
        sink (S | None): Output destination. Defaults to a new ``io.StringIO``.
        prefix (str): Literal written at the start of every output line.
    """

    def __init__(self, sink: S | None = None, prefix: str = "") -> None:
        if sink is None:
            sink = cast("S", io.StringIO())
        self._writer: IndentWriter[S] = IndentWriter(sink, prefix)
        self._needs_break: bool = False

    @classmethod
    def new_with_prefix(cls, sink: S | None = None, prefix: str = "") -> PrettyPrinter[S]:
        """Create a printer whose every output line starts with ``prefix``."""
        return cls(sink, prefix)

    @property
    def writer(self) -> IndentWriter[S]:
        return self._writer

    @property
    def needs_break(self) -> bool:
        """True if the next block start must be preceded by a blank line."""
        return self._needs_break

    def push_event(self, event: Event) -> None:
        """Push a single event into the printer.

        Args:
            event (Event): The next event of the document stream.

        Raises:
            SinkWriteError: If the output sink rejects text. The printer must
                not be used afterwards.
        """
        logger.trace("event: %s", event)
        w = self._writer
        match event.kind:
            case EventKind.START:
                assert event.tag is not None
                self._start(event.tag)
            case EventKind.END:
                assert event.tag is not None
                self._end(event.tag)
            case EventKind.TEXT:
                for i, line in enumerate(event.content.split("\n")):
                    if i > 0:
                        w.write_hard_break()
                        w.write_indent()
                    w.write_text(line)
            case EventKind.RAW_INLINE:
                w.write_text(event.content)
            case EventKind.SOFT_BREAK:
                w.write_soft_break()
            case EventKind.HARD_BREAK:
                w.write_text(HARD_BREAK_MARKER)
                w.write_hard_break()
                w.write_indent()
            case EventKind.RAW_BLOCK | EventKind.FOOTNOTE_REFERENCE:
                logger.trace("not rendered: %s", event)

    def push_events(self, events: Iterable[Event]) -> None:
        """Push a series of events into the printer, stopping at the first failure.

        Args:
            events (Iterable[Event]): Events in document order.

        Raises:
            SinkWriteError: If the output sink rejects text.
        """
        for event in events:
            self.push_event(event)

    def finish(self) -> S:
        """Return the sink holding the formatted document."""
        return self._writer.into_inner()

    into_inner = finish

    def _start(self, tag: Tag) -> None:
        w = self._writer
        kind = tag.kind
        if kind in _BLOCK_TAGS:
            self._flush_break()

        match kind:
            case TagKind.RULE:
                w.write_text(RULE_MARKER)
            case TagKind.HEADING:
                w.write_text(HEADING_MARKER * tag.level)
                w.write_non_breaking_space()
            case TagKind.BLOCK_QUOTE:
                w.write_text(QUOTE_MARKER)
                w.write_non_breaking_space()
                w.push_frame(BlockQuote())
            case TagKind.LIST:
                w.push_frame(ListItem(tag.start))
            case TagKind.CODE_BLOCK:
                w.write_text(f"{CODE_FENCE}{tag.info}")
                w.write_hard_break()
                w.write_indent()
            case TagKind.ITEM:
                self._start_item()
            case _ if kind in _INLINE_OPEN_MARKERS:
                w.write_text(_INLINE_OPEN_MARKERS[kind])
            case _:
                # Paragraphs need nothing beyond the flush; tables and footnotes are not rendered.
                pass

    def _start_item(self) -> None:
        # The list frame is taken off the stack while the separator and marker
        # are written so that they line up with the enclosing content.
        w = self._writer
        frame = w.pop_frame()
        match frame:
            case ListItem(ordinal=None):
                self._flush_break()
                w.write_text(BULLET_MARKER)
            case ListItem(ordinal=int(ordinal)):
                self._flush_break()
                w.write_text(f"{ordinal}.")
            case _:
                logger.debug("item start without an open list (top frame: %r); ignored", frame)
                return
        w.write_non_breaking_space()
        w.push_frame(frame.advanced())

    def _end(self, tag: Tag) -> None:
        w = self._writer
        kind = tag.kind
        match kind:
            case _ if kind in _BREAK_ONLY_END_TAGS:
                self._needs_break = True
            case TagKind.LIST | TagKind.BLOCK_QUOTE:
                w.pop_frame()
                self._needs_break = True
            case TagKind.CODE_BLOCK:
                w.write_text(CODE_FENCE)
                self._needs_break = True
            case TagKind.LINK | TagKind.IMAGE:
                w.write_text(link_suffix(tag))
            case _ if kind in _INLINE_CLOSE_MARKERS:
                w.write_text(_INLINE_CLOSE_MARKERS[kind])
            case _:
                pass

    def _flush_break(self) -> None:
        if self._needs_break:
            w = self._writer
            w.write_hard_break()
            w.write_indent()
            w.write_hard_break()
            w.write_indent()
        self._needs_break = False
