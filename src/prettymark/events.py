# topmark:header:start
#
#   project      : PrettyMark
#   file         : events.py
#   file_relpath : src/prettymark/events.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Structural events consumed by the pretty printer.

A document arrives as a flat, ordered stream of `Event`s. Block and inline
constructs are bracketed by a ``START`` / ``END`` pair carrying the same
`Tag`; leaf content arrives as ``TEXT``, ``RAW_INLINE`` and break events.

Events are immutable value objects. The printer only reads them, so the same
event list can be replayed into several printers.

Tags that PrettyMark does not render (tables, footnote definitions) are part
of the vocabulary so that parsers emitting them can be fed in unchanged.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Final

MIN_HEADING_LEVEL: Final[int] = 1
MAX_HEADING_LEVEL: Final[int] = 6


class EventKind(Enum):
    """Kinds of events in the document stream."""

    START = "start"
    END = "end"
    TEXT = "text"
    RAW_INLINE = "raw_inline"
    RAW_BLOCK = "raw_block"
    FOOTNOTE_REFERENCE = "footnote_reference"
    SOFT_BREAK = "soft_break"
    HARD_BREAK = "hard_break"


class TagKind(Enum):
    """Kinds of constructs delimited by a START/END event pair."""

    PARAGRAPH = "paragraph"
    RULE = "rule"
    HEADING = "heading"
    LIST = "list"
    ITEM = "item"
    BLOCK_QUOTE = "block_quote"
    CODE_BLOCK = "code_block"
    EMPHASIS = "emphasis"
    STRONG = "strong"
    INLINE_CODE = "inline_code"
    LINK = "link"
    IMAGE = "image"
    # Not rendered
    FOOTNOTE_DEFINITION = "footnote_definition"
    TABLE = "table"
    TABLE_HEAD = "table_head"
    TABLE_ROW = "table_row"
    TABLE_CELL = "table_cell"


@dataclass(frozen=True)
class Tag:
    """A construct kind plus the data its markers need.

    Only the fields relevant to ``kind`` are meaningful; the others keep their
    defaults. Prefer the classmethod constructors over calling this directly.

    Attributes:
        kind (TagKind): The construct kind.
        level (int): Heading level (1..6) for ``HEADING``.
        start (int | None): First ordinal for an ordered ``LIST``; None for bullets.
        info (str): Info string of a ``CODE_BLOCK`` (e.g. the language).
        destination (str): Target of a ``LINK`` or source of an ``IMAGE``.
        title (str): Optional ``LINK``/``IMAGE`` title; empty when absent.
        label (str): Label of a ``FOOTNOTE_DEFINITION``.
    """

    kind: TagKind
    level: int = 0
    start: int | None = None
    info: str = ""
    destination: str = ""
    title: str = ""
    label: str = ""

    @classmethod
    def paragraph(cls) -> Tag:
        return cls(TagKind.PARAGRAPH)

    @classmethod
    def rule(cls) -> Tag:
        return cls(TagKind.RULE)

    @classmethod
    def heading(cls, level: int) -> Tag:
        """Return a heading tag.

        Args:
            level (int): Heading level, 1 to 6.

        Returns:
            Tag: The heading tag.

        Raises:
            ValueError: If ``level`` is outside 1..6.
        """
        if not MIN_HEADING_LEVEL <= level <= MAX_HEADING_LEVEL:
            raise ValueError(
                f"heading level must be {MIN_HEADING_LEVEL}..{MAX_HEADING_LEVEL} (got {level})"
            )
        return cls(TagKind.HEADING, level=level)

    @classmethod
    def list(cls, start: int | None = None) -> Tag:
        """Return a list tag; ``start`` is None for bullet lists."""
        return cls(TagKind.LIST, start=start)

    @classmethod
    def item(cls) -> Tag:
        return cls(TagKind.ITEM)

    @classmethod
    def block_quote(cls) -> Tag:
        return cls(TagKind.BLOCK_QUOTE)

    @classmethod
    def code_block(cls, info: str = "") -> Tag:
        return cls(TagKind.CODE_BLOCK, info=info)

    @classmethod
    def emphasis(cls) -> Tag:
        return cls(TagKind.EMPHASIS)

    @classmethod
    def strong(cls) -> Tag:
        return cls(TagKind.STRONG)

    @classmethod
    def inline_code(cls) -> Tag:
        return cls(TagKind.INLINE_CODE)

    @classmethod
    def link(cls, destination: str, title: str = "") -> Tag:
        return cls(TagKind.LINK, destination=destination, title=title)

    @classmethod
    def image(cls, destination: str, title: str = "") -> Tag:
        return cls(TagKind.IMAGE, destination=destination, title=title)

    @classmethod
    def footnote_definition(cls, label: str) -> Tag:
        return cls(TagKind.FOOTNOTE_DEFINITION, label=label)

    @classmethod
    def table(cls) -> Tag:
        return cls(TagKind.TABLE)

    @classmethod
    def table_head(cls) -> Tag:
        return cls(TagKind.TABLE_HEAD)

    @classmethod
    def table_row(cls) -> Tag:
        return cls(TagKind.TABLE_ROW)

    @classmethod
    def table_cell(cls) -> Tag:
        return cls(TagKind.TABLE_CELL)


@dataclass(frozen=True)
class Event:
    """One unit of the document stream.

    Attributes:
        kind (EventKind): The event kind.
        tag (Tag | None): The construct for ``START``/``END`` events, None otherwise.
        content (str): Literal text for ``TEXT``, ``RAW_INLINE`` and ``RAW_BLOCK``;
            the label for ``FOOTNOTE_REFERENCE``.
    """

    kind: EventKind
    tag: Tag | None = None
    content: str = ""

    @classmethod
    def start(cls, tag: Tag) -> Event:
        return cls(EventKind.START, tag=tag)

    @classmethod
    def end(cls, tag: Tag) -> Event:
        return cls(EventKind.END, tag=tag)

    @classmethod
    def text(cls, content: str) -> Event:
        return cls(EventKind.TEXT, content=content)

    @classmethod
    def raw_inline(cls, content: str) -> Event:
        return cls(EventKind.RAW_INLINE, content=content)

    @classmethod
    def raw_block(cls, content: str) -> Event:
        return cls(EventKind.RAW_BLOCK, content=content)

    @classmethod
    def footnote_reference(cls, label: str) -> Event:
        return cls(EventKind.FOOTNOTE_REFERENCE, content=label)

    @classmethod
    def soft_break(cls) -> Event:
        return cls(EventKind.SOFT_BREAK)

    @classmethod
    def hard_break(cls) -> Event:
        return cls(EventKind.HARD_BREAK)

    def __str__(self) -> str:
        if self.tag is not None:
            return f"{self.kind.value}({self.tag.kind.value})"
        if self.content:
            return f"{self.kind.value}({self.content!r})"
        return self.kind.value
