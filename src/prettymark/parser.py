# topmark:header:start
#
#   project      : PrettyMark
#   file         : parser.py
#   file_relpath : src/prettymark/parser.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Parse CommonMark text into PrettyMark events using markdown-it-py.

markdown-it-py produces a flat block token stream with ``*_open`` /
``*_close`` pairs and ``inline`` tokens whose children hold the inline
stream. `TokenAdapter` walks both levels and yields `Event`s:

- paired tokens become ``START`` / ``END`` events carrying the same `Tag`;
- self-contained tokens (``fence``, ``code_block``, ``hr``, ``code_inline``,
  ``image``) are expanded into their start/content/end events;
- ``text_special`` tokens (backslash escapes, entities) keep their source
  spelling so re-parsing the output yields the same text.

Paragraphs that markdown-it hides inside tight lists are still reported.
Token types PrettyMark has no event for are skipped and logged at TRACE.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Final

from markdown_it import MarkdownIt

from prettymark.config.logging import get_logger
from prettymark.events import Event, Tag

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator, Sequence

    from markdown_it.token import Token

    from prettymark.config.logging import PrettymarkLogger

logger: PrettymarkLogger = get_logger(__name__)

_SIMPLE_OPEN_TAGS: Final[dict[str, Tag]] = {
    "paragraph_open": Tag.paragraph(),
    "bullet_list_open": Tag.list(None),
    "list_item_open": Tag.item(),
    "blockquote_open": Tag.block_quote(),
    "em_open": Tag.emphasis(),
    "strong_open": Tag.strong(),
    "table_open": Tag.table(),
    "thead_open": Tag.table_head(),
    "tr_open": Tag.table_row(),
    "th_open": Tag.table_cell(),
    "td_open": Tag.table_cell(),
}


def create_markdown_parser() -> MarkdownIt:
    """Return the CommonMark parser used when the caller does not supply one.

    The ``text_join`` core rule is disabled so escapes and entities reach the
    adapter as ``text_special`` tokens instead of being merged into plain text.
    """
    md = MarkdownIt("commonmark")
    md.disable("text_join", ignoreInvalid=True)
    return md


def _str_attr(token: Token, name: str) -> str:
    value = token.attrGet(name)
    return "" if value is None else str(value)


class TokenAdapter:
    """Translate a markdown-it token stream into PrettyMark events.

    The adapter keeps the tags of open tokens on a stack so that each
    ``END`` event carries the same tag as its ``START`` (links need their
    destination when they close). One adapter handles one token stream.
    """

    def __init__(self) -> None:
        # None marks an open token that has no PrettyMark tag
        self._open: list[Tag | None] = []

    def events(self, tokens: Iterable[Token]) -> Iterator[Event]:
        """Yield the events for ``tokens`` in document order.

        Args:
            tokens (Iterable[Token]): Block-level tokens from ``MarkdownIt.parse``.

        Yields:
            Event: The translated events.
        """
        for token in tokens:
            yield from self._token(token)

    def _token(self, token: Token) -> Iterator[Event]:
        if token.nesting == 1:
            tag = self._open_tag(token)
            self._open.append(tag)
            if tag is None:
                logger.trace("skipping unsupported token %s", token.type)
            else:
                yield Event.start(tag)
            return
        if token.nesting == -1:
            tag = self._open.pop() if self._open else None
            if tag is not None:
                yield Event.end(tag)
            return

        match token.type:
            case "inline":
                yield from self._children(token.children)
            case "text":
                yield Event.text(token.content)
            case "text_special":
                yield Event.text(token.markup or token.content)
            case "softbreak":
                yield Event.soft_break()
            case "hardbreak":
                yield Event.hard_break()
            case "code_inline":
                tag = Tag.inline_code()
                yield Event.start(tag)
                yield Event.text(token.content)
                yield Event.end(tag)
            case "image":
                tag = Tag.image(_str_attr(token, "src"), _str_attr(token, "title"))
                yield Event.start(tag)
                yield from self._children(token.children)
                yield Event.end(tag)
            case "html_inline":
                yield Event.raw_inline(token.content)
            case "html_block":
                yield Event.raw_block(token.content)
            case "fence" | "code_block":
                tag = Tag.code_block(token.info.strip())
                yield Event.start(tag)
                yield Event.text(token.content)
                yield Event.end(tag)
            case "hr":
                tag = Tag.rule()
                yield Event.start(tag)
                yield Event.end(tag)
            case "footnote_ref":
                yield Event.footnote_reference(str((token.meta or {}).get("label", "")))
            case _:
                logger.trace("skipping unsupported token %s", token.type)

    def _children(self, children: Sequence[Token] | None) -> Iterator[Event]:
        for child in children or ():
            yield from self._token(child)

    def _open_tag(self, token: Token) -> Tag | None:
        simple = _SIMPLE_OPEN_TAGS.get(token.type)
        if simple is not None:
            return simple
        match token.type:
            case "heading_open":
                return Tag.heading(int(token.tag[1:]))
            case "ordered_list_open":
                start = token.attrGet("start")
                return Tag.list(1 if start is None else int(start))
            case "link_open":
                return Tag.link(_str_attr(token, "href"), _str_attr(token, "title"))
            case "footnote_open":
                return Tag.footnote_definition(str((token.meta or {}).get("label", "")))
            case _:
                return None


def parse(source: str, *, md: MarkdownIt | None = None) -> Iterator[Event]:
    """Parse CommonMark ``source`` into a stream of events.

    Args:
        source (str): The document text.
        md (MarkdownIt | None): Parser to use; defaults to
            [`create_markdown_parser`][prettymark.parser.create_markdown_parser].

    Returns:
        Iterator[Event]: Events in document order.
    """
    parser: MarkdownIt = md if md is not None else create_markdown_parser()
    tokens: list[Token] = parser.parse(source)
    return TokenAdapter().events(tokens)
