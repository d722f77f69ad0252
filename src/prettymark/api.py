# topmark:header:start
#
#   project      : PrettyMark
#   file         : api.py
#   file_relpath : src/prettymark/api.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Convenience entry points that parse and pretty-print in one call.

Examples:
    ```python
    from prettymark.api import PrettyDisplay, prettify

    prettify("Lorem __ipsum__ dolor `sit` amet!")
    # 'Lorem **ipsum** dolor `sit` amet!'

    f"My document: {PrettyDisplay('Lorem __ipsum__')}"
    # 'My document: Lorem **ipsum**'
    ```
"""

from __future__ import annotations

import io
from dataclasses import dataclass
from typing import TYPE_CHECKING

from prettymark.parser import parse
from prettymark.printer import PrettyPrinter

if TYPE_CHECKING:
    from markdown_it import MarkdownIt

    from prettymark.config.model import Config


def prettify(source: str, *, prefix: str = "", md: MarkdownIt | None = None) -> str:
    """Parse a CommonMark document and return it pretty printed.

    Args:
        source (str): The document text.
        prefix (str): Literal written at the start of every output line.
        md (MarkdownIt | None): Optional parser instance (see `prettymark.parser.parse`).

    Returns:
        str: The canonical document, without a trailing newline.
    """
    printer: PrettyPrinter[io.StringIO] = PrettyPrinter(io.StringIO(), prefix)
    printer.push_events(parse(source, md=md))
    return printer.finish().getvalue()


def format_document(source: str, config: Config) -> str:
    """Format a whole file's content according to ``config``.

    Unlike `prettify`, the result ends with a newline when ``config.final_newline``
    is set and the document is not empty.

    Args:
        source (str): The file content.
        config (Config): Effective configuration.

    Returns:
        str: The content to write back.
    """
    formatted: str = prettify(source, prefix=config.prefix)
    if config.final_newline and formatted:
        formatted += "\n"
    return formatted


@dataclass(frozen=True)
class PrettyDisplay:
    """Wrapper that pretty prints the wrapped document when formatted.

    ``str()``, ``format()`` and f-strings all render the canonical document.
    A non-empty format spec is used as the line prefix:
    ``f"{PrettyDisplay(doc):# }"`` prefixes every line with ``"# "``.
    """

    source: str

    def __str__(self) -> str:
        return prettify(self.source)

    def __format__(self, format_spec: str) -> str:
        return prettify(self.source, prefix=format_spec)
