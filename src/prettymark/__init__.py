# topmark:header:start
#
#   project      : PrettyMark
#   file         : __init__.py
#   file_relpath : src/prettymark/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""PrettyMark package.

PrettyMark re-serializes a parsed CommonMark event stream into a canonical
document: emphasis markers are unified, blocks are separated by exactly one
blank line, and nested list/quote content is re-indented under its markers.

Simple use:

```python
from prettymark import prettify

assert prettify("Lorem __ipsum__ dolor `sit` amet!") == "Lorem **ipsum** dolor `sit` amet!"
```

Event-driven use (events usually come from `prettymark.parser.parse`):

```python
from prettymark import PrettyPrinter, parse

printer = PrettyPrinter()
printer.push_events(parse("Lorem _ipsum_ dolor `sit`."))
assert printer.finish().getvalue() == "Lorem *ipsum* dolor `sit`."
```
"""

from __future__ import annotations

from prettymark.api import PrettyDisplay, prettify
from prettymark.errors import PrettymarkError, SinkWriteError
from prettymark.events import Event, EventKind, Tag, TagKind
from prettymark.parser import parse
from prettymark.printer import PrettyPrinter
from prettymark.writer import BlockQuote, IndentWriter, ListItem

__all__ = [
    "BlockQuote",
    "Event",
    "EventKind",
    "IndentWriter",
    "ListItem",
    "PrettyDisplay",
    "PrettyPrinter",
    "PrettymarkError",
    "SinkWriteError",
    "Tag",
    "TagKind",
    "parse",
    "prettify",
]
