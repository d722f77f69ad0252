# topmark:header:start
#
#   project      : PrettyMark
#   file         : errors.py
#   file_relpath : src/prettymark/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Library-level exceptions.

The formatter itself has a single failure mode: the output sink refusing more
text. Everything else (unsupported events, an unexpected frame on top of the
context stack) degrades silently and is only visible in the logs.
"""

from __future__ import annotations


class PrettymarkError(Exception):
    """Base class for all PrettyMark library errors."""


class SinkWriteError(PrettymarkError):
    """The output sink could not accept more text.

    The original exception raised by the sink is chained as ``__cause__``.
    Output written before the failure is incomplete and should be discarded.
    """


class ConfigError(PrettymarkError):
    """A configuration value has the wrong type or shape."""
