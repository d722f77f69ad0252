# topmark:header:start
#
#   project      : PrettyMark
#   file         : exit_codes.py
#   file_relpath : src/prettymark/cli/exit_codes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exit codes for the PrettyMark CLI.

PrettyMark aligns with the BSD `sysexits` convention where practical. The one
deliberate divergence is `WOULD_CHANGE=2`, used by a dry run that found files
needing formatting. Click's own usage errors also exit with 2, so tests must
assert ``result.exception is None`` to tell the two apart.
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardized exit codes for the PrettyMark CLI.

    Attributes:
        SUCCESS: Nothing to change, or all changes were written.
        FAILURE: Generic failure (non-specific error).
        WOULD_CHANGE: Dry run: files would change with ``--apply``.
        USAGE_ERROR: Invalid invocation. Mirrors BSD ``EX_USAGE (64)``.
        ENCODING_ERROR: Input is not valid UTF-8. Mirrors BSD ``EX_DATAERR (65)``.
        FILE_NOT_FOUND: Input path does not exist. Mirrors BSD ``EX_NOINPUT (66)``.
        IO_ERROR: Reading or writing failed. Mirrors BSD ``EX_IOERR (74)``.
        CONFIG_ERROR: Invalid configuration. Mirrors BSD ``EX_CONFIG (78)``.
    """

    SUCCESS = 0
    FAILURE = 1
    WOULD_CHANGE = 2  # deliberate divergence from sysexits; see module docstring

    USAGE_ERROR = 64  # EX_USAGE
    ENCODING_ERROR = 65  # EX_DATAERR
    FILE_NOT_FOUND = 66  # EX_NOINPUT
    IO_ERROR = 74  # EX_IOERR
    CONFIG_ERROR = 78  # EX_CONFIG
