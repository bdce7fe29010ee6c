# topmark:header:start
#
#   project      : CmdCatalog
#   file         : exit_codes.py
#   file_relpath : src/cmdcatalog/cli/exit_codes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exit codes for CmdCatalog CLI.

CmdCatalog aligns with the BSD `sysexits` convention where practical, so that
build tooling can interpret failures consistently.
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardized exit codes for CmdCatalog CLI.

    Attributes:
        SUCCESS: The catalog was rendered.
        FAILURE: Generic failure (e.g. a module source could not be imported).
        USAGE_ERROR: Command-line invocation error. Mirrors BSD ``EX_USAGE (64)``.
        PARSE_ERROR: A source file could not be decoded or parsed. Mirrors BSD
            ``EX_DATAERR (65)``.
        FILE_NOT_FOUND: A source root does not exist. Mirrors BSD ``EX_NOINPUT (66)``.
        IO_ERROR: Reading a source or writing the catalog failed. Mirrors BSD
            ``EX_IOERR (74)``.
        CONFIG_ERROR: Invalid configuration. Mirrors BSD ``EX_CONFIG (78)``.
        UNEXPECTED_ERROR: Unhandled/unknown error (last-resort).
    """

    SUCCESS = 0
    FAILURE = 1

    # sysexits-aligned values for better interoperability
    USAGE_ERROR = 64  # EX_USAGE
    PARSE_ERROR = 65  # EX_DATAERR
    FILE_NOT_FOUND = 66  # EX_NOINPUT
    IO_ERROR = 74  # EX_IOERR
    CONFIG_ERROR = 78  # EX_CONFIG

    UNEXPECTED_ERROR = 255
