# topmark:header:start
#
#   project      : SnapText
#   file         : exit_codes.py
#   file_relpath : src/snaptext/cli/exit_codes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Defines standardized exit codes used by the SnapText CLI.

Codes follow BSD ``sysexits.h`` so shells and CI can interpret failures
consistently.
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardized exit codes for the SnapText CLI.

    Attributes:
        SUCCESS (int): The document was rendered.
        FAILURE (int): Generic failure.
        USAGE_ERROR (int): Invalid flags or arguments.
        DATA_ERROR (int): The snapshot document is malformed.
        FILE_NOT_FOUND (int): An input file does not exist.
        INTERNAL_ERROR (int): The snapshot could not be rendered (internal state error).
        IO_ERROR (int): Reading or writing failed.
        CONFIG_ERROR (int): The configuration is invalid.
    """

    SUCCESS = 0
    FAILURE = 1

    USAGE_ERROR = 64  # EX_USAGE
    DATA_ERROR = 65  # EX_DATAERR
    FILE_NOT_FOUND = 66  # EX_NOINPUT
    INTERNAL_ERROR = 70  # EX_SOFTWARE
    IO_ERROR = 74  # EX_IOERR
    CONFIG_ERROR = 78  # EX_CONFIG

