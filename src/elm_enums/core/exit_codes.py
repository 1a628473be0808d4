# topmark:header:start
#
#   project      : elm-enums
#   file         : exit_codes.py
#   file_relpath : src/elm_enums/core/exit_codes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exit codes for the elm-enums CLI.

The small codes (1, 3) are part of the tool's historical contract and must not
change: scripts and build steps wrapping ``elm-enums`` test for them. Codes
added later follow the BSD `sysexits` convention where no historical value
exists.
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardized exit codes for the elm-enums CLI.

    Attributes:
        SUCCESS: The generated module was written.
        INPUT_ERROR: The definitions file could not be read (missing, permission
            denied, not a regular file, undecodable, or any other OS error).
        USAGE_ERROR: Command-line invocation error. Click's own default.
        SYNTAX_ERROR: The translator rejected the definitions.
        OUTPUT_ERROR: The generated module could not be written (or the previous
            version could not be moved to its backup).
        CONFIG_ERROR: A configuration file is malformed or holds a value of the
            wrong type. Mirrors BSD ``EX_CONFIG (78)``.
    """

    SUCCESS = 0
    INPUT_ERROR = 1
    USAGE_ERROR = 2
    SYNTAX_ERROR = 3
    OUTPUT_ERROR = 4

    CONFIG_ERROR = 78  # EX_CONFIG
