# topmark:header:start
#
#   project      : BPMN Codegen
#   file         : exit_codes.py
#   file_relpath : src/bpmngen/core/exit_codes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exit codes for the bpmngen CLI.

bpmngen aligns with the BSD `sysexits` convention so that build tooling can
interpret failures consistently.
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardized exit codes for the bpmngen CLI.

    Attributes:
        SUCCESS: Every discovered document was processed and every unit written.
        FAILURE: Generic failure (non-specific error).
        USAGE_ERROR: Command-line invocation error. Mirrors BSD ``EX_USAGE (64)``.
        PARSE_ERROR: At least one document could not be parsed (the run still
            completed). Mirrors BSD ``EX_DATAERR (65)``.
        DISCOVERY_ERROR: The source root could not be scanned; nothing was
            generated. Mirrors BSD ``EX_NOINPUT (66)``.
        COLLISION_ERROR: A unit was rejected because its target was already
            generated (``collision_policy = "error"``). Mirrors BSD ``EX_CANTCREAT (73)``.
        WRITE_ERROR: At least one unit could not be written. Mirrors BSD ``EX_IOERR (74)``.
        CONFIG_ERROR: Invalid configuration. Mirrors BSD ``EX_CONFIG (78)``.
    """

    SUCCESS = 0
    FAILURE = 1

    USAGE_ERROR = 64  # EX_USAGE
    PARSE_ERROR = 65  # EX_DATAERR
    DISCOVERY_ERROR = 66  # EX_NOINPUT
    COLLISION_ERROR = 73  # EX_CANTCREAT
    WRITE_ERROR = 74  # EX_IOERR
    CONFIG_ERROR = 78  # EX_CONFIG
