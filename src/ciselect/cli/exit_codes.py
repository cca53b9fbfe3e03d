# topmark:header:start
#
#   project      : CiSelect
#   file         : exit_codes.py
#   file_relpath : src/ciselect/cli/exit_codes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exit codes for CiSelect's own errors.

A failing pipeline step does not use these codes: its exit status is
propagated unchanged, so ``cargo test`` exiting 101 makes ``ciselect`` exit
101. The codes below only cover failures of the orchestrator itself and align
with the BSD `sysexits` convention where practical.
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardized exit codes for CiSelect's own outcomes.

    Attributes:
        SUCCESS: The selected pipeline completed without untolerated failures.
        FAILURE: Generic failure (non-specific error).
        USAGE_ERROR: Command-line invocation error. Mirrors BSD ``EX_USAGE (64)``.
        PIPELINE_ERROR: Inconsistent pipeline definition (e.g. unbalanced
            directory steps). Mirrors BSD ``EX_SOFTWARE (70)``.
        CONFIG_ERROR: Configuration error (missing/invalid/malformed config).
            Mirrors BSD ``EX_CONFIG (78)``.
        UNEXPECTED_ERROR: Unhandled/unknown error (last resort).
    """

    SUCCESS = 0
    FAILURE = 1

    # sysexits-aligned values for better interoperability
    USAGE_ERROR = 64  # EX_USAGE
    PIPELINE_ERROR = 70  # EX_SOFTWARE (internal error)
    CONFIG_ERROR = 78  # EX_CONFIG

    UNEXPECTED_ERROR = 255
