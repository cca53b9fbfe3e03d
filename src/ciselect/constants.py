# topmark:header:start
#
#   project      : CiSelect
#   file         : constants.py
#   file_relpath : src/ciselect/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CiSelect Constants."""

from __future__ import annotations

from importlib.metadata import version as get_version

CISELECT_VERSION: str = get_version("ciselect")

# The only string value that turns a flag on. Anything else (or absence) is off.
FLAG_TRUE_VALUE: str = "yes"

# Environment variable consulted for the internal log level.
LOG_LEVEL_ENV_VAR: str = "CISELECT_LOG_LEVEL"

# Variable instructing rustc to treat warnings as errors (default pipeline only).
STRICTNESS_ENV_VAR: str = "RUSTFLAGS"

# Config discovery, relative to the pipeline root directory.
CONFIG_FILE_NAME: str = "ciselect.toml"
PYPROJECT_FILE_NAME: str = "pyproject.toml"
PYPROJECT_TOOL_TABLE: tuple[str, str] = ("tool", "ciselect")

# Shell conventions for commands that never produced an exit status.
EXIT_CANNOT_EXECUTE: int = 126
EXIT_COMMAND_NOT_FOUND: int = 127
EXIT_SIGNAL_BASE: int = 128

# Exit status of a failed `cd` under `set -e`.
EXIT_CHDIR_FAILED: int = 1
