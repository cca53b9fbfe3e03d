# topmark:header:start
#
#   project      : CiSelect
#   file         : __init__.py
#   file_relpath : src/ciselect/cli/commands/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CiSelect CLI subcommands."""

from __future__ import annotations
