# topmark:header:start
#
#   project      : CiSelect
#   file         : __init__.py
#   file_relpath : src/ciselect/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Click-based command-line interface for CiSelect."""

from __future__ import annotations
