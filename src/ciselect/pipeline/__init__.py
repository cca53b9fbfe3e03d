# topmark:header:start
#
#   project      : CiSelect
#   file         : __init__.py
#   file_relpath : src/ciselect/pipeline/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Pipeline selection, step definitions, and the fail-fast runner."""

from __future__ import annotations
