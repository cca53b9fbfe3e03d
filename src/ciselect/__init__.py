# topmark:header:start
#
#   project      : CiSelect
#   file         : __init__.py
#   file_relpath : src/ciselect/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CiSelect package.

CiSelect is a mode-dispatching CI orchestrator. It reads a handful of ``yes``
switches from the environment, picks exactly one verification pipeline (lint,
docs, format, integration tests, or the default check/test matrix) and runs its
fixed sequence of external commands with fail-fast semantics.
"""

from __future__ import annotations
