# topmark:header:start
#
#   project      : CiSelect
#   file         : __init__.py
#   file_relpath : src/ciselect/pipeline/steps/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Concrete pipeline steps (external command, enter/leave directory, export)."""

from __future__ import annotations

from ciselect.pipeline.steps.base import BaseStep
from ciselect.pipeline.steps.command import CommandStep
from ciselect.pipeline.steps.directory import EnterDirectoryStep, LeaveDirectoryStep
from ciselect.pipeline.steps.environment import SetEnvironmentStep

__all__ = [
    "BaseStep",
    "CommandStep",
    "EnterDirectoryStep",
    "LeaveDirectoryStep",
    "SetEnvironmentStep",
]
