# topmark:header:start
#
#   project      : CiSelect
#   file         : environment.py
#   file_relpath : src/ciselect/pipeline/steps/environment.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Step that exports a variable to every later command (``export NAME=value``)."""

from __future__ import annotations

import shlex
from dataclasses import dataclass
from typing import TYPE_CHECKING

from ciselect.pipeline.steps.base import BaseStep

if TYPE_CHECKING:
    from ciselect.pipeline.context import RunContext
    from ciselect.pipeline.contracts import CommandExecutor


@dataclass(frozen=True, kw_only=True)
class SetEnvironmentStep(BaseStep):
    """Add ``variable=value`` to the context's environment overlay."""

    variable: str
    value: str

    def run(self, ctx: RunContext, executor: CommandExecutor) -> tuple[RunContext, int]:
        """Return a context exporting the variable; always succeeds."""
        executor.trace(self.describe())
        return ctx.with_env(self.variable, self.value), 0

    def describe(self) -> str:
        """Return ``export NAME=value`` (shell-quoted)."""
        return f"export {self.variable}={shlex.quote(self.value)}"
