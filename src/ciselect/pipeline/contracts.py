# topmark:header:start
#
#   project      : CiSelect
#   file         : contracts.py
#   file_relpath : src/ciselect/pipeline/contracts.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Type contracts for pipeline steps and command executors (engine-facing).

Steps are instantiated objects that are *callable*; the runner invokes them as
``step(ctx, executor)`` and gets back the updated context and a step record.

Lifecycle
---------
1) ``step.may_proceed(ctx)`` gates execution (guard flags).
2) If allowed, ``step.run(ctx, executor)`` performs the work and returns the
   updated context plus an exit status.
3) The step classifies the status (succeeded / failed / tolerated) into a
   [`StepRecord`][ciselect.pipeline.outcomes.StepRecord]. Whether the run stops
   is decided by the runner, from the record alone.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from ciselect.config.flags import Flag
    from ciselect.pipeline.context import RunContext
    from ciselect.pipeline.executor import Command
    from ciselect.pipeline.outcomes import StepRecord


class CommandExecutor(Protocol):
    """Runs one external command to completion and returns its exit status.

    Implementations must block until the command finishes, must not capture or
    suppress its output, and must map "could not start" conditions to shell
    exit statuses (126/127) instead of raising.
    """

    def execute(self, command: Command) -> int:
        """Run ``command`` and return its exit status."""
        ...

    def trace(self, text: str) -> None:
        """Echo a non-command action (``cd``, ``export``) in the command trace."""
        ...


class Step(Protocol):
    """Protocol for a single pipeline step.

    Implementations typically subclass
    [`ciselect.pipeline.steps.base.BaseStep`][].
    """

    name: str
    tolerated: bool
    guard: Flag | None

    def describe(self) -> str:
        """Return a one-line human-readable rendering of the step."""
        ...

    def may_proceed(self, ctx: RunContext) -> bool:
        """Return whether the step should run given the current context."""
        ...

    def run(self, ctx: RunContext, executor: CommandExecutor) -> tuple[RunContext, int]:
        """Perform the step and return the updated context and an exit status."""
        ...

    def __call__(self, ctx: RunContext, executor: CommandExecutor) -> tuple[RunContext, StepRecord]:
        """Run the step lifecycle: gate → run (optional) → classify."""
        ...
