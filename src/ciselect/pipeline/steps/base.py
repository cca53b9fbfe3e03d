# topmark:header:start
#
#   project      : CiSelect
#   file         : base.py
#   file_relpath : src/ciselect/pipeline/steps/base.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Base class for class-based pipeline steps.

The runner invokes steps as *callables*. `BaseStep` implements the common
lifecycle:

    ctx, record = step(ctx, executor)  # internally: may_proceed → run? → classify

Design goals
------------
- Single place for guard evaluation and outcome classification.
- Steps never decide whether the run continues; the runner reads the record.
- Steps never mutate shared state; they return an updated `RunContext`.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from ciselect.config.logging import get_logger
from ciselect.pipeline.outcomes import StepOutcome, StepRecord

if TYPE_CHECKING:
    from ciselect.config.flags import Flag
    from ciselect.config.logging import CiselectLogger
    from ciselect.pipeline.context import RunContext
    from ciselect.pipeline.contracts import CommandExecutor

logger: CiselectLogger = get_logger(__name__)


@dataclass(frozen=True, kw_only=True)
class BaseStep:
    """Reusable foundation for pipeline steps.

    Subclass this to implement a concrete step by overriding ``run()`` and
    ``describe()``. Do not override ``__call__`` unless you need custom
    lifecycle behavior.

    Attributes:
        name (str): Stable step identifier for logs and records.
        tolerated (bool): If True, a non-zero exit status does not fail the run.
        guard (Flag | None): When set, the step only runs if this flag is on.
    """

    name: str
    tolerated: bool = False
    guard: Flag | None = None

    def __call__(
        self, ctx: RunContext, executor: CommandExecutor
    ) -> tuple[RunContext, StepRecord]:
        """Invoke the step lifecycle: gate → run (if allowed) → classify.

        Args:
            ctx (RunContext): The context produced by the previous step.
            executor (CommandExecutor): Runs external commands.

        Returns:
            tuple[RunContext, StepRecord]: The updated context and this step's record.
        """
        if not self.may_proceed(ctx):
            logger.info("Step %s skipped (guard %s is off)", self.name, self.guard)
            return ctx, StepRecord(
                name=self.name,
                description=self.describe(),
                outcome=StepOutcome.SKIPPED,
            )

        logger.info("Step %s - running", self.name)
        new_ctx, exit_code = self.run(ctx, executor)
        return new_ctx, self.classify(exit_code)

    def may_proceed(self, ctx: RunContext) -> bool:
        """Return whether the step should run given the current context.

        Default: run unless a guard flag is configured and off.
        """
        return self.guard is None or ctx.flags.is_set(self.guard)

    def run(self, ctx: RunContext, executor: CommandExecutor) -> tuple[RunContext, int]:
        """Perform the step's work and return the updated context and exit status.

        Subclasses must implement this method.
        """
        raise NotImplementedError

    def describe(self) -> str:
        """Return a one-line rendering of the step (defaults to its name)."""
        return self.name

    def classify(self, exit_code: int) -> StepRecord:
        """Turn an exit status into a record, honoring ``tolerated``."""
        if exit_code == 0:
            outcome = StepOutcome.SUCCEEDED
        elif self.tolerated:
            outcome = StepOutcome.TOLERATED
            logger.warning(
                "Step %s failed with exit status %d; failure tolerated, continuing",
                self.name,
                exit_code,
            )
        else:
            outcome = StepOutcome.FAILED
            logger.error("Step %s failed with exit status %d", self.name, exit_code)
        return StepRecord(
            name=self.name,
            description=self.describe(),
            outcome=outcome,
            exit_code=exit_code,
        )
