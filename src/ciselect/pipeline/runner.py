# topmark:header:start
#
#   project      : CiSelect
#   file         : runner.py
#   file_relpath : src/ciselect/pipeline/runner.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Run a step sequence with fail-fast semantics.

Each step's result is checked immediately after it runs, before the next step
starts. The first ``FAILED`` record stops the loop and its exit status becomes
the run's exit status. ``TOLERATED`` and ``SKIPPED`` records never stop it.
No retries.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from ciselect.config.logging import get_logger
from ciselect.pipeline.outcomes import StepOutcome

if TYPE_CHECKING:
    from collections.abc import Sequence

    from ciselect.config.logging import CiselectLogger
    from ciselect.pipeline.context import RunContext
    from ciselect.pipeline.contracts import CommandExecutor, Step
    from ciselect.pipeline.outcomes import StepRecord

logger: CiselectLogger = get_logger(__name__)


def run(
    ctx: RunContext,
    steps: Sequence[Step],
    executor: CommandExecutor,
) -> tuple[RunContext, tuple[StepRecord, ...], int]:
    """Execute the pipeline sequentially.

    Args:
        ctx (RunContext): Initial context.
        steps (Sequence[Step]): Ordered sequence of pipeline steps.
        executor (CommandExecutor): Runs the steps' external commands.

    Returns:
        tuple[RunContext, tuple[StepRecord, ...], int]: The final context, one
            record per step reached, and the exit status (0, or the status of
            the step that aborted the run).
    """
    records: list[StepRecord] = []
    for index, step in enumerate(steps, start=1):
        logger.trace("Step %d/%d: %s (cwd=%s)", index, len(steps), step.name, ctx.cwd)
        ctx, record = step(ctx, executor)
        records.append(record)
        if record.outcome is StepOutcome.FAILED:
            exit_code: int = record.exit_code if record.exit_code else 1
            logger.info(
                "Run aborted at step %s; %d step(s) not run", step.name, len(steps) - index
            )
            return ctx, tuple(records), exit_code

    return ctx, tuple(records), 0
