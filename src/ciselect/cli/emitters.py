# topmark:header:start
#
#   project      : CiSelect
#   file         : emitters.py
#   file_relpath : src/ciselect/cli/emitters.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Human-readable renderers for step lists and run results.

Emitters only format and print through a `ConsoleLike`; they never decide exit
codes.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from ciselect.constants import FLAG_TRUE_VALUE
from ciselect.pipeline.outcomes import StepOutcome

if TYPE_CHECKING:
    from collections.abc import Sequence

    from ciselect.cli.console_api import ConsoleLike
    from ciselect.pipeline.contracts import Step
    from ciselect.pipeline.outcomes import RunResult, StepRecord

_OUTCOME_STYLES: dict[StepOutcome, str] = {
    StepOutcome.SUCCEEDED: "green",
    StepOutcome.FAILED: "bright_red",
    StepOutcome.TOLERATED: "yellow",
    StepOutcome.SKIPPED: "bright_black",
}


def step_annotations(step: Step) -> list[str]:
    """Return the bracketed markers shown next to a step (tolerated, guarded)."""
    notes: list[str] = []
    if step.tolerated:
        notes.append("failure tolerated")
    guard = getattr(step, "guard", None)
    if guard is not None:
        notes.append(f"only if {guard.value}={FLAG_TRUE_VALUE}")
    return notes


def emit_step_list(console: ConsoleLike, steps: Sequence[Step]) -> None:
    """Print a numbered list of steps."""
    width: int = len(str(len(steps)))
    for index, step in enumerate(steps, start=1):
        notes = step_annotations(step)
        suffix: str = f"  [{'; '.join(notes)}]" if notes else ""
        console.print(f"{index:>{width}}. {step.describe()}{console.styled(suffix, dim=True)}")


def emit_run_summary(console: ConsoleLike, result: RunResult) -> None:
    """Print one line per step record, then the overall status."""
    console.print(console.styled(f"Pipeline: {result.pipeline.value}", bold=True))
    for record in result.records:
        emit_record(console, record)
    status: str = "succeeded" if result.succeeded else f"failed (exit status {result.exit_code})"
    console.print(f"Result: {status}")


def emit_record(console: ConsoleLike, record: StepRecord) -> None:
    """Print a single step record."""
    label: str = console.styled(f"{record.outcome.value:<9}", fg=_OUTCOME_STYLES[record.outcome])
    code: str = f" (exit status {record.exit_code})" if record.exit_code else ""
    console.print(f"  {label} {record.description}{code}")
