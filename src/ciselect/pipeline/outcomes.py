# topmark:header:start
#
#   project      : CiSelect
#   file         : outcomes.py
#   file_relpath : src/ciselect/pipeline/outcomes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Step and run outcomes.

A run produces one [`StepRecord`][ciselect.pipeline.outcomes.StepRecord] per
step it reached (skipped guards included) and a single
[`RunResult`][ciselect.pipeline.outcomes.RunResult] whose ``exit_code`` is the
process exit status of the whole run.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ciselect.pipeline.pipelines import Pipeline


class StepOutcome(str, Enum):
    """What happened to a single step.

    Attributes:
        SUCCEEDED: The step ran and exited 0.
        FAILED: The step ran, exited non-zero, and aborted the run.
        TOLERATED: The step ran and exited non-zero, but is allowed to fail.
        SKIPPED: The step's guard flag was off; nothing ran.
    """

    SUCCEEDED = "succeeded"
    FAILED = "failed"
    TOLERATED = "tolerated"
    SKIPPED = "skipped"


@dataclass(frozen=True)
class StepRecord:
    """Result of one step.

    Attributes:
        name (str): Stable step identifier.
        description (str): Human-readable rendering (usually the command line).
        outcome (StepOutcome): What happened.
        exit_code (int | None): Exit status, or None for skipped steps.
    """

    name: str
    description: str
    outcome: StepOutcome
    exit_code: int | None = None


@dataclass(frozen=True)
class RunResult:
    """Result of a whole run.

    Attributes:
        pipeline (Pipeline): The pipeline that was selected.
        records (tuple[StepRecord, ...]): One record per step reached, in order.
        exit_code (int): 0 on success, otherwise the first fatal step's exit status.
    """

    pipeline: Pipeline
    records: tuple[StepRecord, ...]
    exit_code: int

    @property
    def succeeded(self) -> bool:
        """True when no untolerated step failed."""
        return self.exit_code == 0

    @property
    def failed_step(self) -> StepRecord | None:
        """The step that aborted the run, if any."""
        for record in self.records:
            if record.outcome is StepOutcome.FAILED:
                return record
        return None

    @property
    def tolerated_failures(self) -> tuple[StepRecord, ...]:
        """Steps that failed without failing the run."""
        return tuple(r for r in self.records if r.outcome is StepOutcome.TOLERATED)

    def executed(self) -> tuple[str, ...]:
        """Names of the steps that actually ran (skipped guards excluded)."""
        return tuple(r.name for r in self.records if r.outcome is not StepOutcome.SKIPPED)
