# topmark:header:start
#
#   project      : CiSelect
#   file         : test_runner.py
#   file_relpath : tests/pipeline/test_runner.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Runner: sequential, fail-fast execution of a step sequence."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ciselect.config.flags import FlagSet
from ciselect.pipeline import runner
from ciselect.pipeline.context import RunContext
from ciselect.pipeline.outcomes import StepOutcome
from ciselect.pipeline.steps import CommandStep
from tests.pipeline.conftest import RecordingExecutor

if TYPE_CHECKING:
    from pathlib import Path

STEPS = (
    CommandStep(name="one", program="one"),
    CommandStep(name="two", program="two", tolerated=True),
    CommandStep(name="three", program="three"),
    CommandStep(name="four", program="four"),
)


def _ctx(root: Path) -> RunContext:
    return RunContext.bootstrap(root=root, flags=FlagSet())


def test_all_steps_run_in_order(tmp_path: Path, recorder: RecordingExecutor) -> None:
    """Every step runs, in declaration order, when all succeed."""
    _ctx_after, records, exit_code = runner.run(_ctx(tmp_path), STEPS, recorder)

    assert exit_code == 0
    assert recorder.argvs == [("one",), ("two",), ("three",), ("four",)]
    assert [r.outcome for r in records] == [StepOutcome.SUCCEEDED] * 4


def test_first_failure_stops_the_run(tmp_path: Path) -> None:
    """Steps after the first fatal failure never start."""
    executor = RecordingExecutor({("three",): 42})

    _ctx_after, records, exit_code = runner.run(_ctx(tmp_path), STEPS, executor)

    assert exit_code == 42
    assert executor.argvs == [("one",), ("two",), ("three",)]
    assert [r.name for r in records] == ["one", "two", "three"]


def test_tolerated_failure_does_not_stop(tmp_path: Path) -> None:
    """A tolerated failure is recorded and the run continues to exit 0."""
    executor = RecordingExecutor({("two",): 7})

    _ctx_after, records, exit_code = runner.run(_ctx(tmp_path), STEPS, executor)

    assert exit_code == 0
    assert records[1].outcome is StepOutcome.TOLERATED
    assert records[1].exit_code == 7
    assert len(records) == 4


def test_empty_sequence_succeeds(tmp_path: Path) -> None:
    """Running no steps is a success."""
    _ctx_after, records, exit_code = runner.run(_ctx(tmp_path), (), RecordingExecutor())

    assert (records, exit_code) == ((), 0)
