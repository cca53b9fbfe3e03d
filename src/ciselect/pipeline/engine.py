# topmark:header:start
#
#   project      : CiSelect
#   file         : engine.py
#   file_relpath : src/ciselect/pipeline/engine.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Execution entry point for a CI run (engine layer).

Reads the flags once, selects the pipeline, builds its steps from the config,
and runs them. Shared by the CLI and by programmatic callers.

Design goals:
  - No CLI dependencies: do not import Click or anything under
    ``ciselect.cli.*`` from here. Printing and process exit are the CLI's job.
  - Structured results: return a `RunResult`; never call ``sys.exit``.
  - Logging only: diagnostics go to the package logger.

Typical usage:

    result = run_ci(root=Path.cwd(), executor=SubprocessExecutor())
    raise SystemExit(result.exit_code)
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from ciselect.config.flags import FlagSet
from ciselect.config.logging import get_logger
from ciselect.config.model import Config
from ciselect.pipeline import runner
from ciselect.pipeline.context import RunContext
from ciselect.pipeline.outcomes import RunResult
from ciselect.pipeline.selector import select_pipeline, selecting_flag

if TYPE_CHECKING:
    from collections.abc import Mapping
    from pathlib import Path

    from ciselect.config.logging import CiselectLogger
    from ciselect.pipeline.contracts import CommandExecutor, Step
    from ciselect.pipeline.pipelines import Pipeline

logger: CiselectLogger = get_logger(__name__)


def plan(
    *,
    environ: Mapping[str, str] | None = None,
    config: Config | None = None,
) -> tuple[FlagSet, Pipeline, tuple[Step, ...]]:
    """Select the pipeline for ``environ`` and build its steps, without running anything.

    Args:
        environ (Mapping[str, str] | None): Environment to read flags from
            (process environment when None).
        config (Config | None): Project configuration (defaults when None).

    Returns:
        tuple[FlagSet, Pipeline, tuple[Step, ...]]: The flags, the selected
            pipeline, and its steps.
    """
    flags: FlagSet = FlagSet.from_environ(environ)
    pipeline: Pipeline = select_pipeline(flags)
    logger.info(
        "Selected pipeline %s (by %s)",
        pipeline.value,
        selecting_flag(flags) or "fallback",
    )
    steps: tuple[Step, ...] = pipeline.steps(config or Config.from_defaults())
    return flags, pipeline, steps


def run_ci(
    *,
    root: Path,
    executor: CommandExecutor,
    environ: Mapping[str, str] | None = None,
    config: Config | None = None,
) -> RunResult:
    """Run the pipeline selected by the environment.

    Args:
        root (Path): Directory the pipeline starts in.
        executor (CommandExecutor): Runs the external commands.
        environ (Mapping[str, str] | None): Environment to read flags from
            (process environment when None). Commands inherit the executor's
            base environment, not this mapping.
        config (Config | None): Project configuration (defaults when None).

    Returns:
        RunResult: The selected pipeline, per-step records, and the exit status.

    Raises:
        PipelineDefinitionError: If the selected pipeline's steps are inconsistent.
    """
    cfg: Config = config or Config.from_defaults()
    flags, pipeline, steps = plan(environ=environ, config=cfg)

    ctx: RunContext = RunContext.bootstrap(root=root, flags=flags, env=cfg.env)
    _ctx, records, exit_code = runner.run(ctx, steps, executor)

    result = RunResult(pipeline=pipeline, records=records, exit_code=exit_code)
    if result.succeeded:
        logger.info("Pipeline %s succeeded", pipeline.value)
    else:
        logger.error(
            "Pipeline %s failed at %s (exit status %d)",
            pipeline.value,
            result.failed_step.name if result.failed_step else "?",
            exit_code,
        )
    return result
