# topmark:header:start
#
#   project      : CiSelect
#   file         : run.py
#   file_relpath : src/ciselect/cli/commands/run.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CiSelect `run` command (also the default when no subcommand is given).

Selects the pipeline from the environment flags and runs it. The process exit
status is the status of the first failing step that is not tolerated, or 0.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from ciselect.cli.cmd_common import (
    get_console,
    get_effective_verbosity,
    load_config_for_cli,
    resolve_root,
)
from ciselect.cli.emitters import emit_run_summary
from ciselect.cli.errors import CiselectPipelineError, CiselectUnexpectedError
from ciselect.cli.options import common_config_options
from ciselect.config.logging import get_logger
from ciselect.pipeline.context import PipelineDefinitionError
from ciselect.pipeline.engine import run_ci
from ciselect.pipeline.executor import DryRunExecutor, SubprocessExecutor

if TYPE_CHECKING:
    from collections.abc import Callable
    from pathlib import Path

    from ciselect.pipeline.contracts import CommandExecutor
    from ciselect.pipeline.outcomes import RunResult

logger = get_logger(__name__)


@click.command(
    name="run",
    help=(
        "Run the pipeline selected by CLIPPY, DOCS, RUSTFMT or INTEGRATION_TESTS "
        "(the default pipeline otherwise)."
    ),
)
@common_config_options
@click.option(
    "--dry-run",
    "dry_run",
    is_flag=True,
    default=False,
    help="Print the commands without running them; every command counts as successful.",
)
def run_command(
    *,
    root: Path | None = None,
    config_file: Path | None = None,
    no_config: bool = False,
    dry_run: bool = False,
) -> None:
    """Select and run a pipeline.

    Args:
        root (Path | None): Directory the pipeline starts in (default: CWD).
        config_file (Path | None): Explicit configuration file.
        no_config (bool): Ignore configuration files.
        dry_run (bool): Echo commands instead of running them.

    Raises:
        CiselectPipelineError: If the pipeline definition is inconsistent.
        CiselectUnexpectedError: If running the pipeline raises anything else.
    """
    ctx = click.get_current_context()
    console = get_console(ctx)
    vlevel: int = get_effective_verbosity(ctx)

    root_path: Path = resolve_root(root)
    config = load_config_for_cli(root_path, config_file=config_file, no_config=no_config)

    echo: Callable[[str], None] | None = console.progress if vlevel >= 0 else None
    executor: CommandExecutor = (
        DryRunExecutor(echo=echo) if dry_run else SubprocessExecutor(echo=echo)
    )

    try:
        result: RunResult = run_ci(root=root_path, executor=executor, config=config)
    except PipelineDefinitionError as exc:
        raise CiselectPipelineError(str(exc)) from exc
    except Exception as exc:
        logger.exception("Unexpected error while running pipeline")
        raise CiselectUnexpectedError(f"unexpected error: {exc}") from exc

    for record in result.tolerated_failures:
        console.warn(
            f"warning: step '{record.name}' failed with exit status {record.exit_code} "
            "(failure tolerated)"
        )

    if vlevel > 0:
        emit_run_summary(console, result)

    failed = result.failed_step
    if failed is not None:
        console.error(
            f"Pipeline '{result.pipeline.value}' failed at step '{failed.name}' "
            f"(exit status {result.exit_code})"
        )
        ctx.exit(result.exit_code)
