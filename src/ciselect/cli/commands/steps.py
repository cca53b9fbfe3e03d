# topmark:header:start
#
#   project      : CiSelect
#   file         : steps.py
#   file_relpath : src/ciselect/cli/commands/steps.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CiSelect `steps` command: list a pipeline's steps without running them."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from ciselect.cli.cmd_common import get_console, load_config_for_cli, resolve_root
from ciselect.cli.emitters import emit_step_list
from ciselect.cli.options import common_config_options
from ciselect.config.flags import FlagSet
from ciselect.pipeline.pipelines import Pipeline, get_pipeline
from ciselect.pipeline.selector import select_pipeline

if TYPE_CHECKING:
    from pathlib import Path


@click.command(
    name="steps",
    help="List the steps of the selected pipeline (or of --pipeline).",
)
@common_config_options
@click.option(
    "--pipeline",
    "pipeline",
    type=click.Choice([p.value for p in Pipeline], case_sensitive=False),
    default=None,
    help="Pipeline to list instead of the selected one.",
)
def steps_command(
    *,
    root: Path | None = None,
    config_file: Path | None = None,
    no_config: bool = False,
    pipeline: str | None = None,
) -> None:
    """List pipeline steps.

    Args:
        root (Path | None): Directory used for configuration discovery.
        config_file (Path | None): Explicit configuration file.
        no_config (bool): Ignore configuration files.
        pipeline (str | None): Pipeline identifier to list; the selected one when None.
    """
    ctx = click.get_current_context()
    console = get_console(ctx)

    config = load_config_for_cli(resolve_root(root), config_file=config_file, no_config=no_config)
    chosen: Pipeline = (
        get_pipeline(pipeline) if pipeline is not None else select_pipeline(FlagSet.from_environ())
    )

    console.print(console.styled(f"Pipeline: {chosen.value}", bold=True))
    emit_step_list(console, chosen.steps(config))
