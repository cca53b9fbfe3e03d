# topmark:header:start
#
#   project      : CiSelect
#   file         : main.py
#   file_relpath : src/ciselect/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Click CLI: a default action (``run``) plus real subcommands.

Key ideas:
- Group-level options (verbosity, color) are initialized once into ``ctx.obj``.
- Invoking ``ciselect`` without a subcommand runs the selected pipeline, so CI
  configurations only need the bare command.
"""

from __future__ import annotations

import click

from ciselect.cli.commands.run import run_command
from ciselect.cli.commands.select import select_command
from ciselect.cli.commands.steps import steps_command
from ciselect.cli.commands.version import version_command
from ciselect.cli.console import ClickConsole
from ciselect.cli.options import (
    ColorMode,
    common_color_options,
    common_verbose_options,
    resolve_color_mode,
    resolve_verbosity,
)
from ciselect.config.logging import get_logger, resolve_env_log_level, setup_logging

logger = get_logger(__name__)


def init_common_state(
    ctx: click.Context,
    *,
    verbose: int,
    quiet: int,
    color_mode: ColorMode | None,
    no_color: bool,
) -> None:
    """Initialize shared state (verbosity, logging, color, console) on the Click context.

    Args:
        ctx (click.Context): Current Click context; will have ``obj`` and ``color`` set.
        verbose (int): Count of ``-v`` flags.
        quiet (int): Count of ``-q`` flags.
        color_mode (ColorMode | None): Explicit color mode from ``--color`` (or ``None``).
        no_color (bool): Whether ``--no-color`` was passed; forces color off.
    """
    ctx.obj = ctx.obj or {}

    ctx.obj["verbosity_level"] = resolve_verbosity(verbose, quiet)

    # Internal logging is configured from the environment only
    level_env = resolve_env_log_level()
    ctx.obj["log_level"] = level_env
    setup_logging(level=level_env)

    effective_color_mode = ColorMode.NEVER if no_color else (color_mode or ColorMode.AUTO)
    enable_color = resolve_color_mode(cli_mode=effective_color_mode)
    ctx.obj["color_enabled"] = enable_color
    ctx.color = enable_color

    ctx.obj["console"] = ClickConsole(enable_color=enable_color)


@click.group(
    cls=click.Group,
    context_settings={"help_option_names": ["-h", "--help"]},
    invoke_without_command=True,
    help="CiSelect: run the CI pipeline selected by environment flags.",
)
@common_verbose_options
@common_color_options
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: int,
    quiet: int,
    color_mode: str | None,
    no_color: bool,
) -> None:
    """Entry point for the CiSelect CLI."""
    init_common_state(
        ctx,
        verbose=verbose,
        quiet=quiet,
        color_mode=ColorMode(color_mode) if color_mode else None,
        no_color=no_color,
    )

    if ctx.invoked_subcommand is None:
        logger.debug("No subcommand given; running the selected pipeline")
        ctx.invoke(run_command)


cli.add_command(run_command)

cli.add_command(select_command)

cli.add_command(steps_command)

cli.add_command(version_command)

if __name__ == "__main__":
    cli()
