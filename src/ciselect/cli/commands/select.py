# topmark:header:start
#
#   project      : CiSelect
#   file         : select.py
#   file_relpath : src/ciselect/cli/commands/select.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CiSelect `select` command.

Prints the identifier of the pipeline the current environment selects, without
running anything.
"""

from __future__ import annotations

import click

from ciselect.cli.cmd_common import get_console, get_effective_verbosity
from ciselect.config.flags import FlagSet
from ciselect.pipeline.selector import select_pipeline, selecting_flag


@click.command(
    name="select",
    help="Print the pipeline the environment flags select.",
)
def select_command() -> None:
    """Print the selected pipeline identifier (plus the flags with -v)."""
    ctx = click.get_current_context()
    console = get_console(ctx)

    flags: FlagSet = FlagSet.from_environ()
    pipeline = select_pipeline(flags)
    console.print(pipeline.value)

    if get_effective_verbosity(ctx) > 0:
        flag = selecting_flag(flags)
        console.print(f"flags: {flags.describe()}")
        console.print(f"selected by: {flag.value if flag is not None else 'fallback'}")
