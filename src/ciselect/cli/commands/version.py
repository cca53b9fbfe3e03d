# topmark:header:start
#
#   project      : CiSelect
#   file         : version.py
#   file_relpath : src/ciselect/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CiSelect `version` command.

Prints the current CiSelect version as installed in the active Python environment.
"""

from __future__ import annotations

import json

import click

from ciselect.cli.cmd_common import get_console, get_effective_verbosity
from ciselect.constants import CISELECT_VERSION


@click.command(
    name="version",
    help="Show the current version of CiSelect.",
)
@click.option(
    "--json",
    "as_json",
    is_flag=True,
    default=False,
    help="Print the version as a JSON object.",
)
def version_command(*, as_json: bool = False) -> None:
    """Show the current version of CiSelect.

    Args:
        as_json (bool): Emit ``{"version": ...}`` instead of plain text.
    """
    ctx = click.get_current_context()
    console = get_console(ctx)

    if as_json:
        console.print(json.dumps({"version": CISELECT_VERSION}))
    elif get_effective_verbosity(ctx) > 0:
        console.print(console.styled("CiSelect version:", bold=True, underline=True))
        console.print(f"    {console.styled(CISELECT_VERSION, bold=True)}")
    else:
        console.print(console.styled(CISELECT_VERSION, bold=True))
