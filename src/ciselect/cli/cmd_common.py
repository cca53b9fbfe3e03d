# topmark:header:start
#
#   project      : CiSelect
#   file         : cmd_common.py
#   file_relpath : src/ciselect/cli/cmd_common.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Common command utilities for Click-based commands.

Small, focused helpers shared by several commands. They avoid policy (exit
code rules, messages) and only encapsulate plumbing such as resolving the
root directory and configuration.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from ciselect.cli.console_std import StdConsole
from ciselect.cli.errors import CiselectConfigError
from ciselect.config.io import resolve_config
from ciselect.config.logging import get_logger
from ciselect.config.model import ConfigError

if TYPE_CHECKING:
    from ciselect.cli.console_api import ConsoleLike
    from ciselect.config.model import Config

logger = get_logger(__name__)


def get_console(ctx: click.Context | None = None) -> ConsoleLike:
    """Return the console stored on the Click context by the group callback.

    Falls back to a [`StdConsole`][ciselect.cli.console_std.StdConsole] when no
    context is active or the group callback did not run (e.g. a command invoked
    directly from tests).
    """
    if ctx is None:
        ctx = click.get_current_context(silent=True)
    if ctx is not None and isinstance(ctx.obj, dict) and "console" in ctx.obj:
        console: ConsoleLike = ctx.obj["console"]
        return console
    return StdConsole()


def get_effective_verbosity(ctx: click.Context) -> int:
    """Return the program-output verbosity stored by the group (0 when absent)."""
    obj = ctx.obj if isinstance(ctx.obj, dict) else {}
    return int(obj.get("verbosity_level", 0))


def resolve_root(root: Path | None) -> Path:
    """Return the absolute pipeline root (current directory when not given)."""
    return (root if root is not None else Path.cwd()).resolve()


def load_config_for_cli(root: Path, *, config_file: Path | None, no_config: bool) -> Config:
    """Resolve the configuration, mapping `ConfigError` to a CLI error.

    Raises:
        CiselectConfigError: If the configuration source is invalid.
    """
    try:
        return resolve_config(root, config_file=config_file, no_config=no_config)
    except ConfigError as exc:
        logger.debug("Configuration error: %s", exc)
        raise CiselectConfigError(str(exc)) from exc
