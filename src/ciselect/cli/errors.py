# topmark:header:start
#
#   project      : CiSelect
#   file         : errors.py
#   file_relpath : src/ciselect/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions for the CiSelect CLI.

Raise these from commands to signal orchestrator errors with standardized
messages and exit codes. Tool failures are *not* exceptions: the run command
exits with the failing step's own status.

Styling:
    Exceptions prefer the project console if available (see `show()`); if no
    console is present in the Click context, they fall back to Click's default.
"""

from __future__ import annotations

from typing import IO, Any

import click

from ciselect.cli.exit_codes import ExitCode


class CiselectError(click.ClickException):
    """Base class for all CiSelect CLI errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:  # pragma: no cover - trivial
        """Return the plain error message text (colorized in `show()`)."""
        return str(getattr(self, "message", ""))

    def show(self, file: IO[Any] | None = None) -> None:  # pragma: no cover - Click prints errors
        """Display the error using the project console if available."""
        ctx = click.get_current_context(silent=True)
        if ctx is not None and isinstance(getattr(ctx, "obj", None), dict):
            console = ctx.obj.get("console")
            if console is not None:
                console.error(f"Error: {self.format_message()}")
                return
        super().show(file)


class CiselectUsageError(CiselectError):
    """Error for command-line invocation errors (invalid flag combinations)."""

    exit_code = ExitCode.USAGE_ERROR


class CiselectConfigError(CiselectError):
    """Error for configuration errors (missing/invalid/malformed config)."""

    exit_code = ExitCode.CONFIG_ERROR


class CiselectPipelineError(CiselectError):
    """Error for inconsistent pipeline definitions."""

    exit_code = ExitCode.PIPELINE_ERROR


class CiselectUnexpectedError(CiselectError):
    """Error for unhandled/unknown errors (last resort)."""

    exit_code = ExitCode.UNEXPECTED_ERROR
