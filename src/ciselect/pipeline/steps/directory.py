# topmark:header:start
#
#   project      : CiSelect
#   file         : directory.py
#   file_relpath : src/ciselect/pipeline/steps/directory.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Directory-context steps (``cd <dir>`` / ``cd ..``).

Entering scopes every later step of the pipeline to the new directory until a
matching leave step (or the end of the pipeline). Entering a directory that
does not exist fails with exit status 1, like ``cd`` under ``set -e``.
"""

from __future__ import annotations

import shlex
from dataclasses import dataclass
from typing import TYPE_CHECKING

from ciselect.config.logging import get_logger
from ciselect.constants import EXIT_CHDIR_FAILED
from ciselect.pipeline.steps.base import BaseStep

if TYPE_CHECKING:
    from ciselect.config.logging import CiselectLogger
    from ciselect.pipeline.context import RunContext
    from ciselect.pipeline.contracts import CommandExecutor

logger: CiselectLogger = get_logger(__name__)


@dataclass(frozen=True, kw_only=True)
class EnterDirectoryStep(BaseStep):
    """Make ``path`` (relative to the current directory) the current directory."""

    path: str

    def run(self, ctx: RunContext, executor: CommandExecutor) -> tuple[RunContext, int]:
        """Switch directories, or fail with status 1 if ``path`` is not a directory."""
        executor.trace(self.describe())
        target = ctx.resolve(self.path)
        if not target.is_dir():
            logger.error("cd: %s: No such directory", target)
            return ctx, EXIT_CHDIR_FAILED
        logger.debug("Entering %s", target)
        return ctx.enter(self.path), 0

    def describe(self) -> str:
        """Return ``cd <path>``."""
        return f"cd {shlex.quote(self.path)}"


@dataclass(frozen=True, kw_only=True)
class LeaveDirectoryStep(BaseStep):
    """Return to the directory active before the matching enter step."""

    def run(self, ctx: RunContext, executor: CommandExecutor) -> tuple[RunContext, int]:
        """Pop the directory stack.

        Raises:
            PipelineDefinitionError: If no enter step preceded this one.
        """
        executor.trace(self.describe())
        new_ctx = ctx.leave()
        logger.debug("Leaving %s for %s", ctx.cwd, new_ctx.cwd)
        return new_ctx, 0

    def describe(self) -> str:
        """Return ``cd ..``."""
        return "cd .."
