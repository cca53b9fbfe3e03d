# topmark:header:start
#
#   project      : CiSelect
#   file         : command.py
#   file_relpath : src/ciselect/pipeline/steps/command.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Step that runs one external command.

The command runs in the context's current directory, or in ``cwd`` (resolved
against it) when set. The override applies to this command only; the context
is returned unchanged.
"""

from __future__ import annotations

import shlex
from dataclasses import dataclass
from typing import TYPE_CHECKING

from ciselect.pipeline.executor import Command
from ciselect.pipeline.steps.base import BaseStep

if TYPE_CHECKING:
    from ciselect.pipeline.context import RunContext
    from ciselect.pipeline.contracts import CommandExecutor


@dataclass(frozen=True, kw_only=True)
class CommandStep(BaseStep):
    """Run ``program`` with ``args``.

    Attributes:
        program (str): Executable name or path.
        args (tuple[str, ...]): Arguments, passed verbatim (no shell).
        cwd (str | None): Per-step working-directory override.
    """

    program: str
    args: tuple[str, ...] = ()
    cwd: str | None = None

    @property
    def argv(self) -> tuple[str, ...]:
        """Program followed by its arguments."""
        return (self.program, *self.args)

    def build_command(self, ctx: RunContext) -> Command:
        """Resolve this step into a concrete `Command` for ``ctx``."""
        return Command(
            argv=self.argv,
            cwd=ctx.resolve(self.cwd) if self.cwd is not None else ctx.cwd,
            env=ctx.env,
        )

    def run(self, ctx: RunContext, executor: CommandExecutor) -> tuple[RunContext, int]:
        """Execute the command; the context is not changed."""
        return ctx, executor.execute(self.build_command(ctx))

    def describe(self) -> str:
        """Return the shell-quoted command line (with its directory override, if any)."""
        text: str = shlex.join(self.argv)
        if self.cwd is not None:
            text = f"(cd {shlex.quote(self.cwd)} && {text})"
        return text
