# topmark:header:start
#
#   project      : CiSelect
#   file         : context.py
#   file_relpath : src/ciselect/pipeline/context.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Immutable run context threaded through pipeline steps.

A shell CI script keeps its state in the process: ``cd`` changes the working
directory and ``export`` changes the environment for everything that follows.
`RunContext` holds the same state as a value instead. Steps receive a context
and return an updated copy; the runner passes that copy to the next step. The
process-wide working directory and ``os.environ`` are never touched.

State carried:
    - ``root``: directory the pipeline started in.
    - ``cwd``: directory the next command runs in.
    - ``dir_stack``: directories to restore on ``leave`` (innermost last).
    - ``env``: overlay exported to every command (on top of the inherited environment).
    - ``flags``: the flags read once at run start.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from types import MappingProxyType
from typing import TYPE_CHECKING

from ciselect.config.flags import FlagSet

if TYPE_CHECKING:
    from collections.abc import Mapping
    from pathlib import Path


class PipelineDefinitionError(RuntimeError):
    """Raised when a pipeline's step list is internally inconsistent (e.g. unbalanced leave)."""


def _empty_env() -> Mapping[str, str]:
    return MappingProxyType({})


@dataclass(frozen=True)
class RunContext:
    """Per-run state passed from step to step.

    Attributes:
        root (Path): Directory the pipeline started in.
        cwd (Path): Working directory for the next command.
        dir_stack (tuple[Path, ...]): Previously active directories, innermost last.
        env (Mapping[str, str]): Environment overlay for commands.
        flags (FlagSet): Flags read at run start.
    """

    root: Path
    cwd: Path
    dir_stack: tuple[Path, ...] = ()
    env: Mapping[str, str] = field(default_factory=_empty_env)
    flags: FlagSet = field(default_factory=FlagSet)

    @classmethod
    def bootstrap(
        cls,
        *,
        root: Path,
        flags: FlagSet,
        env: Mapping[str, str] | None = None,
    ) -> RunContext:
        """Create the initial context for a run starting in ``root``."""
        return cls(
            root=root,
            cwd=root,
            env=MappingProxyType(dict(env or {})),
            flags=flags,
        )

    def resolve(self, path: str | Path) -> Path:
        """Resolve ``path`` against the current directory (absolute paths pass through)."""
        return self.cwd / path

    def enter(self, path: str | Path) -> RunContext:
        """Return a context whose current directory is ``path`` (relative to ``cwd``)."""
        return replace(self, cwd=self.resolve(path), dir_stack=(*self.dir_stack, self.cwd))

    def leave(self) -> RunContext:
        """Return a context restored to the directory active before the last ``enter``.

        Raises:
            PipelineDefinitionError: If there is no directory to return to.
        """
        if not self.dir_stack:
            raise PipelineDefinitionError("cannot leave directory: no matching enter step")
        return replace(self, cwd=self.dir_stack[-1], dir_stack=self.dir_stack[:-1])

    def with_env(self, name: str, value: str) -> RunContext:
        """Return a context that additionally exports ``name=value`` to commands."""
        merged: dict[str, str] = dict(self.env)
        merged[name] = value
        return replace(self, env=MappingProxyType(merged))

    def environ(self, base: Mapping[str, str]) -> dict[str, str]:
        """Return the full environment for a command: ``base`` plus the overlay."""
        merged: dict[str, str] = dict(base)
        merged.update(self.env)
        return merged
