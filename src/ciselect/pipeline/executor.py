# topmark:header:start
#
#   project      : CiSelect
#   file         : executor.py
#   file_relpath : src/ciselect/pipeline/executor.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Command executors: the only place that spawns processes.

Executors satisfy the [`CommandExecutor`][ciselect.pipeline.contracts.CommandExecutor]
protocol. They are CLI-free: echoing a command (the ``set -x`` trace) is done
through an optional ``echo`` callback supplied by the caller.

Exit status mapping (POSIX shell conventions):
    - normal exit: the command's own status;
    - killed by signal N: ``128 + N``;
    - program not found: 127;
    - program found but not executable: 126.
"""

from __future__ import annotations

import os
import shlex
import subprocess
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING

from ciselect.config.logging import get_logger
from ciselect.constants import (
    EXIT_CANNOT_EXECUTE,
    EXIT_CHDIR_FAILED,
    EXIT_COMMAND_NOT_FOUND,
    EXIT_SIGNAL_BASE,
)

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping
    from pathlib import Path

    from ciselect.config.logging import CiselectLogger

logger: CiselectLogger = get_logger(__name__)


def _empty_env() -> Mapping[str, str]:
    return MappingProxyType({})


@dataclass(frozen=True)
class Command:
    """A fully resolved external command invocation.

    Attributes:
        argv (tuple[str, ...]): Program followed by its arguments.
        cwd (Path): Working directory to run in.
        env (Mapping[str, str]): Variables exported on top of the inherited environment.
    """

    argv: tuple[str, ...]
    cwd: Path
    env: Mapping[str, str] = field(default_factory=_empty_env)

    @property
    def program(self) -> str:
        """The program name (first element of ``argv``)."""
        return self.argv[0]

    def display(self) -> str:
        """Return a shell-quoted rendering of the command line."""
        return shlex.join(self.argv)


def normalize_returncode(returncode: int) -> int:
    """Map a ``subprocess`` return code to a shell-style exit status.

    Negative return codes mean "terminated by signal"; shells report those as
    ``128 + signal``.
    """
    if returncode < 0:
        return EXIT_SIGNAL_BASE - returncode
    return returncode


class SubprocessExecutor:
    """Run commands with `subprocess.run`, inheriting stdout/stderr.

    Args:
        echo (Callable[[str], None] | None): Called with ``"+ <command>"`` before
            each command runs. ``None`` disables echoing.
        base_env (Mapping[str, str] | None): Environment every command inherits.
            Defaults to the process environment at execution time.
    """

    def __init__(
        self,
        *,
        echo: Callable[[str], None] | None = None,
        base_env: Mapping[str, str] | None = None,
    ) -> None:
        self.echo = echo
        self.base_env = base_env

    def trace(self, text: str) -> None:
        """Echo ``text`` as a ``+ `` trace line (no-op without ``echo``)."""
        if self.echo is not None:
            self.echo(f"+ {text}")

    def execute(self, command: Command) -> int:
        """Run ``command`` to completion and return its exit status."""
        self.trace(command.display())

        if not command.cwd.is_dir():
            logger.error("Working directory does not exist: %s", command.cwd)
            return EXIT_CHDIR_FAILED

        env: dict[str, str] = dict(os.environ if self.base_env is None else self.base_env)
        env.update(command.env)

        logger.debug("Executing %s (cwd=%s)", command.display(), command.cwd)
        try:
            completed = subprocess.run(
                list(command.argv),
                cwd=command.cwd,
                env=env,
                check=False,
            )
        except FileNotFoundError:
            logger.error("%s: command not found", command.program)
            return EXIT_COMMAND_NOT_FOUND
        except PermissionError:
            logger.error("%s: permission denied", command.program)
            return EXIT_CANNOT_EXECUTE
        except OSError as exc:
            logger.error("%s: cannot execute: %s", command.program, exc)
            return EXIT_CANNOT_EXECUTE

        status: int = normalize_returncode(completed.returncode)
        logger.debug("%s exited with status %d", command.program, status)
        return status


class DryRunExecutor:
    """Echo commands without running them; every command "succeeds".

    The executed commands are kept in ``commands`` (in order) so callers can
    inspect what a run would have done.
    """

    def __init__(self, *, echo: Callable[[str], None] | None = None) -> None:
        self.echo = echo
        self.commands: list[Command] = []

    def trace(self, text: str) -> None:
        """Echo ``text`` as a ``+ `` trace line (no-op without ``echo``)."""
        if self.echo is not None:
            self.echo(f"+ {text}")

    def execute(self, command: Command) -> int:
        """Record and echo ``command``; return 0."""
        self.commands.append(command)
        self.trace(command.display())
        logger.info("Dry run: not executing %s (cwd=%s)", command.display(), command.cwd)
        return 0
