# topmark:header:start
#
#   project      : CiSelect
#   file         : conftest.py
#   file_relpath : tests/pipeline/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Shared test utilities for pipeline tests.

Key utilities:
  * RecordingExecutor: a `CommandExecutor` that records every command and
    trace line instead of spawning processes, returning scripted exit codes.
  * flags_environ(*flags): an environment mapping with the given flags on.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from tests.conftest import fixture

if TYPE_CHECKING:
    from collections.abc import Mapping

    from ciselect.config.flags import Flag
    from ciselect.pipeline.executor import Command


class RecordingExecutor:
    """Fake executor: records commands and returns scripted exit codes.

    Args:
        statuses (Mapping[tuple[str, ...], int] | None): Exit status per exact argv.
            Commands not listed exit 0.
    """

    def __init__(self, statuses: Mapping[tuple[str, ...], int] | None = None) -> None:
        self.statuses: dict[tuple[str, ...], int] = dict(statuses or {})
        self.commands: list[Command] = []
        self.traces: list[str] = []

    def trace(self, text: str) -> None:
        self.traces.append(text)

    def execute(self, command: Command) -> int:
        self.commands.append(command)
        self.trace(command.display())
        return self.statuses.get(command.argv, 0)

    @property
    def argvs(self) -> list[tuple[str, ...]]:
        """The argv of every executed command, in order."""
        return [c.argv for c in self.commands]


def flags_environ(*flags: Flag) -> dict[str, str]:
    """Return an environment mapping in which exactly ``flags`` are set to ``yes``."""
    return {flag.env_var: "yes" for flag in flags}


@fixture()
def recorder() -> RecordingExecutor:
    """Return a RecordingExecutor where every command succeeds."""
    return RecordingExecutor()
