# topmark:header:start
#
#   project      : CiSelect
#   file         : conftest.py
#   file_relpath : tests/cli/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI test helpers for running CiSelect in a controlled working directory.

`run_cli_in()` changes the process working directory to the given path before
invoking the Click CLI, so the default pipeline root (the current directory)
is the temporary project. `fake_toolchain` puts stub ``cargo``, ``mdbook`` and
``travis-cargo`` executables first on ``PATH`` so real runs can be exercised
without a Rust toolchain.
"""

from __future__ import annotations

import os
import sys
from typing import TYPE_CHECKING

import pytest
from click.testing import CliRunner, Result

from ciselect.cli.exit_codes import ExitCode
from ciselect.cli.main import cli
from tests.conftest import fixture

if TYPE_CHECKING:
    from collections.abc import Sequence
    from pathlib import Path

# Each stub appends "<tool> <cwd> RUSTFLAGS=<..> CARGO_INCREMENTAL=<..> <args>" to
# $FAKE_TOOL_LOG and exits with $FAKE_<TOOL>_STATUS (default 0).
_STUB_TEMPLATE = """#!/bin/sh
echo "{tool} $PWD RUSTFLAGS=$RUSTFLAGS CARGO_INCREMENTAL=$CARGO_INCREMENTAL $*" >> "$FAKE_TOOL_LOG"
exit ${{{status_var}:-0}}
"""

FAKE_TOOLS: tuple[str, ...] = ("cargo", "mdbook", "travis-cargo")


def status_var(tool: str) -> str:
    """Return the variable that sets a stub tool's exit status."""
    return "FAKE_" + tool.upper().replace("-", "_") + "_STATUS"


class FakeToolchain:
    """Handle on the stub tools installed by the `fake_toolchain` fixture."""

    def __init__(self, bin_dir: Path, log: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        self.bin_dir = bin_dir
        self.log = log
        self._monkeypatch = monkeypatch

    def fail(self, tool: str, status: int) -> None:
        """Make ``tool`` exit with ``status``."""
        self._monkeypatch.setenv(status_var(tool), str(status))

    def calls(self) -> list[str]:
        """Return the logged invocations, one line per call."""
        if not self.log.exists():
            return []
        return self.log.read_text(encoding="utf-8").splitlines()


@pytest.fixture(autouse=True)
def plain_output(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep CLI output free of ANSI codes regardless of the caller's environment."""
    monkeypatch.delenv("FORCE_COLOR", raising=False)


@fixture()
def fake_toolchain(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> FakeToolchain:
    """Install stub tools first on PATH (POSIX only).

    Args:
        tmp_path (Path): Pytest-provided temporary directory.
        monkeypatch (pytest.MonkeyPatch): Pytest monkeypatch fixture.

    Returns:
        FakeToolchain: The installed stubs.
    """
    if sys.platform == "win32":
        pytest.skip("stub tools are POSIX shell scripts")

    bin_dir: Path = tmp_path / "fake-bin"
    bin_dir.mkdir()
    for tool in FAKE_TOOLS:
        script: Path = bin_dir / tool
        script.write_text(
            _STUB_TEMPLATE.format(tool=tool, status_var=status_var(tool)), encoding="utf-8"
        )
        script.chmod(0o755)

    log: Path = tmp_path / "fake-tools.log"
    monkeypatch.setenv("FAKE_TOOL_LOG", str(log))
    monkeypatch.setenv("PATH", f"{bin_dir}{os.pathsep}{os.environ.get('PATH', '')}")
    for tool in FAKE_TOOLS:
        monkeypatch.delenv(status_var(tool), raising=False)
    return FakeToolchain(bin_dir, log, monkeypatch)


def run_cli_in(tmp_path: Path, argv: Sequence[str] | None) -> Result:
    """Invoke the CLI with ``tmp_path`` as the working directory.

    Args:
        tmp_path (Path): Directory to run from (the default pipeline root).
        argv (Sequence[str] | None): CLI argument vector, e.g. ``["run", "--dry-run"]``.

    Returns:
        Result: The `click.testing.Result` produced by `CliRunner.invoke`.
    """
    runner = CliRunner()
    cwd: str = os.getcwd()
    try:
        os.chdir(tmp_path)
        return runner.invoke(cli, argv)
    finally:
        os.chdir(cwd)


def run_cli(argv: Sequence[str] | None) -> Result:
    """Invoke the CLI without changing the working directory.

    Use this for commands that do not depend on the current directory
    (``--help``, ``version``, ``select``) or when ``--root`` is passed.

    Args:
        argv (Sequence[str] | None): CLI argument vector, e.g. ``["--help"]``.

    Returns:
        Result: The `click.testing.Result` produced by `CliRunner.invoke`.
    """
    runner = CliRunner()
    return runner.invoke(cli, argv)


def assert_SUCCESS(result: Result) -> None:
    """Assert that the command exited successfully (code 0)."""
    assert result.exit_code == ExitCode.SUCCESS, result.output


def assert_USAGE_ERROR(result: Result) -> None:
    """Assert that the command exited with the usage-error code (64)."""
    assert result.exit_code == ExitCode.USAGE_ERROR, result.output


def assert_CONFIG_ERROR(result: Result) -> None:
    """Assert that the command exited with the configuration-error code (78)."""
    assert result.exit_code == ExitCode.CONFIG_ERROR, result.output
