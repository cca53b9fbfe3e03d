# topmark:header:start
#
#   project      : CiSelect
#   file         : test_executor.py
#   file_relpath : tests/pipeline/test_executor.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Command executors against real processes.

Child processes are the running Python interpreter (``sys.executable -c``), so
these tests do not depend on any other tool being installed.
"""

from __future__ import annotations

import os
import signal
import sys
from pathlib import Path

import pytest

from ciselect.pipeline.executor import (
    Command,
    DryRunExecutor,
    SubprocessExecutor,
    normalize_returncode,
)
from tests.conftest import mark_integration, parametrize


def _python(code: str, cwd: Path, env: dict[str, str] | None = None) -> Command:
    return Command(argv=(sys.executable, "-c", code), cwd=cwd, env=env or {})


@parametrize(("returncode", "status"), [(0, 0), (1, 1), (101, 101), (-9, 137), (-15, 143)])
def test_normalize_returncode(returncode: int, status: int) -> None:
    """Signals map to 128 + N; normal statuses pass through."""
    assert normalize_returncode(returncode) == status


@mark_integration
def test_exit_status_is_returned(tmp_path: Path) -> None:
    """The child's own exit status is returned unchanged."""
    status: int = SubprocessExecutor().execute(_python("raise SystemExit(3)", tmp_path))

    assert status == 3


@mark_integration
def test_runs_in_requested_directory(tmp_path: Path) -> None:
    """The command runs in ``cwd`` without changing the test process directory."""
    (tmp_path / "sub").mkdir()
    code = "import os, sys; sys.exit(0 if os.path.basename(os.getcwd()) == 'sub' else 9)"
    before: str = os.getcwd()

    status: int = SubprocessExecutor().execute(_python(code, tmp_path / "sub"))

    assert status == 0
    assert os.getcwd() == before


@mark_integration
def test_env_overlay_reaches_child(tmp_path: Path) -> None:
    """The overlay is added on top of the inherited environment."""
    code = (
        "import os, sys; "
        "sys.exit(0 if os.environ.get('CARGO_INCREMENTAL') == '0' "
        "and os.environ.get('BASE') == 'kept' else 9)"
    )
    executor = SubprocessExecutor(base_env={**os.environ, "BASE": "kept"})

    status: int = executor.execute(_python(code, tmp_path, {"CARGO_INCREMENTAL": "0"}))

    assert status == 0


@mark_integration
def test_missing_program_is_127(tmp_path: Path) -> None:
    """A program that cannot be found exits 127, like a shell."""
    command = Command(argv=("ciselect-no-such-program-xyz",), cwd=tmp_path)

    assert SubprocessExecutor().execute(command) == 127


@mark_integration
@pytest.mark.skipif(sys.platform == "win32", reason="POSIX permission bits")
def test_non_executable_program_is_126(tmp_path: Path) -> None:
    """A program that exists but cannot be executed exits 126."""
    script: Path = tmp_path / "not-executable"
    script.write_text("#!/bin/sh\nexit 0\n", encoding="utf-8")
    script.chmod(0o644)

    assert SubprocessExecutor().execute(Command(argv=(str(script),), cwd=tmp_path)) == 126


@mark_integration
@pytest.mark.skipif(sys.platform == "win32", reason="POSIX exec errors")
def test_unrunnable_binary_is_126(tmp_path: Path) -> None:
    """An executable file in no format the kernel can load exits 126."""
    binary: Path = tmp_path / "garbage"
    binary.write_bytes(b"\x00\x01\x02\x03 not a program\n")
    binary.chmod(0o755)

    assert SubprocessExecutor().execute(Command(argv=(str(binary),), cwd=tmp_path)) == 126


@mark_integration
@pytest.mark.skipif(sys.platform == "win32", reason="POSIX exec errors")
def test_program_below_a_regular_file_is_126(tmp_path: Path) -> None:
    """A program path that runs through a regular file exits 126."""
    regular: Path = tmp_path / "regular"
    regular.write_text("", encoding="utf-8")
    command = Command(argv=(str(regular / "tool"),), cwd=tmp_path)

    assert SubprocessExecutor().execute(command) == 126


@mark_integration
def test_missing_directory_is_1(tmp_path: Path) -> None:
    """A command whose directory does not exist fails with status 1."""
    status: int = SubprocessExecutor().execute(_python("pass", tmp_path / "missing"))

    assert status == 1


@mark_integration
@pytest.mark.skipif(sys.platform == "win32", reason="POSIX signals")
def test_signal_maps_to_128_plus_n(tmp_path: Path) -> None:
    """A child killed by a signal reports 128 + the signal number."""
    code = "import os, signal; os.kill(os.getpid(), signal.SIGTERM)"

    status: int = SubprocessExecutor().execute(_python(code, tmp_path))

    assert status == 128 + signal.SIGTERM


def test_echo_prints_trace_lines(tmp_path: Path) -> None:
    """Commands are echoed with a ``+ `` prefix before they run."""
    lines: list[str] = []
    executor = SubprocessExecutor(echo=lines.append)

    executor.trace("cd book")
    executor.execute(_python("pass", tmp_path))

    assert lines[0] == "+ cd book"
    assert lines[1].startswith("+ ")
    assert lines[1].endswith("-c pass")


def test_dry_run_records_without_running(tmp_path: Path) -> None:
    """The dry-run executor succeeds without starting any process."""
    lines: list[str] = []
    executor = DryRunExecutor(echo=lines.append)
    command = Command(argv=("ciselect-no-such-program-xyz", "--flag"), cwd=tmp_path / "missing")

    assert executor.execute(command) == 0
    assert executor.commands == [command]
    assert lines == ["+ ciselect-no-such-program-xyz --flag"]
