# topmark:header:start
#
#   project      : CiSelect
#   file         : test_smoke.py
#   file_relpath : tests/cli/test_smoke.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI smoke tests: help and version output."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

from ciselect.constants import CISELECT_VERSION
from tests.cli.conftest import assert_SUCCESS, run_cli
from tests.conftest import parametrize

if TYPE_CHECKING:
    from click.testing import Result


def test_help_lists_subcommands() -> None:
    """`--help` describes the tool and lists every subcommand."""
    result: Result = run_cli(["--help"])

    assert_SUCCESS(result)
    for name in ("run", "select", "steps", "version"):
        assert name in result.output


@parametrize("command", ["run", "select", "steps", "version"])
def test_subcommand_help(command: str) -> None:
    """Each subcommand accepts `-h`."""
    result: Result = run_cli([command, "-h"])

    assert_SUCCESS(result)
    assert "Usage:" in result.output


def test_version_plain() -> None:
    """`version` prints the installed version."""
    result: Result = run_cli(["version"])

    assert_SUCCESS(result)
    assert result.stdout.strip() == CISELECT_VERSION


def test_version_json() -> None:
    """`version --json` prints a JSON object."""
    result: Result = run_cli(["version", "--json"])

    assert_SUCCESS(result)
    assert json.loads(result.stdout) == {"version": CISELECT_VERSION}


def test_version_verbose() -> None:
    """`-v version` prints a labelled version."""
    result: Result = run_cli(["-v", "version"])

    assert_SUCCESS(result)
    assert "CiSelect version:" in result.stdout
    assert CISELECT_VERSION in result.stdout
