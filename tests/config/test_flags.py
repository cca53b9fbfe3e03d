# topmark:header:start
#
#   project      : CiSelect
#   file         : test_flags.py
#   file_relpath : tests/config/test_flags.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for reading selection flags from the environment.

Only the exact string ``"yes"`` turns a flag on; every other value, including
case and whitespace variants, is silently treated as off.
"""

from __future__ import annotations

import pytest

from ciselect.config.flags import Flag, FlagSet, is_enabled
from tests.conftest import parametrize


@parametrize("value", ["yes"])
def test_yes_enables(value: str) -> None:
    """The literal true-encoding enables a flag."""
    assert is_enabled(value) is True


@parametrize("value", [None, "", "YES", "Yes", " yes", "yes\n", "true", "1", "y", "no"])
def test_anything_else_is_off(value: str | None) -> None:
    """Absent, empty, and malformed values are off and never rejected."""
    assert is_enabled(value) is False


def test_from_environ_reads_every_flag() -> None:
    """Each recognized variable set to ``yes`` ends up in the FlagSet."""
    environ: dict[str, str] = {flag.env_var: "yes" for flag in Flag}

    flags: FlagSet = FlagSet.from_environ(environ)

    assert flags.enabled == frozenset(Flag)


def test_from_environ_ignores_unrelated_and_malformed() -> None:
    """Unrelated variables and non-``yes`` values do not enable anything."""
    environ: dict[str, str] = {"DOCS": "Yes", "CLIPPY": "true", "HOME": "/root", "yes": "yes"}

    flags: FlagSet = FlagSet.from_environ(environ)

    assert flags.enabled == frozenset()
    assert flags.describe() == "<none>"


def test_from_environ_defaults_to_process_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Without an explicit mapping, ``os.environ`` is read."""
    monkeypatch.setenv("RUSTFMT", "yes")
    monkeypatch.setenv("GNUPLOT", "yes")

    flags: FlagSet = FlagSet.from_environ()

    assert flags.is_set(Flag.RUSTFMT)
    assert Flag.GNUPLOT in flags
    assert not flags.is_set(Flag.CLIPPY)


def test_flagset_is_a_snapshot(monkeypatch: pytest.MonkeyPatch) -> None:
    """Changing the environment after reading does not affect the FlagSet."""
    monkeypatch.setenv("CLIPPY", "yes")
    flags: FlagSet = FlagSet.from_environ()

    monkeypatch.delenv("CLIPPY")

    assert flags.is_set(Flag.CLIPPY)


def test_describe_lists_flags_in_declaration_order() -> None:
    """``describe()`` renders enabled flags as NAME=yes in declaration order."""
    flags: FlagSet = FlagSet.of(Flag.GNUPLOT, Flag.CLIPPY)

    assert flags.describe() == "CLIPPY=yes, GNUPLOT=yes"
