# topmark:header:start
#
#   project      : CiSelect
#   file         : flags.py
#   file_relpath : src/ciselect/config/flags.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Environment flags that drive pipeline selection.

A flag is a named boolean switch read from the environment. The only value
that turns a flag on is the literal string ``"yes"``: no case folding, no
whitespace trimming. Absent, empty, ``"YES"``, ``"true"`` and ``"1"`` are all
*off*; malformed values are never rejected.

Flags are read exactly once per run into an immutable [`FlagSet`][ciselect.config.flags.FlagSet].
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING

from ciselect.config.logging import get_logger
from ciselect.constants import FLAG_TRUE_VALUE

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

    from ciselect.config.logging import CiselectLogger

logger: CiselectLogger = get_logger(__name__)


class Flag(str, Enum):
    """Recognized environment switches; the value is the environment variable name."""

    CLIPPY = "CLIPPY"
    DOCS = "DOCS"
    RUSTFMT = "RUSTFMT"
    INTEGRATION_TESTS = "INTEGRATION_TESTS"
    GNUPLOT = "GNUPLOT"

    @property
    def env_var(self) -> str:
        """Name of the environment variable backing this flag."""
        return self.value


def is_enabled(value: str | None) -> bool:
    """Return True only for the exact true-encoding ``"yes"``."""
    return value == FLAG_TRUE_VALUE


@dataclass(frozen=True)
class FlagSet:
    """Immutable snapshot of the flags that were ``"yes"`` when the run started.

    Attributes:
        enabled (frozenset[Flag]): Flags whose environment value was exactly ``"yes"``.
    """

    enabled: frozenset[Flag] = field(default_factory=frozenset)

    @classmethod
    def of(cls, *flags: Flag) -> FlagSet:
        """Build a FlagSet with the given flags enabled (convenience for callers and tests)."""
        return cls(enabled=frozenset(flags))

    @classmethod
    def from_environ(cls, environ: Mapping[str, str] | None = None) -> FlagSet:
        """Read every recognized flag from ``environ`` (defaults to ``os.environ``).

        Args:
            environ (Mapping[str, str] | None): Environment mapping to read. When ``None``,
                the process environment is used.

        Returns:
            FlagSet: The flags that are on.
        """
        env: Mapping[str, str] = os.environ if environ is None else environ
        enabled: set[Flag] = set()
        for flag in Flag:
            raw: str | None = env.get(flag.env_var)
            if is_enabled(raw):
                enabled.add(flag)
            elif raw is not None:
                logger.debug(
                    "Flag %s=%r is not %r; treated as off", flag.value, raw, FLAG_TRUE_VALUE
                )
        flag_set = cls(enabled=frozenset(enabled))
        logger.info("Flags read from environment: %s", flag_set.describe())
        return flag_set

    def is_set(self, flag: Flag) -> bool:
        """Return whether ``flag`` is on."""
        return flag in self.enabled

    def __contains__(self, flag: object) -> bool:
        return flag in self.enabled

    def ordered(self, order: Iterable[Flag] | None = None) -> list[Flag]:
        """Return the enabled flags in ``order`` (declaration order by default)."""
        return [f for f in (order if order is not None else Flag) if f in self.enabled]

    def describe(self) -> str:
        """Return a compact ``NAME=yes`` rendering for logs and CLI output."""
        names: list[str] = [f"{f.value}={FLAG_TRUE_VALUE}" for f in self.ordered()]
        return ", ".join(names) if names else "<none>"
