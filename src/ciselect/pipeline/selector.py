# topmark:header:start
#
#   project      : CiSelect
#   file         : selector.py
#   file_relpath : src/ciselect/pipeline/selector.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Pipeline selection: an ordered decision table, first match wins.

Selection is a pure function of a [`FlagSet`][ciselect.config.flags.FlagSet].
When several flags are on, the one highest in `SELECTION_ORDER` wins and the
others are ignored without warning. When none is on, the default pipeline runs.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Final

from ciselect.config.flags import Flag
from ciselect.pipeline.pipelines import Pipeline

if TYPE_CHECKING:
    from ciselect.config.flags import FlagSet

SELECTION_ORDER: Final[tuple[tuple[Flag, Pipeline], ...]] = (
    (Flag.CLIPPY, Pipeline.LINT),
    (Flag.DOCS, Pipeline.DOCS),
    (Flag.RUSTFMT, Pipeline.FORMAT),
    (Flag.INTEGRATION_TESTS, Pipeline.INTEGRATION),
)

FALLBACK_PIPELINE: Final[Pipeline] = Pipeline.DEFAULT


def select_pipeline(flags: FlagSet) -> Pipeline:
    """Return the pipeline selected by ``flags``.

    Args:
        flags (FlagSet): Flags read at run start.

    Returns:
        Pipeline: The first pipeline in `SELECTION_ORDER` whose flag is on,
            otherwise `FALLBACK_PIPELINE`.
    """
    for flag, pipeline in SELECTION_ORDER:
        if flags.is_set(flag):
            return pipeline
    return FALLBACK_PIPELINE


def selecting_flag(flags: FlagSet) -> Flag | None:
    """Return the flag responsible for the selection, or None for the fallback."""
    for flag, _pipeline in SELECTION_ORDER:
        if flags.is_set(flag):
            return flag
    return None
