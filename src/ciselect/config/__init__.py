# topmark:header:start
#
#   project      : CiSelect
#   file         : __init__.py
#   file_relpath : src/ciselect/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration handling for CiSelect.

Exposes the immutable `Config` model, the environment `FlagSet`, and the TOML
discovery helpers (``ciselect.toml`` or ``[tool.ciselect]`` in ``pyproject.toml``).
"""

from __future__ import annotations

from ciselect.config.flags import Flag, FlagSet
from ciselect.config.io import resolve_config
from ciselect.config.model import Config, ConfigError

__all__ = [
    "Config",
    "ConfigError",
    "Flag",
    "FlagSet",
    "resolve_config",
]
