# topmark:header:start
#
#   project      : CiSelect
#   file         : io.py
#   file_relpath : src/ciselect/config/io.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Load and discover CiSelect configuration files.

Sources, in order of precedence (the first one found wins; there is no merging):

1. an explicit file passed by the caller (``--config``);
2. ``ciselect.toml`` in the pipeline root;
3. the ``[tool.ciselect]`` table of ``pyproject.toml`` in the pipeline root;
4. built-in defaults.

Parsing is done with `tomlkit` and unwrapped into plain ``dict`` structures.
Unlike a missing file during discovery, a file that exists but cannot be read
or parsed raises `ConfigError`.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, cast

import tomlkit
from tomlkit.exceptions import TOMLKitError

from ciselect.config.logging import get_logger
from ciselect.config.model import Config, ConfigError, TomlTable
from ciselect.constants import CONFIG_FILE_NAME, PYPROJECT_FILE_NAME, PYPROJECT_TOOL_TABLE

if TYPE_CHECKING:
    from pathlib import Path

    from ciselect.config.logging import CiselectLogger

logger: CiselectLogger = get_logger(__name__)


def load_toml_dict(path: Path) -> TomlTable:
    """Load and parse a TOML file from the filesystem.

    Args:
        path (Path): Path to a TOML document.

    Returns:
        TomlTable: The parsed TOML content as plain Python data.

    Raises:
        ConfigError: If the file cannot be read or is not valid TOML.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigError(f"cannot read configuration: {e}", source=path) from e
    try:
        data_any: Any = tomlkit.parse(text).unwrap()
    except (TOMLKitError, TypeError, ValueError) as e:
        # Duplicate keys surface as KeyAlreadyPresent, not ParseError.
        raise ConfigError(f"invalid TOML: {e}", source=path) from e
    return cast("TomlTable", data_any) if isinstance(data_any, dict) else {}


def extract_tool_table(data: TomlTable, *, path: Path) -> TomlTable | None:
    """Return the ``[tool.ciselect]`` table of a parsed ``pyproject.toml``, if present."""
    current: Any = data
    for key in PYPROJECT_TOOL_TABLE:
        if not isinstance(current, dict) or key not in current:
            return None
        current = current[key]
    if not isinstance(current, dict):
        raise ConfigError("[tool.ciselect] must be a table", source=path)
    return cast("TomlTable", current)


def load_config_file(path: Path) -> Config:
    """Load a single configuration file (``ciselect.toml`` or ``pyproject.toml``).

    Raises:
        ConfigError: If the file is unreadable, malformed, or a ``pyproject.toml``
            without a ``[tool.ciselect]`` table.
    """
    logger.debug("Loading configuration from %s", path)
    data: TomlTable = load_toml_dict(path)
    if path.name == PYPROJECT_FILE_NAME:
        tool: TomlTable | None = extract_tool_table(data, path=path)
        if tool is None:
            raise ConfigError("[tool.ciselect] table missing", source=path)
        data = tool
    return Config.from_toml_dict(data, config_file=path)


def discover_config_file(root: Path) -> Path | None:
    """Return the configuration file that applies to ``root``, or None.

    ``pyproject.toml`` only counts when it actually carries a ``[tool.ciselect]``
    table; Cargo projects rarely have one at all.
    """
    candidate: Path = root / CONFIG_FILE_NAME
    if candidate.is_file():
        return candidate

    pyproject: Path = root / PYPROJECT_FILE_NAME
    if pyproject.is_file():
        if extract_tool_table(load_toml_dict(pyproject), path=pyproject) is not None:
            return pyproject
        logger.debug("%s has no [tool.ciselect] table; ignoring", pyproject)
    return None


def resolve_config(
    root: Path,
    *,
    config_file: Path | None = None,
    no_config: bool = False,
) -> Config:
    """Resolve the effective configuration for a run rooted at ``root``.

    Args:
        root (Path): Directory the pipeline starts in.
        config_file (Path | None): Explicit configuration file; skips discovery.
        no_config (bool): Ignore all configuration files and use defaults.

    Returns:
        Config: The effective configuration.

    Raises:
        ConfigError: If the selected configuration source is invalid.
    """
    if no_config:
        logger.info("Configuration files disabled; using built-in defaults")
        return Config.from_defaults()

    path: Path | None = config_file if config_file is not None else discover_config_file(root)
    if path is None:
        logger.info("No configuration file found under %s; using built-in defaults", root)
        return Config.from_defaults()

    logger.info("Using configuration file %s", path)
    return load_config_file(path)
