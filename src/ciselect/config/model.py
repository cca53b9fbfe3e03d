# topmark:header:start
#
#   project      : CiSelect
#   file         : model.py
#   file_relpath : src/ciselect/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Immutable runtime configuration for pipeline construction.

`Config` holds the few project-specific names the pipelines need (tool binary,
documentation and integration-test directories, backend feature names, base
environment). The defaults reproduce the historical CI script exactly, so a
project without any configuration file gets the canonical behavior.

Scope:
    - *In scope*: data shape, defaults, building from a parsed TOML table.
    - *Out of scope*: file discovery and TOML parsing (see ``ciselect.config.io``).
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field, replace
from types import MappingProxyType
from typing import TYPE_CHECKING, Any

from ciselect.config.keys import Toml
from ciselect.config.logging import get_logger

if TYPE_CHECKING:
    from pathlib import Path

    from ciselect.config.logging import CiselectLogger

logger: CiselectLogger = get_logger(__name__)

TomlTable = dict[str, Any]


class ConfigError(ValueError):
    """Raised when a configuration source is unreadable, malformed, or invalid.

    Attributes:
        source (Path | None): The offending file, if any.
    """

    def __init__(self, message: str, *, source: Path | None = None) -> None:
        self.source = source
        super().__init__(f"{source}: {message}" if source is not None else message)


def _default_env() -> Mapping[str, str]:
    return MappingProxyType({"CARGO_INCREMENTAL": "0"})


@dataclass(frozen=True)
class Config:
    """Immutable configuration snapshot used to build pipelines.

    Attributes:
        cargo (str): Program name (or path) of the Rust build tool.
        book_dir (str): Documentation-site project directory, relative to the root.
        book_html_dir (str): Rendered site output, copied into the API docs.
        doc_book_dir (str): Destination of the rendered site inside the API-doc tree.
        integration_dir (str): Integration-test subproject directory.
        backend_features (tuple[str, ...]): Feature sets checked one at a time
            (with default features disabled) by the default pipeline.
        strict_rustflags (str): Value given to ``RUSTFLAGS`` by the default pipeline.
        env (Mapping[str, str]): Environment overlay exported to every command.
        config_file (Path | None): The file this config was loaded from, if any.
    """

    cargo: str = "cargo"
    book_dir: str = "book"
    book_html_dir: str = "book/book/html/"
    doc_book_dir: str = "target/doc/book/"
    integration_dir: str = "integration_tests"
    backend_features: tuple[str, ...] = ("gnuplot_backend", "plotters_backend")
    strict_rustflags: str = "-D warnings"
    env: Mapping[str, str] = field(default_factory=_default_env)
    config_file: Path | None = None

    @classmethod
    def from_defaults(cls) -> Config:
        """Return the built-in defaults."""
        return cls()

    @classmethod
    def from_toml_dict(cls, table: TomlTable, *, config_file: Path | None = None) -> Config:
        """Build a Config by overlaying a parsed TOML table on the defaults.

        Args:
            table (TomlTable): The ``ciselect`` table (flat, see `Toml`).
            config_file (Path | None): Origin of ``table``, used in error messages.

        Returns:
            Config: The resulting immutable configuration.

        Raises:
            ConfigError: On unknown keys or values of the wrong type.
        """
        unknown: list[str] = sorted(set(table) - Toml.ALL_KEYS)
        if unknown:
            raise ConfigError(
                f"unknown configuration key(s): {', '.join(unknown)}", source=config_file
            )

        changes: dict[str, Any] = {}
        for key in Toml.STRING_KEYS:
            if key not in table:
                continue
            value: Any = table[key]
            if not isinstance(value, str) or not value:
                raise ConfigError(
                    f"'{key}' must be a non-empty string, got {value!r}", source=config_file
                )
            changes[key] = value

        if Toml.KEY_BACKEND_FEATURES in table:
            features: Any = table[Toml.KEY_BACKEND_FEATURES]
            if not isinstance(features, list) or not all(
                isinstance(f, str) and f for f in features
            ):
                raise ConfigError(
                    f"'{Toml.KEY_BACKEND_FEATURES}' must be an array of non-empty strings",
                    source=config_file,
                )
            changes["backend_features"] = tuple(features)

        if Toml.KEY_ENV in table:
            env_any: Any = table[Toml.KEY_ENV]
            if not isinstance(env_any, dict) or not all(
                isinstance(k, str) and isinstance(v, str) for k, v in env_any.items()
            ):
                raise ConfigError(
                    f"'{Toml.KEY_ENV}' must be a table of string values", source=config_file
                )
            changes["env"] = MappingProxyType(dict(env_any))

        config: Config = replace(cls(), config_file=config_file, **changes)
        logger.debug("Generated Config: %s", config)
        return config
