# topmark:header:start
#
#   project      : CiSelect
#   file         : keys.py
#   file_relpath : src/ciselect/config/keys.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Canonical TOML key names for CiSelect configuration.

These are the keys accepted in ``ciselect.toml`` and in the ``[tool.ciselect]``
table of ``pyproject.toml``. Renaming or removing a key is a breaking change.
"""

from __future__ import annotations

from typing import Final


class Toml:
    """TOML keys used by CiSelect configuration (flat table, no sections)."""

    KEY_CARGO: Final[str] = "cargo"
    KEY_BOOK_DIR: Final[str] = "book_dir"
    KEY_BOOK_HTML_DIR: Final[str] = "book_html_dir"
    KEY_DOC_BOOK_DIR: Final[str] = "doc_book_dir"
    KEY_INTEGRATION_DIR: Final[str] = "integration_dir"
    KEY_BACKEND_FEATURES: Final[str] = "backend_features"
    KEY_STRICT_RUSTFLAGS: Final[str] = "strict_rustflags"
    KEY_ENV: Final[str] = "env"

    STRING_KEYS: Final[tuple[str, ...]] = (
        KEY_CARGO,
        KEY_BOOK_DIR,
        KEY_BOOK_HTML_DIR,
        KEY_DOC_BOOK_DIR,
        KEY_INTEGRATION_DIR,
        KEY_STRICT_RUSTFLAGS,
    )

    ALL_KEYS: Final[frozenset[str]] = frozenset(
        (*STRING_KEYS, KEY_BACKEND_FEATURES, KEY_ENV),
    )
