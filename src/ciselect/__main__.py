# topmark:header:start
#
#   project      : CiSelect
#   file         : __main__.py
#   file_relpath : src/ciselect/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Module entry point for running CiSelect via ``python -m ciselect``.

Delegates to :func:`ciselect.cli.main.cli`, so ``python -m ciselect`` and the
``ciselect`` console script behave identically.

Examples:
    Run whichever pipeline the environment selects::

        CLIPPY=yes python -m ciselect
"""

from __future__ import annotations

from ciselect.cli.main import cli

if __name__ == "__main__":
    # We call the Click group directly
    cli()
