# topmark:header:start
#
#   project      : CiSelect
#   file         : pipelines.py
#   file_relpath : src/ciselect/pipeline/pipelines.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Named pipelines and their immutable step sequences.

Overview (with the default `Config`)
------------------------------------
- ``lint``: ``cargo clippy --all -- -D warnings``
- ``docs``: ``cargo clean`` → ``cargo doc --all --no-deps`` → ``cd book`` →
  ``mdbook build`` → ``cd ..`` → ``cp -r book/book/html/ target/doc/book/`` →
  ``travis-cargo doc-upload`` (failure tolerated)
- ``format``: ``cargo fmt --all -- --check``
- ``integration``: ``cargo build`` → ``cd integration_tests`` →
  ``cargo test -- --format=pretty --nocapture --ignored`` (only if ``GNUPLOT``) →
  ``cargo test -- --format=pretty --nocapture``
- ``default``: ``export RUSTFLAGS="-D warnings"`` → ``cargo check`` per backend
  feature (default features off) → ``cargo check --all-features`` → ``cargo test``

```mermaid
flowchart TD
  F{flags} -->|CLIPPY| L[lint]
  F -->|DOCS| D[docs]
  F -->|RUSTFMT| R[format]
  F -->|INTEGRATION_TESTS| I[integration]
  F -->|none| X[default]
```

Notes:
* Step tuples are built from a `Config` so project directories and feature
  names can be configured; the defaults reproduce the canonical CI script.
* The integration pipeline ends inside its subdirectory: nothing
  runs after it, so there is no leave step.
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Final

from ciselect.config.flags import Flag
from ciselect.config.model import Config
from ciselect.constants import STRICTNESS_ENV_VAR
from ciselect.pipeline.steps import (
    CommandStep,
    EnterDirectoryStep,
    LeaveDirectoryStep,
    SetEnvironmentStep,
)

if TYPE_CHECKING:
    from collections.abc import Callable

    from ciselect.pipeline.contracts import Step

# Options shared by both integration test invocations.
TEST_OUTPUT_ARGS: Final[tuple[str, ...]] = ("--format=pretty", "--nocapture")


class Pipeline(str, Enum):
    """Mutually exclusive verification pipelines."""

    LINT = "lint"
    DOCS = "docs"
    FORMAT = "format"
    INTEGRATION = "integration"
    DEFAULT = "default"

    def steps(self, config: Config | None = None) -> tuple[Step, ...]:
        """Return the ordered step sequence for this pipeline.

        Args:
            config (Config | None): Project configuration; defaults apply when None.

        Returns:
            tuple[Step, ...]: Step *instances*, invoked by the runner in order.
        """
        return build_steps(self, config or Config.from_defaults())


def lint_steps(config: Config) -> tuple[Step, ...]:
    """Static analysis over all packages, warnings denied."""
    return (
        CommandStep(
            name="clippy",
            program=config.cargo,
            args=("clippy", "--all", "--", "-D", "warnings"),
        ),
    )


def docs_steps(config: Config) -> tuple[Step, ...]:
    """API docs plus the rendered book, then a best-effort upload."""
    return (
        CommandStep(name="clean", program=config.cargo, args=("clean",)),
        CommandStep(name="doc", program=config.cargo, args=("doc", "--all", "--no-deps")),
        EnterDirectoryStep(name="enter-book", path=config.book_dir),
        CommandStep(name="mdbook-build", program="mdbook", args=("build",)),
        LeaveDirectoryStep(name="leave-book"),
        CommandStep(
            name="copy-book",
            program="cp",
            args=("-r", config.book_html_dir, config.doc_book_dir),
        ),
        CommandStep(
            name="doc-upload",
            program="travis-cargo",
            args=("doc-upload",),
            tolerated=True,
        ),
    )


def format_steps(config: Config) -> tuple[Step, ...]:
    """Formatting check across all packages, without rewriting files."""
    return (
        CommandStep(
            name="fmt-check",
            program=config.cargo,
            args=("fmt", "--all", "--", "--check"),
        ),
    )


def integration_steps(config: Config) -> tuple[Step, ...]:
    """Build, then run the integration-test subproject's suite(s) from inside it."""
    return (
        CommandStep(name="build", program=config.cargo, args=("build",)),
        EnterDirectoryStep(name="enter-integration-tests", path=config.integration_dir),
        CommandStep(
            name="test-ignored",
            program=config.cargo,
            args=("test", "--", *TEST_OUTPUT_ARGS, "--ignored"),
            guard=Flag.GNUPLOT,
        ),
        CommandStep(name="test", program=config.cargo, args=("test", "--", *TEST_OUTPUT_ARGS)),
    )


def default_steps(config: Config) -> tuple[Step, ...]:
    """Strict feature-matrix type checks followed by the test suite."""
    feature_checks: tuple[Step, ...] = tuple(
        CommandStep(
            name=f"check-{feature}",
            program=config.cargo,
            args=("check", "--no-default-features", "--features", feature),
        )
        for feature in config.backend_features
    )
    return (
        SetEnvironmentStep(
            name="strict-rustflags",
            variable=STRICTNESS_ENV_VAR,
            value=config.strict_rustflags,
        ),
        *feature_checks,
        CommandStep(
            name="check-all-features",
            program=config.cargo,
            args=("check", "--all-features"),
        ),
        CommandStep(name="test", program=config.cargo, args=("test",)),
    )


_BUILDERS: Final[dict[Pipeline, Callable[[Config], tuple[Step, ...]]]] = {
    Pipeline.LINT: lint_steps,
    Pipeline.DOCS: docs_steps,
    Pipeline.FORMAT: format_steps,
    Pipeline.INTEGRATION: integration_steps,
    Pipeline.DEFAULT: default_steps,
}


def build_steps(pipeline: Pipeline, config: Config) -> tuple[Step, ...]:
    """Return the step sequence of ``pipeline`` for ``config``."""
    return _BUILDERS[pipeline](config)


def get_pipeline(name: str) -> Pipeline:
    """Look up a pipeline by its identifier (case-insensitive).

    Raises:
        ValueError: If ``name`` is not a known pipeline.
    """
    try:
        return Pipeline(name.lower())
    except ValueError:
        known: str = ", ".join(p.value for p in Pipeline)
        raise ValueError(f"Unknown pipeline '{name}'. Must be one of: {known}") from None
