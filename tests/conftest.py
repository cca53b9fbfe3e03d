# topmark:header:start
#
#   project      : CiSelect
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Pytest configuration for the CiSelect test suite.

Sets up global fixtures and the logging configuration for test runs. Every
test starts with the selection flags and the log-level variable removed from
the environment, so a developer's shell (or the CI job running these tests)
cannot change which pipeline a test sees.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any, TypeVar, cast

import pytest

from ciselect.config import logging
from ciselect.config.flags import Flag
from ciselect.constants import LOG_LEVEL_ENV_VAR, STRICTNESS_ENV_VAR

if TYPE_CHECKING:
    from pathlib import Path

F = TypeVar("F", bound=Callable[..., object])

DecoratorType = Callable[[F], F]


def as_typed_mark(mark: Any) -> DecoratorType[Any]:
    """Wrap a pytest mark so static type checkers preserve the function type.

    Args:
        mark (Any): A pytest mark decorator such as `pytest.mark.integration`.

    Returns:
        DecoratorType[Any]: A decorator that preserves the wrapped function's type.
    """

    def _decorator(func: F) -> F:
        return cast("F", mark(func))

    return _decorator


mark_integration: DecoratorType[Any] = as_typed_mark(pytest.mark.integration)
mark_pipeline: DecoratorType[Any] = as_typed_mark(pytest.mark.pipeline)
mark_cli: DecoratorType[Any] = as_typed_mark(pytest.mark.cli)


def parametrize(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.mark.parametrize`."""
    mark: pytest.MarkDecorator = pytest.mark.parametrize(*args, **kwargs)
    return as_typed_mark(mark)


def fixture(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.fixture`.

    Use as ``@fixture()`` or ``@fixture(scope=...)``. A bare ``@fixture`` is
    also accepted and registers the fixture directly.
    """
    if len(args) == 1 and callable(args[0]) and not kwargs:
        return cast("Callable[[F], F]", pytest.fixture(args[0]))
    return as_typed_mark(pytest.fixture(*args, **kwargs))


def hookimpl(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.hookimpl`."""
    return as_typed_mark(pytest.hookimpl(*args, **kwargs))


@pytest.fixture(autouse=True)
def clean_ci_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Remove selection flags, the strictness variable and the log level from the environment.

    Args:
        monkeypatch (pytest.MonkeyPatch): Pytest monkeypatch fixture.
    """
    for flag in Flag:
        monkeypatch.delenv(flag.env_var, raising=False)
    monkeypatch.delenv(STRICTNESS_ENV_VAR, raising=False)
    monkeypatch.delenv(LOG_LEVEL_ENV_VAR, raising=False)


@hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:  # pylint: disable=unused-argument
    """Configure TRACE-level logging for the test session.

    Args:
        config (pytest.Config): The pytest configuration object.
    """
    logging.setup_logging(level=logging.TRACE_LEVEL)


@fixture()
def project_root(tmp_path: Path) -> Path:
    """Return a temporary project root with the directories the pipelines enter.

    Layout::

        <root>/book/
        <root>/integration_tests/

    Args:
        tmp_path (Path): Pytest-provided temporary directory.

    Returns:
        Path: The project root.
    """
    (tmp_path / "book").mkdir()
    (tmp_path / "integration_tests").mkdir()
    return tmp_path
