# topmark:header:start
#
#   project      : BPMN Codegen
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Pytest configuration for the bpmngen test suite.

Notes:
    Build configs using `bpmngen.config.MutableConfig`, then `freeze()` into a
    `bpmngen.config.Config` for engine calls. Do not mutate a frozen `Config`;
    use `Config.thaw()` and `freeze()` again.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from pathlib import Path
from typing import Any, TypeVar, cast

import pytest

from bpmngen.config import Config, MutableConfig
from bpmngen.config import logging as bpmngen_logging

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
mark_cli: DecoratorType[Any] = as_typed_mark(pytest.mark.cli)


def parametrize(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.mark.parametrize`."""
    return as_typed_mark(pytest.mark.parametrize(*args, **kwargs))


@pytest.fixture(autouse=True)
def reset_bpmngen_logging(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Keep the log level independent of the developer's shell and of earlier tests.

    CLI tests reconfigure the root handler onto Click's captured streams, so the
    handler is rebuilt after every test.
    """
    monkeypatch.delenv(bpmngen_logging.LOG_LEVEL_ENV_VAR, raising=False)
    yield
    bpmngen_logging.setup_logging(level=bpmngen_logging.TRACE_LEVEL)


def pytest_configure(config: pytest.Config) -> None:
    """Log everything down to TRACE so failures come with full context."""
    bpmngen_logging.setup_logging(level=bpmngen_logging.TRACE_LEVEL)


@pytest.fixture
def isolation(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run a test from an empty project directory so no real config is discovered.

    Returns:
        Path: The temporary working directory.
    """
    cwd: Path = tmp_path / "proj"
    cwd.mkdir()
    monkeypatch.chdir(cwd)
    return cwd


def make_config(base: Path, **overrides: Any) -> Config:
    """Return a frozen `Config` anchored at ``base`` with the given overrides.

    ``source_dir`` and ``output_dir`` default to ``base / "bpmn"`` and
    ``base / "out"``; relative overrides are resolved against ``base``.

    Args:
        base (Path): Directory used as the working directory.
        **overrides (Any): `Config` field values (`MutableConfig.apply_args` keys).

    Returns:
        Config: The frozen configuration.
    """
    args: dict[str, Any] = {"source_dir": "bpmn", "output_dir": "out", **overrides}
    return MutableConfig.from_defaults(base).apply_args(args, cwd=base).freeze()


def write_process_file(directory: Path, name: str, content: str) -> Path:
    """Write ``content`` to ``directory / name`` (creating parents) and return the path."""
    path: Path = directory / name
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
    return path
