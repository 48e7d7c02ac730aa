"""Pytest configuration and shared fixtures.

This module registers custom markers and provides fixtures that record
filesystem probes and run explorers in either execution mode.
"""

from __future__ import annotations

import asyncio
from collections.abc import Callable, Iterator
from pathlib import Path
from typing import Any

import pytest

from configseek import Explorer, ExplorerOptions
from configseek.adapters.loaders import filesystem


def pytest_configure(config: pytest.Config) -> None:
    """Register custom markers."""
    config.addinivalue_line("markers", "core: Core models, ports, and pipeline")
    config.addinivalue_line("markers", "cache: Result caches")
    config.addinivalue_line("markers", "loaders: Source loaders and parsers")
    config.addinivalue_line("markers", "explorer: Explorer search and load")
    config.addinivalue_line("markers", "cli: CLI tests")
    config.addinivalue_line("markers", "property: Property-based tests (hypothesis)")
    config.addinivalue_line(
        "markers", "tra: Test Responsibility Anchor (TRA) - namespace.Anchor format"
    )
    config.addinivalue_line(
        "markers",
        "tier: Test tier for CI job separation (0=instant, 1=fast, 2=standard, 3=slow, 4=manual)",
    )


class ProbeLog(list[Path]):
    """Paths passed to the filesystem read functions, in call order."""

    def relative_to(self, root: Path) -> list[str]:
        """Return the probed paths relative to root, as POSIX strings."""
        return [p.relative_to(root).as_posix() for p in self]


@pytest.fixture
def probes(monkeypatch: pytest.MonkeyPatch) -> ProbeLog:
    """Record every file read made by either execution mode."""
    log = ProbeLog()
    read_file = filesystem.read_file
    read_file_async = filesystem.read_file_async

    def spy(path: Path) -> str | None:
        log.append(path)
        return read_file(path)

    async def spy_async(path: Path) -> str | None:
        log.append(path)
        return await read_file_async(path)

    monkeypatch.setattr(filesystem, "read_file", spy)
    monkeypatch.setattr(filesystem, "read_file_async", spy_async)
    return log


@pytest.fixture(params=["blocking", "cooperative"])
def sync(request: pytest.FixtureRequest) -> bool:
    """Run the test once per execution mode."""
    return request.param == "blocking"


@pytest.fixture
def runner() -> Iterator[asyncio.Runner]:
    """One event loop shared by every cooperative load in a test."""
    with asyncio.Runner() as loop_runner:
        yield loop_runner


LoadFn = Callable[..., Any]


@pytest.fixture
def load(runner: asyncio.Runner) -> LoadFn:
    """Call explorer.load() and return its result in either mode."""

    def _load(explorer: Explorer, *args: Any, **kwargs: Any) -> Any:
        if explorer.options.sync:
            return explorer.load(*args, **kwargs)

        async def _await() -> Any:
            return await explorer.load(*args, **kwargs)

        return runner.run(_await())

    return _load


@pytest.fixture
def make_explorer(tmp_path: Path) -> Callable[..., Explorer]:
    """Build explorers for a tool called "foo" that stop at tmp_path.

    package.json is the manifest, so the "foo" property is top-level.
    """

    def _make(**overrides: Any) -> Explorer:
        options = ExplorerOptions(
            package_prop="foo",
            manifest="package.json",
            rc=".foorc",
            script="foo.config.py",
            stop_dir=tmp_path,
        )
        return Explorer(options.with_overrides(**overrides))

    return _make


@pytest.fixture
def tree(tmp_path: Path) -> Path:
    """Directories a/b/c/d/e/f with configuration in d and b.

    - a/b/c/d/package.json has no "foo" property
    - a/b/c/d/.foorc holds {"foundInD": true}
    - a/b/package.json holds {"foo": {"foundInB": true}}
    """
    deepest = tmp_path / "a" / "b" / "c" / "d" / "e" / "f"
    deepest.mkdir(parents=True)
    d = tmp_path / "a" / "b" / "c" / "d"
    (d / "package.json").write_text('{ "false": "hope" }')
    (d / ".foorc").write_text('{ "foundInD": true }')
    (tmp_path / "a" / "b" / "package.json").write_text(
        '{ "foo": { "foundInB": true } }'
    )
    return tmp_path
