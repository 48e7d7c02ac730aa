"""Execution mode adapters implementing ExecutionMode."""

from __future__ import annotations

import asyncio
import inspect
from typing import TYPE_CHECKING, Any

from configseek.adapters.loaders import filesystem
from configseek.core.pipeline import run_steps, run_steps_async


if TYPE_CHECKING:
    from collections.abc import Callable, Sequence
    from pathlib import Path

    from configseek.core.ports import Step


class BlockingMode:
    """Blocking mode that runs every step immediately in the current thread.

    Filesystem probes complete before the next step begins, and results
    are plain values.
    """

    def run(self, value: Any, steps: Sequence[Step]) -> Any:
        """Run steps eagerly and return the final value."""
        return run_steps(value, steps)

    def share(self, value: Any) -> Any:
        """Plain values can be shared as they are."""
        return value

    def on_error(self, value: Any, callback: Callable[[], None]) -> None:
        """No-op: a failing blocking step raises before anything is shared."""
        return None

    def read_file(self, path: Path) -> str | None:
        """Read path, or None if missing."""
        return filesystem.read_file(path)

    def resolve_dir(self, path: Path) -> Path:
        """Resolve the directory to search from."""
        return filesystem.resolve_dir(path)


class CooperativeMode:
    """Cooperative mode built on asyncio.

    run() returns a coroutine and share() schedules it as a Task, so a
    cache can hold the in-flight computation itself. Every caller that
    awaits the same Task gets the same result without repeating the
    filesystem work. share() needs a running event loop.
    """

    def run(self, value: Any, steps: Sequence[Step]) -> Any:
        """Return a coroutine running steps, awaiting each result."""
        return run_steps_async(value, steps)

    def share(self, value: Any) -> Any:
        """Wrap a coroutine in a Task; Futures and plain values pass through."""
        if inspect.iscoroutine(value):
            return asyncio.ensure_future(value)
        return value

    def on_error(self, value: Any, callback: Callable[[], None]) -> None:
        """Run callback once the shared Task fails or is cancelled."""
        if not isinstance(value, asyncio.Future):
            return

        def _check(future: asyncio.Future[Any]) -> None:
            if future.cancelled() or future.exception() is not None:
                callback()

        value.add_done_callback(_check)

    def read_file(self, path: Path) -> Any:
        """Return an awaitable of the file's text, or None if missing."""
        return filesystem.read_file_async(path)

    def resolve_dir(self, path: Path) -> Any:
        """Return an awaitable of the directory to search from."""
        return filesystem.resolve_dir_async(path)


def mode_for(sync: bool) -> BlockingMode | CooperativeMode:
    """Pick the mode matching ExplorerOptions.sync."""
    return BlockingMode() if sync else CooperativeMode()
