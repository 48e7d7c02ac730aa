"""Port interfaces for configseek.

Ports define contracts that adapters must implement. The explorer
depends only on these protocols, never on concrete implementations.
"""

from __future__ import annotations

from collections.abc import Callable, Hashable, Iterator, Sequence
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable


if TYPE_CHECKING:
    from pathlib import Path

    from configseek.core.models import ConfigResult

Transform = Callable[["ConfigResult | None"], "ConfigResult | None"]

# A step receives the accumulated value and returns the next one, either
# directly (blocking mode) or as an awaitable (cooperative mode).
Step = Callable[[Any], Any]


@runtime_checkable
class ExecutionMode(Protocol):
    """Scheduling strategy shared by every step of a load.

    The same step sequences run under either mode. Only the way values
    are threaded between steps differs.
    """

    def run(self, value: Any, steps: Sequence[Step]) -> Any:
        """Thread value through steps in order.

        Returns:
            The final value (blocking) or an awaitable of it (cooperative).
        """
        ...

    def share(self, value: Any) -> Any:
        """Make a run() result safe to hand to several consumers."""
        ...

    def on_error(self, value: Any, callback: Callable[[], None]) -> None:
        """Call callback if the shared value later completes with an error."""
        ...

    def read_file(self, path: Path) -> Any:
        """Read a text file, or None when it does not exist."""
        ...

    def resolve_dir(self, path: Path) -> Any:
        """Return path if it is a directory, else its containing directory.

        Raises:
            ResolutionError: If nothing exists at path.
        """
        ...


@runtime_checkable
class CachePort(Protocol):
    """In-memory store for load results keyed by absolute path."""

    def __contains__(self, key: Hashable) -> bool:
        """Check whether key has an entry."""
        ...

    def __len__(self) -> int:
        """Number of entries."""
        ...

    def __iter__(self) -> Iterator[Hashable]:
        """Iterate over keys."""
        ...

    def get(self, key: Hashable) -> Any:
        """Get the stored value, or None if not cached."""
        ...

    def put(self, key: Hashable, value: Any) -> None:
        """Store a value."""
        ...

    def invalidate(self, key: Hashable) -> None:
        """Remove one entry if present."""
        ...

    def clear(self) -> None:
        """Remove every entry."""
        ...
