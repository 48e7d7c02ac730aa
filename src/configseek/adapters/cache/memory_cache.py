"""In-memory cache adapter implementing CachePort."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any


if TYPE_CHECKING:
    from collections.abc import Callable, Hashable, Iterator

    from configseek.core.ports import CachePort, ExecutionMode


logger = logging.getLogger(__name__)


class MemoryCache:
    """Dictionary-backed cache of load results.

    Values are whatever the explorer's mode produces: plain results in
    blocking mode, Tasks in cooperative mode. ``None`` is a valid stored
    value (a cached miss), so use ``in`` rather than get() to test for
    an entry.

    Attributes:
        name: Label used in log records.
    """

    def __init__(self, name: str = "cache") -> None:
        """Initialize an empty cache.

        Args:
            name: Label used in log records.
        """
        self.name = name
        self._entries: dict[Hashable, Any] = {}

    def __contains__(self, key: Hashable) -> bool:
        return key in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[Hashable]:
        return iter(list(self._entries))

    def get(self, key: Hashable) -> Any:
        """Get the stored value, or None if not cached."""
        return self._entries.get(key)

    def put(self, key: Hashable, value: Any) -> None:
        """Store a value, replacing any previous entry."""
        self._entries[key] = value

    def invalidate(self, key: Hashable) -> None:
        """Remove one entry if present."""
        self._entries.pop(key, None)

    def clear(self) -> None:
        """Remove every entry."""
        logger.debug("Clearing %s (%d entries)", self.name, len(self._entries))
        self._entries.clear()


def get_or_compute(
    cache: CachePort | None,
    key: Hashable,
    compute: Callable[[], Any],
    mode: ExecutionMode,
) -> Any:
    """Return the cached value for key, computing and storing it on a miss.

    The stored value is the shared computation itself, so in cooperative
    mode a second lookup made while the first is still pending awaits the
    same Task. A computation that fails is never left in the cache.

    Args:
        cache: Store to consult, or None when caching is disabled.
        key: Absolute path identifying the entry.
        compute: Produces the value (or an awaitable of it).
        mode: Execution mode used to share the computation.

    Returns:
        The cached or freshly computed value.
    """
    if cache is not None and key in cache:
        logger.debug("Cache hit for %s", key)
        return cache.get(key)

    value = mode.share(compute())
    if cache is not None:
        cache.put(key, value)

        def _evict() -> None:
            if cache.get(key) is value:
                cache.invalidate(key)

        mode.on_error(value, _evict)
    return value
