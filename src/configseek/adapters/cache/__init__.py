"""Cache adapters for load results."""

from configseek.adapters.cache.memory_cache import MemoryCache, get_or_compute


__all__ = ["MemoryCache", "get_or_compute"]
