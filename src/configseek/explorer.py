"""Explorer: locate and load a tool's configuration.

The explorer walks up from a search path, probing each directory for a
manifest property, an rc file and a Python config module, in that order.
The first source found wins. Results are memoized per directory, so every
directory visited by one search answers later searches without touching
the filesystem again.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import TYPE_CHECKING, Any

from configseek.adapters.cache import MemoryCache, get_or_compute
from configseek.adapters.loaders import (
    load_defined_file,
    load_package_prop,
    load_rc,
    load_script,
)
from configseek.adapters.modes import mode_for
from configseek.core.models import ExplorerOptions


if TYPE_CHECKING:
    from configseek.core.models import ConfigResult
    from configseek.core.ports import ExecutionMode


logger = logging.getLogger(__name__)


def _identity(result: ConfigResult | None) -> ConfigResult | None:
    return result


def _absolute(path: str | os.PathLike[str]) -> Path:
    """Make path absolute against the working directory, without following links."""
    return Path(os.path.abspath(path))


class Explorer:
    """Searches for and loads configuration, with optional caching.

    In blocking mode (``options.sync``) every method returns plain values.
    In cooperative mode load() returns an ``asyncio.Task`` and must be
    called while an event loop is running.

    Example:
        >>> explorer = Explorer(ExplorerOptions.for_module("foo").with_overrides(sync=True))
        >>> result = explorer.load("src/app")
        >>> result.filepath if result else None
    """

    def __init__(
        self,
        options: ExplorerOptions,
        mode: ExecutionMode | None = None,
    ) -> None:
        self._options = options
        self._mode = mode if mode is not None else mode_for(options.sync)
        self._transform = options.transform or _identity
        self._stop_dir = _absolute(options.stop_dir) if options.stop_dir else None
        # In cooperative mode these hold Tasks, not results.
        self._file_cache = MemoryCache("file cache") if options.cache else None
        self._directory_cache = (
            MemoryCache("directory cache") if options.cache else None
        )

    @property
    def options(self) -> ExplorerOptions:
        """Options the explorer was created with."""
        return self._options

    @property
    def file_cache(self) -> MemoryCache | None:
        """Cache keyed by explicit config file path (None if disabled)."""
        return self._file_cache

    @property
    def directory_cache(self) -> MemoryCache | None:
        """Cache keyed by searched directory (None if disabled)."""
        return self._directory_cache

    def clear_file_cache(self) -> None:
        """Forget every explicitly loaded config file."""
        if self._file_cache is not None:
            self._file_cache.clear()

    def clear_directory_cache(self) -> None:
        """Forget every searched directory."""
        if self._directory_cache is not None:
            self._directory_cache.clear()

    def clear_caches(self) -> None:
        """Forget everything."""
        self.clear_file_cache()
        self.clear_directory_cache()

    def load(
        self,
        search_path: str | os.PathLike[str] | None = None,
        config_path: str | os.PathLike[str] | None = None,
    ) -> Any:
        """Load configuration from config_path, or search from search_path.

        Args:
            search_path: File or directory to start the upward search from.
            config_path: Explicit config file; bypasses the search. Defaults
                to options.config_path.

        Returns:
            A ConfigResult, or None when nothing was found. In cooperative
            mode, an awaitable of the same.

        Raises:
            ResolutionError: If search_path or config_path does not exist.
            ConfigParseError: If a config file exists but cannot be parsed.
        """
        if not config_path and self._options.config_path:
            config_path = self._options.config_path

        if config_path:
            filepath = _absolute(config_path)
            return get_or_compute(
                self._file_cache,
                filepath,
                lambda: self._mode.run(filepath, [self._load_file, self._transform]),
                self._mode,
            )

        if not search_path:
            return self._mode.share(self._mode.run(None, []))

        start = _absolute(search_path)
        logger.debug("Starting search from %s", start)
        return self._mode.share(
            self._mode.run(start, [self._mode.resolve_dir, self.search_directory])
        )

    def search_directory(self, directory: Path) -> Any:
        """Search directory and its ancestors up to the stop directory.

        Args:
            directory: Absolute directory path.

        Returns:
            The transformed result of the nearest source, or the transformed
            None when no source exists up to the stop directory.
        """
        return get_or_compute(
            self._directory_cache,
            directory,
            lambda: self._probe(directory),
            self._mode,
        )

    def _load_file(self, filepath: Path) -> Any:
        if filepath.name == self._options.manifest:
            return load_package_prop(filepath.parent, self._options, self._mode)
        return load_defined_file(filepath, self._mode)

    def _probe(self, directory: Path) -> Any:
        logger.debug("Probing %s", directory)
        options = self._options
        mode = self._mode
        return mode.run(
            None,
            [
                lambda _: (
                    load_package_prop(directory, options, mode)
                    if options.package_prop
                    else None
                ),
                lambda result: (
                    result
                    if result is not None or not options.rc
                    else load_rc(directory / options.rc, options, mode)
                ),
                lambda result: (
                    result
                    if result is not None or not options.script
                    else load_script(directory / options.script, mode)
                ),
                # Results from a parent directory were transformed at that level.
                lambda result: (
                    self._transform(result)
                    if result is not None
                    else self._search_parent(directory)
                ),
            ],
        )

    def _search_parent(self, directory: Path) -> Any:
        """Continue with the parent directory, unless the walk ends here.

        The walk ends at the stop directory. It also ends below the
        filesystem root: the root is only probed when a search starts there.
        """
        parent = directory.parent
        if parent == parent.parent or directory == self._stop_dir:
            return self._transform(None)
        return self.search_directory(parent)


def create_explorer(module_name: str, **overrides: Any) -> Explorer:
    """Create an Explorer with the conventional options for module_name.

    Args:
        module_name: Tool name. Probes ``pyproject.toml`` [tool.<name>],
            ``.<name>rc`` and ``<name>.config.py``.
        **overrides: Any ExplorerOptions field, e.g. ``sync=True`` or
            ``rc=None`` to skip rc files.

    Returns:
        A new Explorer with its own caches.

    Raises:
        ConfigurationError: If an option is unknown or invalid.
    """
    options = ExplorerOptions.for_module(module_name).with_overrides(**overrides)
    return Explorer(options)
