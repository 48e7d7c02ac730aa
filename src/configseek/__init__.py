"""configseek - find a tool's configuration by searching up the directory tree.

Each directory from the search path upward is probed for a property in
the project manifest, an rc dotfile and a Python config module. The first
source found is loaded and returned. Lookups are cached per directory and
per file, and the same search runs either blocking or on asyncio.

Example:
    >>> from configseek import create_explorer
    >>> explorer = create_explorer("foo", sync=True)
    >>> result = explorer.load(".")
    >>> if result is not None:
    ...     print(result.filepath, result.config)
"""

from configseek.adapters.cache import MemoryCache
from configseek.adapters.modes import BlockingMode, CooperativeMode
from configseek.config import find_project_root
from configseek.core.exceptions import (
    ConfigParseError,
    ConfigseekError,
    ConfigurationError,
    ResolutionError,
)
from configseek.core.models import ConfigResult, ExplorerOptions
from configseek.core.ports import CachePort, ExecutionMode, Transform
from configseek.explorer import Explorer, create_explorer


__version__ = "0.1.0"

__all__ = [
    "BlockingMode",
    "CachePort",
    "ConfigParseError",
    "ConfigResult",
    "ConfigseekError",
    "ConfigurationError",
    "CooperativeMode",
    "ExecutionMode",
    "Explorer",
    "ExplorerOptions",
    "MemoryCache",
    "ResolutionError",
    "Transform",
    "__version__",
    "create_explorer",
    "find_project_root",
]
