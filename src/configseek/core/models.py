"""Core domain models for configseek.

These models are pure Python dataclasses with no I/O dependencies.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, replace
from pathlib import Path
from typing import TYPE_CHECKING, Any, Self

from configseek.core.exceptions import ConfigurationError


if TYPE_CHECKING:
    from configseek.core.ports import Transform


@dataclass(frozen=True, slots=True)
class ConfigResult:
    """A configuration loaded from a single source.

    Attributes:
        filepath: Absolute path of the file the configuration came from.
        config: The parsed configuration value.
        is_empty: True when the file exists but holds no configuration.

    Example:
        >>> result = ConfigResult(Path("/repo/.foorc"), {"indent": 2})
        >>> result.config["indent"]
        2
    """

    filepath: Path
    config: Any = None
    is_empty: bool = False


@dataclass(frozen=True, slots=True)
class ExplorerOptions:
    """Immutable settings for an Explorer.

    Attributes:
        package_prop: Dotted property looked up inside the manifest
            (e.g. "tool.foo"). None disables manifest lookups.
        rc: Dotfile name probed in every directory. None disables it.
        script: Python config module name probed in every directory.
            None disables it.
        manifest: Manifest filename. ".toml" manifests are parsed as
            TOML, anything else as JSON.
        rc_strict_json: Parse extension-less rc files as strict JSON
            instead of YAML.
        rc_extensions: On an rc miss, also probe the rc name with
            .json, .yaml, .yml, .toml and .py appended.
        stop_dir: Directory where the upward search halts.
        config_path: Default explicit config path used by load().
        cache: Memoize results per file and per directory.
        sync: Run in blocking mode instead of cooperative (asyncio) mode.
        transform: Function applied to every result before it is returned.
    """

    package_prop: str | None = None
    rc: str | None = None
    script: str | None = None
    manifest: str = "pyproject.toml"
    rc_strict_json: bool = False
    rc_extensions: bool = False
    stop_dir: Path | None = None
    config_path: Path | None = None
    cache: bool = True
    sync: bool = False
    transform: Transform | None = None

    def __post_init__(self) -> None:
        """Validate option values after initialization."""
        if not self.manifest:
            raise ConfigurationError("Manifest filename cannot be empty")
        for name in (self.manifest, self.rc, self.script):
            if name and (os.sep in name or (os.altsep and os.altsep in name)):
                raise ConfigurationError(
                    f"Expected a bare filename, got a path: '{name}'"
                )
        if self.transform is not None and not callable(self.transform):
            raise ConfigurationError("transform must be callable")

    @classmethod
    def for_module(cls, module_name: str) -> ExplorerOptions:
        """Return the conventional options for a tool called module_name.

        Args:
            module_name: Tool name used to derive every filename.

        Returns:
            Options probing pyproject.toml [tool.<name>], .<name>rc and
            <name>.config.py, stopping at the user's home directory.
        """
        if not module_name:
            raise ConfigurationError("Module name cannot be empty")
        return cls(
            package_prop=f"tool.{module_name}",
            rc=f".{module_name}rc",
            script=f"{module_name}.config.py",
            stop_dir=Path.home(),
        )

    def with_overrides(self, **overrides: Any) -> Self:
        """Return new options with the given fields replaced.

        Raises:
            ConfigurationError: If a field name is unknown.
        """
        unknown = sorted(set(overrides) - set(self.__dataclass_fields__))
        if unknown:
            raise ConfigurationError(f"Unknown explorer options: {', '.join(unknown)}")
        return replace(self, **overrides)
