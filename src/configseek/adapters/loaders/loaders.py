"""Source loaders for the three kinds of configuration source.

Each loader returns ``mode.run(...)`` over the same steps, so it yields
a plain value in blocking mode and an awaitable in cooperative mode.
A loader returns ``None`` when its source does not exist and raises
ConfigParseError when the source exists but is malformed.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from configseek.adapters.loaders.parsers import (
    PARSERS_BY_SUFFIX,
    parse_json,
    parse_python,
    parse_toml,
    parse_unknown,
    parse_yaml,
)
from configseek.core.exceptions import ResolutionError
from configseek.core.models import ConfigResult


if TYPE_CHECKING:
    from pathlib import Path

    from configseek.core.models import ExplorerOptions
    from configseek.core.ports import ExecutionMode


logger = logging.getLogger(__name__)

RC_EXTENSIONS = (".json", ".yaml", ".yml", ".toml", ".py")

_MISSING = object()


def load_package_prop(
    directory: Path, options: ExplorerOptions, mode: ExecutionMode
) -> Any:
    """Load options.package_prop from the manifest in directory."""
    filepath = directory / options.manifest
    return mode.run(
        filepath,
        [
            mode.read_file,
            lambda content: _package_prop_result(content, filepath, options),
        ],
    )


def load_rc(filepath: Path, options: ExplorerOptions, mode: ExecutionMode) -> Any:
    """Load an rc file, optionally falling back to extension variants."""
    return mode.run(
        filepath,
        [
            mode.read_file,
            lambda content: _rc_result(content, filepath, options),
            lambda result: (
                result
                if result is not None or not options.rc_extensions
                else _load_rc_with_extensions(filepath, mode)
            ),
        ],
    )


def load_script(filepath: Path, mode: ExecutionMode) -> Any:
    """Load a Python config module."""
    return mode.run(
        filepath,
        [
            mode.read_file,
            lambda content: _result(content, filepath, parse_python),
        ],
    )


def load_defined_file(filepath: Path, mode: ExecutionMode) -> Any:
    """Load an explicitly named config file, picking a parser by extension.

    Raises:
        ResolutionError: If the file does not exist.
    """
    parse = PARSERS_BY_SUFFIX.get(filepath.suffix, parse_unknown)
    return mode.run(
        filepath,
        [
            mode.read_file,
            lambda content: _defined_file_result(content, filepath, parse),
        ],
    )


def _result(content: str | None, filepath: Path, parse: Any) -> ConfigResult | None:
    """Build a result from file content, honouring the empty-file convention."""
    if content is None:
        return None
    if not content.strip():
        logger.debug("Found empty config file %s", filepath)
        return ConfigResult(filepath=filepath, config=None, is_empty=True)
    config = parse(content, filepath)
    logger.debug("Loaded config from %s", filepath)
    return ConfigResult(filepath=filepath, config=config, is_empty=config is None)


def _defined_file_result(
    content: str | None, filepath: Path, parse: Any
) -> ConfigResult | None:
    if content is None:
        raise ResolutionError(f"Config file does not exist: {filepath}", filepath)
    return _result(content, filepath, parse)


def _rc_result(
    content: str | None, filepath: Path, options: ExplorerOptions
) -> ConfigResult | None:
    parse = PARSERS_BY_SUFFIX.get(filepath.suffix)
    if parse is None:
        parse = parse_json if options.rc_strict_json else parse_yaml
    return _result(content, filepath, parse)


def _load_rc_with_extensions(filepath: Path, mode: ExecutionMode) -> Any:
    """Probe filepath + each of RC_EXTENSIONS, stopping at the first hit."""

    def attempt(extension: str) -> Any:
        candidate = filepath.with_name(filepath.name + extension)

        def step(result: ConfigResult | None) -> Any:
            if result is not None:
                return result
            return mode.run(
                candidate,
                [
                    mode.read_file,
                    lambda content: _result(
                        content, candidate, PARSERS_BY_SUFFIX[extension]
                    ),
                ],
            )

        return step

    return mode.run(None, [attempt(extension) for extension in RC_EXTENSIONS])


def _package_prop_result(
    content: str | None, filepath: Path, options: ExplorerOptions
) -> ConfigResult | None:
    if content is None or options.package_prop is None:
        return None
    parse = parse_toml if filepath.suffix == ".toml" else parse_json
    value: Any = parse(content, filepath)
    for part in options.package_prop.split("."):
        if not isinstance(value, dict):
            return None
        value = value.get(part, _MISSING)
        if value is _MISSING:
            return None
    logger.debug("Loaded '%s' from %s", options.package_prop, filepath)
    return ConfigResult(filepath=filepath, config=value)
