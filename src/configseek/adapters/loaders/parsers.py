"""Parsers turning file contents into configuration values.

Every parser raises ConfigParseError, with a line number when the
underlying library reports one.
"""

from __future__ import annotations

import importlib.util
import json
import sys
import tomllib
import traceback
from typing import TYPE_CHECKING, Any

import yaml

from configseek.core.exceptions import ConfigParseError


if TYPE_CHECKING:
    from collections.abc import Callable
    from pathlib import Path


def parse_json(content: str, filepath: Path) -> Any:
    """Parse strict JSON."""
    try:
        return json.loads(content)
    except json.JSONDecodeError as e:
        raise ConfigParseError(
            f"Invalid JSON in {filepath}: {e.msg}", filepath, line=e.lineno, cause=e
        ) from e


def parse_yaml(content: str, filepath: Path) -> Any:
    """Parse YAML with the safe loader (JSON documents parse too)."""
    try:
        return yaml.safe_load(content)
    except yaml.YAMLError as e:
        mark = getattr(e, "problem_mark", None)
        line = mark.line + 1 if mark is not None else None
        raise ConfigParseError(
            f"Invalid YAML in {filepath}", filepath, line=line, cause=e
        ) from e


def parse_toml(content: str, filepath: Path) -> Any:
    """Parse TOML."""
    try:
        return tomllib.loads(content)
    except tomllib.TOMLDecodeError as e:
        raise ConfigParseError(
            f"Invalid TOML in {filepath}: {e}",
            filepath,
            line=getattr(e, "lineno", None),
            cause=e,
        ) from e


def parse_python(content: str, filepath: Path) -> Any:
    """Execute a Python config module and return its ``config`` attribute.

    If ``config`` is callable it is called with no arguments and its
    return value is used.
    """
    # Generate a unique module name to avoid conflicts
    module_name = f"_configseek_config_{filepath.stem.replace('.', '_')}_{id(content)}"

    spec = importlib.util.spec_from_file_location(module_name, filepath)
    if spec is None:
        raise ConfigParseError(f"Could not load config module {filepath}", filepath)

    module = importlib.util.module_from_spec(spec)
    sys.modules[module_name] = module

    try:
        # Reuse the text the mode already read; exec_module would read it again.
        code = compile(content, str(filepath), "exec")
        exec(code, module.__dict__)  # noqa: S102
        if not hasattr(module, "config"):
            raise ConfigParseError(
                f"Config module {filepath} does not define 'config'", filepath
            )
        config = module.config
        return config() if callable(config) else config
    except ConfigParseError:
        raise
    except SyntaxError as e:
        raise ConfigParseError(
            f"Syntax error in {filepath}: {e.msg}", filepath, line=e.lineno, cause=e
        ) from e
    except Exception as e:
        raise ConfigParseError(
            f"Error executing {filepath}: {e}",
            filepath,
            line=_line_in(filepath, e),
            cause=e,
        ) from e
    finally:
        # Clean up to avoid polluting sys.modules
        sys.modules.pop(module_name, None)


def _line_in(filepath: Path, error: Exception) -> int | None:
    """Find the deepest traceback line that belongs to filepath."""
    frames = traceback.extract_tb(error.__traceback__)
    lines = [frame.lineno for frame in frames if frame.filename == str(filepath)]
    return lines[-1] if lines else None


PARSERS_BY_SUFFIX: dict[str, Callable[[str, Path], Any]] = {
    ".json": parse_json,
    ".yaml": parse_yaml,
    ".yml": parse_yaml,
    ".toml": parse_toml,
    ".py": parse_python,
}


def parse_unknown(content: str, filepath: Path) -> Any:
    """Parse content of a file with no recognised extension: JSON, then YAML."""
    try:
        return json.loads(content)
    except json.JSONDecodeError:
        return parse_yaml(content, filepath)
