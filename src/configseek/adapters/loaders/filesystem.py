"""Filesystem probes in blocking and non-blocking flavours.

Both flavours treat a missing file as ``None`` rather than an error, so
callers can tell an absent source apart from a broken one.
"""

from __future__ import annotations

import stat
from pathlib import Path

import anyio

from configseek.core.exceptions import ConfigParseError, ResolutionError


# A path running through a regular file cannot hold a source either.
_ABSENT = (FileNotFoundError, NotADirectoryError)


def read_file(path: Path) -> str | None:
    """Read a UTF-8 text file, or return None if it does not exist.

    Raises:
        ConfigParseError: If the file is not valid UTF-8.
    """
    try:
        return path.read_text(encoding="utf-8")
    except _ABSENT:
        return None
    except UnicodeDecodeError as e:
        raise _not_utf8(path, e) from e


async def read_file_async(path: Path) -> str | None:
    """Non-blocking read_file."""
    try:
        return await anyio.Path(path).read_text(encoding="utf-8")
    except _ABSENT:
        return None
    except UnicodeDecodeError as e:
        raise _not_utf8(path, e) from e


def resolve_dir(path: Path) -> Path:
    """Return path if it names a directory, else the directory containing it.

    Raises:
        ResolutionError: If nothing exists at path.
    """
    try:
        mode = path.stat().st_mode
    except _ABSENT as e:
        raise ResolutionError(f"Search path does not exist: {path}", path, e) from e
    return path if stat.S_ISDIR(mode) else path.parent


async def resolve_dir_async(path: Path) -> Path:
    """Non-blocking resolve_dir."""
    try:
        mode = (await anyio.Path(path).stat()).st_mode
    except _ABSENT as e:
        raise ResolutionError(f"Search path does not exist: {path}", path, e) from e
    return path if stat.S_ISDIR(mode) else path.parent


def _not_utf8(path: Path, error: UnicodeDecodeError) -> ConfigParseError:
    return ConfigParseError(f"{path} is not valid UTF-8", path, cause=error)
