"""Stop-directory helpers for configseek.

An explorer stops its upward search at ``ExplorerOptions.stop_dir``,
which defaults to the user's home directory. The helpers here are
optional: they compute a tighter boundary for callers that want one.
"""

from __future__ import annotations

from pathlib import Path


DEFAULT_ROOT_MARKERS = (".git", ".hg", "pyproject.toml")


def _has_marker(directory: Path, markers: tuple[str, ...]) -> bool:
    return any((directory / marker).exists() for marker in markers)


def find_project_root(
    start: Path | None = None,
    markers: tuple[str, ...] = DEFAULT_ROOT_MARKERS,
) -> Path:
    """Find a stop directory: the nearest ancestor that holds a root marker.

    Pass the result as ``stop_dir`` so a search never leaves the project.
    Markers are checked per directory, so the nearest matching directory
    wins regardless of marker order.

    Args:
        start: File or directory to start from. If None, uses current directory.
            A file starts from the directory containing it.
        markers: File or directory names marking a project root.

    Returns:
        The resolved project root, or the starting directory when no
        ancestor holds a marker.

    Example:
        >>> from configseek import create_explorer, find_project_root
        >>> explorer = create_explorer("foo", stop_dir=find_project_root())
    """
    directory = (start or Path.cwd()).resolve()
    if directory.is_file():
        directory = directory.parent

    return next(
        (
            candidate
            for candidate in (directory, *directory.parents)
            if _has_marker(candidate, markers)
        ),
        directory,
    )
