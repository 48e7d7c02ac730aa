"""Unit tests for stop-directory helpers.

These tests verify the behavior of find_project_root for discovering
the project root directory from marker files.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest


if TYPE_CHECKING:
    from pathlib import Path

from configseek import create_explorer
from configseek.config import find_project_root


@pytest.mark.core
class TestFindProjectRoot:
    """Tests for find_project_root utility."""

    def test_find_project_root_with_pyproject_toml(self, tmp_path: Path) -> None:
        """Should find directory containing pyproject.toml marker."""
        # Arrange
        project_root = tmp_path
        (project_root / "pyproject.toml").touch()
        subdir = project_root / "src" / "myapp"
        subdir.mkdir(parents=True)

        # Act
        result = find_project_root(start=subdir)

        # Assert
        assert result == project_root

    def test_find_project_root_with_git(self, tmp_path: Path) -> None:
        """Should find directory containing .git marker."""
        # Arrange
        project_root = tmp_path
        (project_root / ".git").mkdir()
        subdir = project_root / "src"
        subdir.mkdir()

        # Act
        result = find_project_root(start=subdir)

        # Assert
        assert result == project_root

    def test_find_project_root_returns_start_when_no_marker(
        self, tmp_path: Path
    ) -> None:
        """Should return start directory when no markers found."""
        # Arrange
        subdir = tmp_path / "subdir"
        subdir.mkdir()

        # Act
        result = find_project_root(start=subdir, markers=("no-such-marker",))

        # Assert
        assert result == subdir

    def test_nearest_marker_wins(self, tmp_path: Path) -> None:
        """A nested project's marker wins over an outer repository."""
        # Arrange
        (tmp_path / ".git").mkdir()
        inner = tmp_path / "packages" / "inner"
        inner.mkdir(parents=True)
        (inner / "pyproject.toml").touch()

        # Act
        result = find_project_root(start=inner / "src", markers=(".git", "pyproject.toml"))

        # Assert
        assert result == inner

    def test_custom_markers(self, tmp_path: Path) -> None:
        """Callers can choose their own markers."""
        # Arrange
        (tmp_path / "WORKSPACE").touch()
        subdir = tmp_path / "a" / "b"
        subdir.mkdir(parents=True)

        # Act
        result = find_project_root(start=subdir, markers=("WORKSPACE",))

        # Assert
        assert result == tmp_path


@pytest.mark.core
class TestProjectRootAsStopDir:
    """find_project_root() as an explorer boundary."""

    def test_search_stops_at_project_root(self, tmp_path: Path) -> None:
        """Configuration above the project root is ignored."""
        # Arrange
        (tmp_path / ".foorc").write_text("outer: true")
        project = tmp_path / "project"
        (project / "src").mkdir(parents=True)
        (project / ".git").mkdir()

        # Act
        explorer = create_explorer(
            "foo", sync=True, stop_dir=find_project_root(project / "src")
        )
        result = explorer.load(project / "src")

        # Assert
        assert result is None

    def test_file_start_bounds_its_directory(self, tmp_path: Path) -> None:
        """Starting from a file yields a directory usable as stop_dir."""
        # Arrange
        project = tmp_path / "project"
        project.mkdir()
        (project / "setup.cfg").touch()

        # Act
        result = find_project_root(start=project / "setup.cfg", markers=("nope",))

        # Assert
        assert result == project.resolve()
        assert result.is_dir()
