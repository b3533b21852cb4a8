#
# tests/unit/test_project_root.py
#
"""
Tests for locating the module root.
"""

from pathlib import Path
from unittest.mock import patch

import pytest

from makego.exceptions import ProjectRootNotFoundError, WorkingDirectoryError
from makego.project import current_working_directory, find_project_root


def _nest(base: Path, depth: int) -> Path:
    path = base
    for level in range(1, depth + 1):
        path = path / f"level{level}"
    path.mkdir(parents=True, exist_ok=True)
    return path


class TestFindProjectRoot:
    """Upward search for the marker file."""

    def test_start_directory_is_root(self, go_module: Path) -> None:
        assert find_project_root(go_module) == go_module

    def test_nested_package_resolves_two_levels_up(self, tmp_path: Path) -> None:
        """/home/u/project/src/pkg with /home/u/project/go.mod -> /home/u/project."""
        project = tmp_path / "home" / "u" / "project"
        start = project / "src" / "pkg"
        start.mkdir(parents=True)
        (project / "go.mod").write_text("module x\n")

        assert find_project_root(start) == project

    @pytest.mark.parametrize("depth", [0, 1, 5, 9])
    def test_marker_within_bound_is_found(self, tmp_path: Path, depth: int) -> None:
        root = tmp_path / "mod"
        root.mkdir()
        (root / "go.mod").write_text("module x\n")
        start = _nest(root, depth)

        assert find_project_root(start) == root

    @pytest.mark.parametrize("depth", [10, 12])
    def test_marker_beyond_bound_fails(self, tmp_path: Path, depth: int) -> None:
        root = tmp_path / "mod"
        root.mkdir()
        (root / "go.mod").write_text("module x\n")
        start = _nest(root, depth)

        with pytest.raises(ProjectRootNotFoundError) as exc_info:
            find_project_root(start)

        assert exc_info.value.marker == "go.mod"
        assert exc_info.value.max_hops == 10
        assert exc_info.value.start == start

    def test_nearest_marker_wins(self, go_module: Path) -> None:
        inner = go_module / "src"
        (inner / "go.mod").write_text("module inner\n")

        assert find_project_root(inner / "pkg") == inner

    def test_custom_marker_and_bound(self, tmp_path: Path) -> None:
        root = tmp_path / "ws"
        start = _nest(root, 2)
        (root / "go.work").write_text("go 1.22\n")

        assert find_project_root(start, marker="go.work", max_hops=3) == root
        with pytest.raises(ProjectRootNotFoundError):
            find_project_root(start, marker="go.work", max_hops=2)

    def test_relative_start_is_made_absolute(self, go_module: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.chdir(go_module / "src")
        result = find_project_root(Path("pkg"))
        assert result.is_absolute()
        assert result == go_module


class TestCurrentWorkingDirectory:
    def test_returns_cwd(self, go_module: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.chdir(go_module)
        assert current_working_directory() == go_module

    def test_unreadable_cwd_raises(self) -> None:
        with patch("makego.project.Path.cwd", side_effect=FileNotFoundError("gone")):
            with pytest.raises(WorkingDirectoryError) as exc_info:
                current_working_directory()
        assert isinstance(exc_info.value.details, FileNotFoundError)
