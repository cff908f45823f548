"""Tests for the upward project marker search."""

from pathlib import Path

import pytest

from rustdoc_index.find_project_dir import find_project_dir


class RecordingExists:
    """Existence probe that only reports the given paths."""

    def __init__(self, present: set[str]) -> None:
        self.present = present
        self.checked: list[str] = []

    async def __call__(self, path: str) -> bool:
        self.checked.append(path)
        return path in self.present


@pytest.mark.asyncio
async def test_checks_ancestors_in_order() -> None:
    """Verify that the closest ancestors are checked first and search stops."""
    exists = RecordingExists({"/a/Cargo.toml"})
    assert await find_project_dir("/a/b/c", exists=exists) == "/a"
    assert exists.checked == ["/a/b/c/Cargo.toml", "/a/b/Cargo.toml", "/a/Cargo.toml"]


@pytest.mark.asyncio
async def test_closest_marker_wins() -> None:
    """Verify that a nested project shadows an enclosing workspace."""
    exists = RecordingExists({"/a/Cargo.toml", "/a/b/Cargo.toml"})
    assert await find_project_dir("/a/b/c", exists=exists) == "/a/b"


@pytest.mark.asyncio
async def test_stops_at_filesystem_root() -> None:
    """Verify that the root directory itself is never checked."""
    exists = RecordingExists(set())
    assert await find_project_dir("/a/b", exists=exists) is None
    assert exists.checked == ["/a/b/Cargo.toml", "/a/Cargo.toml"]


@pytest.mark.asyncio
async def test_degenerate_paths() -> None:
    """Verify that empty and '.' paths find nothing."""
    exists = RecordingExists({"Cargo.toml", "./Cargo.toml"})
    assert await find_project_dir("", exists=exists) is None
    assert await find_project_dir(".", exists=exists) is None
    assert exists.checked == []


@pytest.mark.asyncio
async def test_real_filesystem(tmp_path: Path) -> None:
    """Verify the search against real directories."""
    (tmp_path / "proj" / "src" / "bin").mkdir(parents=True)
    (tmp_path / "proj" / "Cargo.toml").write_text("[package]\n", encoding="utf-8")
    found = await find_project_dir(str(tmp_path / "proj" / "src" / "bin" / "x.rs"))
    assert found == str(tmp_path / "proj")


@pytest.mark.asyncio
async def test_custom_marker(tmp_path: Path) -> None:
    """Verify that the marker file name can be changed."""
    (tmp_path / "Project.toml").write_text("", encoding="utf-8")
    assert await find_project_dir(str(tmp_path), marker="Project.toml") == str(
        tmp_path
    )
