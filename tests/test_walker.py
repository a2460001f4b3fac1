"""Tests for repo_analyzer.walker."""

from __future__ import annotations

import os
from pathlib import Path

import pytest

from repo_analyzer import walker as walker_module
from repo_analyzer.models import Folder
from repo_analyzer.scanner import DirectoryScanner, ScanError
from repo_analyzer.sizes import bytes_to_mb, round_two_decimals
from repo_analyzer.walker import RepositoryWalker, WalkError
from tests._fixtures.repo_builder import MB, RepoBuilder


def test_walk_collects_folders_and_total(repo_builder: RepoBuilder) -> None:
    repo_builder.sample_tree()

    result = repo_builder.walk()

    assert result.total_bytes == int(6.5 * MB)
    assert [folder.name for folder in result.folders] == ["dir1", "dir1/dir2"]
    assert [f.size for f in result.folders[0].files] == [0.5]
    assert [f.size for f in result.folders[1].files] == [3.0]


def test_walk_counts_root_files_without_root_folder(repo_builder: RepoBuilder) -> None:
    repo_builder.write_sized({"only_root.bin": 4096})

    result = repo_builder.walk()

    assert result.folders == []
    assert result.total_bytes == 4096


def test_walk_emits_folders_in_depth_first_name_order(repo_builder: RepoBuilder) -> None:
    repo_builder.write_sized(
        {
            "b/x.txt": 1,
            "a/z/y.txt": 1,
            "a/m.txt": 1,
            "c.txt": 1,
        }
    )
    (repo_builder.path() / "a" / "empty").mkdir()

    result = repo_builder.walk()

    assert [folder.name for folder in result.folders] == ["a", "a/empty", "a/z", "b"]
    assert result.total_bytes == 4


def test_walk_total_matches_folder_files_plus_root_files(repo_builder: RepoBuilder) -> None:
    repo_builder.write_sized(
        {
            "root.bin": 123_457,
            "src/one.py": 2_000,
            "src/pkg/two.py": 777_777,
            "docs/guide.md": 3 * MB + 17,
            ".git/objects/pack.pack": 5_000_001,
        }
    )
    root = repo_builder.path()

    result = repo_builder.walk()

    folder_bytes = sum(
        path.stat().st_size for path in root.rglob("*") if path.is_file() and path.parent != root
    )
    root_bytes = sum(path.stat().st_size for path in root.iterdir() if path.is_file())
    assert folder_bytes + root_bytes == result.total_bytes
    assert ".git/objects" in [folder.name for folder in result.folders]


def test_walk_is_repeatable(repo_builder: RepoBuilder) -> None:
    repo_builder.sample_tree()

    first = repo_builder.walk()
    second = repo_builder.walk()

    assert first == second
    assert round_two_decimals(bytes_to_mb(first.total_bytes)) == 6.5


def test_walk_rejects_missing_root(tmp_path: Path) -> None:
    with pytest.raises(WalkError):
        RepositoryWalker().walk(tmp_path / "missing")


def test_walk_aborts_on_first_scan_failure(repo_builder: RepoBuilder) -> None:
    repo_builder.sample_tree()
    calls: list[Path] = []

    class FailingScanner(DirectoryScanner):
        def scan(self, path, repo_root) -> Folder:  # type: ignore[override]
            calls.append(Path(path))
            raise ScanError("failed to read directory", path, PermissionError("denied"))

    with pytest.raises(WalkError) as excinfo:
        RepositoryWalker(scanner=FailingScanner()).walk(repo_builder.path())

    assert len(calls) == 1
    assert isinstance(excinfo.value.cause, ScanError)
    assert "denied" in str(excinfo.value)


def test_walk_fails_when_nested_directory_becomes_unreadable(
    repo_builder: RepoBuilder, monkeypatch: pytest.MonkeyPatch
) -> None:
    repo_builder.sample_tree()
    unreadable = repo_builder.path() / "dir1" / "dir2"
    real_scandir = os.scandir

    def scandir(path):  # type: ignore[no-untyped-def]
        if Path(path) == unreadable:
            raise PermissionError(13, "Permission denied", str(path))
        return real_scandir(path)

    monkeypatch.setattr(os, "scandir", scandir)

    with pytest.raises(WalkError) as excinfo:
        repo_builder.walk()

    assert str(unreadable) in str(excinfo.value)
    assert isinstance(excinfo.value.cause, PermissionError)


def test_walk_fails_when_file_size_cannot_be_read(
    repo_builder: RepoBuilder, monkeypatch: pytest.MonkeyPatch
) -> None:
    repo_builder.sample_tree()
    real_entry_size = walker_module.entry_size

    def entry_size(entry):  # type: ignore[no-untyped-def]
        if entry.name == "file2.txt":
            raise FileNotFoundError(2, "No such file or directory", entry.path)
        return real_entry_size(entry)

    monkeypatch.setattr(walker_module, "entry_size", entry_size)

    with pytest.raises(WalkError) as excinfo:
        repo_builder.walk()

    assert "file2.txt" in str(excinfo.value)
    assert isinstance(excinfo.value.cause, FileNotFoundError)


def test_walk_fails_when_entry_type_cannot_be_read(
    repo_builder: RepoBuilder, monkeypatch: pytest.MonkeyPatch
) -> None:
    repo_builder.write_sized({"root.bin": 10})

    def is_subdirectory(entry):  # type: ignore[no-untyped-def]
        raise PermissionError(13, "Permission denied", entry.path)

    monkeypatch.setattr(walker_module, "is_subdirectory", is_subdirectory)

    with pytest.raises(WalkError) as excinfo:
        repo_builder.walk()

    assert isinstance(excinfo.value.cause, PermissionError)
