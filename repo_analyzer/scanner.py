"""Directory scanning: per-file sizes for one directory of a repository."""

from __future__ import annotations

import os
from pathlib import Path
from typing import List

from .models import AnalysisError, FileEntry, Folder
from .sizes import bytes_to_human, bytes_to_mb, round_two_decimals


class ScanError(AnalysisError):
    """Raised when a directory cannot be listed or a file size cannot be read."""

    def __init__(self, message: str, path: Path | str, cause: BaseException | None = None) -> None:
        self.path = str(path)
        super().__init__(message, cause)


def list_directory(path: Path | str) -> List[os.DirEntry]:
    """Return the entries of ``path`` sorted by name."""
    with os.scandir(path) as entries:
        return sorted(entries, key=lambda entry: entry.name)


def is_subdirectory(entry: os.DirEntry) -> bool:
    # Symlinks are sized as files and never followed.
    return entry.is_dir(follow_symlinks=False)


def entry_size(entry: os.DirEntry) -> int:
    return entry.stat(follow_symlinks=False).st_size


class DirectoryScanner:
    """Builds a :class:`Folder` from the immediate files of one directory."""

    def scan(self, path: Path | str, repo_root: Path | str) -> Folder:
        """Return the folder record for ``path`` relative to ``repo_root``.

        Subdirectories are skipped; the walker scans them separately.
        """
        dir_path = Path(path)
        root_path = Path(repo_root)
        try:
            relative_name = dir_path.relative_to(root_path).as_posix()
        except ValueError as exc:
            raise ScanError(
                f"directory {dir_path} is outside repository root {root_path}", dir_path, exc
            ) from exc

        try:
            entries = list_directory(dir_path)
        except OSError as exc:
            raise ScanError(f"failed to read directory {dir_path}", dir_path, exc) from exc

        files: List[FileEntry] = []
        for entry in entries:
            try:
                if is_subdirectory(entry):
                    continue
                byte_count = entry_size(entry)
            except OSError as exc:
                raise ScanError(
                    f"failed to get file info for {entry.path}", entry.path, exc
                ) from exc
            files.append(
                FileEntry(
                    name=entry.name,
                    size=round_two_decimals(bytes_to_mb(byte_count)),
                    size_human=bytes_to_human(byte_count),
                )
            )

        return Folder(name=relative_name, files=files)


__all__ = ["DirectoryScanner", "ScanError", "entry_size", "is_subdirectory", "list_directory"]
