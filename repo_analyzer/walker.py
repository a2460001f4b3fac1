"""Recursive traversal of a checked-out repository."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import List

from .logging import get_logger
from .models import AnalysisError, Folder
from .scanner import DirectoryScanner, ScanError, entry_size, is_subdirectory, list_directory


class WalkError(AnalysisError):
    """Raised when the repository tree cannot be traversed."""


@dataclass(frozen=True)
class WalkResult:
    """Folders found under the root plus the byte total of every file."""

    folders: List[Folder]
    total_bytes: int


class RepositoryWalker:
    """Walks a repository depth-first, scanning every non-root directory."""

    def __init__(self, scanner: DirectoryScanner | None = None) -> None:
        self.scanner = scanner or DirectoryScanner()
        self.logger = get_logger("walker")

    def walk(self, repo_root: Path | str) -> WalkResult:
        """Return folder records in pre-order and the total size of all files.

        Files directly under the root count towards ``total_bytes`` but the
        root itself never becomes a folder record. The first failure aborts
        the walk.
        """
        root_path = Path(repo_root)
        if not root_path.is_dir():
            raise WalkError(f"repository root is not a directory: {root_path}")

        folders: List[Folder] = []
        total_bytes = 0
        pending = [root_path]
        while pending:
            current = pending.pop()
            try:
                entries = list_directory(current)
            except OSError as exc:
                raise WalkError(f"failed to walk {current}", exc) from exc

            # The scanner lists the directory again on its own; the total is
            # summed from this listing so it never depends on scanner output.
            if current != root_path:
                try:
                    folders.append(self.scanner.scan(current, root_path))
                except ScanError as exc:
                    raise WalkError(f"failed to walk {current}", exc) from exc

            subdirectories: List[Path] = []
            for entry in entries:
                try:
                    if is_subdirectory(entry):
                        subdirectories.append(Path(entry.path))
                        continue
                    total_bytes += entry_size(entry)
                except OSError as exc:
                    raise WalkError(f"failed to get file info for {entry.path}", exc) from exc

            # Reversed so siblings pop off the stack in name order.
            pending.extend(reversed(subdirectories))

        self.logger.debug(
            "Walked %s: %d folders, %d bytes", root_path, len(folders), total_bytes
        )
        return WalkResult(folders=folders, total_bytes=total_bytes)


__all__ = ["RepositoryWalker", "WalkError", "WalkResult"]
