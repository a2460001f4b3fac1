"""Cloning remote repositories into temporary workspaces."""

from __future__ import annotations

import os
import shutil
import subprocess
import tempfile
from pathlib import Path
from typing import Callable, Iterable

from ..logging import get_logger
from ..models import AnalysisError

_SUBMODULE_MARKER = ".gitmodules"


class CloneError(AnalysisError):
    """Raised when a remote repository cannot be cloned."""


class WorkspaceError(AnalysisError):
    """Raised when a temporary workspace cannot be created or removed."""


class Workspace:
    """A temporary directory holding one cloned repository.

    Usable as a context manager; leaving the block removes the directory.
    """

    def __init__(self, path: Path) -> None:
        self.path = path
        self.logger = get_logger("workspace")

    def has_submodules(self) -> bool:
        """Return True when the repository root declares submodules."""
        marker = self.path / _SUBMODULE_MARKER
        try:
            return marker.is_file()
        except OSError as exc:
            raise WorkspaceError(f"failed to check {marker}", exc) from exc

    def cleanup(self) -> None:
        """Remove the workspace. Calling this again is a no-op."""
        try:
            shutil.rmtree(self.path)
        except FileNotFoundError:
            return
        except OSError as exc:
            raise WorkspaceError(f"failed to remove workspace {self.path}", exc) from exc
        self.logger.debug("Removed workspace %s", self.path)

    def __enter__(self) -> "Workspace":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.cleanup()


class GitCloner:
    """Clones repositories with the git CLI, following submodules."""

    def __init__(
        self,
        runner: Callable[..., str] | None = None,
        *,
        git_binary: str = "git",
        recurse_submodules: bool = True,
        workspace_prefix: str = "repo-analysis-",
        workspace_dir: Path | None = None,
    ) -> None:
        self._runner = runner or self._default_runner
        self.git_binary = git_binary
        self.recurse_submodules = recurse_submodules
        self.workspace_prefix = workspace_prefix
        self.workspace_dir = workspace_dir
        self.logger = get_logger("git.clone")

    def create_workspace(self) -> Workspace:
        """Allocate a fresh, empty temporary directory."""
        try:
            path = tempfile.mkdtemp(
                prefix=self.workspace_prefix,
                dir=str(self.workspace_dir) if self.workspace_dir else None,
            )
        except OSError as exc:
            raise WorkspaceError("failed to create temporary directory", exc) from exc
        self.logger.debug("Created workspace %s", path)
        return Workspace(Path(path))

    def clone(self, url: str, workspace: Workspace) -> None:
        """Clone ``url`` into ``workspace``."""
        if not url or not url.strip():
            raise CloneError("repository URL must not be empty")

        args = [self.git_binary, "clone"]
        if self.recurse_submodules:
            args.append("--recurse-submodules")
        args.extend(["--", url, str(workspace.path)])

        env = os.environ.copy()
        env["GIT_TERMINAL_PROMPT"] = "0"

        self.logger.info("Cloning repository %s", url)
        try:
            output = self._run(args, cwd=workspace.path, env=env, capture_output=True)
        except subprocess.CalledProcessError as exc:
            detail = (exc.stderr or "").strip() or f"git exited with status {exc.returncode}"
            raise CloneError("failed to clone repository", RuntimeError(detail)) from exc
        except OSError as exc:
            raise CloneError("failed to run git", exc) from exc
        if output.strip():
            self.logger.debug("git clone output:\n%s", output.strip())

    # ------------------------------------------------------------------
    # Helpers

    def _run(
        self,
        args: Iterable[str],
        *,
        cwd: Path,
        env: dict[str, str] | None = None,
        capture_output: bool = False,
    ) -> str:
        return self._runner(args, cwd=cwd, env=env, capture_output=capture_output)

    @staticmethod
    def _default_runner(
        args: Iterable[str],
        *,
        cwd: Path,
        env: dict[str, str] | None = None,
        capture_output: bool = False,
    ) -> str:
        completed = subprocess.run(
            list(args),
            cwd=str(cwd),
            env=env,
            check=True,
            text=True,
            capture_output=capture_output,
        )
        if capture_output:
            # git clone reports progress on stderr.
            return "\n".join(part for part in (completed.stdout, completed.stderr) if part)
        return ""


__all__ = ["CloneError", "GitCloner", "Workspace", "WorkspaceError"]
