"""Git collaborators for fetching repositories."""

from .clone import CloneError, GitCloner, Workspace, WorkspaceError

__all__ = ["CloneError", "GitCloner", "Workspace", "WorkspaceError"]
