"""Core data models shared across repo_analyzer components."""

import json
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


class AnalysisError(RuntimeError):
    """Base error for failures that end an analysis run."""

    def __init__(self, message: str, cause: Optional[BaseException] = None) -> None:
        self.message = message
        self.cause = cause
        super().__init__(str(self))

    def __str__(self) -> str:
        if self.cause is not None:
            return f"{self.message}: {self.cause}"
        return self.message


@dataclass(frozen=True)
class FileEntry:
    """Size information for a single file inside a folder."""

    name: str
    size: float
    size_human: str

    def to_dict(self) -> Dict[str, Any]:
        return {"name": self.name, "size": self.size, "size_human": self.size_human}


@dataclass(frozen=True)
class Folder:
    """Immediate files of one non-root directory of the repository."""

    name: str
    files: List[FileEntry] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {"name": self.name, "files": [entry.to_dict() for entry in self.files]}


@dataclass
class RepoAnalysis:
    """Report produced for one repository URL."""

    clone_url: str
    size: float = 0.0
    size_human: str = ""
    folders: List[Folder] = field(default_factory=list)
    has_submodules: bool = False
    error: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        """Return the output document; ``error`` is present only on failure."""
        payload: Dict[str, Any] = {
            "clone_url": self.clone_url,
            "size": self.size,
            "size_human": self.size_human,
            "folders": [folder.to_dict() for folder in self.folders],
            "has_submodules": self.has_submodules,
        }
        if self.error is not None:
            payload["error"] = self.error
        return payload

    def to_json(self, indent: Optional[int] = 2) -> str:
        return json.dumps(self.to_dict(), indent=indent or None)
