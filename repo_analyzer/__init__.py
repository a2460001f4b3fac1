"""Clone a repository and report file, folder, and total sizes."""

from .models import AnalysisError, FileEntry, Folder, RepoAnalysis
from .orchestrator import Orchestrator

__version__ = "1.0.0"

__all__ = ["AnalysisError", "FileEntry", "Folder", "Orchestrator", "RepoAnalysis"]
