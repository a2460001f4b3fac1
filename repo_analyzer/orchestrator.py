"""Pipeline orchestration: clone, walk, and assemble the size report."""

from __future__ import annotations

from .config import AnalyzerConfig
from .git.clone import CloneError, GitCloner, WorkspaceError
from .logging import get_logger
from .models import RepoAnalysis
from .sizes import bytes_to_human, bytes_to_mb, round_two_decimals
from .walker import RepositoryWalker, WalkError


class Orchestrator:
    """Coordinates one repository analysis from URL to report."""

    def __init__(
        self,
        cloner: GitCloner | None = None,
        walker: RepositoryWalker | None = None,
        config: AnalyzerConfig | None = None,
    ) -> None:
        self.config = config
        self.cloner = cloner or self._cloner_from_config(config)
        self.walker = walker or RepositoryWalker()
        self.logger = get_logger("orchestrator")

    def analyze(self, url: str) -> RepoAnalysis:
        """Return the report for ``url``.

        Clone, walk, and workspace failures are recorded in
        ``RepoAnalysis.error`` instead of being raised.
        """
        analysis = RepoAnalysis(clone_url=url)
        self.logger.info("Starting analysis of %s", url)

        try:
            workspace = self.cloner.create_workspace()
        except WorkspaceError as exc:
            return self._fail(analysis, exc)

        try:
            with workspace:
                try:
                    self.cloner.clone(url, workspace)
                except CloneError as exc:
                    return self._fail(analysis, exc)

                try:
                    result = self.walker.walk(workspace.path)
                except WalkError as exc:
                    return self._fail(analysis, exc)

                try:
                    has_submodules = workspace.has_submodules()
                except WorkspaceError as exc:
                    return self._fail(analysis, exc)

                analysis.size = round_two_decimals(bytes_to_mb(result.total_bytes))
                analysis.size_human = bytes_to_human(result.total_bytes)
                analysis.folders = result.folders
                analysis.has_submodules = has_submodules
        except WorkspaceError as exc:
            self.logger.warning("Workspace cleanup failed: %s", exc)

        self.logger.info(
            "Analysis of %s finished: %s across %d folders",
            url,
            analysis.size_human,
            len(analysis.folders),
        )
        return analysis

    def _fail(self, analysis: RepoAnalysis, exc: Exception) -> RepoAnalysis:
        self.logger.error("Error analyzing repository: %s", exc)
        analysis.error = str(exc)
        return analysis

    @staticmethod
    def _cloner_from_config(config: AnalyzerConfig | None) -> GitCloner:
        if config is None:
            return GitCloner()
        return GitCloner(
            git_binary=config.git.binary,
            recurse_submodules=config.git.recurse_submodules,
            workspace_prefix=config.workspace.prefix,
            workspace_dir=config.workspace.parent_dir,
        )
