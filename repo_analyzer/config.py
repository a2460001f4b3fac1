"""Configuration loading for repo-analyzer (.repo-analyzer.yml)."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

CONFIG_FILENAME = ".repo-analyzer.yml"


class ConfigError(RuntimeError):
    """Raised when the configuration file cannot be parsed."""


@dataclass
class GitConfig:
    """How repositories are fetched."""

    binary: str = "git"
    recurse_submodules: bool = True


@dataclass
class WorkspaceConfig:
    """Where temporary clones are placed."""

    prefix: str = "repo-analysis-"
    parent_dir: Optional[Path] = None


@dataclass
class OutputConfig:
    """Report serialization settings."""

    indent: int = 2


@dataclass
class AnalyzerConfig:
    """Represents the settings defined in .repo-analyzer.yml."""

    root: Path
    git: GitConfig = field(default_factory=GitConfig)
    workspace: WorkspaceConfig = field(default_factory=WorkspaceConfig)
    output: OutputConfig = field(default_factory=OutputConfig)


def load_config(config_path: Path) -> AnalyzerConfig:
    """Load configuration from disk, falling back to defaults when absent."""
    config_file = _resolve_config_path(config_path)
    root = config_file.parent.resolve()

    if not config_file.exists():
        return AnalyzerConfig(root=root)

    data = _read_config(config_file)
    if not isinstance(data, dict):
        raise ConfigError(f"{CONFIG_FILENAME} must contain a mapping at the root")

    git = GitConfig()
    git_data = _as_dict(data.get("git"))
    if git_data:
        git.binary = _as_str(git_data.get("binary")) or git.binary
        recurse = _as_bool(git_data.get("recurse_submodules"))
        if recurse is not None:
            git.recurse_submodules = recurse

    workspace = WorkspaceConfig()
    workspace_data = _as_dict(data.get("workspace"))
    if workspace_data:
        workspace.prefix = _as_str(workspace_data.get("prefix")) or workspace.prefix
        parent_dir = _as_str(workspace_data.get("parent_dir"))
        if parent_dir:
            workspace.parent_dir = (root / parent_dir).resolve()

    output = OutputConfig()
    output_data = _as_dict(data.get("output"))
    if output_data:
        indent = _as_int(output_data.get("indent"))
        if indent is not None and indent >= 0:
            output.indent = indent

    return AnalyzerConfig(root=root, git=git, workspace=workspace, output=output)


def _resolve_config_path(config_path: Path) -> Path:
    config_path = config_path.expanduser()
    if config_path.is_dir():
        return (config_path / CONFIG_FILENAME).resolve()
    return config_path.resolve()


def _read_config(path: Path) -> Dict[str, Any]:
    text = path.read_text(encoding="utf-8")
    if not text.strip():
        return {}
    try:
        loaded = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse {path.name}: {exc}") from exc
    return loaded or {}


def _as_dict(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _as_str(value: Any) -> Optional[str]:
    return str(value) if isinstance(value, (str, int, float)) and not isinstance(value, bool) else None


def _as_int(value: Any) -> Optional[int]:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        try:
            return int(value)
        except ValueError:
            return None
    return None


def _as_bool(value: Any) -> Optional[bool]:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in {"true", "yes", "1"}:
            return True
        if lowered in {"false", "no", "0"}:
            return False
    return None
