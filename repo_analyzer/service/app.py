"""FastAPI application entrypoint for repo-analyzer service mode."""

from __future__ import annotations

import asyncio
from typing import Callable, List, Optional

from fastapi import Depends, FastAPI
from pydantic import BaseModel

from ..models import RepoAnalysis
from ..orchestrator import Orchestrator


class AnalyzeRequest(BaseModel):
    url: str


class FileResponse(BaseModel):
    name: str
    size: float
    size_human: str


class FolderResponse(BaseModel):
    name: str
    files: List[FileResponse]


class AnalysisResponse(BaseModel):
    clone_url: str
    size: float
    size_human: str
    folders: List[FolderResponse]
    has_submodules: bool
    error: Optional[str] = None


class HealthResponse(BaseModel):
    status: str


def _default_orchestrator() -> Orchestrator:
    return Orchestrator()


def create_app(
    orchestrator_factory: Callable[[], Orchestrator] = _default_orchestrator,
) -> FastAPI:
    """Create the FastAPI application exposing repository analysis."""
    app = FastAPI(title="Repo Analyzer Service", version="1.0.0")

    async def get_orchestrator() -> Orchestrator:
        # Each request owns its orchestrator and therefore its workspace.
        return orchestrator_factory()

    @app.get("/health", response_model=HealthResponse)
    async def health() -> HealthResponse:
        return HealthResponse(status="ok")

    @app.post(
        "/analyze",
        response_model=AnalysisResponse,
        response_model_exclude_none=True,
    )
    async def analyze_repo(
        payload: AnalyzeRequest,
        orchestrator: Orchestrator = Depends(get_orchestrator),
    ) -> AnalysisResponse:
        loop = asyncio.get_running_loop()
        analysis: RepoAnalysis = await loop.run_in_executor(
            None, orchestrator.analyze, payload.url
        )
        return AnalysisResponse(**analysis.to_dict())

    return app


def run_service(
    host: str = "0.0.0.0", port: int = 8000
) -> None:  # pragma: no cover - integration path
    import uvicorn

    from ..logging import configure_logging

    configure_logging()
    uvicorn.run(create_app(), host=host, port=port)
