"""FastAPI application entrypoint for scngen service mode."""

from __future__ import annotations

import asyncio
from typing import Any, Callable, Dict, List

from fastapi import FastAPI
from fastapi.responses import JSONResponse
from pydantic import BaseModel, ConfigDict, Field

from ..errors import GraphError, ProviderError
from ..ids import IdStyle
from ..logging import get_logger
from ..models import CodeGraph
from ..providers import graph_from_document
from ..serializer import RenderOptions, serialize_graph

_logger = get_logger("service")

Serializer = Callable[[CodeGraph, RenderOptions], str]


class SerializeRequest(BaseModel):
    """Graph document plus render options; options accept camelCase or snake_case."""

    model_config = ConfigDict(populate_by_name=True)

    nodes: List[Dict[str, Any]] = Field(default_factory=list)
    edges: List[Dict[str, Any]] = Field(default_factory=list)
    id_style: IdStyle = Field(default=IdStyle.VERBATIM, alias="idStyle")
    uppercase_containers: bool = Field(default=False, alias="uppercaseContainers")


class SerializeResponse(BaseModel):
    scn: str
    files: int
    nodes: int


class HealthResponse(BaseModel):
    status: str


def create_app(serializer: Serializer = serialize_graph) -> FastAPI:
    """Create the FastAPI application exposing SCN serialization."""

    app = FastAPI(title="SCN Service", version="1.0.0")

    @app.get("/health", response_model=HealthResponse)
    async def health() -> HealthResponse:
        return HealthResponse(status="ok")

    @app.post("/serialize", response_model=SerializeResponse)
    async def serialize(payload: SerializeRequest) -> SerializeResponse:
        graph = graph_from_document(
            {"nodes": payload.nodes, "edges": payload.edges}, source="request"
        )
        options = RenderOptions(
            id_style=payload.id_style,
            uppercase_containers=payload.uppercase_containers,
        )

        def _run() -> str:
            return serializer(graph, options)

        loop = asyncio.get_running_loop()
        scn = await loop.run_in_executor(None, _run)
        file_count = sum(1 for node in graph.nodes.values() if node.is_file)
        _logger.debug("Serialized %d node(s) across %d file(s)", len(graph.nodes), file_count)
        return SerializeResponse(scn=scn, files=file_count, nodes=len(graph.nodes))

    @app.exception_handler(GraphError)
    async def graph_error_handler(_: Any, exc: GraphError) -> JSONResponse:
        return JSONResponse(status_code=422, content={"detail": str(exc)})

    @app.exception_handler(ProviderError)
    async def provider_error_handler(_: Any, exc: ProviderError) -> JSONResponse:
        return JSONResponse(status_code=400, content={"detail": str(exc)})

    return app


def run_service(host: str = "127.0.0.1", port: int = 8000) -> None:  # pragma: no cover - integration path
    import uvicorn

    app = create_app()
    uvicorn.run(app, host=host, port=port)
