"""FastAPI application entrypoint for elpparser service mode."""

from __future__ import annotations

import asyncio
from typing import Any, Callable, Dict, List

from fastapi import Depends, FastAPI
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from ..config import ParserConfig
from ..errors import ElpError, ElpFormatError, ElpNotFoundError
from ..parser import ElpParser

ParserFactory = Callable[[str], ElpParser]


class PackageRequest(BaseModel):
    path: str


class RecordResponse(BaseModel):
    version: int
    title: str
    description: str
    author: str
    license: str
    language: str
    learningResourceType: str
    strings: List[str]


class MetadataResponse(BaseModel):
    metadata: List[Dict[str, Any]]
    pages: List[Dict[str, Any]]


class HealthResponse(BaseModel):
    status: str


def _default_factory(config: ParserConfig | None = None) -> ParserFactory:
    def _open(path: str) -> ElpParser:
        return ElpParser.from_file(path, config)

    return _open


def create_app(
    parser_factory: ParserFactory | None = None,
    *,
    config: ParserConfig | None = None,
) -> FastAPI:
    """Create the FastAPI application exposing package inspection."""

    factory = parser_factory or _default_factory(config)
    app = FastAPI(title="ELP Parser Service", version="1.0.0")

    async def get_factory() -> ParserFactory:
        return factory

    async def _run(func: Callable[[], Any]) -> Any:
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(None, func)

    @app.get("/health", response_model=HealthResponse)
    async def health() -> HealthResponse:
        return HealthResponse(status="ok")

    @app.post("/parse", response_model=RecordResponse)
    async def parse_package(
        payload: PackageRequest,
        open_package: ParserFactory = Depends(get_factory),
    ) -> RecordResponse:
        record = await _run(lambda: open_package(payload.path).to_dict())
        return RecordResponse(**record)

    @app.post("/metadata", response_model=MetadataResponse)
    async def package_metadata(
        payload: PackageRequest,
        open_package: ParserFactory = Depends(get_factory),
    ) -> MetadataResponse:
        report = await _run(lambda: open_package(payload.path).get_metadata_report().to_dict())
        return MetadataResponse(**report)

    @app.exception_handler(ElpNotFoundError)
    async def not_found_handler(_: Any, exc: ElpNotFoundError) -> JSONResponse:
        return JSONResponse(status_code=404, content={"detail": str(exc)})

    @app.exception_handler(ElpFormatError)
    async def format_error_handler(_: Any, exc: ElpFormatError) -> JSONResponse:
        return JSONResponse(status_code=422, content={"detail": str(exc)})

    @app.exception_handler(ElpError)
    async def elp_error_handler(_: Any, exc: ElpError) -> JSONResponse:
        return JSONResponse(status_code=400, content={"detail": str(exc)})

    return app


def run_service(
    host: str = "0.0.0.0", port: int = 8000, config: ParserConfig | None = None
) -> None:  # pragma: no cover - integration path
    import uvicorn

    uvicorn.run(create_app(config=config), host=host, port=port)
