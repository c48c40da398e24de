"""FastAPI application bootstrap."""

from __future__ import annotations

import logging
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from src.todo import TodoRepository

from .dependencies import get_config, get_todo_repository
from .routes import register_health_routes, register_todo_routes

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Render every failure as ``{"error": ...}``."""

    @app.exception_handler(StarletteHTTPException)
    async def http_error(request: Request, exc: StarletteHTTPException) -> JSONResponse:
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": str(exc.detail)},
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(RequestValidationError)
    async def validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
        logger.warning("Invalid request body for %s %s", request.method, request.url.path)
        return JSONResponse(
            status_code=400,
            content={
                "error": "Invalid request body",
                "details": jsonable_encoder(exc.errors()),
            },
        )

    @app.exception_handler(Exception)
    async def unhandled_error(request: Request, exc: Exception) -> JSONResponse:
        logger.exception("Unhandled error for %s %s: %s", request.method, request.url.path, exc)
        return JSONResponse(status_code=500, content={"error": "Internal server error"})


def create_app(repository: Optional[TodoRepository] = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        repository: store to serve; the shared singleton when omitted
    """
    config = get_config()
    app = FastAPI(title="TODO App API", version="1.0.0")

    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.server.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    if repository is not None:
        app.dependency_overrides[get_todo_repository] = lambda: repository

    register_error_handlers(app)
    register_health_routes(app)
    register_todo_routes(app)

    return app


app = create_app()
