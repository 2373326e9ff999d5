"""FastAPI application factory."""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

import structlog
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from srtresync.api.constants import ResyncHeader
from srtresync.api.errors import ApiError, InvalidRequestError
from srtresync.api.logging import setup_logging
from srtresync.api.routes import router
from srtresync.api.schemas import ErrorDetail
from srtresync.utils.config import get_settings

if TYPE_CHECKING:
    from collections.abc import AsyncGenerator

logger = structlog.get_logger()


def _error_response(request: Request, exc: ApiError) -> JSONResponse:
    """Log a rejected request and render it as an ErrorDetail body."""
    logger.info(
        "request_rejected",
        path=request.url.path,
        code=exc.code,
        status_code=exc.status_code,
    )
    return JSONResponse(
        status_code=exc.status_code,
        content=ErrorDetail(
            code=exc.code,
            message=exc.message,
            detail=exc.detail,
        ).model_dump(),
    )


@asynccontextmanager
async def lifespan(_app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan: setup/teardown."""
    setup_logging()
    logger.info("app_started")
    yield


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    settings = get_settings()
    app = FastAPI(
        title="SRT Resync",
        description="Shift every timecode of an SRT subtitle file",
        lifespan=lifespan,
    )

    # CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allow_origins,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["Content-Disposition", *ResyncHeader],
    )

    # Global error handlers
    @app.exception_handler(ApiError)
    async def api_error_handler(request: Request, exc: ApiError) -> JSONResponse:
        return _error_response(request, exc)

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        return _error_response(request, InvalidRequestError(exc))

    # API routes
    app.include_router(router)

    return app


app = create_app()
