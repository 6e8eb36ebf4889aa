"""FastAPI application factory."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, Awaitable, Callable

import httpx
from fastapi import FastAPI, Request, Response
from fastapi.responses import JSONResponse

from wastebin import __version__
from wastebin.api.routes import expirations_router, health_router
from wastebin.api.schemas import APIError, ErrorDetail
from wastebin.config import Settings, get_settings

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """
    Application lifespan manager.

    Hands the resolved settings to the collaborators that need them.
    """
    settings: Settings = app.state.settings

    logger.info("Initializing HTTP client...")
    app.state.http_client = httpx.AsyncClient(
        timeout=settings.http_timeout.total_seconds(),
    )

    logger.info(
        f"Application startup complete: storage={settings.database.kind}, "
        f"theme={settings.theme}, base_url={settings.base_url}"
    )

    yield

    # Cleanup
    logger.info("Shutting down application...")

    if getattr(app.state, "http_client", None) is not None:
        await app.state.http_client.aclose()

    logger.info("Application shutdown complete")


def _exceeds(length: str, limit: int) -> bool:
    """Whether a ``Content-Length`` value declares more than *limit* bytes."""
    if not (length.isascii() and length.isdigit()):
        return False
    significant = length.lstrip("0")
    return len(significant) > len(str(limit)) or int(significant or "0") > limit


def create_app(settings: Settings | None = None) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        settings: Resolved configuration, resolved from the environment
            when omitted.

    Returns:
        Configured FastAPI application
    """
    if settings is None:
        settings = get_settings()

    app = FastAPI(
        title=settings.title,
        version=__version__,
        lifespan=lifespan,
        openapi_url="/api/openapi.json",
        docs_url="/api/docs",
        redoc_url="/api/redoc",
    )
    app.state.settings = settings

    @app.middleware("http")
    async def limit_body_size(
        request: Request,
        call_next: Callable[[Request], Awaitable[Response]],
    ) -> Response:
        """
        Refuse requests whose declared ``Content-Length`` exceeds the limit.

        Only the header is checked. Chunked bodies without a declared length
        pass through to the routes.
        """
        length = request.headers.get("content-length", "")
        if _exceeds(length, settings.max_body_size):
            error = APIError(
                error=ErrorDetail(
                    code="payload_too_large",
                    message=f"request body exceeds {settings.max_body_size} bytes",
                )
            )
            return JSONResponse(status_code=413, content=error.model_dump(by_alias=True))
        return await call_next(request)

    # Register routes
    app.include_router(health_router, prefix="/api/v1")
    app.include_router(expirations_router, prefix="/api/v1")

    return app
