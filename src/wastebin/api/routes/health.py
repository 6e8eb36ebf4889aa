"""Health check endpoints."""

from __future__ import annotations

from typing import Literal

from fastapi import APIRouter, Request

from wastebin import __version__
from wastebin.api.dependencies import HttpClientDep, SettingsDep
from wastebin.api.schemas import HealthResponse

router = APIRouter(tags=["health"])


@router.get(
    "/health",
    response_model=HealthResponse,
    operation_id="getHealth",
    summary="Health check",
    description="Check the health status of the API and its dependencies.",
)
async def health_check(settings: SettingsDep, http_client: HttpClientDep) -> HealthResponse:
    """Check API health status."""
    services: dict[str, Literal["up", "down", "unknown"]] = {}
    overall_status: Literal["healthy", "degraded", "unhealthy"] = "healthy"

    if http_client is None:
        services["http_client"] = "unknown"
    elif http_client.is_closed:
        services["http_client"] = "down"
        overall_status = "degraded"
    else:
        services["http_client"] = "up"

    return HealthResponse(
        status=overall_status,
        version=__version__,
        title=settings.title,
        theme=settings.theme,
        storage=settings.database.kind,
        services=services,
    )


@router.get(
    "/ready",
    operation_id="getReady",
    summary="Readiness check",
    description="Check if the API is ready to serve traffic.",
)
async def readiness_check(request: Request) -> dict[str, bool]:
    """Check if API is ready to serve traffic."""
    settings = getattr(request.app.state, "settings", None)
    http_client = getattr(request.app.state, "http_client", None)

    ready = settings is not None and http_client is not None

    return {"ready": ready}
