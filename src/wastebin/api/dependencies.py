"""FastAPI dependency injection."""

from __future__ import annotations

from typing import Annotated

import httpx
from fastapi import Depends, Request

from wastebin.config import Settings


async def get_settings(request: Request) -> Settings:
    """Get the resolved settings from app state."""
    return request.app.state.settings


async def get_http_client(request: Request) -> httpx.AsyncClient | None:
    """Get the outbound HTTP client from app state."""
    return getattr(request.app.state, "http_client", None)


SettingsDep = Annotated[Settings, Depends(get_settings)]
HttpClientDep = Annotated[httpx.AsyncClient | None, Depends(get_http_client)]
