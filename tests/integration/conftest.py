"""Integration test fixtures for the FastAPI application."""

from __future__ import annotations

from typing import AsyncIterator

import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from wastebin.api.app import create_app
from wastebin.config import Settings, resolve_settings


# ============================================================================
# Settings Fixtures
# ============================================================================


@pytest.fixture
def app_env(minimal_env: dict[str, str]) -> dict[str, str]:
    """Inputs for the application under test."""
    return {
        **minimal_env,
        "WASTEBIN_TITLE": "test bin",
        "WASTEBIN_THEME": "onehalf",
        "WASTEBIN_MAX_BODY_SIZE": "16",
        "WASTEBIN_PASTE_EXPIRATIONS": "600,0=d,3600",
    }


@pytest.fixture
def test_settings(app_env: dict[str, str], hostname_lookup) -> Settings:
    """Resolve settings without touching the process environment."""
    return resolve_settings(app_env, hostname_lookup=hostname_lookup)


# ============================================================================
# Application Fixtures
# ============================================================================


@pytest.fixture
async def test_app(test_settings: Settings) -> AsyncIterator[FastAPI]:
    """Create the application and run its lifespan."""
    app = create_app(test_settings)
    async with app.router.lifespan_context(app):
        yield app


@pytest.fixture
async def test_client(test_app: FastAPI) -> AsyncIterator[AsyncClient]:
    """Create async HTTP test client."""
    transport = ASGITransport(app=test_app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
