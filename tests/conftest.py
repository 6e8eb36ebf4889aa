"""Shared test fixtures for all tests."""

from __future__ import annotations

import os
from collections.abc import Iterator
from pathlib import Path

import pytest

from wastebin.config import get_settings

# ============================================================================
# Test Data Constants
# ============================================================================


# 64 bytes, the minimum accepted signing key length
VALID_SIGNING_KEY = "k" * 64
SHORT_SIGNING_KEY = "k" * 63

TEST_HOSTNAME = "host1"


# ============================================================================
# Environment Isolation
# ============================================================================


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Iterator[None]:
    """Drop WASTEBIN_* variables and run each test outside the repo.

    Keeps a developer's environment or ``.env`` file from leaking into
    resolution results.
    """
    for name in list(os.environ):
        if name.upper().startswith("WASTEBIN_"):
            monkeypatch.delenv(name)
    monkeypatch.chdir(tmp_path)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


# ============================================================================
# Input Fixtures
# ============================================================================


@pytest.fixture
def hostname_lookup():
    """Hostname source that always answers ``host1``."""
    return lambda: TEST_HOSTNAME


@pytest.fixture
def full_env() -> dict[str, str]:
    """Create an input mapping that sets every variable."""
    return {
        "WASTEBIN_ADDRESS_PORT": "127.0.0.1:3000",
        "WASTEBIN_BASE_URL": "https://paste.example.com",
        "WASTEBIN_CACHE_SIZE": "256",
        "WASTEBIN_DATABASE_PATH": "/var/lib/wastebin/state.db",
        "WASTEBIN_HTTP_TIMEOUT": "30",
        "WASTEBIN_MAX_BODY_SIZE": "2048",
        "WASTEBIN_PASTE_EXPIRATIONS": "0,600,3600=d,86400",
        "WASTEBIN_SIGNING_KEY": VALID_SIGNING_KEY,
        "WASTEBIN_THEME": "gruvbox",
        "WASTEBIN_TITLE": "my paste bin",
        "WASTEBIN_PASSWORD_SALT": "pepper",
    }


@pytest.fixture
def minimal_env() -> dict[str, str]:
    """Create an input mapping with a fixed key and nothing else."""
    return {"WASTEBIN_SIGNING_KEY": VALID_SIGNING_KEY}
