"""Unit test fixtures."""

from __future__ import annotations

import pytest


# ============================================================================
# Hostname Fixtures
# ============================================================================


@pytest.fixture
def failing_hostname_lookup():
    """Hostname source that fails like an unconfigured resolver."""

    def lookup() -> str:
        raise OSError("[Errno -2] Name or service not known")

    return lookup


@pytest.fixture
def empty_hostname_lookup():
    """Hostname source that answers with an empty name."""
    return lambda: ""


# ============================================================================
# Non-text Inputs
# ============================================================================


# How os.environ surfaces bytes that are not valid UTF-8
SURROGATE_VALUE = "bad\udcffvalue"


@pytest.fixture(params=[b"bad\xffvalue", SURROGATE_VALUE], ids=["bytes", "surrogate"])
def non_text_value(request: pytest.FixtureRequest) -> bytes | str:
    """Values that cannot be read as text."""
    return request.param
