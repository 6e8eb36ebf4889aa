"""Response schemas for API endpoints."""

from __future__ import annotations

from typing import Literal

from pydantic import Field

from wastebin.api.schemas.base import APIBaseSchema
from wastebin.core.types import StorageKind, Theme
from wastebin.expiration import Expiration, ExpirationSet


class HealthResponse(APIBaseSchema):
    """Health check response."""

    status: Literal["healthy", "degraded", "unhealthy"]
    version: str
    title: str
    theme: Theme
    storage: StorageKind
    services: dict[str, Literal["up", "down", "unknown"]] = Field(default_factory=dict)


class ExpirationResponse(APIBaseSchema):
    """One paste lifetime choice."""

    seconds: int = Field(..., description="Lifetime in seconds, 0 = never")
    label: str = Field(..., description="Human readable lifetime")
    is_default: bool = Field(..., description="Pre-selected choice")

    @classmethod
    def from_expiration(cls, expiration: Expiration) -> ExpirationResponse:
        return cls(
            seconds=expiration.seconds,
            label=expiration.label,
            is_default=expiration.default,
        )


class ExpirationsResponse(APIBaseSchema):
    """Paste lifetimes in presentation order."""

    expirations: list[ExpirationResponse]
    default_seconds: int

    @classmethod
    def from_set(cls, expirations: ExpirationSet) -> ExpirationsResponse:
        return cls(
            expirations=[ExpirationResponse.from_expiration(e) for e in expirations],
            default_seconds=expirations.default.seconds,
        )
