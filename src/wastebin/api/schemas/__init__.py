"""API schema definitions."""

from wastebin.api.schemas.base import (
    APIBaseSchema,
    APIError,
    ErrorDetail,
)
from wastebin.api.schemas.responses import (
    ExpirationResponse,
    ExpirationsResponse,
    HealthResponse,
)

__all__ = [
    # Base
    "APIBaseSchema",
    "APIError",
    "ErrorDetail",
    # Responses
    "ExpirationResponse",
    "ExpirationsResponse",
    "HealthResponse",
]
