"""API route modules."""

from wastebin.api.routes.expirations import router as expirations_router
from wastebin.api.routes.health import router as health_router

__all__ = [
    "expirations_router",
    "health_router",
]
