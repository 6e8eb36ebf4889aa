"""FastAPI application and routes."""

from wastebin.api.app import create_app

__all__ = [
    "create_app",
]
