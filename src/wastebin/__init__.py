"""Wastebin - startup configuration for a minimal paste bin service."""

from wastebin.config import Settings, WastebinEnvironment, get_settings, resolve_settings
from wastebin.core.exceptions import ConfigurationError, WastebinError
from wastebin.core.models import BindAddress, FileStorage, InMemoryStorage, SigningKey
from wastebin.core.types import StorageKind, Theme
from wastebin.expiration import Expiration, ExpirationSet

__version__ = "0.1.0"
__all__ = [
    # Configuration
    "Settings",
    "WastebinEnvironment",
    "get_settings",
    "resolve_settings",
    # Types
    "StorageKind",
    "Theme",
    # Models
    "BindAddress",
    "Expiration",
    "ExpirationSet",
    "FileStorage",
    "InMemoryStorage",
    "SigningKey",
    # Errors
    "ConfigurationError",
    "WastebinError",
    # Version
    "__version__",
]
