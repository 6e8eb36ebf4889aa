"""Core types, models, and exceptions."""

from .exceptions import (
    ConfigurationError,
    DuplicateExpirationError,
    ExpirationError,
    HostnameLookupError,
    InvalidAddressError,
    InvalidBaseUrlError,
    InvalidExpirationError,
    InvalidNumberError,
    InvalidSigningKeyError,
    MultipleDefaultsError,
    NonTextValueError,
    UnknownThemeError,
    WastebinError,
)
from .models import (
    BindAddress,
    FileStorage,
    InMemoryStorage,
    SigningKey,
    StorageLocation,
)
from .types import StorageKind, Theme

__all__ = [
    # Types
    "StorageKind",
    "Theme",
    # Models
    "BindAddress",
    "FileStorage",
    "InMemoryStorage",
    "SigningKey",
    "StorageLocation",
    # Exceptions
    "ConfigurationError",
    "DuplicateExpirationError",
    "ExpirationError",
    "HostnameLookupError",
    "InvalidAddressError",
    "InvalidBaseUrlError",
    "InvalidExpirationError",
    "InvalidNumberError",
    "InvalidSigningKeyError",
    "MultipleDefaultsError",
    "NonTextValueError",
    "UnknownThemeError",
    "WastebinError",
]
