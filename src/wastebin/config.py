"""Application configuration resolved once at startup."""

from __future__ import annotations

import logging
import socket
from collections.abc import Callable, Mapping
from datetime import timedelta
from functools import lru_cache
from typing import Annotated, Literal

from pydantic import AnyUrl, BaseModel, ConfigDict, Field, SkipValidation, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from wastebin import resolvers
from wastebin.core.models import BindAddress, SigningKey, StorageLocation
from wastebin.core.types import Theme
from wastebin.expiration import ExpirationSet

logger = logging.getLogger(__name__)

ENV_PREFIX = "WASTEBIN_"

# Raw values are validated by the resolvers, not by pydantic.
RawInput = Annotated[str | None, SkipValidation()]


class WastebinEnvironment(BaseSettings):
    """Raw ``WASTEBIN_*`` inputs from the environment and ``.env``."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        env_prefix=ENV_PREFIX,
        extra="ignore",
    )

    # Server
    address_port: RawInput = Field(default=None, description="Listener `ip:port`")
    base_url: RawInput = Field(default=None, description="Public URL for absolute links")
    max_body_size: RawInput = Field(default=None, description="Request body limit in bytes")
    http_timeout: RawInput = Field(default=None, description="Outbound HTTP timeout in seconds")

    # Storage
    database_path: RawInput = Field(default=None, description="Database file, in memory if unset")
    cache_size: RawInput = Field(default=None, description="Rendered paste cache capacity")

    # Pastes
    paste_expirations: RawInput = Field(default=None, description="Expiration list, e.g. 0,600=d")
    password_salt: RawInput = Field(default=None, description="Salt for paste password hashes")

    # Appearance
    theme: RawInput = Field(default=None, description="Highlighting theme name")
    title: RawInput = Field(default=None, description="Page title")

    # Security
    signing_key: RawInput = Field(default=None, description="Cookie signing key material")

    # App settings
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        description="Logging level",
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        """Accept level names in any case."""
        return str(v).strip().upper()

    def to_inputs(self) -> dict[str, str]:
        """Return the present inputs keyed by their variable names."""
        inputs: dict[str, str] = {}
        for name in type(self).model_fields:
            if name == "log_level":
                continue
            value = getattr(self, name)
            if value is not None:
                inputs[f"{ENV_PREFIX}{name.upper()}"] = value
        return inputs


class Settings(BaseModel):
    """Validated startup configuration handed to the collaborators."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    address: BindAddress = Field(..., description="Listener address")
    base_url: AnyUrl = Field(..., description="Base for absolute links")
    max_body_size: int = Field(..., ge=0, description="Request body limit in bytes")
    http_timeout: timedelta = Field(..., description="Outbound HTTP timeout")
    database: StorageLocation = Field(..., description="Paste database location")
    cache_size: int = Field(..., gt=0, description="Rendered paste cache capacity")
    expirations: ExpirationSet = Field(..., description="Paste lifetimes offered to users")
    password_salt: str = Field(..., repr=False, description="Salt for password hashes")
    theme: Theme = Field(..., description="Highlighting theme")
    title: str = Field(..., description="Page title")
    signing_key: SigningKey = Field(..., repr=False, exclude=True, description="Cookie key")


def resolve_settings(
    env: Mapping[str, str | bytes] | None = None,
    *,
    hostname_lookup: Callable[[], str] = socket.gethostname,
) -> Settings:
    """
    Resolve every setting from *env*.

    Args:
        env: Input mapping keyed by variable name. Read from the process
            environment and ``.env`` when omitted.
        hostname_lookup: Hostname source for the base URL fallback.

    Raises:
        ConfigurationError: The first input that fails to resolve.
    """
    if env is None:
        env = WastebinEnvironment().to_inputs()

    settings = Settings(
        address=resolvers.address(env),
        base_url=resolvers.base_url(env, hostname_lookup),
        max_body_size=resolvers.max_body_size(env),
        http_timeout=resolvers.http_timeout(env),
        database=resolvers.database_method(env),
        cache_size=resolvers.cache_size(env),
        expirations=resolvers.expiration_set(env),
        password_salt=resolvers.password_hash_salt(env),
        theme=resolvers.theme(env),
        title=resolvers.title(env),
        signing_key=resolvers.signing_key(env),
    )
    logger.debug(f"Resolved settings: {settings!r}")
    return settings


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return resolve_settings()
