"""Resolvers turning raw ``WASTEBIN_*`` inputs into typed settings.

Each resolver reads at most one variable from an input mapping. An absent
variable yields the documented default, a present one must parse or the
resolver raises a :class:`~wastebin.core.exceptions.ConfigurationError`.
"""

from __future__ import annotations

import logging
import re
import socket
from collections.abc import Callable, Mapping
from datetime import timedelta
from pathlib import Path

from pydantic import AnyUrl, TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from wastebin.core.exceptions import (
    ExpirationError,
    HostnameLookupError,
    InvalidAddressError,
    InvalidBaseUrlError,
    InvalidNumberError,
    InvalidSigningKeyError,
    NonTextValueError,
    UnknownThemeError,
)
from wastebin.core.models import BindAddress, FileStorage, InMemoryStorage, SigningKey
from wastebin.core.types import Theme
from wastebin.expiration import DEFAULT_EXPIRATIONS, ExpirationSet

logger = logging.getLogger(__name__)

VAR_ADDRESS_PORT = "WASTEBIN_ADDRESS_PORT"
VAR_BASE_URL = "WASTEBIN_BASE_URL"
VAR_CACHE_SIZE = "WASTEBIN_CACHE_SIZE"
VAR_DATABASE_PATH = "WASTEBIN_DATABASE_PATH"
VAR_HTTP_TIMEOUT = "WASTEBIN_HTTP_TIMEOUT"
VAR_MAX_BODY_SIZE = "WASTEBIN_MAX_BODY_SIZE"
VAR_PASTE_EXPIRATIONS = "WASTEBIN_PASTE_EXPIRATIONS"
VAR_SIGNING_KEY = "WASTEBIN_SIGNING_KEY"
VAR_THEME = "WASTEBIN_THEME"
VAR_TITLE = "WASTEBIN_TITLE"
VAR_PASSWORD_SALT = "WASTEBIN_PASSWORD_SALT"

DEFAULT_ADDRESS_PORT = "0.0.0.0:8088"
DEFAULT_CACHE_SIZE = 128
DEFAULT_MAX_BODY_SIZE = 1024 * 1024
DEFAULT_HTTP_TIMEOUT = timedelta(seconds=5)
DEFAULT_THEME = Theme.AYU
DEFAULT_TITLE = "wastebin"
DEFAULT_PASSWORD_SALT = "somesalt"

BASE_URL_SCHEME = "https"

# Unsigned integers are stored in 64 bits.
MAX_UNSIGNED = 2**64 - 1

_DIGITS = re.compile(r"[0-9]+")
# Digits in MAX_UNSIGNED, longer strings never fit and int() caps string length.
_MAX_DIGITS = len(str(MAX_UNSIGNED))

THEMES: dict[str, Theme] = {
    "ayu": Theme.AYU,
    "base16ocean": Theme.BASE16_OCEAN,
    "coldark": Theme.COLDARK,
    "gruvbox": Theme.GRUVBOX,
    "monokai": Theme.MONOKAI,
    "onehalf": Theme.ONEHALF,
    "solarized": Theme.SOLARIZED,
}

_url_adapter: TypeAdapter[AnyUrl] = TypeAdapter(AnyUrl)

Environment = Mapping[str, str | bytes]


def _is_text(value: str | bytes) -> bool:
    """Undecodable environment bytes surface as lone surrogates."""
    if isinstance(value, bytes):
        return False
    try:
        value.encode("utf-8")
    except UnicodeEncodeError:
        return False
    return True


def _read(env: Environment, variable: str) -> str | None:
    """Return the text value of *variable*, None when absent."""
    value = env.get(variable)
    if value is None:
        return None
    if not _is_text(value):
        raise NonTextValueError(variable)
    return value  # type: ignore[return-value]


def _parse_unsigned(variable: str, value: str, expected: str, *, nonzero: bool = False) -> int:
    if not value:
        raise InvalidNumberError(variable, value, "cannot parse integer from empty string", expected)
    if not _DIGITS.fullmatch(value):
        raise InvalidNumberError(variable, value, "invalid digit found in string", expected)
    significant = value.lstrip("0") or "0"
    if len(significant) > _MAX_DIGITS:
        raise InvalidNumberError(variable, value, "number too large to fit in target type", expected)
    number = int(significant)
    if number > MAX_UNSIGNED:
        raise InvalidNumberError(variable, value, "number too large to fit in target type", expected)
    if nonzero and number == 0:
        raise InvalidNumberError(variable, value, "number would be zero for non-zero type", expected)
    return number


def title(env: Environment) -> str:
    """Page title, ``wastebin`` unless overridden."""
    value = _read(env, VAR_TITLE)
    return DEFAULT_TITLE if value is None else value


def password_hash_salt(env: Environment) -> str:
    """Salt for hashing paste passwords."""
    value = _read(env, VAR_PASSWORD_SALT)
    return DEFAULT_PASSWORD_SALT if value is None else value


def theme(env: Environment) -> Theme:
    """Highlighting theme, matched case-sensitively against the known names."""
    value = _read(env, VAR_THEME)
    if value is None:
        return DEFAULT_THEME
    try:
        return THEMES[value]
    except KeyError:
        raise UnknownThemeError(VAR_THEME, value) from None


def cache_size(env: Environment) -> int:
    """Number of rendered pastes kept in the cache, never zero."""
    value = _read(env, VAR_CACHE_SIZE)
    if value is None:
        return DEFAULT_CACHE_SIZE
    return _parse_unsigned(VAR_CACHE_SIZE, value, "number of elements", nonzero=True)


def max_body_size(env: Environment) -> int:
    """Upper bound for request bodies in bytes."""
    value = _read(env, VAR_MAX_BODY_SIZE)
    if value is None:
        return DEFAULT_MAX_BODY_SIZE
    return _parse_unsigned(VAR_MAX_BODY_SIZE, value, "number of bytes")


def http_timeout(env: Environment) -> timedelta:
    """Timeout for outbound HTTP requests, given in whole seconds."""
    value = _read(env, VAR_HTTP_TIMEOUT)
    if value is None:
        return DEFAULT_HTTP_TIMEOUT
    seconds = _parse_unsigned(VAR_HTTP_TIMEOUT, value, "number of seconds")
    try:
        return timedelta(seconds=seconds)
    except OverflowError:
        raise InvalidNumberError(
            VAR_HTTP_TIMEOUT, value, "number too large to fit in target type", "number of seconds"
        ) from None


def address(env: Environment) -> BindAddress:
    """Socket address for the HTTP listener."""
    value = _read(env, VAR_ADDRESS_PORT)
    if value is None:
        value = DEFAULT_ADDRESS_PORT
    try:
        return BindAddress.parse(value)
    except ValueError as e:
        raise InvalidAddressError(VAR_ADDRESS_PORT, value, str(e)) from e


def database_method(env: Environment) -> InMemoryStorage | FileStorage:
    """Storage location, in memory unless a database path is given."""
    value = _read(env, VAR_DATABASE_PATH)
    if value is None:
        return InMemoryStorage()
    return FileStorage(path=Path(value))


def signing_key(env: Environment) -> SigningKey:
    """Cookie signing key, freshly generated unless supplied."""
    value = _read(env, VAR_SIGNING_KEY)
    if value is None:
        return SigningKey.generate()
    material = value.encode("utf-8")
    if len(material) < SigningKey.LENGTH:
        raise InvalidSigningKeyError(VAR_SIGNING_KEY, SigningKey.LENGTH, len(material))
    return SigningKey(material)


def _parse_url(value: str) -> AnyUrl:
    try:
        url = _url_adapter.validate_python(value)
    except PydanticValidationError as e:
        reason = e.errors()[0]["msg"] if e.errors() else str(e)
        raise InvalidBaseUrlError(VAR_BASE_URL, value, reason) from e
    if not url.host:
        raise InvalidBaseUrlError(VAR_BASE_URL, value, "URL has no host")
    return url


def base_url(
    env: Environment,
    hostname_lookup: Callable[[], str] = socket.gethostname,
) -> AnyUrl:
    """Public base URL for absolute links.

    Falls back to ``https://<hostname>`` when no URL is configured.
    """
    value = _read(env, VAR_BASE_URL)
    if value is not None:
        return _parse_url(value)

    try:
        hostname = hostname_lookup()
    except OSError as e:
        raise HostnameLookupError(VAR_BASE_URL, str(e)) from e
    if not hostname:
        raise HostnameLookupError(VAR_BASE_URL, "hostname is empty")

    logger.info(f"{VAR_BASE_URL} not set, using hostname {hostname!r}")
    return _parse_url(f"{BASE_URL_SCHEME}://{hostname}")


def expiration_set(env: Environment) -> ExpirationSet:
    """Paste lifetimes offered to users, built-in list unless overridden."""
    value = _read(env, VAR_PASTE_EXPIRATIONS)
    if value is None:
        return ExpirationSet.parse(DEFAULT_EXPIRATIONS)
    try:
        return ExpirationSet.parse(value)
    except ExpirationError as e:
        raise e.with_variable(VAR_PASTE_EXPIRATIONS)
