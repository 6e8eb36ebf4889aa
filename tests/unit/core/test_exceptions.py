"""Tests for the configuration error taxonomy."""

from __future__ import annotations

import pytest

from wastebin.core.exceptions import (
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


class TestErrorMessages:
    """Each error names the variable and what is wrong with it."""

    @pytest.mark.parametrize(
        "error,expected",
        [
            (
                InvalidNumberError(
                    "WASTEBIN_CACHE_SIZE",
                    "x",
                    "invalid digit found in string",
                    "number of elements",
                ),
                "failed to parse WASTEBIN_CACHE_SIZE, expected number of elements: "
                "invalid digit found in string",
            ),
            (
                InvalidAddressError("WASTEBIN_ADDRESS_PORT", "x", "missing port"),
                "failed to parse WASTEBIN_ADDRESS_PORT, expected `host:port`: missing port",
            ),
            (
                NonTextValueError("WASTEBIN_DATABASE_PATH"),
                "failed to parse WASTEBIN_DATABASE_PATH, contains non-Unicode data",
            ),
            (
                InvalidBaseUrlError("WASTEBIN_BASE_URL", "x", "relative URL without a base"),
                "failed to parse WASTEBIN_BASE_URL: relative URL without a base",
            ),
            (
                HostnameLookupError("WASTEBIN_BASE_URL", "no name"),
                "failed to parse WASTEBIN_BASE_URL: failed to get hostname: no name",
            ),
            (UnknownThemeError("WASTEBIN_THEME", "dracula"), "unknown theme dracula"),
            (
                InvalidSigningKeyError("WASTEBIN_SIGNING_KEY", 64, 10),
                "failed to generate key from WASTEBIN_SIGNING_KEY: "
                "key material must be at least 64 bytes, got 10",
            ),
        ],
    )
    def test_message(self, error: ConfigurationError, expected: str):
        assert str(error) == expected
        assert error.message == expected

    @pytest.mark.parametrize(
        "error_type",
        [
            InvalidNumberError,
            InvalidAddressError,
            NonTextValueError,
            InvalidBaseUrlError,
            HostnameLookupError,
            UnknownThemeError,
            InvalidSigningKeyError,
            ExpirationError,
        ],
    )
    def test_hierarchy(self, error_type: type):
        assert issubclass(error_type, ConfigurationError)
        assert issubclass(error_type, WastebinError)


class TestExpirationErrors:
    """Tests for grammar errors and attaching the variable name."""

    @pytest.mark.parametrize(
        "error",
        [
            InvalidExpirationError("-5", "expected non-negative number of seconds"),
            MultipleDefaultsError("60=d"),
            DuplicateExpirationError("60", 60),
        ],
    )
    def test_subclasses(self, error: ExpirationError):
        assert isinstance(error, ExpirationError)
        assert error.variable is None

    def test_with_variable(self):
        error = InvalidExpirationError("-5", "expected non-negative number of seconds")
        returned = error.with_variable("WASTEBIN_PASTE_EXPIRATIONS")

        assert returned is error
        assert error.variable == "WASTEBIN_PASTE_EXPIRATIONS"
        assert str(error) == (
            "failed to parse WASTEBIN_PASTE_EXPIRATIONS: "
            "invalid expiration '-5': expected non-negative number of seconds"
        )
        assert error.details == {"token": "-5", "reason": "expected non-negative number of seconds"}
