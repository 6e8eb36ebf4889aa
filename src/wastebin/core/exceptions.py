"""Custom exception hierarchy for wastebin."""

from typing import Any


class WastebinError(Exception):
    """Base exception for all wastebin errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}


class ConfigurationError(WastebinError):
    """A startup setting could not be resolved from its input."""

    def __init__(
        self,
        message: str,
        variable: str | None = None,
        value: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, details)
        self.variable = variable
        self.value = value


class InvalidNumberError(ConfigurationError):
    """Input is not a valid unsigned integer for its setting."""

    def __init__(
        self,
        variable: str,
        value: str,
        reason: str,
        expected: str = "number",
    ) -> None:
        super().__init__(
            f"failed to parse {variable}, expected {expected}: {reason}",
            variable=variable,
            value=value,
            details={"reason": reason},
        )
        self.reason = reason


class InvalidAddressError(ConfigurationError):
    """Input is not a `host:port` socket address."""

    def __init__(self, variable: str, value: str, reason: str) -> None:
        super().__init__(
            f"failed to parse {variable}, expected `host:port`: {reason}",
            variable=variable,
            value=value,
            details={"reason": reason},
        )
        self.reason = reason


class NonTextValueError(ConfigurationError):
    """Input is present but cannot be read as text."""

    def __init__(self, variable: str) -> None:
        super().__init__(
            f"failed to parse {variable}, contains non-Unicode data",
            variable=variable,
        )


class InvalidBaseUrlError(ConfigurationError):
    """Input or synthesized value is not an absolute URL."""

    def __init__(self, variable: str, value: str, reason: str) -> None:
        super().__init__(
            f"failed to parse {variable}: {reason}",
            variable=variable,
            value=value,
            details={"reason": reason},
        )
        self.reason = reason


class HostnameLookupError(ConfigurationError):
    """Local hostname could not be determined for the base URL fallback."""

    def __init__(self, variable: str, reason: str) -> None:
        super().__init__(
            f"failed to parse {variable}: failed to get hostname: {reason}",
            variable=variable,
            details={"reason": reason},
        )
        self.reason = reason


class UnknownThemeError(ConfigurationError):
    """Input does not name a known theme."""

    def __init__(self, variable: str, value: str) -> None:
        super().__init__(f"unknown theme {value}", variable=variable, value=value)


class InvalidSigningKeyError(ConfigurationError):
    """Supplied key material is too short for the signing primitive."""

    def __init__(self, variable: str, required: int, actual: int) -> None:
        # The raw value is never attached, it is secret material.
        super().__init__(
            f"failed to generate key from {variable}: "
            f"key material must be at least {required} bytes, got {actual}",
            variable=variable,
            details={"required": required, "actual": actual},
        )
        self.required = required
        self.actual = actual


class ExpirationError(ConfigurationError):
    """Paste expiration list violates the expiration grammar."""

    def with_variable(self, variable: str) -> "ExpirationError":
        """Attach the name of the input the list was read from."""
        self.variable = variable
        self.message = f"failed to parse {variable}: {self.message}"
        self.args = (self.message,)
        return self


class InvalidExpirationError(ExpirationError):
    """A token of the expiration list is not a duration in seconds."""

    def __init__(self, token: str, reason: str) -> None:
        super().__init__(
            f"invalid expiration {token!r}: {reason}",
            value=token,
            details={"token": token, "reason": reason},
        )
        self.token = token
        self.reason = reason


class MultipleDefaultsError(ExpirationError):
    """More than one token of the expiration list carries the default marker."""

    def __init__(self, token: str) -> None:
        super().__init__(
            f"multiple default expirations, second marker on {token!r}",
            value=token,
            details={"token": token},
        )
        self.token = token


class DuplicateExpirationError(ExpirationError):
    """The same duration appears twice in the expiration list."""

    def __init__(self, token: str, seconds: int) -> None:
        super().__init__(
            f"duplicate expiration {token!r}, {seconds} seconds is already listed",
            value=token,
            details={"token": token, "seconds": seconds},
        )
        self.token = token
        self.seconds = seconds
