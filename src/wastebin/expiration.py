"""Paste expiration choices and their list grammar.

The list is written as comma-separated durations in seconds, in the order
they are offered to users. ``0`` means the paste never expires and one
entry may carry the ``=d`` marker to make it the pre-selected choice::

    0,600,3600=d,86400

When no entry is marked the first one is the default.
"""

from __future__ import annotations

import re
from collections.abc import Iterator
from datetime import timedelta
from typing import ClassVar, Self

from pydantic import BaseModel, ConfigDict, Field, model_validator

from wastebin.core.exceptions import (
    DuplicateExpirationError,
    InvalidExpirationError,
    MultipleDefaultsError,
)

DEFAULT_EXPIRATIONS = "0,600,3600=d,86400,604800,2419200,29030400"

SEPARATOR = ","
DEFAULT_MARKER = "=d"

# Durations are stored as unsigned 32-bit seconds.
MAX_SECONDS = 2**32 - 1
_MAX_DIGITS = len(str(MAX_SECONDS))

_UNITS: tuple[tuple[int, str], ...] = (
    (604800, "week"),
    (86400, "day"),
    (3600, "hour"),
    (60, "minute"),
    (1, "second"),
)


class Expiration(BaseModel):
    """A single paste lifetime offered to users."""

    model_config = ConfigDict(frozen=True)

    seconds: int = Field(..., ge=0, le=MAX_SECONDS, description="Lifetime, 0 = never")
    default: bool = Field(default=False, description="Pre-selected choice")

    DIGITS_PATTERN: ClassVar[re.Pattern[str]] = re.compile(r"[0-9]+")

    @classmethod
    def parse(cls, token: str) -> Expiration:
        """Parse one list token, with or without the default marker."""
        marked = token.endswith(DEFAULT_MARKER)
        number = token[: -len(DEFAULT_MARKER)] if marked else token

        if not number:
            raise InvalidExpirationError(token, "empty duration")
        if not cls.DIGITS_PATTERN.fullmatch(number):
            raise InvalidExpirationError(token, "expected non-negative number of seconds")
        significant = number.lstrip("0") or "0"
        if len(significant) > _MAX_DIGITS:
            raise InvalidExpirationError(token, "number too large")
        seconds = int(significant)
        if seconds > MAX_SECONDS:
            raise InvalidExpirationError(token, "number too large")
        return cls(seconds=seconds, default=marked)

    @property
    def never(self) -> bool:
        return self.seconds == 0

    @property
    def duration(self) -> timedelta | None:
        """Lifetime as a timedelta, None if the paste never expires."""
        if self.never:
            return None
        return timedelta(seconds=self.seconds)

    @property
    def label(self) -> str:
        """Human readable lifetime, e.g. ``10 minutes``."""
        if self.never:
            return "never"
        for size, unit in _UNITS:
            if self.seconds % size == 0:
                count = self.seconds // size
                return f"{count} {unit}" if count == 1 else f"{count} {unit}s"
        return f"{self.seconds} seconds"  # pragma: no cover

    def __str__(self) -> str:
        return f"{self.seconds}{DEFAULT_MARKER}" if self.default else str(self.seconds)


class ExpirationSet(BaseModel):
    """Ordered paste lifetimes with exactly one default."""

    model_config = ConfigDict(frozen=True)

    expirations: tuple[Expiration, ...] = Field(..., min_length=1)

    @model_validator(mode="after")
    def validate_expirations(self) -> Self:
        """Enforce a single default and distinct durations."""
        defaults = [e for e in self.expirations if e.default]
        if len(defaults) != 1:
            raise ValueError(f"expected exactly one default expiration, got {len(defaults)}")
        seen: set[int] = set()
        for expiration in self.expirations:
            if expiration.seconds in seen:
                raise ValueError(f"duplicate expiration {expiration.seconds}")
            seen.add(expiration.seconds)
        return self

    @classmethod
    def parse(cls, value: str) -> ExpirationSet:
        """Parse the comma-separated expiration grammar.

        Raises:
            InvalidExpirationError: A token is not a duration in seconds.
            MultipleDefaultsError: More than one token is marked default.
            DuplicateExpirationError: A duration is listed twice.
        """
        parsed: list[Expiration] = []
        seen: set[int] = set()
        default_index: int | None = None

        for index, token in enumerate(value.split(SEPARATOR)):
            expiration = Expiration.parse(token)
            if expiration.default:
                if default_index is not None:
                    raise MultipleDefaultsError(token)
                default_index = index
            if expiration.seconds in seen:
                raise DuplicateExpirationError(token, expiration.seconds)
            seen.add(expiration.seconds)
            parsed.append(expiration)

        if default_index is None:
            # Unmarked lists default to the first entry.
            parsed[0] = parsed[0].model_copy(update={"default": True})

        return cls(expirations=tuple(parsed))

    @property
    def default(self) -> Expiration:
        """The pre-selected expiration."""
        return next(e for e in self.expirations if e.default)

    @property
    def default_index(self) -> int:
        return next(i for i, e in enumerate(self.expirations) if e.default)

    @property
    def seconds(self) -> list[int]:
        """Durations in presentation order."""
        return [e.seconds for e in self.expirations]

    def __iter__(self) -> Iterator[Expiration]:  # type: ignore[override]
        return iter(self.expirations)

    def __len__(self) -> int:
        return len(self.expirations)

    def __str__(self) -> str:
        return SEPARATOR.join(str(e) for e in self.expirations)
