"""Value objects produced by the configuration resolvers."""

from __future__ import annotations

import hashlib
import hmac
import re
import secrets
from ipaddress import IPv4Address, IPv6Address
from pathlib import Path
from typing import Annotated, ClassVar, Literal

from pydantic import BaseModel, ConfigDict, Field


class BindAddress(BaseModel):
    """Socket address the HTTP listener binds to."""

    model_config = ConfigDict(frozen=True)

    host: IPv4Address | IPv6Address = Field(..., description="IP address literal")
    port: int = Field(..., ge=0, le=65535, description="TCP port")

    PORT_PATTERN: ClassVar[re.Pattern[str]] = re.compile(r"[0-9]{1,5}")

    @classmethod
    def parse(cls, value: str) -> BindAddress:
        """Parse ``ipv4:port`` or ``[ipv6]:port``.

        Hostnames are not accepted, the listener needs a literal address.
        """
        if value.startswith("["):
            end = value.find("]")
            if end == -1:
                raise ValueError("unterminated IPv6 address")
            host_text = value[1:end]
            rest = value[end + 1 :]
            if not rest.startswith(":"):
                raise ValueError("missing port")
            port_text = rest[1:]
            try:
                host: IPv4Address | IPv6Address = IPv6Address(host_text)
            except ValueError as e:
                raise ValueError(f"invalid IPv6 address {host_text!r}") from e
        else:
            host_text, sep, port_text = value.rpartition(":")
            if not sep:
                raise ValueError("missing port")
            if ":" in host_text:
                raise ValueError("IPv6 addresses must be enclosed in brackets")
            try:
                host = IPv4Address(host_text)
            except ValueError as e:
                raise ValueError(f"invalid IPv4 address {host_text!r}") from e

        if not cls.PORT_PATTERN.fullmatch(port_text):
            raise ValueError(f"invalid port {port_text!r}")
        port = int(port_text)
        if port > 65535:
            raise ValueError(f"port {port} out of range")
        return cls(host=host, port=port)

    def __str__(self) -> str:
        if isinstance(self.host, IPv6Address):
            return f"[{self.host}]:{self.port}"
        return f"{self.host}:{self.port}"


class InMemoryStorage(BaseModel):
    """Ephemeral database that lives as long as the process."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["memory"] = "memory"


class FileStorage(BaseModel):
    """Database persisted to a file."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["file"] = "file"
    path: Path = Field(..., description="Database file path")


StorageLocation = Annotated[InMemoryStorage | FileStorage, Field(discriminator="kind")]


class SigningKey:
    """
    Opaque key material for signing cookies.

    The material cannot be read back; consumers sign and verify through
    the key. Equality is constant-time.
    """

    # 512 bits, the key size expected by the cookie signer.
    LENGTH: ClassVar[int] = 64

    __slots__ = ("_material",)

    def __init__(self, material: bytes) -> None:
        if len(material) < self.LENGTH:
            raise ValueError(
                f"key material must be at least {self.LENGTH} bytes, got {len(material)}"
            )
        self._material = bytes(material)

    @classmethod
    def generate(cls) -> SigningKey:
        """Create a fresh key from the operating system CSPRNG."""
        return cls(secrets.token_bytes(cls.LENGTH))

    def __len__(self) -> int:
        return len(self._material)

    def sign(self, message: bytes) -> bytes:
        """Return the HMAC-SHA256 tag of *message*."""
        return hmac.new(self._material, message, hashlib.sha256).digest()

    def verify(self, message: bytes, signature: bytes) -> bool:
        """Check *signature* against *message* in constant time."""
        return hmac.compare_digest(self.sign(message), signature)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SigningKey):
            return NotImplemented
        return hmac.compare_digest(self._material, other._material)

    def __hash__(self) -> int:
        return hash(hashlib.sha256(self._material).digest())

    def __repr__(self) -> str:
        return f"SigningKey(<{len(self._material)} bytes redacted>)"
