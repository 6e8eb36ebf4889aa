"""Core enums and type definitions."""

from enum import StrEnum


class Theme(StrEnum):
    """Syntax highlighting themes offered by the renderer."""

    AYU = "ayu"
    BASE16_OCEAN = "base16ocean"
    COLDARK = "coldark"
    GRUVBOX = "gruvbox"
    MONOKAI = "monokai"
    ONEHALF = "onehalf"
    SOLARIZED = "solarized"


class StorageKind(StrEnum):
    """Where the paste database lives."""

    MEMORY = "memory"
    FILE = "file"
