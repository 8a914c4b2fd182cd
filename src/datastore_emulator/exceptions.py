"""Custom exceptions for the datastore_emulator package."""

from __future__ import annotations


class DataStoreError(Exception):
    """Base exception for all emulator errors."""


class ConfigError(DataStoreError):
    """Raised when a registry configuration is invalid."""

    def __init__(self, message: str) -> None:
        super().__init__(f"Invalid registry configuration: {message}")
