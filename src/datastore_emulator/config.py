"""RegistryConfig — settings shared by every store a registry creates."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from datastore_emulator.exceptions import ConfigError

DEFAULT_SCOPE = "global"


class RegistryConfig(BaseModel):
    """Registry configuration.

    Attributes:
        default_scope: Scope used when a store is requested without one.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    default_scope: str = Field(default=DEFAULT_SCOPE, min_length=1)

    @classmethod
    def load(cls, data: Mapping[str, Any]) -> RegistryConfig:
        """Validate *data* into a config, raising :class:`ConfigError` on failure."""
        try:
            return cls.model_validate(dict(data))
        except ValidationError as e:
            raise ConfigError(str(e)) from e
