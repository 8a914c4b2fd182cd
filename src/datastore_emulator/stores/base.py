"""Store identity and the update-transform contract shared by all stores."""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import TypeAlias

from datastore_emulator.config import DEFAULT_SCOPE
from datastore_emulator.values import Value

Transform: TypeAlias = Callable[[Value], "Value | Awaitable[Value]"]
"""Maps the current value (``None`` when missing) to the new value.

Returning ``None`` leaves the stored value untouched.  The callable may also
return an awaitable, which is awaited before committing.
"""


@dataclass(frozen=True)
class StoreIdentity:
    """``(name, scope)`` pair that uniquely identifies a store in a registry."""

    name: str
    scope: str = DEFAULT_SCOPE

    @property
    def cache_key(self) -> str:
        return f"{self.name}:{self.scope}"
