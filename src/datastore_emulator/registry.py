"""DataStoreRegistry — creates, caches and enumerates stores."""

from __future__ import annotations

import logging
import threading
from typing import Any, TypeVar

from datastore_emulator.config import RegistryConfig
from datastore_emulator.page import Entry, Page
from datastore_emulator.stores.base import StoreIdentity
from datastore_emulator.stores.ordered import OrderedDataStore
from datastore_emulator.stores.plain import DataStore

logger = logging.getLogger(__name__)

_S = TypeVar("_S", bound=DataStore)


class DataStoreRegistry:
    """Entry point of the emulator.

    Stores are created on first request and cached for the lifetime of the
    registry, keyed by ``"<name>:<scope>"``.  Plain and ordered stores live
    in separate namespaces: asking for both with the same identity yields
    two independent stores.

    A registry holds no global state, so tests can create as many isolated
    registries as they like.

    Parameters:
        config: Registry settings.  Defaults to :class:`RegistryConfig` when
                omitted.
    """

    def __init__(self, config: RegistryConfig | None = None) -> None:
        self._config = config or RegistryConfig()
        self._stores: dict[str, DataStore] = {}
        self._ordered_stores: dict[str, OrderedDataStore] = {}
        self._lock = threading.Lock()

    @property
    def config(self) -> RegistryConfig:
        return self._config

    # ── store lookup ─────────────────────────────────────────

    def get_store(
        self,
        name: str,
        scope: str | None = None,
        options: Any = None,
    ) -> DataStore:
        """Return the plain store for ``(name, scope)``, creating it if needed.

        *options* mirrors the remote API's per-store options and is ignored.
        """
        return self._resolve(self._stores, DataStore, name, scope)

    def get_ordered_store(self, name: str, scope: str | None = None) -> OrderedDataStore:
        """Return the ordered store for ``(name, scope)``, creating it if needed."""
        return self._resolve(self._ordered_stores, OrderedDataStore, name, scope)

    # ── enumeration ──────────────────────────────────────────

    async def list_stores(
        self,
        prefix: str | None = None,
        page_size: int | None = None,
        cursor: str | None = None,
    ) -> Page:
        """List the names of known stores starting with *prefix*.

        Plain and ordered stores are both reported, each name once.  Values
        are always ``0``: this reports existence, not content.  *page_size*
        and *cursor* are accepted for compatibility; everything comes back
        in one page.
        """
        with self._lock:
            stores = [*self._stores.values(), *self._ordered_stores.values()]

        names = dict.fromkeys(
            store.name for store in stores if not prefix or store.name.startswith(prefix)
        )
        return Page(Entry(name, 0) for name in names)

    # ── internals ────────────────────────────────────────────

    def _resolve(
        self,
        cache: dict[str, _S],
        factory: type[_S],
        name: str,
        scope: str | None,
    ) -> _S:
        identity = StoreIdentity(name, self._config.default_scope if scope is None else scope)
        with self._lock:
            store = cache.get(identity.cache_key)
            if store is None:
                store = factory(identity.name, identity.scope)
                cache[identity.cache_key] = store
                logger.debug("Created %r", store)
        return store
