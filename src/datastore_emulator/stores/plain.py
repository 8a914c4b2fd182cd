"""DataStore — a namespaced, in-memory key-value store."""

from __future__ import annotations

import copy
import inspect
import itertools
import logging
import threading

from datastore_emulator.config import DEFAULT_SCOPE
from datastore_emulator.stores.base import StoreIdentity, Transform
from datastore_emulator.values import Value

logger = logging.getLogger(__name__)


class DataStore:
    """Key-value store identified by ``(name, scope)``.

    A ``None`` value is the same as no value: reading a missing key returns
    ``None`` and writing ``None`` removes the key.

    Values are deep-copied on the way in and out, so callers and transforms
    never share an object with the store.

    Every key carries a version stamp that changes on each write.
    :meth:`update` uses it to commit with compare-and-swap semantics, so the
    caller's transform runs outside the lock and is simply re-run when
    another writer got in first.

    Parameters:
        name:  Store name.
        scope: Secondary namespace qualifier.
    """

    def __init__(self, name: str, scope: str = DEFAULT_SCOPE) -> None:
        self._identity = StoreIdentity(name, scope)
        self._data: dict[str, Value] = {}
        self._versions: dict[str, int] = {}
        self._stamps = itertools.count(1)
        self._lock = threading.Lock()

    @property
    def name(self) -> str:
        return self._identity.name

    @property
    def scope(self) -> str:
        return self._identity.scope

    @property
    def identity(self) -> StoreIdentity:
        return self._identity

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r}, scope={self.scope!r})"

    # ── key-value API ────────────────────────────────────────

    async def get(self, key: str) -> Value:
        """Return the stored value, or ``None`` if the key is missing."""
        with self._lock:
            return copy.deepcopy(self._data.get(key))

    async def set(self, key: str, value: Value) -> bool:
        """Create or overwrite *key*.  Always succeeds."""
        with self._lock:
            self._write(key, value)
        return True

    async def remove(self, key: str) -> Value:
        """Delete *key* and return the value it held (``None`` if missing)."""
        with self._lock:
            previous = self._data.pop(key, None)
            self._write(key, None)
        return previous

    async def update(self, key: str, transform: Transform) -> Value:
        """Read-modify-write *key* through *transform*.

        *transform* receives the current value (``None`` when missing).  A
        non-``None`` result is stored and returned.  A ``None`` result
        leaves the store unchanged and ``None`` is returned.

        Exceptions raised by *transform* propagate and nothing is written.
        """
        while True:
            with self._lock:
                current = copy.deepcopy(self._data.get(key))
                version = self._versions.get(key, 0)

            new_value = transform(current)
            if inspect.isawaitable(new_value):
                new_value = await new_value

            if new_value is None:
                return None

            with self._lock:
                if self._versions.get(key, 0) == version:
                    self._write(key, new_value)
                    return new_value

            logger.debug("Concurrent write to %r in %r, retrying update", key, self)

    async def list_keys(self) -> list[str]:
        """Return the stored keys in insertion order."""
        with self._lock:
            return list(self._data)

    # ── internals ────────────────────────────────────────────

    def _write(self, key: str, value: Value) -> None:
        # Caller must hold self._lock.
        if value is None:
            self._data.pop(key, None)
        else:
            self._data[key] = copy.deepcopy(value)
        # Stamps of removed keys are kept so a remove followed by a re-create
        # between an update's read and commit still fails the version check.
        self._versions[key] = next(self._stamps)

    def _snapshot(self) -> list[tuple[str, Value]]:
        with self._lock:
            return list(self._data.items())
