"""Entry and Page — the result types returned by store queries."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from datastore_emulator.values import Value


@dataclass(frozen=True)
class Entry:
    """A single ``(key, value)`` pair.

    Attributes:
        key:   Entry key (a key inside a store, or a store name when
               returned from :meth:`DataStoreRegistry.list_stores`).
        value: The stored value.
    """

    key: str
    value: Value


class Page:
    """Immutable, already-computed result set of a single query.

    The entries are materialized once at construction; mutations to the
    store afterwards are not reflected.  Cursoring beyond the first page is
    not emulated, so every page is also the last one.
    """

    def __init__(self, entries: Iterable[Entry] = ()) -> None:
        self._entries: tuple[Entry, ...] = tuple(entries)

    def get_current_page(self) -> list[Entry]:
        """Return the entries of this page in result order."""
        return list(self._entries)

    @property
    def is_finished(self) -> bool:
        return True

    def __iter__(self) -> Iterator[Entry]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Page):
            return NotImplemented
        return self._entries == other._entries

    def __hash__(self) -> int:
        return hash(self._entries)

    def __repr__(self) -> str:
        return f"Page({list(self._entries)!r})"
