"""OrderedDataStore — a DataStore that can enumerate its numeric entries in order."""

from __future__ import annotations

import math
from enum import Enum
from typing import cast

from datastore_emulator.page import Entry, Page
from datastore_emulator.stores.plain import DataStore
from datastore_emulator.values import Number, is_numeric


class SortDirection(Enum):
    ASCENDING = "Ascending"
    DESCENDING = "Descending"

    @classmethod
    def coerce(cls, value: SortDirection | str) -> SortDirection:
        """Normalize an enum member or its literal string.

        Anything that does not denote ascending order sorts descending.
        """
        if value is cls.ASCENDING or value == cls.ASCENDING.value:
            return cls.ASCENDING
        return cls.DESCENDING


class OrderedDataStore(DataStore):
    """Store whose numeric values can be range-filtered and sorted.

    Non-numeric values and NaN can still be stored and read back, but
    :meth:`get_sorted` skips them.
    """

    async def get_sorted(
        self,
        direction: SortDirection | str,
        page_size: int,
        min_value: Number | None = None,
        max_value: Number | None = None,
    ) -> Page:
        """Return numeric entries within ``[min_value, max_value]``, sorted by value.

        Both bounds are inclusive and optional.  Ties keep insertion order.
        ``page_size`` is accepted for compatibility; the whole result comes
        back as a single page.
        """
        descending = SortDirection.coerce(direction) is SortDirection.DESCENDING

        matches: list[tuple[str, Number]] = []
        for key, value in self._snapshot():
            if not is_numeric(value):
                continue
            number = cast(Number, value)
            if math.isnan(number):
                continue
            if min_value is not None and number < min_value:
                continue
            if max_value is not None and number > max_value:
                continue
            matches.append((key, number))

        matches.sort(key=lambda item: item[1], reverse=descending)
        return Page(Entry(key, value) for key, value in matches)
