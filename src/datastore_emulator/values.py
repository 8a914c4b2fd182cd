"""Value union stored by the emulator and the numeric check used for ordering."""

from __future__ import annotations

from typing import TypeAlias, Union

Value: TypeAlias = Union[str, int, float, bool, None, dict[str, "Value"]]
Number: TypeAlias = int | float


def is_numeric(value: object) -> bool:
    """Return ``True`` for ints and floats.  ``bool`` does not count."""
    return isinstance(value, (int, float)) and not isinstance(value, bool)
