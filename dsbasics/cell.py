"""Single-value storage cells."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, TypeVar

T = TypeVar("T")


@dataclass
class MemoryCell(Generic[T]):
    """A cell that stores one value of any type."""

    value: T | None = None


@dataclass
class IntCell:
    """A cell that stores exactly one integer.

    Values that are not integers are rejected rather than converted.
    Cells have no ordering, so comparing two cells with ``<`` fails.
    """

    value: int = 0

    def __setattr__(self, name: str, new_value: Any) -> None:
        if name == "value" and (
            not isinstance(new_value, int) or isinstance(new_value, bool)
        ):
            raise TypeError(
                f"IntCell stores int values, not {type(new_value).__name__}"
            )
        super().__setattr__(name, new_value)