"""A growable array with explicit size and capacity."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any, Generic, TypeVar

T = TypeVar("T")


class DynamicArray(Generic[T]):
    """An array that tracks its size and the capacity reserved for it.

    When appending to a full array, the capacity doubles, or becomes 2
    if it was 0. Indices must lie in ``[0, len(self))``.
    """

    __slots__ = ("_slots", "_size")

    def __init__(self, iterable: Iterable[T] | None = None) -> None:
        self._slots: list[Any] = list(iterable) if iterable is not None else []
        self._size = len(self._slots)

    @property
    def capacity(self) -> int:
        """Number of elements the array holds without growing."""
        return len(self._slots)

    def __len__(self) -> int:
        return self._size

    def __bool__(self) -> bool:
        return self._size > 0

    def _check_index(self, index: int) -> int:
        if not isinstance(index, int) or isinstance(index, bool):
            raise TypeError("DynamicArray indices must be integers")
        if not 0 <= index < self._size:
            raise IndexError("out of bounds!")
        return index

    def __getitem__(self, index: int) -> T:
        return self._slots[self._check_index(index)]

    def __setitem__(self, index: int, value: T) -> None:
        self._slots[self._check_index(index)] = value

    def __iter__(self) -> Iterator[T]:
        for i in range(self._size):
            yield self._slots[i]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DynamicArray):
            return NotImplemented
        return list(self) == list(other)

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"DynamicArray({list(self)!r})"

    def reserve(self, new_capacity: int) -> None:
        """Set the capacity; ignored if it would drop below the size."""
        if new_capacity < self._size:
            return
        kept = self._slots[: self._size]
        self._slots = kept + [None] * (new_capacity - self._size)

    def resize(self, new_size: int, fill: T | None = None) -> None:
        """Change the size, growing the capacity when needed.

        Slots that become part of the array are set to ``fill``.
        """
        if new_size < 0:
            raise ValueError("size must not be negative")
        if new_size > self.capacity:
            self.reserve(new_size)
        for i in range(self._size, new_size):
            self._slots[i] = fill
        self._size = new_size

    def back(self) -> T:
        """Return the last element."""
        if not self._size:
            raise IndexError("stack is empty!")
        return self._slots[self._size - 1]

    def append(self, value: T) -> None:
        """Add ``value`` at the end."""
        if self._size == self.capacity:
            self.reserve(2 * self.capacity if self.capacity > 0 else 2)
        self._slots[self._size] = value
        self._size += 1

    def pop(self) -> T:
        """Remove and return the last element."""
        value = self.back()
        self._size -= 1
        self._slots[self._size] = None
        return value

    def copy(self) -> DynamicArray[T]:
        """Return an independent array with the same elements and capacity."""
        dup: DynamicArray[T] = DynamicArray()
        dup._slots = list(self._slots)
        dup._size = self._size
        return dup