"""A singly linked list with cursors for editing after a position."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any, Generic, TypeVar

T = TypeVar("T")


class _Node(Generic[T]):
    __slots__ = ("value", "next")

    def __init__(self, value: T, next: _Node[T] | None = None) -> None:
        self.value = value
        self.next = next


class Cursor(Generic[T]):
    """A position in a :class:`SinglyLinkedList`, or its end.

    A cursor reads and writes the value it points at and moves forward
    one node at a time.
    """

    __slots__ = ("_owner", "_node")

    def __init__(self, owner: SinglyLinkedList[T], node: _Node[T] | None) -> None:
        self._owner = owner
        self._node = node

    @property
    def at_end(self) -> bool:
        """True when the cursor is past the last element."""
        return self._node is None

    @property
    def value(self) -> T:
        """The value at the cursor."""
        if self._node is None:
            raise IndexError("cursor is at the end of the list")
        return self._node.value

    @value.setter
    def value(self, new_value: T) -> None:
        if self._node is None:
            raise IndexError("cursor is at the end of the list")
        self._node.value = new_value

    def advance(self) -> Cursor[T]:
        """Move to the next element and return this cursor."""
        if self._node is None:
            raise IndexError("cannot advance past the end of the list")
        self._node = self._node.next
        return self

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Cursor):
            return NotImplemented
        return self._owner is other._owner and self._node is other._node

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        if self._node is None:
            return "Cursor(<end>)"
        return f"Cursor({self._node.value!r})"


class SinglyLinkedList(Generic[T]):
    """A singly linked list that grows at the front."""

    def __init__(self, iterable: Iterable[T] | None = None) -> None:
        self._head: _Node[T] | None = None
        if iterable is None:
            return
        tail: _Node[T] | None = None
        for value in iterable:
            node = _Node(value)
            if tail is None:
                self._head = node
            else:
                tail.next = node
            tail = node

    def _nodes(self) -> Iterator[_Node[T]]:
        node = self._head
        while node is not None:
            yield node
            node = node.next

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __bool__(self) -> bool:
        return self._head is not None

    def __iter__(self) -> Iterator[T]:
        for node in self._nodes():
            yield node.value

    def __contains__(self, value: Any) -> bool:
        return not self.find(value).at_end

    def __repr__(self) -> str:
        return f"SinglyLinkedList({list(self)!r})"

    def insert_front(self, value: T) -> None:
        """Add ``value`` before the first element."""
        self._head = _Node(value, self._head)

    def remove_front(self) -> T:
        """Remove and return the first element."""
        if self._head is None:
            raise IndexError("List is empty!")
        node = self._head
        self._head = node.next
        return node.value

    def clear(self) -> None:
        """Remove every element."""
        self._head = None

    def begin(self) -> Cursor[T]:
        """Return a cursor at the first element (at the end if empty)."""
        return Cursor(self, self._head)

    def find(self, value: Any) -> Cursor[T]:
        """Return a cursor at the first element equal to ``value``, else the end."""
        for node in self._nodes():
            if node.value == value:
                return Cursor(self, node)
        return Cursor(self, None)

    def _check(self, cursor: Cursor[T]) -> _Node[T]:
        if cursor._owner is not self:
            raise ValueError("cursor belongs to a different list")
        if cursor._node is None:
            raise IndexError("cursor is at the end of the list")
        return cursor._node

    def insert_after(self, cursor: Cursor[T], value: T) -> None:
        """Insert ``value`` right after the cursor's element."""
        node = self._check(cursor)
        node.next = _Node(value, node.next)

    def remove_after(self, cursor: Cursor[T]) -> T:
        """Remove and return the element right after the cursor's element."""
        node = self._check(cursor)
        removed = node.next
        if removed is None:
            raise IndexError("no element after the cursor")
        node.next = removed.next
        return removed.value

    def copy(self) -> SinglyLinkedList[T]:
        """Return a new list with its own nodes holding the same values."""
        return SinglyLinkedList(self)