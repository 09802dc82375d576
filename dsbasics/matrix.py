"""A dense two-dimensional matrix stored in one flat list."""

from __future__ import annotations

from typing import Any


class Matrix:
    """A ``rows`` x ``cols`` matrix in column-major order.

    Elements are addressed as ``m[row, col]``; indices outside the shape
    raise :class:`IndexError`.
    """

    __slots__ = ("_rows", "_cols", "_data")

    def __init__(self, rows: int, cols: int, fill: Any = 0) -> None:
        if rows < 0 or cols < 0:
            raise ValueError("matrix dimensions must not be negative")
        self._rows = rows
        self._cols = cols
        self._data = [fill] * (rows * cols)

    @property
    def rows(self) -> int:
        """Number of rows."""
        return self._rows

    @property
    def cols(self) -> int:
        """Number of columns."""
        return self._cols

    def _offset(self, key: Any) -> int:
        if not isinstance(key, tuple) or len(key) != 2:
            raise TypeError("matrix indices must be a (row, col) pair")
        row, col = key
        if not 0 <= row < self._rows or not 0 <= col < self._cols:
            raise IndexError("Out of bounds!")
        return col * self._rows + row

    def __getitem__(self, key: tuple[int, int]) -> Any:
        return self._data[self._offset(key)]

    def __setitem__(self, key: tuple[int, int], value: Any) -> None:
        self._data[self._offset(key)] = value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return (
            self._rows == other._rows
            and self._cols == other._cols
            and self._data == other._data
        )

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        return "".join(
            "".join(f"{self[r, c]} " for c in range(self._cols)) + "\n"
            for r in range(self._rows)
        )

    def __repr__(self) -> str:
        return f"Matrix(rows={self._rows}, cols={self._cols})"

    def copy(self) -> Matrix:
        """Return a matrix of the same shape with its own storage."""
        dup = Matrix(self._rows, self._cols)
        dup._data = list(self._data)
        return dup