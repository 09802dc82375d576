"""Finding the largest item of a sequence under an ordering."""

from __future__ import annotations

import operator
from collections.abc import Callable, Iterable, Sequence
from typing import Any, TypeVar

T = TypeVar("T")


def find_max(
    items: Iterable[T], is_less_than: Callable[[T, T], bool] | None = None
) -> T:
    """Return the largest item; the first one wins among equals.

    ``is_less_than`` defaults to ``<``.
    """
    less: Callable[[Any, Any], bool] = is_less_than or operator.lt
    iterator = iter(items)
    try:
        best = next(iterator)
    except StopIteration:
        raise ValueError("find_max() of an empty sequence") from None
    for item in iterator:
        if less(best, item):
            best = item
    return best


def case_insensitive_less(lhs: str, rhs: str) -> bool:
    """Order strings ignoring letter case."""
    return lhs.lower() < rhs.lower()


def main(argv: Sequence[str] | None = None) -> int:
    """Show find_max with the default and a case-insensitive ordering."""
    numbers = [3, 5, 8, 2, 4]
    floats = [2.9, 5.4, 2.1, 3.3]
    words = ["hello", "world", "apple"]
    print("Templated findMax() function")
    for values in (numbers, floats, words):
        print(find_max(values))

    print("\nBuilt-in max()")
    for values in (numbers, floats, words):
        print(max(values))

    animals = ["ZEBRA", "alligator", "crocodile"]
    print(f"\ncase insensitive: {find_max(animals, case_insensitive_less)}")
    print(f"default string comparator: {find_max(animals)}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())