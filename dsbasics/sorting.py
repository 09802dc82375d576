"""Bubble sort and a simple sort-timing harness."""

from __future__ import annotations

import argparse
import random
import time
from collections.abc import Callable, Iterable, Iterator, MutableSequence, Sequence
from typing import Any


def bubble_sort(items: MutableSequence[Any]) -> None:
    """Sort ``items`` in place with bubble sort."""
    n = len(items)
    for i in range(n - 1):
        for j in range(n - i - 1):
            if items[j] > items[j + 1]:
                items[j], items[j + 1] = items[j + 1], items[j]


def random_list(
    size: int, rng: random.Random | None = None, upper: int = 1000
) -> list[int]:
    """Return ``size`` random integers in ``[0, upper)``."""
    rng = rng or random.Random()
    return [rng.randrange(upper) for _ in range(size)]


def _builtin_sort(items: list[Any]) -> None:
    items.sort()


def time_sort(
    sort: Callable[[list[int]], None],
    sizes: Iterable[int],
    rng: random.Random | None = None,
) -> Iterator[tuple[int, int]]:
    """Yield ``(size, microseconds)`` for sorting a random list of each size."""
    rng = rng or random.Random()
    for size in sizes:
        data = random_list(size, rng)
        start = time.perf_counter_ns()
        sort(data)
        stop = time.perf_counter_ns()
        yield size, (stop - start) // 1000


def main(argv: Sequence[str] | None = None) -> int:
    """Demonstrate bubble sort or print timings as CSV."""
    parser = argparse.ArgumentParser(description="Sort random lists.")
    parser.add_argument(
        "--timing",
        choices=("bubble", "builtin"),
        help="print sort timings instead of a demonstration",
    )
    parser.add_argument("--max-size", type=int, default=20000)
    parser.add_argument("--step", type=int, default=1000)
    parser.add_argument("--size", type=int, default=10, help="demo list size")
    args = parser.parse_args(argv)

    if args.timing is None:
        data = random_list(args.size)
        print("Original array: ")
        print(" ".join(map(str, data)))
        bubble_sort(data)
        print("Sorted array: ")
        print(" ".join(map(str, data)))
        return 0

    if args.timing == "bubble":
        sort, sizes = bubble_sort, range(0, args.max_size + 1, args.step)
    else:
        sort, sizes = _builtin_sort, range(1, args.max_size + 1, args.step)

    print("N, time [micro sec.]")
    for size, micros in time_sort(sort, sizes):
        print(f"{size}, {micros}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())