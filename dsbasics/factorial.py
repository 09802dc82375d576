"""Exact, floating-point and approximate factorials."""

from __future__ import annotations

import math
import sys
from collections.abc import Sequence

_NEGATIVE_MESSAGE = "factorial is not defined for negative numbers!"


def factorial(number: int) -> int:
    """Return ``number!`` exactly as an integer."""
    if number < 0:
        raise ValueError(_NEGATIVE_MESSAGE)
    return math.prod(range(2, number + 1))


def factorial_iterative(number: int) -> float:
    """Return ``number!`` as a float; overflows to infinity for large input."""
    if number < 0:
        raise ValueError(_NEGATIVE_MESSAGE)
    result = 1.0
    for i in range(number, 1, -1):
        result *= i
    return result


def factorial_approx(number: int) -> float:
    """Return Stirling's approximation of ``number!``."""
    try:
        power = math.pow(number / math.e, number)
    except OverflowError:
        return math.inf
    return math.sqrt(2 * math.pi * number) * power


def main(argv: Sequence[str] | None = None) -> int:
    """Print a few factorials and their approximations."""
    try:
        for n in (0, 1, 5, 100):
            print(f"{n}! = {factorial_iterative(n):g}")
        for n in (0, 1, 5, 100):
            print(f"{n}! ~ {factorial_approx(n):g}")
        print(f"(-1)! = {factorial_iterative(-1):g}")
    except ValueError as exc:
        print(f"Error: {exc}", file=sys.stderr)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())