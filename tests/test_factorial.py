import math

import pytest

from dsbasics.factorial import (
    factorial,
    factorial_approx,
    factorial_iterative,
    main,
)


@pytest.mark.parametrize(
    "n, expected",
    [(0, 1), (1, 1), (2, 2), (3, 6), (10, 3628800)],
)
def test_simple_factorials(n, expected):
    assert factorial(n) == expected


def test_factorial_is_exact_for_large_numbers():
    assert factorial(100) == math.factorial(100)


def test_factorial_rejects_negative():
    with pytest.raises(ValueError):
        factorial(-1)


def test_factorial_recurrence():
    for n in range(1, 30):
        assert factorial(n) == n * factorial(n - 1)


def test_iterative_matches_exact_for_small_numbers():
    for n in range(0, 20):
        assert factorial_iterative(n) == float(factorial(n))


def test_iterative_hundred():
    assert factorial_iterative(100) == pytest.approx(9.332622e157, rel=1e-6)


def test_iterative_negative_message():
    with pytest.raises(ValueError, match="factorial is not defined for negative numbers!"):
        factorial_iterative(-1)


def test_iterative_overflows_to_infinity():
    result = factorial_iterative(1000)
    assert result == math.inf


def test_approx_zero():
    assert factorial_approx(0) == 0.0


def test_approx_underestimates_and_converges():
    for n in (1, 5, 20, 100):
        exact = factorial_iterative(n)
        assert factorial_approx(n) < exact
    assert factorial_approx(100) / factorial_iterative(100) == pytest.approx(1.0, rel=1e-2)


def test_approx_overflow_is_infinite():
    result = factorial_approx(1000)
    assert result == math.inf


def test_main_prints_results_and_error(capsys):
    assert main([]) == 0
    captured = capsys.readouterr()
    assert "5! = 120" in captured.out
    assert "0! = 1" in captured.out
    assert "Error: factorial is not defined for negative numbers!" in captured.err
    assert "(-1)!" not in captured.out