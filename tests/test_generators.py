"""
Tests for the bundled generators, each run through the combinator.
"""

import pytest

from fixpoint import Y
from fixpoint.generators import (
    factorial_step,
    fibonacci_step,
    gcd_step,
    power_step,
    ackermann_step,
    length_step,
    sum_step,
    flatten_step,
)


class TestArithmetic:
    def test_factorial(self):
        assert [Y(factorial_step)(n) for n in range(6)] == [1, 1, 2, 6, 24, 120]

    def test_fibonacci(self):
        assert Y(fibonacci_step)(20) == 6765

    @pytest.mark.parametrize("a, b, expected", [
        (1071, 462, 21),
        (12, 18, 6),
        (0, 5, 5),
        (-4, 6, 2),
        (7, 0, 7),
    ])
    def test_gcd(self, a, b, expected):
        assert Y(gcd_step)(a, b) == expected

    def test_power(self):
        power = Y(power_step)
        assert power(2, 10) == 1024
        assert power(3, 0) == 1
        assert power(2, 1) == 2
        assert power(1.5, 2) == 2.25
        assert power(7, 13) == 7 ** 13

    def test_power_keeps_base_type(self):
        power = Y(power_step)
        assert isinstance(power(1.5, 0), float)
        assert isinstance(power(3, 0), int)
        assert power(1.5, 0) == 1.5 ** 0
        assert isinstance(power(2.0, 3), float)

    @pytest.mark.parametrize("m, n, expected", [
        (0, 0, 1),
        (1, 2, 4),
        (2, 3, 9),
        (3, 3, 61),
    ])
    def test_ackermann(self, m, n, expected):
        assert Y(ackermann_step)(m, n) == expected


class TestSequences:
    def test_length(self):
        length = Y(length_step)
        assert length("") == 0
        assert length("abcde") == 5
        assert length([None] * 50) == 50

    def test_sum(self):
        total = Y(sum_step)
        assert total([]) == 0
        assert total(list(range(101))) == 5050

    def test_flatten(self):
        flatten = Y(flatten_step)
        assert flatten([1, [2, [3, (4, 5)]], []]) == [1, 2, 3, 4, 5]
        assert flatten(42) == [42]
        assert flatten([]) == []
