"""
Tests for the derivation stages: bottom, finite approximations,
unfolding, the eager (diverging) form and the symmetric form.
"""

import itertools
import pytest

from fixpoint.combinator.y_combinator import Y
from fixpoint.combinator.derivation import (
    UndefinedRecursionError,
    bottom,
    approximate,
    unfold,
    eager_y,
    symmetric_y,
    satisfies_fixed_point_law,
)
from fixpoint.generators import factorial_step, fibonacci_step, flatten_step, gcd_step


class TestBottom:

    def test_always_raises(self):
        with pytest.raises(UndefinedRecursionError):
            bottom()
        with pytest.raises(UndefinedRecursionError):
            bottom(1, key="value")

    def test_is_runtime_error(self):
        assert issubclass(UndefinedRecursionError, RuntimeError)


class TestApproximate:

    def test_depth_zero_handles_base_case_only(self):
        approx = approximate(factorial_step, 0)
        assert approx(0) == 1
        with pytest.raises(UndefinedRecursionError):
            approx(1)

    def test_depth_one(self):
        approx = approximate(factorial_step, 1)
        assert approx(0) == 1
        assert approx(1) == 1
        with pytest.raises(UndefinedRecursionError):
            approx(2)

    def test_agrees_with_fixed_point_within_depth(self):
        approx = approximate(factorial_step, 6)
        fixed = Y(factorial_step)
        for n in range(7):
            assert approx(n) == fixed(n)

    def test_fibonacci_depth_boundary(self):
        assert approximate(fibonacci_step, 9)(10) == 55
        with pytest.raises(UndefinedRecursionError):
            approximate(fibonacci_step, 8)(10)

    def test_negative_depth(self):
        with pytest.raises(ValueError):
            approximate(factorial_step, -1)


class TestUnfold:

    def test_zero_times_is_identity(self):
        fixed = Y(factorial_step)
        assert unfold(factorial_step, fixed, 0) is fixed

    def test_unfolding_bottom_matches_approximation(self):
        unfolded = unfold(factorial_step, bottom, 3)
        approx = approximate(factorial_step, 2)
        for n in range(3):
            assert unfolded(n) == approx(n)
        with pytest.raises(UndefinedRecursionError):
            unfolded(3)

    def test_negative_times(self):
        with pytest.raises(ValueError):
            unfold(factorial_step, bottom, -2)


class TestEagerY:

    def test_diverges_at_construction(self):
        with pytest.raises(RecursionError):
            eager_y(factorial_step)


class TestSymmetricY:

    def test_factorial(self):
        assert symmetric_y(factorial_step)(5) == 120

    def test_agrees_with_y(self):
        fixed = Y(fibonacci_step)
        symmetric = symmetric_y(fibonacci_step)
        for n in range(12):
            assert symmetric(n) == fixed(n)


class TestFixedPointLawChecker:

    def test_factorial(self):
        assert satisfies_fixed_point_law(factorial_step, range(10))

    def test_deeper_unfolding(self):
        assert satisfies_fixed_point_law(fibonacci_step, range(10), depth=3)

    def test_spread_argument_tuples(self):
        assert satisfies_fixed_point_law(gcd_step, [(12, 18), (7, 5), (0, 9)], spread=True)

    def test_tuple_is_a_single_argument_by_default(self):
        assert Y(flatten_step)((1, 2)) == [1, 2]
        assert satisfies_fixed_point_law(flatten_step, [(1, 2), (1, (2, [3])), ()])

    def test_impure_generator_fails(self):
        counter = itertools.count()

        def improve(recurse):
            return lambda n: next(counter)

        assert not satisfies_fixed_point_law(improve, [0])
