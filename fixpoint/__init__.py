"""
fixpoint: Anonymous Recursion via the Applicative-Order Y-Combinator
=====================================================================

Write a recursive function as a generator that is handed its own
recursive call, and let the combinator tie the knot.

Core Components:
    - combinator: Y/Z combinator, derivation stages, traced engine
    - generators: ready-made generators (factorial, fibonacci, ...)
    - utils: timing helpers for the benchmark script

Usage:
    >>> import fixpoint
    >>> fact = fixpoint.Y(lambda recurse: lambda n: 1 if n == 0 else n * recurse(n - 1))
    >>> fact(10)
    3628800

    >>> @fixpoint.fixpoint
    ... def fib(recurse):
    ...     return lambda n: n if n < 2 else recurse(n - 1) + recurse(n - 2)
    >>> fib(10)
    55
"""

__version__ = "1.0.0"

from fixpoint.combinator import (
    Generator,
    Y,
    Z,
    fix,
    delay,
    self_apply,
    UndefinedRecursionError,
    bottom,
    approximate,
    unfold,
    eager_y,
    symmetric_y,
    satisfies_fixed_point_law,
    FixpointCombinator,
    FixpointProfile,
    fixpoint,
)
