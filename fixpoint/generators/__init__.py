"""
Ready-made generators for the fixed-point combinator.

    >>> from fixpoint import Y
    >>> from fixpoint.generators import fibonacci_step
    >>> Y(fibonacci_step)(10)
    55
"""

from fixpoint.generators.arithmetic import (
    factorial_step,
    fibonacci_step,
    gcd_step,
    power_step,
    ackermann_step,
)
from fixpoint.generators.sequences import (
    length_step,
    sum_step,
    flatten_step,
)

__all__ = [
    'factorial_step',
    'fibonacci_step',
    'gcd_step',
    'power_step',
    'ackermann_step',
    'length_step',
    'sum_step',
    'flatten_step',
]
