"""
Fixed-Point Combinator
======================

Recursion without names, in three layers:

1. **y_combinator**: the applicative-order Y-combinator. A generator
   describes one step of a recursion; Y ties the knot through
   self-application, with the self-application delayed behind an extra
   argument so eager evaluation does not expand it forever.

2. **derivation**: the stages leading up to Y (bottom, finite
   approximations, unfolding, the diverging eager form, the symmetric
   form) and a checker for the fixed-point law.

3. **engine**: a configurable combinator that can trace how many delayed
   self-references a call forces and how deep it recursed.

References:
    - Curry, H.B. & Feys, R. (1958). Combinatory Logic, Vol. I.
    - Plotkin, G.D. (1975). Call-by-name, call-by-value and the λ-calculus.
    - Friedman, D.P. & Felleisen, M. (1996). The Little Schemer, ch. 9.
"""

from fixpoint.combinator.y_combinator import (
    Generator,
    Y,
    Z,
    fix,
    delay,
    self_apply,
)
from fixpoint.combinator.derivation import (
    UndefinedRecursionError,
    bottom,
    approximate,
    unfold,
    eager_y,
    symmetric_y,
    satisfies_fixed_point_law,
)
from fixpoint.combinator.engine import (
    FixpointCombinator,
    FixpointProfile,
    fixpoint,
)

__all__ = [
    'Generator',
    'Y',
    'Z',
    'fix',
    'delay',
    'self_apply',
    'UndefinedRecursionError',
    'bottom',
    'approximate',
    'unfold',
    'eager_y',
    'symmetric_y',
    'satisfies_fixed_point_law',
    'FixpointCombinator',
    'FixpointProfile',
    'fixpoint',
]
