"""
Fixpoint Engine
===============

A configurable front end over the Y-combinator.

Untraced, the engine hands out exactly what Y produces. Traced, it
derives the same fixed point but routes every delayed self-reference
through a counting wrapper, so one can observe how many unfoldings a
call forced and how deep the recursion went:

    factorial(n)   →  n unfoldings, depth n
    fibonacci(n)   →  fib(n+1)·2 - 2 unfoldings, depth n - 1

Instrumentation never alters evaluation order: the counting wrapper is
itself built lazily, and depth bookkeeping is restored in ``finally``
blocks so that errors from the generator propagate untouched.
"""

import functools
import logging
from dataclasses import dataclass
from typing import Callable, Dict, Optional

from fixpoint.combinator.y_combinator import Y, self_apply

logger = logging.getLogger(__name__)


@dataclass
class FixpointProfile:
    """Tracing data for one derived fixed point."""
    constructions: int = 0
    invocations: int = 0      # Calls made from outside the recursion
    unfoldings: int = 0       # Delayed self-references forced
    max_depth: int = 0
    current_depth: int = 0


class FixpointCombinator:
    """
    Derives fixed points of generators, optionally with tracing.

    Usage:
        >>> combinator = FixpointCombinator(trace=True)
        >>> @combinator.recursive
        ... def factorial(recurse):
        ...     return lambda n: 1 if n == 0 else n * recurse(n - 1)
        >>> factorial(5)
        120
        >>> combinator.get_profile(factorial).unfoldings
        5
    """

    def __init__(
        self,
        trace: bool = False,
        enable_logging: bool = False,
    ):
        self.trace = trace
        self.profiles: Dict[str, FixpointProfile] = {}
        self._id_counts: Dict[str, int] = {}

        if enable_logging:
            logging.basicConfig(level=logging.DEBUG)

    def fix(self, improve: Callable) -> Callable:
        """Derive the fixed point of ``improve``."""
        if not callable(improve):
            raise TypeError(f"Expected callable generator, got {type(improve).__name__}")

        if not self.trace:
            fixed = Y(improve)
            logger.debug(f"Derived fixed point of {_describe(improve)}")
            return fixed

        func_id = self._register(improve)
        profile = self.profiles[func_id]
        profile.constructions += 1

        def counted_delay(gen):
            def delayed(*args, **kwargs):
                profile.unfoldings += 1
                profile.current_depth += 1
                try:
                    if profile.current_depth > profile.max_depth:
                        profile.max_depth = profile.current_depth
                    return self_apply(gen)(*args, **kwargs)
                finally:
                    profile.current_depth -= 1
            return delayed

        def wrapper(gen):
            return improve(counted_delay(gen))

        fixed = wrapper(wrapper)

        def traced(*args, **kwargs):
            profile.invocations += 1
            before = profile.unfoldings
            result = fixed(*args, **kwargs)
            logger.debug(
                f"{func_id}{args!r} forced {profile.unfoldings - before} unfoldings "
                f"(max depth {profile.max_depth})"
            )
            return result

        traced.__fixpoint_id__ = func_id
        traced.__fixpoint_combinator__ = self
        logger.debug(f"Derived traced fixed point {func_id}")
        return traced

    __call__ = fix

    def recursive(self, improve: Callable) -> Callable:
        """
        Decorator form of fix().

        The generator's name and docstring are carried over, so the
        decorated name reads like an ordinary recursive function. The
        generator is not exposed as ``__wrapped__``: its ``(recurse)``
        signature is not the signature of the fixed point.
        """
        fixed = self.fix(improve)
        if self.trace:
            functools.update_wrapper(fixed, improve)
            del fixed.__wrapped__
            return fixed

        @functools.wraps(improve)
        def wrapper(*args, **kwargs):
            return fixed(*args, **kwargs)

        del wrapper.__wrapped__
        return wrapper

    def get_profile(self, func_or_id) -> Optional[FixpointProfile]:
        """Get the tracing profile for a fixed point or its id."""
        if isinstance(func_or_id, str):
            return self.profiles.get(func_or_id)
        func_id = getattr(func_or_id, '__fixpoint_id__', None)
        if func_id:
            return self.profiles.get(func_id)
        return None

    def get_stats(self) -> Dict[str, Dict]:
        """Get statistics for all traced fixed points."""
        stats = {}
        for func_id, profile in self.profiles.items():
            stats[func_id] = {
                'invocations': profile.invocations,
                'unfoldings': profile.unfoldings,
                'max_depth': profile.max_depth,
            }
        return stats

    def reset(self):
        """
        Drop all collected profiles.

        Every traced fix() registers a new profile, so long-lived traced
        combinators should be reset periodically.
        """
        self.profiles.clear()
        self._id_counts.clear()

    def _register(self, improve: Callable) -> str:
        base_id = _describe(improve)
        count = self._id_counts.get(base_id, 0) + 1
        self._id_counts[base_id] = count
        func_id = base_id if count == 1 else f"{base_id}#{count}"
        self.profiles[func_id] = FixpointProfile()
        return func_id


def _describe(func: Callable) -> str:
    module = getattr(func, '__module__', None) or '<unknown>'
    name = getattr(func, '__qualname__', None) or type(func).__name__
    return f"{module}.{name}"


# ---------------------------------------------------------------------------
# Module-level convenience API
# ---------------------------------------------------------------------------

_default_combinator = FixpointCombinator()


def fixpoint(improve: Callable = None, *, trace: bool = False) -> Callable:
    """
    Module-level decorator turning a generator into its fixed point.

    Usage:
        from fixpoint import fixpoint

        @fixpoint
        def factorial(recurse):
            return lambda n: 1 if n == 0 else n * recurse(n - 1)
    """
    combinator = FixpointCombinator(trace=True) if trace else _default_combinator
    if improve is None:
        return lambda g: combinator.recursive(g)
    return combinator.recursive(improve)
