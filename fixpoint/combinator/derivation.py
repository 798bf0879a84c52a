"""
Derivation Stages
=================

The intermediate forms that lead from plain self-application to the
applicative-order combinator, kept as tools for reasoning about and
testing fixed points.

    bottom                 the recursive call that must never happen
    approximate(g, n)      g(g(...g(bottom))), correct up to depth n
    unfold(g, f, k)        k extra unfoldings of an existing fixed point
    eager_y(g)             self-application without delay; diverges
    symmetric_y(g)         both halves written as g(delay(gen))

The chain of approximations is the informal justification of Y:

    approximate(g, 0) ⊑ approximate(g, 1) ⊑ ... ⊑ Y(g)

each one agreeing with the fixed point on every input whose recursion
stays within its depth.
"""

from typing import Any, Callable, Iterable

from fixpoint.combinator.y_combinator import Y, delay, self_apply


class UndefinedRecursionError(RuntimeError):
    """A finite approximation was asked to recurse past its depth."""


def bottom(*args, **kwargs):
    """Stand-in for a recursive call that has not been wired up."""
    raise UndefinedRecursionError(
        f"recursive call with arguments {args!r} is beyond the approximation depth"
    )


def approximate(improve: Callable, depth: int) -> Callable:
    """
    Build the finite approximation improve^(depth+1)(bottom).

    The result handles every input that needs at most ``depth`` recursive
    calls and raises UndefinedRecursionError for anything deeper.
    """
    if depth < 0:
        raise ValueError(f"depth must be non-negative, got {depth}")
    approximation = improve(bottom)
    for _ in range(depth):
        approximation = improve(approximation)
    return approximation


def unfold(improve: Callable, func: Callable, times: int = 1) -> Callable:
    """Apply the generator ``times`` times on top of ``func``."""
    if times < 0:
        raise ValueError(f"times must be non-negative, got {times}")
    for _ in range(times):
        func = improve(func)
    return func


def eager_y(improve: Callable) -> Callable:
    """
    Self-application without the delay wrapper.

    gen(gen) is evaluated before improve receives it, which evaluates
    gen(gen) again, and so on. Calling this raises RecursionError before
    any function is returned.
    """
    def wrapper(gen):
        return improve(self_apply(gen))

    return wrapper(wrapper)


def symmetric_y(improve: Callable) -> Callable:
    """
    Y with the outer application spelled out like the inner one.

    Passing the wrapper to a lambda that does improve(delay(gen)) is the
    same as calling the wrapper on itself, which makes both halves of the
    expression identical.
    """
    return (lambda gen: improve(delay(gen)))(lambda gen: improve(delay(gen)))


def satisfies_fixed_point_law(
    improve: Callable,
    samples: Iterable[Any],
    depth: int = 1,
    spread: bool = False,
) -> bool:
    """
    Check Y(improve)(a) == unfold(improve, Y(improve), depth)(a).

    Each sample is passed as the single argument. With ``spread=True``
    every sample is instead an argument tuple, for generators of more
    than one argument.
    """
    fixed = Y(improve)
    unfolded = unfold(improve, fixed, depth)
    for sample in samples:
        args = tuple(sample) if spread else (sample,)
        if fixed(*args) != unfolded(*args):
            return False
    return True
