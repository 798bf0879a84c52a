"""
Applicative-Order Fixed-Point Combinator
========================================

Derives a recursive function from a *generator* that only describes one
step of the recursion, without the function ever being bound to a name.

Theoretical Foundation:
    A generator has the shape

        improve: (A → R) → (A → R)

    and we look for its fixed point f with f = improve(f). The classic
    Y-combinator obtains it through self-application:

        Y = λimprove. (λgen. improve(gen(gen))) (λgen. improve(gen(gen)))

    Python evaluates arguments before calls (applicative order), so the
    inner gen(gen) is expanded before improve ever sees it, and the
    expansion never terminates. Eta-expanding the self-application

        gen(gen)  ⟶  λv. gen(gen)(v)

    turns it into a value. gen(gen) is then only evaluated when the
    generator actually makes a recursive call, i.e. one level at a time
    and only as deep as the base case requires. This is the
    applicative-order variant, also known as the Z-combinator.

Usage:
    >>> fact = Y(lambda recurse: lambda n: 1 if n == 0 else n * recurse(n - 1))
    >>> fact(5)
    120
"""

from typing import Any, Callable, TypeVar

A = TypeVar('A')
R = TypeVar('R')

# One step of a recursive computation, abstracted over the recursive call.
Generator = Callable[[Callable[[A], R]], Callable[[A], R]]


def self_apply(gen: Callable) -> Any:
    """Apply a function to itself: gen(gen)."""
    return gen(gen)


def delay(gen: Callable) -> Callable:
    """
    Suspend the self-application gen(gen) behind an argument boundary.

    Building the wrapper does not touch gen; gen(gen) is evaluated only
    when the wrapper is called, and it is evaluated afresh on every call.
    All arguments are forwarded, so the wrapper has whatever arity the
    generator's returned function has.
    """
    def delayed(*args, **kwargs):
        return self_apply(gen)(*args, **kwargs)

    return delayed


def Y(improve: 'Generator[A, R]') -> Callable[[A], R]:
    """
    Compute the fixed point of a generator.

    Args:
        improve: Generator taking the "recurse" function and returning
            the function for one level of the computation. It must only
            call ``recurse`` from inside the function it returns.

    Returns:
        f such that f(a) == improve(f)(a) for every a on which the
        recursion terminates.

    Errors raised by the generator, including RecursionError for a
    recursion that never reaches a base case, propagate unchanged.
    """
    if not callable(improve):
        raise TypeError(f"Expected callable generator, got {type(improve).__name__}")

    def wrapper(gen):
        return improve(delay(gen))

    return wrapper(wrapper)


Z = Y
fix = Y
