"""
Arithmetic generators.

Each generator receives the recursive call and returns one level of the
computation; feed it to Y to get the recursive function.
"""

from typing import Callable


def factorial_step(recurse: Callable[[int], int]) -> Callable[[int], int]:
    """n! with 0! = 1."""
    def factorial(n):
        return 1 if n == 0 else n * recurse(n - 1)
    return factorial


def fibonacci_step(recurse: Callable[[int], int]) -> Callable[[int], int]:
    """Fibonacci by the doubly recursive definition (fib(0) = 0, fib(1) = 1)."""
    def fibonacci(n):
        if n < 2:
            return n
        return recurse(n - 1) + recurse(n - 2)
    return fibonacci


def gcd_step(recurse: Callable[[int, int], int]) -> Callable[[int, int], int]:
    """Greatest common divisor by Euclid's algorithm."""
    def gcd(a, b):
        return abs(a) if b == 0 else recurse(b, a % b)
    return gcd


def power_step(recurse: Callable[[float, int], float]) -> Callable[[float, int], float]:
    """base ** exponent for a non-negative integer exponent, by squaring."""
    def power(base, exponent):
        if exponent == 0:
            return base ** 0
        half = recurse(base, exponent // 2)
        if exponent % 2:
            return half * half * base
        return half * half
    return power


def ackermann_step(recurse: Callable[[int, int], int]) -> Callable[[int, int], int]:
    """
    Ackermann-Péter function.

    The recursive call is nested inside another recursive call's
    argument, so the delayed self-reference is forced twice per level
    without the outer call's argument being known in advance.
    """
    def ackermann(m, n):
        if m == 0:
            return n + 1
        if n == 0:
            return recurse(m - 1, 1)
        return recurse(m - 1, recurse(m, n - 1))
    return ackermann
