"""
╔════════════════════════════════════════════════════════════════════════════╗
║  fixpoint Benchmark Suite                                                  ║
║  Applicative-Order Y-Combinator: Results and Call Overhead                 ║
║                                                                            ║
║  Benchmarks:                                                               ║
║   1. Results of the bundled generators                                     ║
║   2. Finite approximations vs the fixed point                              ║
║   3. Unfoldings and depth under tracing                                    ║
║   4. Call overhead: Y vs directly named recursion                          ║
╚════════════════════════════════════════════════════════════════════════════╝
"""

import statistics
import sys
import os

# Ensure fixpoint is importable
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from fixpoint.combinator.y_combinator import Y
from fixpoint.combinator.derivation import (
    UndefinedRecursionError, approximate, symmetric_y,
)
from fixpoint.combinator.engine import FixpointCombinator
from fixpoint.generators import (
    factorial_step, fibonacci_step, gcd_step, power_step, ackermann_step,
    length_step, sum_step, flatten_step,
)
from fixpoint.utils.helpers import measure, format_ns, format_overhead


# ═══════════════════════════════════════════════════════════════════
#  Baselines: the same functions with named recursion
# ═══════════════════════════════════════════════════════════════════

def named_factorial(n):
    return 1 if n == 0 else n * named_factorial(n - 1)

def named_fibonacci(n):
    if n < 2:
        return n
    return named_fibonacci(n - 1) + named_fibonacci(n - 2)


def _banner(title):
    print("┌──────────────────────────────────────────────────────────────┐")
    print(f"│  {title:<60}│")
    print("└──────────────────────────────────────────────────────────────┘")


def run_benchmarks(iterations: int = 200):
    print("=" * 80)
    print("  FIXPOINT BENCHMARK SUITE")
    print("=" * 80)
    print()

    # ─────────────────────────────────────────────────────────
    #  Benchmark 1: Generator results
    # ─────────────────────────────────────────────────────────
    _banner("BENCHMARK 1: Generator Results")

    cases = [
        ("factorial(0)", factorial_step, (0,)),
        ("factorial(1)", factorial_step, (1,)),
        ("factorial(5)", factorial_step, (5,)),
        ("factorial(10)", factorial_step, (10,)),
        ("fibonacci(10)", fibonacci_step, (10,)),
        ("gcd(1071, 462)", gcd_step, (1071, 462)),
        ("power(2, 10)", power_step, (2, 10)),
        ("ackermann(2, 3)", ackermann_step, (2, 3)),
        ("length('abcde')", length_step, ("abcde",)),
        ("sum([1..10])", sum_step, (list(range(1, 11)),)),
        ("flatten([1,[2,[3]]])", flatten_step, ([1, [2, [3]]],)),
    ]
    for label, generator, args in cases:
        print(f"  {label:<24} {Y(generator)(*args)!r:>14}   symmetric: {symmetric_y(generator)(*args)!r}")
    print()

    # ─────────────────────────────────────────────────────────
    #  Benchmark 2: Finite approximations
    # ─────────────────────────────────────────────────────────
    _banner("BENCHMARK 2: Finite Approximations of factorial")

    for depth in range(4):
        approx = approximate(factorial_step, depth)
        row = []
        for n in range(5):
            try:
                row.append(f"{approx(n):>4}")
            except UndefinedRecursionError:
                row.append(f"{'⊥':>4}")
        print(f"  depth {depth}: {' '.join(row)}")
    print()

    # ─────────────────────────────────────────────────────────
    #  Benchmark 3: Tracing
    # ─────────────────────────────────────────────────────────
    _banner("BENCHMARK 3: Unfoldings Under Tracing")

    combinator = FixpointCombinator(trace=True)
    traced = [
        ("factorial(10)", combinator.fix(factorial_step), (10,)),
        ("fibonacci(10)", combinator.fix(fibonacci_step), (10,)),
        ("ackermann(2, 3)", combinator.fix(ackermann_step), (2, 3)),
    ]
    print(f"  {'Call':<20} {'Result':>10} {'Unfoldings':>12} {'Max depth':>10}")
    print(f"  {'─' * 20} {'─' * 10} {'─' * 12} {'─' * 10}")
    for label, func, args in traced:
        result = func(*args)
        profile = combinator.get_profile(func)
        print(f"  {label:<20} {result:>10} {profile.unfoldings:>12} {profile.max_depth:>10}")
    print()

    # ─────────────────────────────────────────────────────────
    #  Benchmark 4: Overhead
    # ─────────────────────────────────────────────────────────
    _banner("BENCHMARK 4: Call Overhead vs Named Recursion")

    pairs = [
        ("factorial(20)", named_factorial, Y(factorial_step), (20,)),
        ("fibonacci(15)", named_fibonacci, Y(fibonacci_step), (15,)),
    ]
    print(f"  {'Call':<16} {'Named':>12} {'Y':>12} {'Overhead':>16}")
    print(f"  {'─' * 16} {'─' * 12} {'─' * 12} {'─' * 16}")
    for label, named, derived, args in pairs:
        baseline = statistics.median(measure(named, *args, iterations=iterations))
        combinator_time = statistics.median(measure(derived, *args, iterations=iterations))
        print(
            f"  {label:<16} {format_ns(baseline):>12} {format_ns(combinator_time):>12} "
            f"{format_overhead(baseline, combinator_time):>16}"
        )
    print()
    print("=" * 80)
    print("  FIXPOINT BENCHMARK SUITE COMPLETE")
    print("=" * 80)


if __name__ == "__main__":
    run_benchmarks()
