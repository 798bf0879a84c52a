"""Structural recursion over sequences."""

from typing import Any, Callable, List, Sequence


def length_step(recurse: Callable[[Sequence], int]) -> Callable[[Sequence], int]:
    def length(items):
        if not items:
            return 0
        return 1 + recurse(items[1:])
    return length


def sum_step(recurse: Callable[[Sequence], Any]) -> Callable[[Sequence], Any]:
    def total(items):
        if not items:
            return 0
        return items[0] + recurse(items[1:])
    return total


def flatten_step(recurse: Callable[[Any], List]) -> Callable[[Any], List]:
    """Flatten arbitrarily nested lists and tuples into one list."""
    def flatten(value):
        if not isinstance(value, (list, tuple)):
            return [value]
        flat = []
        for item in value:
            flat.extend(recurse(item))
        return flat
    return flatten
