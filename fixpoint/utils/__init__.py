"""Utility helpers for fixpoint."""

from fixpoint.utils.helpers import Timer, measure, format_ns, format_overhead
