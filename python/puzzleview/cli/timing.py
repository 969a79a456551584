"""Timing helpers shared by the CLI frontends."""

from __future__ import annotations

from collections.abc import Callable
from time import perf_counter
from typing import TypeVar

R = TypeVar("R")

_UNITS = (
    (1e-3, 1e6, "microseconds"),
    (1.0, 1e3, "milliseconds"),
)


def timed(fn: Callable[[], R]) -> tuple[R, float]:
    """Call *fn* and return its result with the elapsed seconds."""
    t0 = perf_counter()
    result = fn()
    return result, perf_counter() - t0


def format_duration(seconds: float) -> str:
    """Format *seconds* in the largest unit that keeps the value at least 1.

    Example: ``format_duration(0.0123)`` -> ``"12.30 milliseconds"``.
    """
    for upper, scale, unit in _UNITS:
        if abs(seconds) < upper:
            return f"{seconds * scale:.2f} {unit}"
    return f"{seconds:.2f} seconds"
