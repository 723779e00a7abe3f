"""
Sample Maybe steps.

divide is curried: divide(divisor) fixes the divisor and returns a
reusable single-argument step. whatever never returns Nothing and
leaves absence handling entirely to chain().
"""

from __future__ import annotations

from collections.abc import Callable

from .monad import Maybe, Nothing, Some


def divide(divisor: float) -> Callable[[float], Maybe[float]]:
    """
    Safe division by a fixed divisor. Dividing by zero gives Nothing().

    Example:
        halve = divide(2)
        halve(10)      # Some(5.0)
        divide(0)(10)  # Nothing
    """

    def step(x: float) -> Maybe[float]:
        if divisor == 0:
            return Nothing()
        return Some(x / divisor)

    return step


def whatever(x: float) -> Maybe[float]:
    return Some(x + 42)


__all__ = ("divide", "whatever")
