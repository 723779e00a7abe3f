"""
Sample Logged steps.

Each step does its usual calculation and adds one log entry naming
the input it was applied to (not the result).
"""

from __future__ import annotations

from .log import Log
from .monad import Logged


def square(x: float) -> Logged[float]:
    return Logged(x * x, Log.of(f"squared {x}"))


def double(x: float) -> Logged[float]:
    return Logged(x * 2, Log.of(f"doubled {x}"))


__all__ = ("square", "double")
