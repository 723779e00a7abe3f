"""
Fold combinators
================

Left fold of a monad's chain over an ordered list of steps.
Sugar for repeated chain(): no bind logic lives here.
"""

from __future__ import annotations

from collections.abc import Iterable
from functools import reduce

from .. import logged as logged_m
from .. import maybe as maybe_m
from .._types import Bind, LoggedStep, MaybeStep, Step
from ..logged import Logged
from ..maybe import Maybe


# ============================================================================
# Generic combinator (lift + chain pattern)
# ============================================================================


def foldM[T, M](
    steps: Iterable[Step[T, M]],
    *,
    initial: M,
    chain: Bind[T, M],
) -> M:
    """
    Generic fold: chain(...chain(chain(initial, f1), f2)..., fn).

    `initial` is already wrapped. With no steps, `initial` is returned
    and chain is never called.
    """
    return reduce(chain, steps, initial)


# ============================================================================
# Sugar for Logged
# ============================================================================


def fold_logged[T](
    steps: Iterable[LoggedStep[T, T]],
    *,
    initial: T,
) -> Logged[T]:
    """
    Fold Logged steps starting from lift(initial).

    Example:
        fold_logged([square, double], initial=5)
        # Logged(value=50, logs=['squared 5', 'doubled 25'])
    """
    return foldM(steps, initial=logged_m.lift(initial), chain=logged_m.chain)


# ============================================================================
# Sugar for Maybe
# ============================================================================


def fold_maybe[T](
    steps: Iterable[MaybeStep[T, T]],
    *,
    initial: T,
) -> Maybe[T]:
    """Fold Maybe steps starting from lift(initial). Stops invoking steps at the first Nothing."""
    return foldM(steps, initial=maybe_m.lift(initial), chain=maybe_m.chain)


__all__ = ("foldM", "fold_logged", "fold_maybe")
