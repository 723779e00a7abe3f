"""
Demonstrations of both monads.

Each demo builds the same chain twice: by nesting chain() calls by hand
and by folding chain() over a list of steps. Both forms must agree.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

from . import logged as L
from . import maybe as M
from ._logging import get_logger
from .collection import fold_logged, fold_maybe
from .logged import Logged
from .maybe import Maybe, Nothing

logger = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class DemoReport[R]:
    title: str
    manual: R
    folded: R

    @property
    def agree(self) -> bool:
        """Manual nesting and fold produced the same container."""
        return self.manual == self.folded

    def lines(self) -> Iterator[str]:
        yield f"== {self.title} =="
        yield f"manual: {self.manual!r}"
        yield f"folded: {self.folded!r}"


def logged_demo(initial: float = 5) -> DemoReport[Logged[float]]:
    """square then double, with every operation recorded."""
    manual = L.chain(L.chain(L.lift(initial), L.square), L.double)
    folded = fold_logged([L.square, L.double], initial=initial)

    logger.debug("demo.logged.finished", value=folded.value, entries=len(folded.logs))
    return DemoReport(f"Logged: square, double from {initial}", manual, folded)


def maybe_demo(initial: float = 10, divisor: float = 0) -> DemoReport[Maybe[float]]:
    """divide(divisor) then whatever; a zero divisor skips whatever."""
    manual = M.chain(M.chain(M.lift(initial), M.divide(divisor)), M.whatever)
    folded = fold_maybe([M.divide(divisor), M.whatever], initial=initial)

    if isinstance(folded, Nothing):
        logger.debug("demo.maybe.short_circuit", initial=initial, divisor=divisor)
    logger.debug("demo.maybe.finished", result=repr(folded))
    return DemoReport(f"Maybe: divide({divisor}), whatever from {initial}", manual, folded)


def run_demos() -> list[DemoReport[object]]:
    return [
        logged_demo(),
        maybe_demo(divisor=0),
        maybe_demo(divisor=5),
    ]


__all__ = ("DemoReport", "logged_demo", "maybe_demo", "run_demos")
