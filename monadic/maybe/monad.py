"""Maybe Monad

Optional value as an explicit tagged variant:
- Some(value): value is present (any value, including 0, "", False or None)
- Nothing(): value is absent

Nothing is absorbing: once reached, chain() skips every further step."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Never, assert_never

from .._errors import UnwrapNothingError


@dataclass(frozen=True, slots=True)
class Some[T]:
    """Present value."""

    value: T

    def then[U](self, step: Callable[[T], Maybe[U]], /) -> Maybe[U]:
        """Monadic bind: apply step to the held value."""
        return step(self.value)

    def map[U](self, f: Callable[[T], U], /) -> Maybe[U]:
        """Functor fmap - apply function to the held value."""
        return Some(f(self.value))

    def is_some(self) -> bool:
        return True

    def is_nothing(self) -> bool:
        return False

    def unwrap_or(self, default: T, /) -> T:
        return self.value

    def __repr__(self) -> str:
        return f"Some({self.value!r})"


@dataclass(frozen=True, slots=True)
class Nothing:
    """Absent value. Every Nothing equals every other Nothing."""

    def then(self, step: Callable[[Never], Maybe[object]], /) -> Nothing:
        """Short-circuit: step is never called."""
        return self

    def map(self, f: Callable[[Never], object], /) -> Nothing:
        return self

    def is_some(self) -> bool:
        return False

    def is_nothing(self) -> bool:
        return True

    def unwrap_or[T](self, default: T, /) -> T:
        return default

    def __repr__(self) -> str:
        return "Nothing"


type Maybe[T] = Some[T] | Nothing


def lift[T](value: T) -> Maybe[T]:
    """
    Lift a value into Maybe. Always present, exactly one layer deep.

    Example:
        lift(10)  # Some(10)
        lift(0)   # Some(0), zero is a value, not absence
    """
    return Some(value)


def chain[T, U](wrapped: Maybe[T], step: Callable[[T], Maybe[U]], /) -> Maybe[U]:
    """
    Monadic bind (>>=).

    - On Some: calls step with the held value and returns its result as is
    - On Nothing: short-circuit, step is not called
    """
    match wrapped:
        case Some(value):
            return step(value)
        case Nothing():
            return wrapped
        case _ as unreachable:
            assert_never(unreachable)


def from_optional[T](value: T | None) -> Maybe[T]:
    """
    Convert Python's `T | None` convention to Maybe. None becomes Nothing().

    **When to use:** dict lookups, regex matches, anything returning None
    for "not found". Prefer lift() when None is a legitimate payload.
    """
    if value is None:
        return Nothing()
    return Some(value)


def or_else[T](wrapped: Maybe[T], default: T) -> T:
    """Get the held value or `default` when absent."""
    match wrapped:
        case Some(value):
            return value
        case Nothing():
            return default
        case _ as unreachable:
            assert_never(unreachable)


def unwrap[T](wrapped: Maybe[T]) -> T:
    """Get the held value, raising UnwrapNothingError when absent."""
    match wrapped:
        case Some(value):
            return value
        case Nothing():
            raise UnwrapNothingError()
        case _ as unreachable:
            assert_never(unreachable)


__all__ = (
    "Maybe",
    "Some",
    "Nothing",
    "lift",
    "chain",
    "from_optional",
    "or_else",
    "unwrap",
)
