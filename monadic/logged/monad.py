"""Logged Monad

Writer-style monad pairing a value with the ordered history of
operations applied to it:
- lift: naked value -> Logged with empty log
- chain: Logged + step -> Logged, histories concatenated in order

Containers are immutable; every operation builds a fresh one."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass, field

from .log import Log


@dataclass(frozen=True, slots=True)
class Logged[T]:
    """Value together with its log of applied operations.

    Monadic laws:
    - Left identity: chain(lift(a), f) ≡ f(a)
    - Right identity: chain(m, lift) ≡ m
    - Associativity: chain(chain(m, f), g) ≡ chain(m, lambda x: chain(f(x), g))
    """

    value: T
    logs: Log[str] = field(default_factory=Log)

    def __post_init__(self) -> None:
        # Steps may hand over plain lists; normalise so combine() is always available
        if isinstance(self.logs, str):
            raise TypeError("logs must be a sequence of entries, not a str")
        if not isinstance(self.logs, Log):
            object.__setattr__(self, "logs", Log(self.logs))

    # Monad operations

    def then[U](self, step: Callable[[T], Logged[U]], /) -> Logged[U]:
        """Monadic bind as a method: `lift(5).then(square).then(double)`."""
        return chain(self, step)

    # Functor operations

    def map[U](self, f: Callable[[T], U], /) -> Logged[U]:
        """Functor fmap - apply function to value, preserve log."""
        return Logged(f(self.value), self.logs)

    # Writer operations

    def with_log(self, *entries: str) -> Logged[T]:
        """Add entries to log without changing the value."""
        return Logged(self.value, self.logs.combine(Log.of(*entries)))

    def __repr__(self) -> str:
        return f"Logged(value={self.value!r}, logs={list(self.logs)!r})"


def lift[T](value: T) -> Logged[T]:
    """
    Lift a naked value into Logged with an empty log.

    Always exactly one layer: a Logged passed in becomes the payload.

    Example:
        lift(5)  # Logged(value=5, logs=[])
    """
    return Logged(value, Log())


def chain[T, U](wrapped: Logged[T], step: Callable[[T], Logged[U]], /) -> Logged[U]:
    """
    Monadic bind (>>=).

    Runs `step` once on the wrapped value. The result carries the step's
    value and the prior log followed by the step's entries.

    Example:
        chain(chain(lift(5), square), double)
        # Logged(value=50, logs=['squared 5', 'doubled 25'])
    """
    produced = step(wrapped.value)
    return Logged(produced.value, wrapped.logs.combine(produced.logs))


def tell(*entries: str) -> Logged[None]:
    """Write entries to the log without producing a value."""
    return Logged(None, Log.of(*entries))


def logged[T](value: T, entries: Iterable[str] = ()) -> Logged[T]:
    """Create Logged with value and log entries. Shorthand for writing steps."""
    return Logged(value, entries)


__all__ = (
    "Logged",
    "lift",
    "chain",
    "tell",
    "logged",
)
