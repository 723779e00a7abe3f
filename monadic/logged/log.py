"""
Log - Моноидный аккумулятор для Logged
======================================
"""

from __future__ import annotations


class Log[A](tuple[A, ...]):
    """
    Log accumulator for the Logged monad.

    Immutable tuple with monoidal operations:
    - empty: пустой лог (просто Log())
    - combine: конкатенация логов

    Monoid laws hold:
    - Left identity: Log().combine(x) == x
    - Right identity: x.combine(Log()) == x
    - Associativity: (x.combine(y)).combine(z) == x.combine(y.combine(z))
    """

    __slots__ = ()

    @staticmethod
    def of[T](*items: T) -> Log[T]:
        """Create log with items."""
        return Log(items)

    def combine(self, other: Log[A], /) -> Log[A]:
        """
        Combine two logs (monoidal append).

        Example:
            Log.of("a", "b").combine(Log.of("c"))  # Log('a', 'b', 'c')
        """
        return Log((*self, *other))

    def tell(self, item: A, /) -> Log[A]:
        """
        Append single item.

        Convenience method equivalent to self.combine(Log.of(item))
        """
        return Log((*self, item))

    def __repr__(self) -> str:
        return f"Log({', '.join(repr(item) for item in self)})"


__all__ = ("Log",)
