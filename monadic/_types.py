"""
Core type definitions for monadic.

Типы и алиасы используемые по всей библиотеке.
"""

from __future__ import annotations

import typing
from collections.abc import Callable

if typing.TYPE_CHECKING:
    from .logged.monad import Logged
    from .maybe.monad import Maybe

# ============================================================================
# Type aliases
# ============================================================================

# Step = function from a naked value to a wrapped one (the right side of bind)
type Step[T, M] = Callable[[T], M]

# Bind = chain operation of a monad: wrapped value + step -> wrapped value
type Bind[T, M] = Callable[[M, Step[T, M]], M]

# ============================================================================
# Concrete shortcuts
# ============================================================================

type LoggedStep[T, U] = Callable[[T], Logged[U]]

type MaybeStep[T, U] = Callable[[T], Maybe[U]]

__all__ = (
    "Step",
    "Bind",
    "LoggedStep",
    "MaybeStep",
)
