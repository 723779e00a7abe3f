"""
Maybe Monad
===========

Maybe - монада опционального значения:
- Some(value) (значение есть)
- Nothing() (значения нет, поглощающее состояние)
"""

from .monad import Maybe, Nothing, Some, chain, from_optional, lift, or_else, unwrap
from .steps import divide, whatever

__all__ = (
    "Maybe",
    "Some",
    "Nothing",
    "lift",
    "chain",
    "from_optional",
    "or_else",
    "unwrap",
    "divide",
    "whatever",
)
