"""
Logged Monad
============

Logged - writer-монада:
- value (любой тип T)
- Log[str] (упорядоченная история операций)
"""

from .log import Log
from .monad import Logged, chain, lift, logged, tell
from .steps import double, square

__all__ = (
    "Log",
    "Logged",
    "lift",
    "chain",
    "tell",
    "logged",
    "square",
    "double",
)
