"""
Monads as a design pattern: a wrapping type, lift (return/unit) and
chain (bind).

Two independent monads:
- Logged: value + ordered log of applied operations
- Maybe: value that may be absent, absence short-circuits the chain

Both can be chained by nesting chain() calls or by folding chain()
over a list of steps (fold_logged / fold_maybe / foldM).
"""

__version__ = "0.1.0"

# Core types
from ._types import Bind, LoggedStep, MaybeStep, Step

# Logged monad (module namespace import - preferred: logged.lift, logged.chain)
from . import logged
from .logged import Log, Logged

# Maybe monad (module namespace import - preferred: maybe.lift, maybe.chain)
from . import maybe
from .maybe import Maybe, Nothing, Some

# Collection operations
from .collection import foldM, fold_logged, fold_maybe

# Errors
from ._errors import UnwrapNothingError

__all__ = (
    "__version__",
    # Types
    "Bind",
    "LoggedStep",
    "MaybeStep",
    "Step",
    # Logged
    "logged",
    "Log",
    "Logged",
    # Maybe
    "maybe",
    "Maybe",
    "Nothing",
    "Some",
    # Collection
    "foldM",
    "fold_logged",
    "fold_maybe",
    # Errors
    "UnwrapNothingError",
)
