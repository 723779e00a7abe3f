from .fold import foldM, fold_logged, fold_maybe

__all__ = (
    # Logged
    "fold_logged",
    # Maybe
    "fold_maybe",
    # Generic
    "foldM",
)
