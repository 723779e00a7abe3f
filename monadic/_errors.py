from __future__ import annotations


class UnwrapNothingError(Exception):
    """unwrap() was called on Nothing."""

    def __init__(self) -> None:
        super().__init__("Called unwrap on Nothing")


__all__ = ("UnwrapNothingError",)
