"""Pytest configuration and fixtures."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field

import pytest
import structlog

from monadic._logging import configure_logging


@dataclass(slots=True)
class CountingStep[T, R]:
    """Step stand-in recording every value it is called with."""

    fn: Callable[[T], R]
    calls: list[T] = field(default_factory=list)

    def __call__(self, value: T) -> R:
        self.calls.append(value)
        return self.fn(value)

    @property
    def count(self) -> int:
        return len(self.calls)


@pytest.fixture
def counting() -> Callable[[Callable[[object], object]], CountingStep[object, object]]:
    """Wrap a step so tests can assert how many times it ran."""
    return CountingStep


@pytest.fixture(autouse=True)
def reset_logging():
    """The CLI configures structlog globally; restore the quiet setup after each test."""
    yield
    structlog.reset_defaults()
    configure_logging()
