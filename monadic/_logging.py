"""Structured logging setup (structlog).

Logs go to stderr so stdout carries only the demo output."""

from __future__ import annotations

import logging
import sys

import structlog


def configure_logging(*, verbose: bool = False) -> None:
    """Install the processor chain. DEBUG when verbose, WARNING otherwise."""
    level = logging.DEBUG if verbose else logging.WARNING
    structlog.configure(
        processors=[
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer(colors=False),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=False,
    )


def get_logger(name: str) -> structlog.typing.FilteringBoundLogger:
    return structlog.get_logger(name)


# Quiet until the CLI (or an embedding app) configures otherwise
if not structlog.is_configured():
    configure_logging()


__all__ = ("configure_logging", "get_logger")
