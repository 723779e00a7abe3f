"""CLI entry point for monadic."""

from __future__ import annotations

import click

from . import __version__
from ._logging import configure_logging, get_logger
from .demo import run_demos

logger = get_logger(__name__)


@click.command()
@click.option("-v", "--verbose", is_flag=True, help="Log demo events to stderr.")
@click.version_option(version=__version__)
def cli(verbose: bool) -> None:
    """Run the Logged and Maybe demonstrations and print their results."""
    configure_logging(verbose=verbose)
    logger.debug("demo.start")

    for report in run_demos():
        for line in report.lines():
            click.echo(line)
        if not report.agree:
            logger.warning("demo.mismatch", title=report.title)


__all__ = ("cli",)
