"""Shared plumbing for the artifact tools: logging setup and fatal-error exits."""

from __future__ import annotations

import logging
import sys
from contextlib import contextmanager
from typing import Iterator

import typer

from kyberstat import ArtifactError

log = logging.getLogger(__name__)

VERBOSE_OPTION = typer.Option(False, "--verbose", "-v", help="Log every parsing step to stderr (DEBUG).")
QUIET_OPTION = typer.Option(False, "--quiet", "-q", help="Only log errors.")


def configure_logging(verbose: bool = False, quiet: bool = False) -> None:
    if verbose:
        level = logging.DEBUG
    elif quiet:
        level = logging.ERROR
    else:
        level = logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
        force=True,
    )


@contextmanager
def fatal_on_artifact_error() -> Iterator[None]:
    """Turn an unreadable input into a stderr diagnostic and exit status 1."""
    try:
        yield
    except ArtifactError as exc:
        log.debug("aborting scan", exc_info=True)
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(code=1)
