
from __future__ import annotations
from pathlib import Path

import typer

from kyberstat import render_batch_report, scan_batch_log, summarize
from .common import QUIET_OPTION, VERBOSE_OPTION, configure_logging, fatal_on_artifact_error

app = typer.Typer(add_completion=False)

@app.command()
def main(
    batch_log: Path = typer.Argument(..., metavar="SLURM_OUT", help="Captured stdout of an iterated Kyber batch job."),
    verbose: bool = VERBOSE_OPTION,
    quiet: bool = QUIET_OPTION,
):
    """
    Mean and population stddev of the per-iteration timings of each Kyber operation.

    The printed avg divides by the number of `Loop spin:` iterations; the
    stddev is taken around the operation's own sample mean.
    """
    configure_logging(verbose=verbose, quiet=quiet)
    with fatal_on_artifact_error():
        state = scan_batch_log(batch_log, on_open=lambda: typer.echo("Successfully opened slurm STDOUT"))
    typer.echo(render_batch_report(summarize(state)), nl=False)

def app_main():
    app()

if __name__ == "__main__":
    app_main()
