
from __future__ import annotations
from pathlib import Path

import typer

from kyberstat import render_instruction_report, scan_listing
from .common import QUIET_OPTION, VERBOSE_OPTION, configure_logging, fatal_on_artifact_error

app = typer.Typer(add_completion=False)

@app.command()
def main(
    listing: Path = typer.Argument(..., metavar="OBJDUMP_TXT", help="Path to a .txt listing from `objdump -d`."),
    breakdown: bool = typer.Option(False, help="Also print the SIMD share and per-ISA-family counts."),
    verbose: bool = VERBOSE_OPTION,
    quiet: bool = QUIET_OPTION,
):
    """
    Count how many instructions of a disassembly listing are SIMD (MMX..AVX2).
    """
    configure_logging(verbose=verbose, quiet=quiet)
    with fatal_on_artifact_error():
        counts = scan_listing(
            listing,
            on_open=lambda: typer.echo("Successfully opened object dump. Investigating..."),
        )
    typer.echo(render_instruction_report(counts, breakdown=breakdown), nl=False)

def app_main():
    app()

if __name__ == "__main__":
    app_main()
