
from __future__ import annotations
from typing import Optional

import typer

from kyberstat import SIMD_FAMILIES
from .tools import analyze_simd, testrun_sum_std

app = typer.Typer(add_completion=False, help="Offline analysis of Kyber benchmark artifacts")

app.command(name="analyze-simd")(analyze_simd.main)
app.command(name="sum-std")(testrun_sum_std.main)

@app.command(name="list-simd")
def list_simd(
    family: Optional[str] = typer.Option(None, help="Only print one ISA family, e.g. AVX2."),
) -> None:
    """List the compiled-in SIMD mnemonics per ISA family."""
    if family is not None and family not in SIMD_FAMILIES:
        known = ", ".join(SIMD_FAMILIES)
        raise typer.BadParameter(f"unknown family {family!r} (known: {known})", param_hint="--family")
    for name, members in SIMD_FAMILIES.items():
        if family is not None and name != family:
            continue
        typer.echo(f"{name} ({len(members)}):")
        typer.echo("  " + " ".join(sorted(members)))

def app_main():
    app()

if __name__ == "__main__":
    app_main()
