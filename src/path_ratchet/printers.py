"""
Output formatting for CLI commands.

Keeps presentation out of the command bodies; every function writes through
typer.echo so CliRunner captures it.
"""
from __future__ import annotations

import typer

from .models import PathReport


def print_report(report: PathReport) -> None:
    """Print the normalized path, or the rejection on stderr."""
    if report.valid:
        typer.echo(report.path)
        return
    typer.echo(
        f"unsafe path: {report.input} ({report.kind}-component, {report.platform.value} rules)",
        err=True,
    )


def print_report_json(report: PathReport) -> None:
    typer.echo(report.model_dump_json(indent=2))


def print_components(report: PathReport) -> None:
    """Print the decomposition as ``kind<TAB>value`` lines."""
    for component in report.components:
        typer.echo(f"{component.kind.value}\t{component.value}")
