"""
path-ratchet CLI

Verbs:
- check: Validate a path as a single or multi component
- join: Append validated components to a trusted base path
- sanitize: Rewrite arbitrary text into a single component
"""
from __future__ import annotations

import logging
from typing import List, Optional

import typer

from .cli_context import CLIContext
from .components import MultiComponentPathBuf, SingleComponentPathBuf
from .mappers import run_and_exit
from .models import PathReport
from .printers import print_components, print_report, print_report_json
from .push import PathBuilder
from .sanitize import sanitize_component

app = typer.Typer(name="path-ratchet", help="Traversal-safe path component checks")

PLATFORM_HELP = "Path rules to validate under: posix or windows (default: PATH_RATCHET_PLATFORM or native)"


@app.callback()
def main(
    ctx: typer.Context,
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
):
    """Validate untrusted path components before joining them to trusted paths."""
    context = run_and_exit(CLIContext.from_env)
    level = logging.DEBUG if verbose else context.settings.log_level_value
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s", force=True)
    ctx.obj = context


@app.command()
def check(
    ctx: typer.Context,
    path: str = typer.Argument(..., help="Untrusted path to validate"),
    multi: bool = typer.Option(False, "--multi", help="Allow several normal components"),
    platform: Optional[str] = typer.Option(None, "--platform", "-p", help=PLATFORM_HELP),
    as_json: bool = typer.Option(False, "--json", help="Print a JSON report"),
    show_components: bool = typer.Option(False, "--components", help="Print the path decomposition"),
):
    """Validate PATH; exits with code 2 if it is unsafe."""
    context: CLIContext = ctx.obj

    def _check() -> None:
        report = PathReport.build(path, "multi" if multi else "single", context.platform_for(platform))
        if as_json:
            print_report_json(report)
        else:
            print_report(report)
            if show_components:
                print_components(report)
        if not report.valid:
            raise typer.Exit(code=2)

    run_and_exit(_check)


@app.command()
def join(
    ctx: typer.Context,
    base: str = typer.Argument(..., help="Trusted base directory"),
    components: List[str] = typer.Argument(..., help="Untrusted components to append in order"),
    multi: bool = typer.Option(False, "--multi", help="Allow several normal components per argument"),
    platform: Optional[str] = typer.Option(None, "--platform", "-p", help=PLATFORM_HELP),
):
    """Append COMPONENTS to BASE, refusing any that would escape it."""
    context: CLIContext = ctx.obj

    def _join() -> None:
        target = context.platform_for(platform)
        builder = PathBuilder(base, target)
        for raw in components:
            if multi:
                builder.push_components(MultiComponentPathBuf(raw, target))
            else:
                builder.push_component(SingleComponentPathBuf(raw, target))
        typer.echo(str(builder))

    run_and_exit(_join)


@app.command()
def sanitize(
    ctx: typer.Context,
    raw: str = typer.Argument(..., help="Arbitrary text to turn into a filename"),
    platform: Optional[str] = typer.Option(None, "--platform", "-p", help=PLATFORM_HELP),
    replacement: Optional[str] = typer.Option(
        None, "--replacement", "-r", help="Replacement for illegal characters (default: PATH_RATCHET_SANITIZE_REPLACEMENT or '_')"
    ),
):
    """Print RAW rewritten into a single safe component (output may change between releases)."""
    context: CLIContext = ctx.obj

    def _sanitize() -> None:
        chosen = replacement if replacement is not None else context.settings.sanitize_replacement
        result = sanitize_component(raw, context.platform_for(platform), chosen)
        typer.echo(str(result))

    run_and_exit(_sanitize)


if __name__ == "__main__":
    app()
