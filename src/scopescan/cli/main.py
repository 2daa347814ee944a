"""Global options callback."""

from pathlib import Path
from typing import Optional

import typer

from ..logging_config import setup_logging
from . import app
from ._common import console


@app.callback(invoke_without_command=True, no_args_is_help=False)
def main(
    ctx: typer.Context,
    config: Optional[Path] = typer.Option(
        None,
        "-c",
        "--config",
        help="Configuration file (TOML)",
        exists=True,
        file_okay=True,
        dir_okay=False,
        readable=True,
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable debug logging",
    ),
    quiet: bool = typer.Option(
        False,
        "--quiet",
        "-q",
        help="Only log errors",
    ),
    workers: Optional[int] = typer.Option(
        None,
        "-w",
        "--workers",
        help="Parallel workers (default: auto-detect)",
        min=1,
        max=32,
    ),
    no_cache: bool = typer.Option(
        False,
        "--no-cache",
        help="Do not read or write the on-disk result cache",
    ),
    log_file: Optional[Path] = typer.Option(
        None,
        "--log-file",
        help="Also append log records to this file",
        dir_okay=False,
    ),
    version: bool = typer.Option(
        False,
        "--version",
        help="Show version and exit",
    ),
):
    """
    Scan JavaScript/TypeScript sources for long functions, duplicated names,
    aliases, destructuring and comment noise.

    [bold cyan]Examples:[/bold cyan]

      scopescan check src

      scopescan check --json

      scopescan functions src/app.js

      scopescan stats src
    """
    ctx.ensure_object(dict)
    ctx.obj.update(
        {
            "config": config,
            "verbose": verbose,
            "quiet": quiet,
            "workers": workers,
            "no_cache": no_cache,
        }
    )

    if version:
        from .. import __version__

        console.print(f"[bold cyan]scopescan[/bold cyan] version [green]{__version__}[/green]")
        raise typer.Exit(0)

    verbosity = "quiet" if quiet else "verbose" if verbose else "normal"
    setup_logging(verbosity, log_file=str(log_file) if log_file else None)

    if ctx.invoked_subcommand is None:
        console.print(ctx.get_help())
        raise typer.Exit(0)
