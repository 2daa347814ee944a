"""Check command: run every enabled check over discovered files."""

from pathlib import Path
from typing import List, Optional

import click
import typer

from ..cache import ResultCache
from ..checks import CheckRunner
from ..config import ALL_CHECKS
from ..discovery import discover_files
from ..formatters import FORMATTERS, get_formatter
from . import app
from ._common import console, default_paths, error_boundary, resolve_config


@app.command()
def check(
    ctx: typer.Context,
    paths: Optional[List[Path]] = typer.Argument(
        None,
        help="Files or directories to scan (default: current directory)",
    ),
    json_output: bool = typer.Option(
        False,
        "--json",
        help="Output in machine-readable JSON format",
    ),
    output_format: str = typer.Option(
        "rich",
        "--format",
        "-f",
        help="Output format: rich | json | github",
        click_type=click.Choice(list(FORMATTERS), case_sensitive=False),
    ),
    max_lines: Optional[int] = typer.Option(
        None,
        "--max-lines",
        help="Own-line limit per function",
        min=1,
    ),
    max_comments: Optional[int] = typer.Option(
        None,
        "--max-comments",
        help="Inline comment lines allowed per file",
        min=0,
    ),
    only: Optional[List[str]] = typer.Option(
        None,
        "--only",
        help=f"Run only these checks ({', '.join(ALL_CHECKS)})",
    ),
):
    """
    Run the enabled checks and exit 1 when any violation is found.

    [bold cyan]Examples:[/bold cyan]

      scopescan check src lib

      scopescan check --only function-length --max-lines 40

      scopescan check --format github
    """
    with error_boundary(ctx):
        config = resolve_config(
            ctx,
            max_function_lines=max_lines,
            max_inline_comments=max_comments,
            enabled_checks=tuple(only) if only else None,
        )
        files = discover_files(default_paths(paths), config)

        if not files:
            console.print("[yellow]No source files found.[/yellow]")
            raise typer.Exit(0)

        with ResultCache.from_config(config) as cache:
            result = CheckRunner(config, cache=cache).run(files, root_dir=Path.cwd())

        formatter = get_formatter("json" if json_output else output_format.lower())
        formatter.render(result, config)

        if result.has_violations:
            raise typer.Exit(1)
