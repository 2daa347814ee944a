"""Stats command: own-line distribution across a codebase."""

import json
from dataclasses import asdict
from pathlib import Path
from typing import List, Optional

import typer
from rich.table import Table

from ..cache import ResultCache
from ..checks import CheckRunner
from ..discovery import discover_files
from ..stats import summarize_own_lines
from . import app
from ._common import console, default_paths, error_boundary, resolve_config


@app.command()
def stats(
    ctx: typer.Context,
    paths: Optional[List[Path]] = typer.Argument(
        None,
        help="Files or directories to scan (default: current directory)",
    ),
    threshold: float = typer.Option(
        3.5,
        "--threshold",
        "-t",
        help="Modified z-score above which a function counts as an outlier",
        min=0.0,
    ),
    json_output: bool = typer.Option(
        False,
        "--json",
        help="Output in machine-readable JSON format",
    ),
):
    """Summarize function own-line counts: median, p90, max and outliers."""
    with error_boundary(ctx):
        config = resolve_config(ctx)
        files = discover_files(default_paths(paths), config)

        with ResultCache.from_config(config) as cache:
            result = CheckRunner(config, cache=cache).run(files, root_dir=Path.cwd())

        summary = summarize_own_lines(result.own_lines, threshold=threshold)

        if json_output:
            data = asdict(summary)
            data["files_scanned"] = result.files_scanned
            print(json.dumps(data, indent=2))
            return

        table = Table(title="Function own lines", expand=False)
        table.add_column("Metric", style="cyan")
        table.add_column("Value", justify="right")
        table.add_row("Files", str(result.files_scanned))
        table.add_row("Functions", str(summary.count))
        table.add_row("Median", f"{summary.median:.1f}")
        table.add_row("p90", f"{summary.p90:.1f}")
        table.add_row("Max", str(summary.maximum))
        table.add_row("MAD", f"{summary.mad:.1f}")
        table.add_row("Outliers", ", ".join(str(n) for n in summary.outliers) or "-")
        console.print(table)
