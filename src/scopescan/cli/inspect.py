"""Single-file inspection commands: function records and comment runs."""

from pathlib import Path

import typer
from rich.table import Table

from ..discovery import read_source
from ..scanning import (
    CommentKind,
    ScanContext,
    compute_own_lines,
    count_excess_comments,
    countable_comment_lines,
    extract_comment_runs,
    extract_functions,
)
from . import app
from ._common import console, error_boundary, resolve_config

_FILE_ARGUMENT = typer.Argument(
    ...,
    help="Source file to inspect",
    exists=True,
    file_okay=True,
    dir_okay=False,
    readable=True,
)


@app.command()
def functions(ctx: typer.Context, file: Path = _FILE_ARGUMENT):
    """List every function found in FILE with its own-line count."""
    with error_boundary(ctx):
        config = resolve_config(ctx)
        metrics = compute_own_lines(extract_functions(read_source(file)))

        if not metrics:
            console.print(f"[yellow]No functions found in {file}[/yellow]")
            return

        table = Table(title=f"Functions in {file}", expand=False)
        table.add_column("Name", style="cyan")
        table.add_column("Start", justify="right")
        table.add_column("End", justify="right")
        table.add_column("Lines", justify="right")
        table.add_column("Own lines", justify="right")

        for metric in metrics:
            own = str(metric.own_lines)
            if metric.own_lines > config.max_function_lines:
                own = f"[red bold]{own}[/red bold]"
            table.add_row(
                metric.name,
                str(metric.start_line),
                str(metric.end_line),
                str(metric.line_count),
                own,
            )
        console.print(table)


@app.command()
def comments(ctx: typer.Context, file: Path = _FILE_ARGUMENT):
    """List the comment runs in FILE and the inline comment total."""
    with error_boundary(ctx):
        config = resolve_config(ctx)
        text = read_source(file)
        context = ScanContext()
        runs = extract_comment_runs(text, context)

        table = Table(title=f"Comments in {file}", expand=False)
        table.add_column("Kind")
        table.add_column("Start", justify="right")
        table.add_column("End", justify="right")
        table.add_column("Lines", justify="right")

        styles = {
            CommentKind.HEADER: "dim",
            CommentKind.INLINE: "yellow",
            CommentKind.TYPE_ANNOTATION: "green",
        }
        for run in runs:
            style = styles[run.kind]
            table.add_row(
                f"[{style}]{run.kind.value}[/{style}]",
                str(run.start_line),
                str(run.end_line),
                str(run.line_count),
            )
        console.print(table)

        total = len(countable_comment_lines(runs))
        limit = config.max_inline_comments
        console.print(f"Inline comment lines: [bold]{total}[/bold] (limit: {limit})")

        excess = count_excess_comments(text, limit, context)
        if excess is not None:
            console.print(f"[red]Over the limit from line {excess.line}[/red]")
