"""Result cache commands: cache-info and cache-clear."""

import typer

from ..cache import ResultCache
from . import app
from ._common import console, error_boundary, resolve_config


@app.command()
def cache_info(ctx: typer.Context):
    """Show where the result cache lives and how much it holds."""
    with error_boundary(ctx):
        config = resolve_config(ctx)
        with ResultCache.from_config(config) as cache:
            info = cache.info()

        console.print("[bold cyan]scopescan cache[/bold cyan]")
        console.print()

        if not info["enabled"]:
            console.print("Status: [red]Disabled[/red]")
            return

        console.print("Status: [green]Enabled[/green]")
        console.print(f"Directory: [blue]{info['directory']}[/blue]")
        console.print(f"Reports: [yellow]{info['entries']}[/yellow]")
        console.print(f"Size: [yellow]{info['volume']} bytes[/yellow]")
        console.print(f"TTL: {config.cache_ttl_hours}h")


@app.command()
def cache_clear(ctx: typer.Context):
    """Drop every cached per-file report."""
    with error_boundary(ctx):
        config = resolve_config(ctx)
        if not config.cache_enabled:
            console.print("[yellow]Cache is disabled[/yellow]")
            raise typer.Exit(0)

        with ResultCache.from_config(config) as cache:
            removed = cache.clear()
        console.print(f"[green]Cache cleared[/green] ({removed} reports removed)")
