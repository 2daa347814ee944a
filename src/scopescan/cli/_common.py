"""Shared CLI helpers."""

from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, Optional

import typer
from rich.console import Console

from ..config import ScanConfig, load_config
from ..exceptions import ScopeScanError
from ..logging_config import get_logger

console = Console()

logger = get_logger(__name__)


def resolve_config(ctx: typer.Context, **overrides) -> ScanConfig:
    """Build configuration from global CLI options plus command overrides."""
    options = ctx.obj or {}
    if options.get("no_cache"):
        overrides["cache_enabled"] = False
    return load_config(
        config_file=options.get("config"),
        verbose=options.get("verbose", False),
        quiet=options.get("quiet", False),
        workers=options.get("workers"),
        **overrides,
    )


def default_paths(paths: Optional[list[Path]]) -> list[Path]:
    return list(paths) if paths else [Path(".")]


@contextmanager
def error_boundary(ctx: typer.Context) -> Iterator[None]:
    """Map scopescan errors to exit 1 and Ctrl-C to exit 130."""
    verbose = bool((ctx.obj or {}).get("verbose"))
    try:
        yield
    except typer.Exit:
        raise
    except ScopeScanError as e:
        logger.debug(f"{e.__class__.__name__}: {e}")
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)
    except KeyboardInterrupt:
        console.print("\n[yellow]Scan interrupted[/yellow]")
        raise typer.Exit(130)
    except Exception as e:
        logger.exception("Unexpected error during scan")
        console.print(f"[red]Unexpected error:[/red] {e}")
        if verbose:
            console.print_exception()
        raise typer.Exit(1)
