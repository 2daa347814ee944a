"""CLI entry point, registers all subcommands."""

import typer

app = typer.Typer(
    name="scopescan",
    help="scopescan - function scope, comment and naming checks for JavaScript/TypeScript",
    add_completion=False,
    rich_markup_mode="rich",
)


# Import subcommands to register them
from .main import main as _main_callback  # noqa: F401, E402
from .check import check as _check  # noqa: F401, E402
from .inspect import functions as _functions, comments as _comments  # noqa: F401, E402
from .stats import stats as _stats  # noqa: F401, E402
from .cache import cache_info as _cache_info, cache_clear as _cache_clear  # noqa: F401, E402
