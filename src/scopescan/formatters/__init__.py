"""Report renderers for scopescan: rich tables, JSON and GitHub annotations."""

from .base import BaseFormatter
from .github_formatter import GithubFormatter
from .json_formatter import JsonFormatter
from .rich_formatter import RichFormatter

FORMATTERS = {
    "rich": RichFormatter,
    "json": JsonFormatter,
    "github": GithubFormatter,
}


def get_formatter(name: str) -> BaseFormatter:
    """Instantiate the formatter registered as ``name``.

    Raises:
        ValueError: If name is not recognized
    """
    cls = FORMATTERS.get(name)
    if cls is None:
        choices = ", ".join(sorted(FORMATTERS))
        raise ValueError(f"Unknown formatter: {name!r}. Choose from: {choices}")
    return cls()


__all__ = [
    "FORMATTERS",
    "BaseFormatter",
    "RichFormatter",
    "JsonFormatter",
    "GithubFormatter",
    "get_formatter",
]
