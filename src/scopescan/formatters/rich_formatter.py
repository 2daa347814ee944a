"""Rich terminal formatter for scopescan."""

from typing import Optional

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from ..checks import RunResult, Violation
from ..config import ScanConfig
from .base import BaseFormatter

_RULE_TITLES = {
    "function-length": "Functions over the length limit",
    "duplicate-name": "Function names declared in several files",
    "alias": "Aliased names",
    "destructuring": "Object destructuring",
    "excessive-comments": "Files with too many inline comments",
    "inline-type-annotation": "Inline @type annotations",
}


class RichFormatter(BaseFormatter):
    """Rich terminal output with a summary panel and one table per check."""

    def __init__(self, console: Optional[Console] = None) -> None:
        self.console = console or Console()

    def render(self, result: RunResult, config: ScanConfig) -> None:
        self._print_summary(result)
        for rule, violations in sorted(result.by_rule().items()):
            self._print_rule(rule, violations, config.max_reported)
        if result.skipped:
            self.console.print(f"[yellow]Skipped {len(result.skipped)} unreadable file(s)[/yellow]")

    def format(self, result: RunResult, config: ScanConfig) -> str:
        # Rich output goes directly to console; return empty string
        self.render(result, config)
        return ""

    # -- private helpers --

    def _print_summary(self, result: RunResult) -> None:
        total = len(result.violations)
        status = "[red]FAILED[/red]" if total else "[green]PASSED[/green]"
        summary_text = (
            f"Scanned [bold]{result.files_scanned}[/bold] files "
            f"([dim]{result.cached_count} cached[/dim])  |  "
            f"[yellow]{total}[/yellow] violations  |  {status}"
        )
        self.console.print(
            Panel(summary_text, title="[bold cyan]scopescan[/bold cyan]", expand=False)
        )
        self.console.print()

    def _print_rule(self, rule: str, violations: list[Violation], max_reported: int) -> None:
        title = _RULE_TITLES.get(rule, rule)
        table = Table(title=f"{title} ({len(violations)})", expand=True, title_justify="left")
        table.add_column("Location", style="cyan", no_wrap=True)
        table.add_column("Detail", ratio=3)
        table.add_column("Code", style="dim", ratio=2)

        for v in violations[:max_reported]:
            table.add_row(v.location, v.detail, v.code)

        self.console.print(table)
        remaining = len(violations) - max_reported
        if remaining > 0:
            self.console.print(f"  [dim]... and {remaining} more[/dim]")
        self.console.print()
