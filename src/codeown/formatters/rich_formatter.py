"""Rich terminal formatter for the ownership summary."""

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from ..ownership.models import OwnershipReport
from .base import BaseFormatter

console = Console()

TOP_OWNERS = 10
BAR_WIDTH = 20


def _bar(count: int, maximum: int) -> str:
    filled = round(count / maximum * BAR_WIDTH) if maximum else 0
    return "█" * filled + "░" * max(0, BAR_WIDTH - filled)


class RichFormatter(BaseFormatter):
    """Summary panel plus a top-owners table."""

    def __init__(self, top: int = TOP_OWNERS, out: Console = console):
        self.top = top
        self.console = out

    def render(self, report: OwnershipReport) -> None:
        summary = report.summary
        title = escape(report.project.label) if report.project else "CODEOWNERS"
        self.console.print(
            Panel(
                f"[bold]{len(report.entries)}[/bold] ownership rules generated\n"
                f"[dim]{summary.total_files} files attributed to "
                f"{summary.unique_owners} owners, history since {report.since_date}[/dim]",
                title=f"[bold cyan]{title}[/bold cyan]",
                expand=False,
            )
        )

        top = summary.top(self.top)
        if not top:
            self.console.print("[yellow]No files could be attributed to an owner.[/yellow]")
            return

        maximum = top[0][1]
        table = Table(title="Top Contributors by File Count", show_header=True, header_style="bold")
        table.add_column("#", justify="right", style="dim")
        table.add_column("Owner")
        table.add_column("", style="grey50")
        table.add_column("Files", justify="right", style="cyan")
        table.add_column("%", justify="right", style="cyan")
        for index, (owner, count) in enumerate(top, start=1):
            table.add_row(
                str(index),
                escape(owner),
                _bar(count, maximum),
                str(count),
                f"{summary.percentage(count):.0f}%",
            )
        self.console.print(table)

        rest_owners, rest_files = summary.remainder(self.top)
        if rest_owners:
            self.console.print(
                f"[dim]And {rest_owners} more contributors with {rest_files} files "
                f"({summary.percentage(rest_files):.0f}%)[/dim]"
            )

    def format(self, report: OwnershipReport) -> str:
        # Rich output goes directly to console; return empty string
        self.render(report)
        return ""
