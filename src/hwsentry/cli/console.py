"""Console summary of a finished run, rendered with Rich."""

from typing import Optional

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from ..models.results import RunSummary, StressResult, StressStatus

console = Console()

STATUS_STYLES = {
    StressStatus.OK: "green",
    StressStatus.CRITICAL: "bold red",
    StressStatus.HIGH_USAGE: "yellow",
    StressStatus.UNAVAILABLE: "dim",
    StressStatus.ERROR: "red",
}


def format_metric(result: StressResult) -> str:
    if result.metric is None:
        return "-"
    return f"{result.metric:g}"


def stress_table(summary: RunSummary) -> Table:
    """Build the table of per-component stress results."""
    table = Table(
        title="Stress Test Results",
        box=box.ROUNDED,
        show_header=True,
        header_style="bold cyan",
    )
    table.add_column("Component", style="cyan", no_wrap=True)
    table.add_column("Max Metric", justify="right")
    table.add_column("Status", justify="center")

    for result in summary.stress.results:
        style = STATUS_STYLES.get(result.status, "white")
        table.add_row(
            result.component.value,
            format_metric(result),
            f"[{style}]{result.status.value}[/]",
        )
    return table


def alerts_panel(summary: RunSummary) -> Panel:
    """Red panel listing every alert, or a green all-clear panel."""
    if not summary.has_alerts:
        return Panel("All sensors within thresholds", title="Alerts", border_style="green")
    lines = "\n".join(f"- {escape(alert)}" for alert in summary.alerts)
    return Panel(lines, title=f"Alerts ({len(summary.alerts)})", border_style="red")


def print_summary(summary: RunSummary, out: Optional[Console] = None) -> None:
    """
    Print the end-of-run summary.

    Args:
        summary: Summary of the finished run
        out: Console to print to (defaults to the module console)
    """
    out = out or console
    out.print()
    out.print(stress_table(summary))
    out.print(alerts_panel(summary))
    out.print(f"Summary report: [blue]{escape(str(summary.paths.report_file))}[/]")
    if summary.tree_report_written:
        out.print(f"Sensor tree report: [blue]{escape(str(summary.paths.tree_report_file))}[/]")
    else:
        out.print("Sensor tree report: [yellow]not written (tree fetch failed)[/]")
    out.print(f"Log file: [blue]{escape(str(summary.paths.log_file))}[/]")
