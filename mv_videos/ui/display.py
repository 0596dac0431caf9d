"""Display functions for move plans and reports."""

from typing import Dict, Sequence

from rich.markup import escape

from mv_videos.models.report import ExecutionReport, MoveStatus
from mv_videos.models.selection import MovePlanEntry
from mv_videos.ui.console import ConsoleUI

STATUS_STYLES: Dict[MoveStatus, str] = {
    MoveStatus.MOVED: "green",
    MoveStatus.WOULD_MOVE: "yellow",
    MoveStatus.SKIPPED: "dim",
    MoveStatus.FAILED: "red",
}


def display_configuration(cli_args, console: ConsoleUI) -> None:
    """
    Display the run configuration.

    Args:
        cli_args: Resolved CLI arguments.
        console: Console UI instance.
    """
    mode = "[yellow]SIMULATION[/yellow]" if cli_args.dry_run else "[green]Normal[/green]"
    sources = ", ".join(escape(str(s)) for s in cli_args.sources)
    timeout = f"{cli_args.timeout:g}s" if cli_args.timeout else "none"

    console.print_panel(
        f"Sources: [cyan]{sources}[/cyan]\n"
        f"Destination: [cyan]{escape(str(cli_args.destination))}[/cyan]\n"
        f"Extensions: {escape(cli_args.extensions)}\n"
        f"Minimum size: {escape(cli_args.size)}\n"
        f"Discovery timeout: {timeout}\n"
        f"Mode: {mode}",
        title="mv_videos",
    )


def format_summary(report: ExecutionReport) -> str:
    """
    Summarize a report in one line.

    Returns:
        e.g. "3 moved, 1 failed" or "2 would move".
    """
    counts = [
        (len(report.moved), "moved"),
        (len(report.would_move), "would move"),
        (len(report.skipped), "skipped"),
        (len(report.failed), "failed"),
    ]
    parts = [f"{count} {label}" for count, label in counts if count]
    return ", ".join(parts) if parts else "nothing to do"


def display_plan(plan: Sequence[MovePlanEntry], console: ConsoleUI) -> None:
    """Display the planned moves before confirmation."""
    table = console.create_table("Planned moves", ["#", "Source", "Destination"])
    for i, entry in enumerate(plan, 1):
        table.add_row(str(i), escape(str(entry.source)), escape(str(entry.destination)))
    console.print_table(table)


def display_report(report: ExecutionReport, console: ConsoleUI) -> None:
    """
    Display every outcome of a move batch and a summary.

    Args:
        report: Execution report.
        console: Console UI instance.
    """
    title = "Simulated moves" if report.dry_run else "Moves"
    table = console.create_table(title, ["Status", "Source", "Destination", "Detail"])
    for outcome in report.outcomes:
        style = STATUS_STYLES[outcome.status]
        table.add_row(
            f"[{style}]{outcome.status.value}[/{style}]",
            escape(str(outcome.entry.source)),
            escape(str(outcome.entry.destination)),
            escape(outcome.error or ""),
        )
    console.print_table(table)

    summary = format_summary(report)
    if report.has_failures:
        console.print_error(summary)
    elif report.dry_run:
        console.print_simulation(summary)
    else:
        console.print_success(summary)
