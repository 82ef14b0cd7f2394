"""Display functions for run output."""

from typing import Iterable, TYPE_CHECKING

from id3mover.ui.console import ConsoleUI

if TYPE_CHECKING:
    from id3mover.config.cli import CLIArgs
    from id3mover.pipeline.orchestrator import ProcessingStats


def display_configuration(cli_args: "CLIArgs", console: ConsoleUI) -> None:
    """
    Display the current configuration to the user.

    Args:
        cli_args: Parsed CLI arguments.
        console: Console UI instance.
    """
    operation = "Copy" if cli_args.copy else "Move"
    mode = "[yellow]DRY RUN[/yellow]" if cli_args.dry_run else "[green]Normal[/green]"

    console.print_panel(
        f"Source: [cyan]{cli_args.directory}[/cyan]\n"
        f"Output: [cyan]{cli_args.resolved_output_dir}[/cyan]\n"
        f"Operation: {operation}\n"
        f"Workers: {cli_args.workers}\n"
        f"Mode: {mode}",
        title="id3mover",
    )


def display_report_lines(lines: Iterable[str], console: ConsoleUI) -> None:
    """Print report lines verbatim."""
    for line in lines:
        console.print_plain(line)


def display_summary(stats: "ProcessingStats", console: ConsoleUI, dry_run: bool = False) -> None:
    """
    Print a summary table of the run.

    Args:
        stats: Outcome counts.
        console: Console UI instance.
        dry_run: If True, word the summary as a simulation.
    """
    title = "Dry run summary" if dry_run else "Summary"
    table = console.create_table(title, ["Result", "Files"])
    if dry_run:
        table.add_row("Would be processed", str(stats.planned))
    else:
        table.add_row("Moved", str(stats.moved))
        table.add_row("Copied", str(stats.copied))
    table.add_row("Skipped", str(stats.skipped))
    table.add_row("Failed", str(stats.failed))
    table.add_row("Total", str(stats.total))
    console.print_table(table)

    if stats.skipped:
        console.print_warning(f"{stats.skipped} file(s) skipped, see the log for details")
    if stats.has_failures:
        console.print_error(f"{stats.failed} file(s) could not be processed")
    elif dry_run:
        console.print_info(f"Dry run complete. {stats.total} files inspected.")
    else:
        console.print_success("Processing complete.")
