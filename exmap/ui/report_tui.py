"""Terminal reporting for exmap.

This module provides the ReportTUI class, a Rich-based display for the
generate, verify and match workflows. Output goes to the console's stream,
which the CLI points at stderr so generated code on stdout stays clean.

Example:
    from exmap.ui import ReportTUI

    tui = ReportTUI()
    tui.display_mapping_summary(report)
    tui.display_coverage(coverage)
"""

from typing import List, Optional

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from exmap.models import CoverageReport, MappingReport, MatchKind, MatchResult


class ReportTUI:
    """Rich-based display of mapping and coverage results.

    Args:
        console: Optional Rich Console instance for output. If None, creates
            a new Console. Pass a custom Console for testing (e.g., with
            StringIO file for output capture).

    Attributes:
        console: The Rich Console instance used for all output.
    """

    def __init__(self, console: Optional[Console] = None) -> None:
        self.console = console or Console()

    def display_inputs(self, total_exercises: int, total_folders: int) -> None:
        """Show how many exercises and image folders were found."""
        self.console.print(f"Found {total_exercises:,} exercises in database")
        self.console.print(f"Found {total_folders:,} image folders")

    def display_mapping_summary(self, report: MappingReport, verbose: bool = False) -> None:
        """Display the outcome of a generator run.

        Shows a header panel with counts, the unmapped ids (with any
        suggestions) and, in verbose mode, a table of every fuzzy match.

        Args:
            report: MappingReport from the generator.
            verbose: If True, also list containment and normalized matches.
        """
        mapped = len(report.mappings)
        unmapped = report.unmapped
        header_text = (
            f"Exercises: {report.total_exercises:,}\n"
            f"Image folders: {report.total_folders:,}\n"
            f"[green]Generated {mapped:,} mappings[/green]\n"
            f"[red]Could not map {len(unmapped):,} exercises[/red]"
        )
        self.console.print(Panel(header_text, title="Mapping Results", border_style="blue"))

        if verbose:
            fuzzy = [
                r for r in report.results
                if r.kind in (MatchKind.NORMALIZED, MatchKind.CONTAINMENT)
            ]
            if fuzzy:
                self._display_match_table(fuzzy, title="Fuzzy Matches")

        if unmapped:
            table = Table(title="Unmapped Exercises")
            table.add_column("Exercise", style="cyan")
            table.add_column("Suggestions", style="white")
            for exercise_id in unmapped:
                suggestions = report.suggestions.get(exercise_id) or []
                table.add_row(exercise_id, ", ".join(suggestions) or "[dim]-[/dim]")
            self.console.print(table)

        if report.errors:
            self._display_errors(report.errors)

    def display_match(self, result: MatchResult) -> None:
        """Display a single match result."""
        if not result.is_mapped:
            self.console.print(f"[yellow]No folder matches '{result.target}'.[/yellow]")
            return
        self._display_match_table([result], title="Match")

    def display_coverage(self, coverage: CoverageReport, show_unused: int = 10) -> None:
        """Display image availability for every exercise.

        Args:
            coverage: CoverageReport from the verify workflow.
            show_unused: Maximum number of unused folders to list.
        """
        if coverage.without_images:
            missing = "\n".join(f"- {exercise_id}" for exercise_id in coverage.without_images)
            self.console.print(
                Panel(missing, title=f"Missing images ({len(coverage.without_images)})", border_style="red")
            )

        if coverage.unused_folders:
            shown = coverage.unused_folders[:show_unused]
            self.console.print(
                f"Unused image folders: {len(coverage.unused_folders)} "
                f"(first {len(shown)}):"
            )
            for folder in shown:
                self.console.print(f"  - {folder}")

        table = Table(title="Image Coverage", show_header=True, header_style="bold")
        table.add_column("Metric", style="cyan")
        table.add_column("Value", justify="right")
        table.add_row("Total exercises", f"{coverage.total_exercises:,}")
        table.add_row(
            "With images",
            f"{len(coverage.with_images):,} ({coverage.percent_with_images()}%)",
        )
        table.add_row(
            "Without images",
            f"{len(coverage.without_images):,} ({coverage.percent_without_images()}%)",
        )
        table.add_row("Available folders", f"{coverage.total_folders:,}")
        table.add_row("Unused folders", f"{len(coverage.unused_folders):,}")
        self.console.print(table)

    def _display_match_table(self, results: List[MatchResult], title: str) -> None:
        table = Table(title=title)
        table.add_column("Exercise", style="cyan", no_wrap=True)
        table.add_column("Folder", style="white")
        table.add_column("Match Type", style="magenta")
        table.add_column("Score", justify="center")
        for result in results:
            table.add_row(
                result.target,
                self._truncate_name(result.candidate or ""),
                result.kind.value,
                self._format_score(int(result.score * 100)),
            )
        self.console.print(table)

    def _display_errors(self, errors: List[str]) -> None:
        """Display error messages in a separate panel.

        Args:
            errors: List of error messages to display.
        """
        max_display = 10
        displayed_errors = errors[:max_display]
        remaining = len(errors) - max_display

        error_text = "\n".join(f"- {e}" for e in displayed_errors)
        if remaining > 0:
            error_text += f"\n\n... and {remaining} more errors"

        self.console.print(Panel(error_text, title=f"Errors ({len(errors)})", border_style="red"))

    def _format_score(self, score_pct: int) -> str:
        """Format a score percentage with color coding."""
        if score_pct >= 90:
            return f"[green]{score_pct}%[/green]"
        elif score_pct >= 70:
            return f"[yellow]{score_pct}%[/yellow]"
        else:
            return f"[red]{score_pct}%[/red]"

    def _truncate_name(self, name: str, max_length: int = 60) -> str:
        if len(name) > max_length:
            return name[: max_length - 3] + "..."
        return name
