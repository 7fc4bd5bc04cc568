"""Clean error display for unresolved inputs."""

from __future__ import annotations

from typing import TYPE_CHECKING

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from ..display.formatters import format_more_matches
from ..display.formatters import pluralize
from ..display.formatters import truncate_items
from ..resolution import ResolutionReport

if TYPE_CHECKING:
    from .display import DisplayStyles


def display_resolution_report(
    console: Console,
    report: ResolutionReport,
    styles: DisplayStyles,
    max_ambiguous_shown: int = 8,
) -> None:
    """Render every failing input from ``report``.

    Every offending input is listed, grouped by kind, followed by any files
    that did resolve so the user can see what a corrected command would pick up.

    Args:
        console: Rich console for output
        report: Aggregated resolution outcome (``report.failed`` should be True)
        styles: Palette to use
        max_ambiguous_shown: Candidates listed per ambiguous input before "... and N more"
    """
    table = Table(show_header=False, box=None, padding=(0, 1))
    table.add_column("Marker", width=3)
    table.add_column("Detail")

    if report.missing_paths:
        _section(table, "The following specified paths do not exist:", styles.error)
        for case in report.missing_paths:
            detail = Text()
            detail.append(f"Input: '{case.token}'", style=styles.error)
            detail.append(f" (checked: {case.path_tried})", style=styles.metadata)
            table.add_row(Text("•", style=styles.metadata), detail)

    if report.invalid_patterns:
        _section(table, "The following glob patterns are invalid:", styles.error)
        for case in report.invalid_patterns:
            detail = Text()
            detail.append(f"Input: '{case.token}'", style=styles.error)
            detail.append(f" ({case.error})", style=styles.metadata)
            table.add_row(Text("•", style=styles.metadata), detail)

    if report.not_found:
        _section(table, "The following inputs could not be found:", styles.warning)
        for case in report.not_found:
            table.add_row(Text("•", style=styles.metadata), Text(f"Input: '{case.token}'", style=styles.warning))

    if report.ambiguous:
        _section(table, "The following inputs are ambiguous:", styles.ambiguous)
        for case in report.ambiguous:
            header = Text()
            header.append("Input ", style=styles.ambiguous)
            header.append(f"'{case.token}' ", style=styles.warning)
            header.append("matched:", style=styles.ambiguous)
            table.add_row(Text("•", style=styles.metadata), header)

            shown, hidden = truncate_items(list(case.candidates), max_ambiguous_shown)
            for path in shown:
                table.add_row(Text(""), Text.assemble(("→ ", styles.metadata), (str(path), styles.filename)))
            if hidden:
                trailer = Text.assemble(("→ ", styles.metadata), (format_more_matches(hidden), styles.metadata))
                table.add_row(Text(""), trailer)

    if report.files:
        _section(table, "However, these files were successfully resolved:", styles.success)
        for resolved in report.files:
            table.add_row(Text("✓", style=styles.metadata), Text(str(resolved.display_path), style=styles.filename))

    count = report.failure_count
    console.print()
    console.print(
        Panel(
            Text(f"{count} {pluralize(count, 'input')} could not be resolved", style=styles.error),
            title=f"[{styles.error}]Could not proceed due to unresolved inputs[/{styles.error}]",
            border_style="red",
            padding=(0, 2),
        )
    )
    console.print(table)
    console.print()
    console.print(Text("Please resolve the issues above and try again.", style=styles.metadata))


def _section(table: Table, title: str, style: str) -> None:
    table.add_row(Text(""), Text(""))
    table.add_row(Text(""), Text(title, style=style))
