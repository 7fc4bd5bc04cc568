"""CLI display system using rich terminal UX.

All styling comes from an explicit DisplayStyles object so callers (and
tests) decide the palette; nothing here keeps module-level style state.
"""

import logging
from collections.abc import Sequence
from dataclasses import dataclass

from rich.console import Console

from ..display.formatters import format_summary
from ..models import FileContext
from ..resolution import ResolutionReport
from ..utils.error_format import escape_markup
from ..utils.error_format import format_error_message
from .error_display import display_resolution_report

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DisplayStyles:
    """Rich style strings for each kind of message."""

    error: str = "bold red"
    warning: str = "yellow"
    success: str = "bold green"
    filename: str = "bold cyan"
    metadata: str = "dim"
    ambiguous: str = "bold magenta"


class DisplayManager:
    """Status output on stderr; stdout is reserved for the payload."""

    def __init__(
        self,
        console: Console | None = None,
        styles: DisplayStyles | None = None,
        max_ambiguous_shown: int = 8,
    ):
        self.console = console or Console(stderr=True)
        self.styles = styles or DisplayStyles()
        self.max_ambiguous_shown = max_ambiguous_shown

    def print_resolution_errors(self, report: ResolutionReport) -> None:
        """Explain every unresolved input, then list what did resolve."""
        display_resolution_report(self.console, report, self.styles, self.max_ambiguous_shown)

    def print_no_files(self) -> None:
        self.console.print(
            f"[{self.styles.warning}]No files were found or resolved based on your input.[/{self.styles.warning}]"
        )

    def print_error(self, error: BaseException) -> None:
        s = self.styles
        self.console.print(f"[{s.error}]Error:[/{s.error}] {escape_markup(format_error_message(error))}")

    def print_operation_summary(
        self,
        contexts: Sequence[FileContext],
        line_count: int,
        clipboard_error: BaseException | None = None,
        copied: bool = True,
    ) -> None:
        """Report delivery status and preview the included files.

        Args:
            contexts: Files in the payload
            line_count: Lines in the assembled payload
            clipboard_error: Why the clipboard copy failed, if it did
            copied: False when the clipboard was skipped on purpose
        """
        s = self.styles
        summary = f"[{s.metadata}]{escape_markup(format_summary(len(contexts), line_count))}[/{s.metadata}]"
        check = f"[{s.success}]✅[/{s.success}]"

        if clipboard_error is not None:
            self.console.print(f"[{s.warning}]⚠️ Failed to copy to clipboard.[/{s.warning}]")
            reason = escape_markup(format_error_message(clipboard_error))
            self.console.print(f"    [{s.warning}]Error: {reason}[/{s.warning}]")
            self.console.print(
                f"    [{s.metadata}]Full context will be printed to stdout as a fallback.[/{s.metadata}]"
            )
        elif copied:
            self.console.print(f"{check} Context copied to clipboard ({summary})")
        else:
            self.console.print(f"{check} Context written to stdout ({summary})")

        self.console.print(f"[{s.metadata}]{'=' * 40}[/{s.metadata}]")
        self.console.print(f"[{s.filename}]Included files:[/{s.filename}]")

        if not contexts:
            self.console.print(f"  [{s.metadata}](No files to preview)[/{s.metadata}]")

        for i, ctx in enumerate(contexts, start=1):
            self.console.print()
            name = escape_markup(ctx.display_path)
            self.console.print(f"[{s.metadata}]{i}.[/{s.metadata}] [{s.filename}]{name}[/{s.filename}]")
            detail = f"{ctx.source_lines} lines"
            if ctx.is_skeleton and ctx.fallback_reason is None:
                detail += ", skeleton"
            elif ctx.fallback_reason is not None:
                detail += ", full content (skeleton unavailable)"
            self.console.print(f"    [{s.metadata}]📄 {escape_markup(detail)}[/{s.metadata}]")

        self.console.print()
        self.console.print(f"[{s.metadata}]{'=' * 40}[/{s.metadata}]")
        logger.debug(f"Summary printed for {len(contexts)} files")
