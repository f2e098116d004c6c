"""Terminal reports for urlspell.

This module provides the ReportTUI class, a Rich-based display of scanner
candidates and fixup outcomes used by the command-line interface.

Example:
    from urlspell.ui import ReportTUI

    tui = ReportTUI()
    tui.display_scan_result("/srv/www/doc", "indx.html", result)
    tui.display_fixup_result(request, fixup_result)
"""

from typing import Optional, Sequence

from rapidfuzz import fuzz
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from urlspell.matching import ascii_lower
from urlspell.models import (
    Candidate,
    FixupResult,
    FixupStatus,
    RequestContext,
    ScanResult,
    Similarity,
)


class ReportTUI:
    """Rich-based display of spelling-correction results.

    Args:
        console: Optional Rich Console instance for output. If None, creates
            a new Console. Pass a custom Console for testing (e.g., with
            StringIO file for output capture).

    Attributes:
        console: The Rich Console instance used for all output.
    """

    _STATUS_STYLES = {
        FixupStatus.DECLINED: "dim",
        FixupStatus.OK: "yellow",
        FixupStatus.MOVED_PERMANENTLY: "green",
        FixupStatus.MULTIPLE_CHOICES: "magenta",
    }

    def __init__(self, console: Optional[Console] = None) -> None:
        self.console = console or Console()

    def display_scan_result(
        self, directory: str, requested: str, result: Optional[ScanResult]
    ) -> None:
        """Display the candidates found for a name in a directory.

        Args:
            directory: The directory that was scanned.
            requested: The name the candidates were graded against.
            result: The scan result, or None if the directory could not be read.
        """
        header_text = f"Directory: {escape(directory)}\nRequested name: {escape(requested)}"
        self.console.print(Panel(header_text, title="Scan", border_style="blue"))

        if result is None:
            self.console.print("[red]Directory could not be opened.[/red]")
            return

        if result.exact_sibling:
            self.console.print(
                "[yellow]An entry with exactly this name exists; "
                "no correction would be made.[/yellow]"
            )
            return

        if not result.candidates:
            self.console.print("[yellow]No candidates found.[/yellow]")
            return

        self.console.print(
            self._candidate_table(result.candidates, title="Candidates", requested=requested)
        )

    def display_fixup_result(self, request: RequestContext, result: FixupResult) -> None:
        """Display what the fixup decided for a request.

        Args:
            request: The request the fixup ran on.
            result: The fixup outcome.
        """
        style = self._STATUS_STYLES[result.status]
        http_status = result.status.http_status
        status_text = result.status.value.replace("_", " ").upper()
        if http_status is not None:
            status_text = f"{http_status} {status_text}"

        header_text = (
            f"URI: {escape(request.uri)}\n"
            f"Filename: {escape(request.filename)}\n"
            f"Path info: {escape(request.path_info) or '-'}\n"
            f"Outcome: [{style}]{status_text}[/{style}]"
        )
        self.console.print(Panel(header_text, title="Spelling Fixup", border_style="blue"))

        if result.status is FixupStatus.MOVED_PERMANENTLY:
            self.console.print(f"Location: [green]{escape(result.location)}[/green]")
        elif result.status is FixupStatus.MULTIPLE_CHOICES:
            self.console.print(self._candidate_table(result.candidates, title="Available documents"))
        elif result.status is FixupStatus.OK:
            self.console.print("[dim]No correction; the request continues unchanged.[/dim]")
        else:
            self.console.print("[dim]Not a candidate for spelling correction.[/dim]")

    def _candidate_table(
        self,
        candidates: Sequence[Candidate],
        title: str,
        requested: Optional[str] = None,
    ) -> Table:
        """Build a table of candidates with their similarity.

        When ``requested`` is given, a RapidFuzz ratio of each name against it
        (ignoring ASCII case) is shown as a rough closeness score.
        """
        table = Table(title=title)
        table.add_column("#", justify="right", style="cyan", no_wrap=True)
        table.add_column("Name", style="white")
        table.add_column("Similarity", style="magenta")
        if requested is not None:
            table.add_column("Score", justify="right")

        for idx, candidate in enumerate(candidates, start=1):
            phrase = candidate.similarity.phrase
            if candidate.similarity is Similarity.VERY_DIFFERENT:
                phrase = f"[dim]{phrase}[/dim]"
            row = [str(idx), escape(candidate.name), phrase]
            if requested is not None:
                score = fuzz.ratio(ascii_lower(requested), ascii_lower(candidate.name))
                row.append(f"{score:.0f}%")
            table.add_row(*row)

        return table
