"""Console reporter: CatalogPage → rich formatted string."""

from __future__ import annotations

from io import StringIO
from typing import TYPE_CHECKING

from rich.console import Console
from rich.markup import escape
from rich.syntax import Syntax
from rich.table import Table

from catalogfilter.application.diagrams import build_mermaid
from catalogfilter.application.reporters._base import BaseReporter

if TYPE_CHECKING:
    from collections.abc import Sequence

    from catalogfilter.application.page import CatalogPage
    from catalogfilter.domain.model.event import Event
    from catalogfilter.domain.model.filter_state import FilterState

NO_RESULTS = "No events found."


def _join(values: Sequence[str]) -> str:
    """Comma-join catalog strings with rich markup escaped."""
    return ", ".join(escape(v) for v in values)


class ConsoleReporter(BaseReporter):
    """Console reporter: outputs rich formatted text.

    Sections: page header, active filters, list heading, events table,
    optional Mermaid diagrams, neutral empty-result line.
    """

    def __init__(self, *, width: int | None = None, color: bool = True) -> None:
        """Initialize reporter.

        Args:
            width: Console width. Page config width if None.
            color: Emit ANSI styles.
        """
        self._width = width
        self._color = color

    def report(self, page: CatalogPage) -> str:
        """Format page as rich formatted string."""
        output = StringIO()
        console = Console(
            file=output,
            force_terminal=self._color,
            color_system="standard" if self._color else None,
            width=self._width or page.config.console_width,
        )

        view = page.view
        visible = page.visible

        self._render_header(console, page)
        self._render_filters(console, view.filters)
        console.print(f"[bold]{page.heading()}[/bold]")
        console.print()

        if not visible:
            console.print(f"[dim]{NO_RESULTS}[/dim]")
            return output.getvalue()

        self._render_events(console, visible)
        if view.show_diagrams:
            self._render_diagrams(console, visible)

        return output.getvalue()

    def _render_header(self, console: Console, page: CatalogPage) -> None:
        console.print()
        console.rule(f"[bold]{escape(page.config.title)} - All Events[/bold]")
        console.print()
        console.print(f"[bold]Events ({len(page.catalog.events)})[/bold]")
        console.print()

    def _render_filters(self, console: Console, filters: FilterState) -> None:
        """Render active constraints, one line per constrained dimension."""
        if filters.is_unconstrained:
            return
        if filters.search_text:
            console.print(f"  search:   {escape(repr(filters.search_text))}")
        if filters.selected_services:
            console.print(f"  services: {_join(sorted(filters.selected_services))}")
        if filters.selected_domains:
            console.print(f"  domains:  {_join(sorted(filters.selected_domains))}")
        console.print()

    def _render_events(self, console: Console, events: Sequence[Event]) -> None:
        table = Table(show_header=True, header_style="bold")
        table.add_column("Name", style="cyan")
        table.add_column("Version")
        table.add_column("Domain", style="yellow")
        table.add_column("Producers")
        table.add_column("Consumers")

        for event in events:
            table.add_row(
                escape(event.name),
                escape(event.version or "-"),
                escape(event.domain or "-"),
                _join(event.producer_names) or "-",
                _join(event.consumer_names) or "-",
            )

        console.print(table)
        console.print()

    def _render_diagrams(self, console: Console, events: Sequence[Event]) -> None:
        console.print("[bold]DIAGRAMS[/bold]")
        console.print()
        for event in events:
            console.print(f"[cyan]{escape(event.name)}[/cyan]")
            console.print(Syntax(build_mermaid(event), "text", theme="ansi_dark"))
            console.print()
