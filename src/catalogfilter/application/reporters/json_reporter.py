"""JSON reporter for machine-readable output.

Stdlib-only reporter for JSON output.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

from catalogfilter.application.diagrams import build_mermaid
from catalogfilter.application.reporters._base import BaseReporter

if TYPE_CHECKING:
    from catalogfilter.application.page import CatalogPage
    from catalogfilter.domain.model.event import Event


class JSONReporter(BaseReporter):
    """JSON reporter: summary, active filters and visible events."""

    def __init__(self, *, indent: int | None = 2) -> None:
        """Initialize reporter.

        Args:
            indent: JSON indentation (default: 2, None for compact)
        """
        self._indent = indent

    def report(self, page: CatalogPage) -> str:
        """Format page as JSON text."""
        return json.dumps(self._page_to_dict(page), indent=self._indent)

    def _page_to_dict(self, page: CatalogPage) -> dict[str, object]:
        view = page.view
        summary = page.summary
        return {
            "summary": {
                "total": summary.total,
                "visible": summary.visible,
                "filters_applied": summary.filters_applied,
                "heading": summary.heading,
            },
            "filters": {
                "services": sorted(view.filters.selected_services),
                "domains": sorted(view.filters.selected_domains),
                "search": view.filters.search_text,
            },
            "events": [self._event_to_dict(e, diagrams=view.show_diagrams) for e in page.visible],
        }

    def _event_to_dict(self, event: Event, *, diagrams: bool) -> dict[str, object]:
        data: dict[str, object] = {
            "name": event.name,
            "version": event.version,
            "summary": event.summary,
            "domain": event.domain,
            "producerNames": list(event.producer_names),
            "consumerNames": list(event.consumer_names),
        }
        if diagrams:
            data["mermaid"] = build_mermaid(event)
        return data
