"""Catalog page controller.

Owns the ViewState, relays user actions through the reducer and
recomputes the VisibleSet whenever the FilterState changes:

  checkbox ──────────────► dispatch(action) ─► reduce_view ─► compute_visible
  keystroke ─► Debouncer ─► dispatch(SetSearchText)               │
                                                                  ▼
                                                        subscribers(page)

Diagram toggles update the view but never trigger recomputation.
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from typing import TYPE_CHECKING

from catalogfilter.application.debounce import Debouncer
from catalogfilter.application.engine import compute_visible, summarize
from catalogfilter.application.reducer import reduce_view
from catalogfilter.config import CatalogConfig
from catalogfilter.domain.exceptions import InvalidCallbackError
from catalogfilter.domain.model.actions import SetSearchText
from catalogfilter.domain.model.filter_state import ViewState

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence

    from catalogfilter.application.debounce import Scheduler
    from catalogfilter.domain.model.actions import Action
    from catalogfilter.domain.model.catalog import EventCatalog
    from catalogfilter.domain.model.event import Event
    from catalogfilter.domain.model.summary import FilterSummary

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class FilterOption:
    """One checkbox in a sidebar section."""

    value: str
    checked: bool


@dataclass(frozen=True, slots=True)
class FilterSection:
    """Sidebar checkbox group.

    Attributes:
        id: "domains" or "services"
        title: Header with option count, e.g. "Filter by Domains (3)"
        options: Checkboxes in catalog order
    """

    id: str
    title: str
    options: tuple[FilterOption, ...]


class CatalogPage:
    """Stateful page facade over the pure engine and reducer.

    Single writer: every state change goes through dispatch().
    _lock serializes dispatch() and listener registration against
    debounced calls arriving from a timer thread.
    """

    def __init__(
        self,
        catalog: EventCatalog,
        config: CatalogConfig | None = None,
        scheduler: Scheduler | None = None,
    ) -> None:
        """Initialize page with empty filters.

        Args:
            catalog: Loaded catalog (never mutated).
            config: Page configuration. Uses defaults if None.
            scheduler: Timing source for search debounce. Threads if None.
        """
        self._catalog = catalog
        self._config = config or CatalogConfig()
        self._lock = threading.RLock()
        self._view = ViewState(show_diagrams=self._config.show_diagrams)
        self._visible: Sequence[Event] = compute_visible(catalog.events, self._view.filters)
        self._listeners: list[Callable[[CatalogPage], None]] = []
        self._search = Debouncer(self._apply_search, self._config.debounce_seconds, scheduler)

    @property
    def catalog(self) -> EventCatalog:
        """Loaded catalog."""
        return self._catalog

    @property
    def config(self) -> CatalogConfig:
        """Page configuration."""
        return self._config

    @property
    def view(self) -> ViewState:
        """Current view state."""
        with self._lock:
            return self._view

    @property
    def visible(self) -> Sequence[Event]:
        """Current VisibleSet."""
        with self._lock:
            return self._visible

    @property
    def summary(self) -> FilterSummary:
        """Counts for the list heading."""
        with self._lock:
            return summarize(self._catalog.events, self._visible, self._view.filters)

    @property
    def search_pending(self) -> bool:
        """Check if a keystroke is waiting for the debounce window."""
        return self._search.pending

    def subscribe(self, listener: Callable[[CatalogPage], None]) -> Callable[[], None]:
        """Register listener called after every state change.

        Returns:
            Function that removes the listener.

        Raises:
            InvalidCallbackError: If listener is not callable.
        """
        if not callable(listener):
            raise InvalidCallbackError(type(listener))
        with self._lock:
            self._listeners.append(listener)

        def _unsubscribe() -> None:
            with self._lock:
                if listener in self._listeners:
                    self._listeners.remove(listener)

        return _unsubscribe

    def dispatch(self, action: Action) -> ViewState:
        """Apply action and recompute visible events if filters changed.

        Returns:
            New view state.
        """
        with self._lock:
            previous = self._view
            view = reduce_view(previous, action)
            if view is previous:
                return view
            self._view = view
            if view.filters != previous.filters:
                self._visible = compute_visible(self._catalog.events, view.filters)
                logger.debug(
                    "recomputed visible events: %d/%d after %s",
                    len(self._visible),
                    len(self._catalog.events),
                    type(action).__name__,
                )
        self._notify()
        return view

    def type_search(self, text: str) -> None:
        """Record a keystroke. Applies after the debounce window settles."""
        self._search(text)

    def _apply_search(self, text: str) -> None:
        self.dispatch(SetSearchText(text))

    def flush(self) -> bool:
        """Apply pending search text now.

        Returns:
            True if a pending search was applied.
        """
        return self._search.flush()

    def close(self) -> None:
        """Drop pending search text. Page stays usable."""
        self._search.cancel()

    def filter_sections(self) -> tuple[FilterSection, ...]:
        """Sidebar sections: domains then services. Empty sections omitted."""
        filters = self.view.filters
        sections = (
            FilterSection(
                id="domains",
                title=f"Filter by Domains ({len(self._catalog.domains)})",
                options=tuple(
                    FilterOption(value=d, checked=d in filters.selected_domains)
                    for d in self._catalog.domains
                ),
            ),
            FilterSection(
                id="services",
                title=f"Filter by Services ({len(self._catalog.services)})",
                options=tuple(
                    FilterOption(value=s, checked=s in filters.selected_services)
                    for s in self._catalog.services
                ),
            ),
        )
        return tuple(section for section in sections if section.options)

    def heading(self) -> str:
        """List heading, e.g. "Filtered Events (1/2)" or "All Events (2)"."""
        return self.summary.heading

    def _notify(self) -> None:
        # Listeners run outside the lock on a snapshot; they may (un)subscribe.
        with self._lock:
            listeners = tuple(self._listeners)
        for listener in listeners:
            listener(self)
