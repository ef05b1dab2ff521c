"""Filter state value objects.

FilterState holds the three filter dimensions the engine reads.
ViewState adds the diagram flag, which never reaches the engine.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True, slots=True)
class FilterState:
    """Active filter constraints.

    Empty set or empty string = dimension imposes no constraint.
    OR within a dimension, AND across dimensions.

    Attributes:
        selected_services: Service ids to match against producers and consumers
        selected_domains: Domain labels to match against event domain
        search_text: Case-insensitive substring of event name
    """

    selected_services: frozenset[str] = field(default_factory=frozenset)
    selected_domains: frozenset[str] = field(default_factory=frozenset)
    search_text: str = ""

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not isinstance(self.selected_services, frozenset):
            raise TypeError(
                f"selected_services must be frozenset, got {type(self.selected_services).__name__}"
            )
        if not isinstance(self.selected_domains, frozenset):
            raise TypeError(
                f"selected_domains must be frozenset, got {type(self.selected_domains).__name__}"
            )
        if self.search_text is None:
            raise TypeError("search_text must not be None, use empty string")

    @property
    def is_unconstrained(self) -> bool:
        """True when no dimension narrows the event list."""
        return not self.selected_services and not self.selected_domains and not self.search_text

    @property
    def filters_applied(self) -> bool:
        """Whether the page labels the list as filtered.

        Domain selection alone does not count: only search text or a
        selected service flips this flag.
        """
        return bool(self.search_text) or bool(self.selected_services)


@dataclass(frozen=True, slots=True)
class ViewState:
    """Everything the catalog page shows besides the events themselves.

    Attributes:
        filters: Engine input
        show_diagrams: Render Mermaid diagrams next to events
    """

    filters: FilterState = field(default_factory=FilterState)
    show_diagrams: bool = False
