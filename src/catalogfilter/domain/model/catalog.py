"""Event catalog aggregate."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from typing import TYPE_CHECKING

from catalogfilter.domain.exceptions import DuplicateEventError

if TYPE_CHECKING:
    from catalogfilter.domain.model.event import Event


@dataclass(frozen=True, slots=True)
class EventCatalog:
    """Loaded catalog: all events plus the option lists for the filter sidebar.

    Created once by the loader, never mutated.

    Attributes:
        events: Every documented event, in source order
        services: Distinct producer/consumer ids, first-seen order
        domains: Distinct domain labels, first-seen order
    """

    events: tuple[Event, ...]
    services: tuple[str, ...]
    domains: tuple[str, ...]

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        counts = Counter(event.name for event in self.events)
        duplicates = sorted(name for name, n in counts.items() if n > 1)
        if duplicates:
            raise DuplicateEventError(duplicates[0])
        if len(set(self.services)) != len(self.services):
            raise ValueError("services must be distinct")
        if len(set(self.domains)) != len(self.domains):
            raise ValueError("domains must be distinct")

    def __len__(self) -> int:
        """Total number of events."""
        return len(self.events)

    def get(self, name: str) -> Event | None:
        """Look up event by name."""
        for event in self.events:
            if event.name == name:
                return event
        return None
