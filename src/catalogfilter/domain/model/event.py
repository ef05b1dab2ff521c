"""Catalog event value object."""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Event:
    """Documented message type exchanged between services.

    Attributes:
        name: Event name, unique within a catalog (must not be empty)
        domain: Domain label (one per event, empty = no domain)
        producer_names: Services that emit this event
        consumer_names: Services that receive this event
        version: Display version, None if undocumented
        summary: One-line description, None if undocumented
    """

    name: str
    domain: str = ""
    producer_names: tuple[str, ...] = ()
    consumer_names: tuple[str, ...] = ()
    version: str | None = None
    summary: str | None = None

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.name:
            raise ValueError("event name must not be empty")
        if self.domain is None:
            raise TypeError("domain must not be None, use empty string")
        if not isinstance(self.producer_names, tuple):
            raise TypeError(f"producer_names must be tuple, got {type(self.producer_names).__name__}")
        if not isinstance(self.consumer_names, tuple):
            raise TypeError(f"consumer_names must be tuple, got {type(self.consumer_names).__name__}")

    @property
    def services(self) -> frozenset[str]:
        """All services touching this event, producers and consumers."""
        return frozenset(self.producer_names) | frozenset(self.consumer_names)

    def __str__(self) -> str:
        """Format as name@version when a version is known."""
        if self.version:
            return f"{self.name}@{self.version}"
        return self.name
