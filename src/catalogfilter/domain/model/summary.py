"""Derived counts shown above the event list."""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class FilterSummary:
    """Counts for one recomputation.

    Attributes:
        total: Events in the catalog (must be >= 0)
        visible: Events surviving the filters (0 <= visible <= total)
        filters_applied: True if search text or a service is selected
    """

    total: int
    visible: int
    filters_applied: bool

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.total < 0:
            raise ValueError(f"total must be >= 0, got {self.total}")
        if not 0 <= self.visible <= self.total:
            raise ValueError(f"visible must be in 0..{self.total}, got {self.visible}")

    @property
    def is_empty(self) -> bool:
        """No events visible. A normal state, not an error."""
        return self.visible == 0

    @property
    def heading(self) -> str:
        """List heading: filtered ratio or plain total."""
        if self.filters_applied:
            return f"Filtered Events ({self.visible}/{self.total})"
        return f"All Events ({self.total})"
