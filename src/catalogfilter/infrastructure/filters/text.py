"""Text filters.

Case-insensitive substring match on event name.
Both sides lower-cased before comparison.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from catalogfilter.domain.model.event import Event
    from catalogfilter.infrastructure.filters.types import Filter


def name_contains(text: str) -> Filter:
    """Create filter that keeps events whose name contains text.

    Args:
        text: Substring to look for, any case. Empty string matches all.

    Returns:
        Filter that returns True when lower(text) is in lower(event.name).
    """
    needle = text.lower()

    def _filter(event: Event) -> bool:
        return needle in event.name.lower()

    return _filter
