"""Domain filters.

Match events by their single domain label.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable

    from catalogfilter.domain.model.event import Event
    from catalogfilter.infrastructure.filters.types import Filter


def include_domains(domains: Iterable[str]) -> Filter:
    """Create filter that keeps events whose domain is in the set.

    Args:
        domains: Domain labels to match (exact, case-sensitive).

    Returns:
        Filter that returns True for events in any listed domain.
        Empty domains = always False.
    """
    domain_set = frozenset(domains)

    def _filter(event: Event) -> bool:
        return event.domain in domain_set

    return _filter
