"""Service filters.

Match events by the services that produce or consume them.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable

    from catalogfilter.domain.model.event import Event
    from catalogfilter.infrastructure.filters.types import Filter


def include_services(services: Iterable[str]) -> Filter:
    """Create filter that keeps events touching any of the services.

    An event matches if at least one producer OR at least one consumer
    is in the given set. Role lists that are None count as empty.

    Args:
        services: Service ids to match.

    Returns:
        Filter that returns True for events produced or consumed by any service.
        Empty services = always False.
    """
    service_set = frozenset(services)

    def _filter(event: Event) -> bool:
        consumers = event.consumer_names or ()
        producers = event.producer_names or ()
        return any(c in service_set for c in consumers) or any(p in service_set for p in producers)

    return _filter


def produced_by(services: Iterable[str]) -> Filter:
    """Create filter that keeps events emitted by any of the services."""
    service_set = frozenset(services)

    def _filter(event: Event) -> bool:
        return any(p in service_set for p in event.producer_names or ())

    return _filter


def consumed_by(services: Iterable[str]) -> Filter:
    """Create filter that keeps events received by any of the services."""
    service_set = frozenset(services)

    def _filter(event: Event) -> bool:
        return any(c in service_set for c in event.consumer_names or ())

    return _filter
