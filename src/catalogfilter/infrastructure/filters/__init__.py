"""Infrastructure layer: stateless filter functions.

Filters are pure functions: Filter = Callable[[Event], bool]
True = include event, False = exclude event.

Usage:
    from catalogfilter.infrastructure.filters import all_of, include_services, name_contains

    # Single filter
    flt = include_services({"OrderService"})
    visible = [e for e in events if flt(e)]

    # Composed filters
    flt = all_of(include_services({"OrderService"}), name_contains("created"))
"""

from catalogfilter.infrastructure.filters.composite import all_of, any_of, negate
from catalogfilter.infrastructure.filters.domain import include_domains
from catalogfilter.infrastructure.filters.service import (
    consumed_by,
    include_services,
    produced_by,
)
from catalogfilter.infrastructure.filters.text import name_contains
from catalogfilter.infrastructure.filters.types import Filter

__all__ = [
    "Filter",
    "all_of",
    "any_of",
    "consumed_by",
    "include_domains",
    "include_services",
    "name_contains",
    "negate",
    "produced_by",
]
