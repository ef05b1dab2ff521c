"""Filter engine: FilterState → visible events.

Pure functions. No I/O, no state, no errors on well-formed input.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from catalogfilter.domain.model.summary import FilterSummary
from catalogfilter.infrastructure.filters import (
    all_of,
    include_domains,
    include_services,
    name_contains,
)

if TYPE_CHECKING:
    from collections.abc import Sequence

    from catalogfilter.domain.model.event import Event
    from catalogfilter.domain.model.filter_state import FilterState
    from catalogfilter.infrastructure.filters.types import Filter


def filter_passes(state: FilterState) -> tuple[Filter, ...]:
    """Narrowing passes for the constrained dimensions, in application order.

    Order: services, then domains, then search text.
    Unconstrained dimensions contribute no pass.
    """
    passes: list[Filter] = []
    if state.selected_services:
        passes.append(include_services(state.selected_services))
    if state.selected_domains:
        passes.append(include_domains(state.selected_domains))
    if state.search_text:
        passes.append(name_contains(state.search_text))
    return tuple(passes)


def build_filter(state: FilterState) -> Filter:
    """Single predicate equivalent to all passes (AND).

    Unconstrained state = always True.
    """
    return all_of(*filter_passes(state))


def compute_visible(events: Sequence[Event], state: FilterState) -> Sequence[Event]:
    """Compute the visible subset of events.

    Unconstrained state returns the input sequence itself.
    Otherwise each pass narrows the output of the previous one.
    Survivors keep their original relative order.

    Args:
        events: Full event collection (never mutated).
        state: Active filter constraints.

    Returns:
        Visible events.
    """
    if state.is_unconstrained:
        return events

    visible: Sequence[Event] = events
    for flt in filter_passes(state):
        visible = tuple(event for event in visible if flt(event))
    return visible


def summarize(events: Sequence[Event], visible: Sequence[Event], state: FilterState) -> FilterSummary:
    """Derived counts for the list heading.

    filters_applied ignores domain selection (see FilterState.filters_applied).
    """
    return FilterSummary(
        total=len(events),
        visible=len(visible),
        filters_applied=state.filters_applied,
    )
