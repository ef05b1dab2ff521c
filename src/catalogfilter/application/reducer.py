"""Pure reducers: (state, action) → state.

Exhaustive match on the Action union.
"""

from __future__ import annotations

from dataclasses import replace
from typing import TYPE_CHECKING

from catalogfilter.domain.model.actions import (
    SetDiagramsVisible,
    SetSearchText,
    ToggleDomain,
    ToggleService,
)

if TYPE_CHECKING:
    from catalogfilter.domain.model.actions import Action
    from catalogfilter.domain.model.filter_state import FilterState, ViewState


def _toggle(values: frozenset[str], value: str, *, checked: bool) -> frozenset[str]:
    if checked:
        return values | {value}
    return values - {value}


def reduce(state: FilterState, action: Action) -> FilterState:
    """Apply action to filter state.

    SetDiagramsVisible is not a filter change: state returned unchanged.
    Returns the same object when the action changes nothing.
    """
    match action:
        case ToggleService(value=value, checked=checked):
            services = _toggle(state.selected_services, value, checked=checked)
            if services == state.selected_services:
                return state
            return replace(state, selected_services=services)
        case ToggleDomain(value=value, checked=checked):
            domains = _toggle(state.selected_domains, value, checked=checked)
            if domains == state.selected_domains:
                return state
            return replace(state, selected_domains=domains)
        case SetSearchText(value=value):
            if value == state.search_text:
                return state
            return replace(state, search_text=value)
        case SetDiagramsVisible():
            return state


def reduce_view(view: ViewState, action: Action) -> ViewState:
    """Apply action to the whole page view.

    Filter actions go through reduce(); SetDiagramsVisible sets the flag.
    """
    match action:
        case SetDiagramsVisible(visible=visible):
            if visible == view.show_diagrams:
                return view
            return replace(view, show_diagrams=visible)
        case _:
            filters = reduce(view.filters, action)
            if filters is view.filters:
                return view
            return replace(view, filters=filters)
