"""Domain model: immutable value objects."""

from catalogfilter.domain.model.actions import (
    Action,
    SetDiagramsVisible,
    SetSearchText,
    ToggleDomain,
    ToggleService,
)
from catalogfilter.domain.model.catalog import EventCatalog
from catalogfilter.domain.model.event import Event
from catalogfilter.domain.model.filter_state import FilterState, ViewState
from catalogfilter.domain.model.summary import FilterSummary

__all__ = [
    # Entities
    "Event",
    "EventCatalog",
    # State
    "FilterState",
    "ViewState",
    "FilterSummary",
    # Actions
    "Action",
    "ToggleService",
    "ToggleDomain",
    "SetSearchText",
    "SetDiagramsVisible",
]
