"""catalogfilter domain layer.

Pure domain logic with no external dependencies.
Only imports: typing, dataclasses, collections, pathlib
"""

from catalogfilter.domain.exceptions import (
    CatalogFilterError,
    CatalogLoadError,
    DuplicateEventError,
    EventValidationError,
    InvalidCallbackError,
)
from catalogfilter.domain.model import (
    Action,
    Event,
    EventCatalog,
    FilterState,
    FilterSummary,
    SetDiagramsVisible,
    SetSearchText,
    ToggleDomain,
    ToggleService,
    ViewState,
)

__all__ = [
    # Exceptions
    "CatalogFilterError",
    "CatalogLoadError",
    "DuplicateEventError",
    "EventValidationError",
    "InvalidCallbackError",
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
