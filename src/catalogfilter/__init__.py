"""catalogfilter - filter engine for event catalog pages."""

__version__ = "0.1.0"

from catalogfilter.application.engine import build_filter, compute_visible, summarize
from catalogfilter.application.loader import build_catalog, load_catalog
from catalogfilter.application.page import CatalogPage
from catalogfilter.application.reducer import reduce, reduce_view
from catalogfilter.config import CatalogConfig
from catalogfilter.domain.model import (
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
    "CatalogConfig",
    "CatalogPage",
    "Event",
    "EventCatalog",
    "FilterState",
    "FilterSummary",
    "SetDiagramsVisible",
    "SetSearchText",
    "ToggleDomain",
    "ToggleService",
    "ViewState",
    "__version__",
    "build_catalog",
    "build_filter",
    "compute_visible",
    "load_catalog",
    "reduce",
    "reduce_view",
    "summarize",
]
