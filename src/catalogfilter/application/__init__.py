"""Application layer: engine, reducers, debounce, loading, page controller."""

from catalogfilter.application.debounce import Debouncer, Scheduler, ThreadingScheduler
from catalogfilter.application.engine import build_filter, compute_visible, summarize
from catalogfilter.application.loader import build_catalog, load_catalog, load_events
from catalogfilter.application.page import CatalogPage, FilterOption, FilterSection
from catalogfilter.application.reducer import reduce, reduce_view

__all__ = [
    "CatalogPage",
    "Debouncer",
    "FilterOption",
    "FilterSection",
    "Scheduler",
    "ThreadingScheduler",
    "build_catalog",
    "build_filter",
    "compute_visible",
    "load_catalog",
    "load_events",
    "reduce",
    "reduce_view",
    "summarize",
]
