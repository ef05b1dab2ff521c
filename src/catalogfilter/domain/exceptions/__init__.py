"""Domain exceptions."""

from catalogfilter.domain.exceptions.base import CatalogFilterError
from catalogfilter.domain.exceptions.loading import CatalogLoadError
from catalogfilter.domain.exceptions.validation import (
    DuplicateEventError,
    EventValidationError,
    InvalidCallbackError,
)

__all__ = [
    "CatalogFilterError",
    "CatalogLoadError",
    "DuplicateEventError",
    "EventValidationError",
    "InvalidCallbackError",
]
