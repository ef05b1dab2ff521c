"""Catalog page configuration.

Immutable configuration object with FAIL-FIRST validation.
Every field has a default; callers override what they need.
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Mapping

# Quiescence window for the search box, seconds
DEFAULT_DEBOUNCE_SECONDS = 0.5


@dataclass(frozen=True, slots=True)
class CatalogConfig:
    """Catalog page configuration DTO.

    Attributes:
        title: Catalog title shown in the page header.
        debounce_seconds: Delay after the last keystroke before search applies.
        show_diagrams: Initial state of the diagram checkbox.
        console_width: Width used by the console reporter.
    """

    title: str = "EventCatalog"
    debounce_seconds: float = DEFAULT_DEBOUNCE_SECONDS
    show_diagrams: bool = False
    console_width: int = 120

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.title:
            raise ValueError("title must not be empty")
        if self.debounce_seconds < 0:
            raise ValueError(f"debounce_seconds must be >= 0, got {self.debounce_seconds}")
        if self.console_width < 40:
            raise ValueError(f"console_width must be >= 40, got {self.console_width}")

    @classmethod
    def from_mapping(cls, data: Mapping[str, object]) -> CatalogConfig:
        """Build config from a plain mapping (e.g. a [tool.catalogfilter] table).

        Dashes in keys are accepted as underscores.

        Raises:
            ValueError: If mapping contains unknown keys.
        """
        known = {f.name for f in fields(cls)}
        normalized = {key.replace("-", "_"): value for key, value in data.items()}
        unknown = sorted(set(normalized) - known)
        if unknown:
            raise ValueError(f"unknown config keys: {', '.join(unknown)}")
        return cls(**normalized)  # type: ignore[arg-type]
