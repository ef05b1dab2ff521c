"""User actions that change the catalog page state.

Action is a closed union; reducers match on it exhaustively.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class ToggleService:
    """Service checkbox changed."""

    value: str
    checked: bool


@dataclass(frozen=True, slots=True)
class ToggleDomain:
    """Domain checkbox changed."""

    value: str
    checked: bool


@dataclass(frozen=True, slots=True)
class SetSearchText:
    """Search box settled on a new value."""

    value: str

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.value is None:
            raise TypeError("search value must not be None, use empty string")


@dataclass(frozen=True, slots=True)
class SetDiagramsVisible:
    """Diagram checkbox changed."""

    visible: bool


type Action = ToggleService | ToggleDomain | SetSearchText | SetDiagramsVisible
