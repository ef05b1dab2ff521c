"""Tests for Action variants."""

import pytest

from catalogfilter.domain.model.actions import (
    SetDiagramsVisible,
    SetSearchText,
    ToggleDomain,
    ToggleService,
)


class TestActions:
    """Actions are frozen value objects."""

    def test_toggle_service_fields(self) -> None:
        action = ToggleService("OrderService", checked=True)
        assert action.value == "OrderService"
        assert action.checked is True

    def test_toggle_domain_equality(self) -> None:
        """Same fields = equal actions."""
        assert ToggleDomain("Orders", checked=False) == ToggleDomain("Orders", checked=False)

    def test_variants_not_equal(self) -> None:
        """Different variants never compare equal."""
        assert ToggleService("X", checked=True) != ToggleDomain("X", checked=True)

    def test_search_none_raises(self) -> None:
        with pytest.raises(TypeError, match="must not be None"):
            SetSearchText(None)  # type: ignore[arg-type]

    def test_frozen(self) -> None:
        action = SetDiagramsVisible(visible=True)
        with pytest.raises(AttributeError):
            action.visible = False  # type: ignore[misc]
