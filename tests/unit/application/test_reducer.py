"""Tests for pure reducers."""

from catalogfilter.application.reducer import reduce, reduce_view
from catalogfilter.domain.model.actions import (
    SetDiagramsVisible,
    SetSearchText,
    ToggleDomain,
    ToggleService,
)
from catalogfilter.domain.model.filter_state import FilterState, ViewState
from tests.factories import make_state


class TestReduceServices:
    """ToggleService adds on check, removes on uncheck."""

    def test_check_adds(self) -> None:
        state = reduce(FilterState(), ToggleService("A", checked=True))
        assert state.selected_services == frozenset({"A"})

    def test_uncheck_removes(self) -> None:
        state = reduce(make_state(services=["A", "B"]), ToggleService("A", checked=False))
        assert state.selected_services == frozenset({"B"})

    def test_round_trip(self) -> None:
        """Check then uncheck restores prior contents."""
        before = make_state(services=["B"], search="x")
        after = reduce(reduce(before, ToggleService("A", checked=True)), ToggleService("A", checked=False))
        assert after == before

    def test_check_present_is_noop(self) -> None:
        """Returns the same object when nothing changes."""
        state = make_state(services=["A"])
        assert reduce(state, ToggleService("A", checked=True)) is state

    def test_uncheck_absent_is_noop(self) -> None:
        state = FilterState()
        assert reduce(state, ToggleService("A", checked=False)) is state

    def test_input_untouched(self) -> None:
        state = FilterState()
        reduce(state, ToggleService("A", checked=True))
        assert state.selected_services == frozenset()


class TestReduceDomains:
    def test_check_adds(self) -> None:
        state = reduce(FilterState(), ToggleDomain("Orders", checked=True))
        assert state.selected_domains == frozenset({"Orders"})

    def test_round_trip(self) -> None:
        before = make_state(domains=["Shipping"])
        after = reduce(reduce(before, ToggleDomain("Orders", checked=True)), ToggleDomain("Orders", checked=False))
        assert after == before

    def test_does_not_touch_services(self) -> None:
        state = reduce(make_state(services=["Orders"]), ToggleDomain("Orders", checked=True))
        assert state.selected_services == frozenset({"Orders"})
        assert state.selected_domains == frozenset({"Orders"})


class TestReduceSearch:
    def test_replaces_wholesale(self) -> None:
        state = reduce(make_state(search="ord"), SetSearchText("ship"))
        assert state.search_text == "ship"

    def test_clear(self) -> None:
        state = reduce(make_state(search="ord"), SetSearchText(""))
        assert state.is_unconstrained is True

    def test_same_text_noop(self) -> None:
        state = make_state(search="ord")
        assert reduce(state, SetSearchText("ord")) is state


class TestReduceDiagrams:
    def test_filter_state_unchanged(self) -> None:
        """Diagram flag is not a filter."""
        state = make_state(services=["A"])
        assert reduce(state, SetDiagramsVisible(visible=True)) is state


class TestReduceView:
    def test_diagrams_flag(self) -> None:
        view = reduce_view(ViewState(), SetDiagramsVisible(visible=True))
        assert view.show_diagrams is True
        assert view.filters == FilterState()

    def test_diagrams_same_value_noop(self) -> None:
        view = ViewState()
        assert reduce_view(view, SetDiagramsVisible(visible=False)) is view

    def test_filter_action_routed(self) -> None:
        view = reduce_view(ViewState(show_diagrams=True), ToggleService("A", checked=True))
        assert view.filters.selected_services == frozenset({"A"})
        assert view.show_diagrams is True

    def test_filter_noop_returns_same_view(self) -> None:
        view = ViewState()
        assert reduce_view(view, ToggleDomain("X", checked=False)) is view
