"""Tests for the filter engine.

Tests:
- compute_visible: identity, each dimension, conjunction, ordering
- build_filter: combined predicate
- summarize: derived counts and filters_applied asymmetry
"""

from catalogfilter.application.engine import build_filter, compute_visible, filter_passes, summarize
from catalogfilter.domain.model.filter_state import FilterState
from tests.factories import make_event, make_state, order_events, shop_events


def names(events: object) -> list[str]:
    return [e.name for e in events]  # type: ignore[attr-defined]


class TestIdentity:
    """Unconstrained state returns input unchanged."""

    def test_returns_same_object(self) -> None:
        events = shop_events()
        assert compute_visible(events, FilterState()) is events

    def test_list_input_returned_as_is(self) -> None:
        events = list(shop_events())
        assert compute_visible(events, FilterState()) is events

    def test_empty_input(self) -> None:
        assert compute_visible((), FilterState()) == ()


class TestOrderScenario:
    """OrderCreated / OrderShipped example."""

    def test_billing_service(self) -> None:
        """BillingService consumes only OrderCreated."""
        result = compute_visible(order_events(), make_state(services=["BillingService"]))
        assert names(result) == ["OrderCreated"]

    def test_search_ship(self) -> None:
        """'ship' matches OrderShipped case-insensitively."""
        result = compute_visible(order_events(), make_state(search="ship"))
        assert names(result) == ["OrderShipped"]

    def test_both_no_overlap(self) -> None:
        """Service and search with no overlap yield empty, not an error."""
        result = compute_visible(order_events(), make_state(services=["BillingService"], search="ship"))
        assert list(result) == []


class TestServiceDimension:
    def test_producer_or_consumer(self) -> None:
        """OrderService produces two and consumes two events."""
        result = compute_visible(shop_events(), make_state(services=["OrderService"]))
        assert names(result) == ["OrderCreated", "OrderCancelled", "PaymentProcessed", "InventoryReserved"]

    def test_multiple_services_or(self) -> None:
        result = compute_visible(shop_events(), make_state(services=["ShippingService", "AccountService"]))
        assert names(result) == ["ShipmentDispatched", "UserSignedUp"]

    def test_unknown_service(self) -> None:
        result = compute_visible(shop_events(), make_state(services=["Nobody"]))
        assert list(result) == []


class TestDomainDimension:
    def test_single_domain(self) -> None:
        result = compute_visible(shop_events(), make_state(domains=["Orders"]))
        assert names(result) == ["OrderCreated", "OrderCancelled", "InventoryReserved"]

    def test_multiple_domains_or(self) -> None:
        result = compute_visible(shop_events(), make_state(domains=["Payments", "Shipping"]))
        assert names(result) == ["PaymentProcessed", "ShipmentDispatched"]


class TestConjunction:
    """Dimensions narrow each other (AND)."""

    def test_service_and_domain(self) -> None:
        state = make_state(services=["BillingService"], domains=["Orders"])
        result = compute_visible(shop_events(), state)
        assert names(result) == ["OrderCreated", "OrderCancelled"]

    def test_all_three(self) -> None:
        state = make_state(services=["BillingService"], domains=["Orders"], search="CANCEL")
        result = compute_visible(shop_events(), state)
        assert names(result) == ["OrderCancelled"]

    def test_order_preserved(self) -> None:
        """Survivors keep original relative order."""
        events = (
            make_event("Zeta", "D"),
            make_event("Alpha", "D"),
            make_event("Mid", "Other"),
            make_event("Beta", "D"),
        )
        result = compute_visible(events, make_state(domains=["D"]))
        assert names(result) == ["Zeta", "Alpha", "Beta"]

    def test_input_not_mutated(self) -> None:
        events = list(shop_events())
        snapshot = list(events)
        compute_visible(events, make_state(domains=["Orders"]))
        assert events == snapshot


class TestBuildFilter:
    def test_pass_order(self) -> None:
        """Passes built for constrained dimensions only."""
        assert len(filter_passes(FilterState())) == 0
        assert len(filter_passes(make_state(services=["A"], search="x"))) == 2
        assert len(filter_passes(make_state(services=["A"], domains=["B"], search="x"))) == 3

    def test_matches_compute_visible(self) -> None:
        state = make_state(services=["OrderService"], domains=["Orders"])
        flt = build_filter(state)
        assert [e for e in shop_events() if flt(e)] == list(compute_visible(shop_events(), state))

    def test_unconstrained_accepts_all(self) -> None:
        flt = build_filter(FilterState())
        assert all(flt(e) for e in shop_events())


class TestSummarize:
    def test_counts(self) -> None:
        events = shop_events()
        state = make_state(search="order")
        visible = compute_visible(events, state)
        summary = summarize(events, visible, state)
        assert summary.total == 6
        assert summary.visible == 2
        assert summary.filters_applied is True

    def test_domain_only_not_applied(self) -> None:
        """Domain selection narrows the list but the flag stays False."""
        events = shop_events()
        state = make_state(domains=["Payments"])
        summary = summarize(events, compute_visible(events, state), state)
        assert summary.visible == 1
        assert summary.filters_applied is False

    def test_service_applied(self) -> None:
        events = shop_events()
        state = make_state(services=["AccountService"])
        summary = summarize(events, compute_visible(events, state), state)
        assert summary.filters_applied is True
