"""Tests for service filters.

Tests:
- include_services: producer OR consumer membership
- produced_by / consumed_by: single-role membership
"""

from catalogfilter.infrastructure.filters.service import consumed_by, include_services, produced_by
from tests.factories import make_event


class TestIncludeServices:
    """Tests for include_services filter."""

    def test_matches_producer(self) -> None:
        """Event produced by a selected service passes."""
        flt = include_services({"OrderService"})

        assert flt(make_event(producers=("OrderService",), consumers=())) is True

    def test_matches_consumer(self) -> None:
        """Event consumed by a selected service passes."""
        flt = include_services({"BillingService"})

        assert flt(make_event(producers=("OrderService",), consumers=("BillingService",))) is True

    def test_any_of_several_services(self) -> None:
        """Selecting several services is OR."""
        flt = include_services({"A", "Z"})

        assert flt(make_event(producers=("Z",), consumers=())) is True
        assert flt(make_event(producers=("B",), consumers=("C",))) is False

    def test_no_roles(self) -> None:
        """Event with no producers or consumers never matches."""
        flt = include_services({"OrderService"})

        assert flt(make_event(producers=(), consumers=())) is False

    def test_empty_selection_matches_nothing(self) -> None:
        """Empty set = always False (engine skips the pass instead)."""
        flt = include_services(())

        assert flt(make_event()) is False

    def test_accepts_any_iterable(self) -> None:
        """Services may be given as a list."""
        flt = include_services(["OrderService"])

        assert flt(make_event(producers=("OrderService",))) is True

    def test_exact_match_only(self) -> None:
        """Service ids compare exactly, no substring or case folding."""
        flt = include_services({"orderservice"})

        assert flt(make_event(producers=("OrderService",))) is False


class TestSingleRole:
    """Tests for produced_by and consumed_by."""

    def test_produced_by(self) -> None:
        flt = produced_by({"OrderService"})

        assert flt(make_event(producers=("OrderService",), consumers=())) is True
        assert flt(make_event(producers=(), consumers=("OrderService",))) is False

    def test_consumed_by(self) -> None:
        flt = consumed_by({"OrderService"})

        assert flt(make_event(producers=(), consumers=("OrderService",))) is True
        assert flt(make_event(producers=("OrderService",), consumers=())) is False
