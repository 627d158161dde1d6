"""Unit tests for ticket pricing against active offers."""

from datetime import date, timedelta

import pytest

from ticketing.config import TicketingConfig
from ticketing.offers import OfferRepository, TimeService
from ticketing.pricing import Destination, TicketPricer

TODAY = date(2024, 6, 15)


@pytest.fixture
def pricer(monkeypatch):
    monkeypatch.delenv("TICKETING_TODAY", raising=False)
    config = TicketingConfig()
    time_service = TimeService(config)
    time_service.pin(TODAY)
    return TicketPricer(OfferRepository(config), time_service)


class TestTicketPricer:
    """Tests for TicketPricer."""

    def test_no_offer_keeps_base_price(self, pricer):
        quote = pricer.quote(Destination("York", single_price=40.0, return_price=70.0))
        assert quote.base_price == 40.0
        assert quote.discount == 0.0
        assert quote.final_price == 40.0
        assert quote.offer is None

    def test_active_offer_applies_to_return_price(self, pricer):
        offer = pricer.repository.create("London", 20, TODAY, TODAY + timedelta(days=3))
        quote = pricer.quote(Destination("london", 50.0, 90.0), return_trip=True)
        assert quote.base_price == 90.0
        assert quote.discount == 20.0
        assert quote.final_price == 72.0
        assert quote.offer == offer

    def test_best_discount_wins(self, pricer):
        pricer.repository.create("London", 10, TODAY, TODAY)
        best = pricer.repository.create("London", 25, TODAY - timedelta(days=2), TODAY, force=True)
        quote = pricer.quote(Destination("London", 100.0, 180.0))
        assert quote.offer == best
        assert quote.final_price == 75.0

    def test_expired_and_upcoming_offers_ignored(self, pricer):
        pricer.repository.create("London", 50, TODAY - timedelta(days=10), TODAY - timedelta(days=1))
        pricer.repository.create("London", 50, TODAY + timedelta(days=1), TODAY + timedelta(days=5))
        assert pricer.active_offers("London") == []
        assert pricer.quote(Destination("London", 30.0, 50.0)).final_price == 30.0

    def test_other_station_offer_ignored(self, pricer):
        pricer.repository.create("Leeds", 50, TODAY, TODAY)
        assert pricer.quote(Destination("London", 30.0, 50.0)).discount == 0.0

    def test_final_price_rounded(self, pricer):
        pricer.repository.create("York", 33, TODAY, TODAY)
        assert pricer.quote(Destination("York", 10.0, 20.0)).final_price == 6.7

    def test_sell_counts_sales(self, pricer):
        destination = Destination("York", 10.0, 20.0)
        pricer.sell(destination)
        pricer.sell(destination, return_trip=True)
        assert destination.sales_count == 2
