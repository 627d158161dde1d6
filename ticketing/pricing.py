"""
Ticket pricing against active special offers.

The best active discount for the destination station applies; discounts do
not stack.
"""

import logging
from dataclasses import dataclass
from typing import List, Optional

from ticketing.offers import Offer, OfferRepository, TimeService

logger = logging.getLogger(__name__)


@dataclass
class Destination:
    """A station tickets can be sold for."""

    name: str
    single_price: float = 0.0
    return_price: float = 0.0
    sales_count: int = 0

    def base_price(self, return_trip: bool = False) -> float:
        return self.return_price if return_trip else self.single_price


@dataclass
class PriceQuote:
    """Result of pricing one ticket."""

    base_price: float
    discount: float  # Percentage applied, 0.0 when no offer is active
    final_price: float
    offer: Optional[Offer] = None


class TicketPricer:
    """Applies active offers to destination prices."""

    def __init__(self, repository: OfferRepository, time_service: TimeService):
        self.repository = repository
        self.time_service = time_service

    def active_offers(self, station_name: str) -> List[Offer]:
        """Offers running today for the station."""
        return self.repository.find_active_on(self.time_service.today(), station_name)

    def quote(self, destination: Destination, return_trip: bool = False) -> PriceQuote:
        base = destination.base_price(return_trip)
        offers = self.active_offers(destination.name)
        # Highest discount wins; earliest id on ties
        best = max(offers, key=lambda o: (o.discount, -o.id), default=None)

        if best is None:
            return PriceQuote(base_price=base, discount=0.0, final_price=round(base, 2))

        final = round(base * (1 - best.discount / 100), 2)
        logger.debug(
            f"Offer {best.id} applied to {destination.name}: {best.discount}% off {base}"
        )
        return PriceQuote(base_price=base, discount=best.discount, final_price=final, offer=best)

    def sell(self, destination: Destination, return_trip: bool = False) -> PriceQuote:
        """Quote a ticket and count the sale."""
        quote = self.quote(destination, return_trip)
        destination.sales_count += 1
        logger.info(
            f"Sold {'return' if return_trip else 'single'} ticket to "
            f"{destination.name} for {quote.final_price:.2f}"
        )
        return quote
