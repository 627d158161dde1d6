"""Offer entity and the date arithmetic around it."""

from dataclasses import dataclass
from datetime import date
from enum import Enum


class OfferStatus(str, Enum):
    """Temporal classification of an offer relative to a reference date."""

    EXPIRED = "EXPIRED"
    ACTIVE = "ACTIVE"
    UPCOMING = "UPCOMING"


@dataclass(frozen=True)
class Offer:
    """A discount valid over an inclusive date interval for a station.

    Instances are immutable; the repository assigns ``id`` at creation.
    """

    id: int
    station_name: str
    discount: float  # Percentage in (0, 100]
    start_date: date
    end_date: date
    description: str

    def is_active_on(self, day: date) -> bool:
        """Check if the offer's interval contains ``day`` (both ends inclusive)."""
        return self.start_date <= day <= self.end_date

    def overlaps(self, start_date: date, end_date: date) -> bool:
        """Check if the offer shares at least one day with ``[start_date, end_date]``."""
        return dates_overlap(self.start_date, self.end_date, start_date, end_date)

    def matches_station(self, station_name: str) -> bool:
        """Case-insensitive exact station comparison."""
        return self.station_name.casefold() == station_name.strip().casefold()

    def status_on(self, today: date) -> OfferStatus:
        return compute_status(self, today)

    def sort_key(self):
        """Canonical listing order: start date, then id."""
        return (self.start_date, self.id)


def dates_overlap(start1: date, end1: date, start2: date, end2: date) -> bool:
    """Closed-interval overlap; intervals that touch on a single day overlap."""
    return not (end1 < start2 or end2 < start1)


def compute_status(offer: Offer, today: date) -> OfferStatus:
    """Derive the offer status for ``today``.

    Always recomputed, since the reference date moves between calls.
    """
    if offer.end_date < today:
        return OfferStatus.EXPIRED
    if offer.start_date > today:
        return OfferStatus.UPCOMING
    return OfferStatus.ACTIVE
