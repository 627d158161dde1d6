"""
Offer Repository

In-memory store of special offers with identity assignment, overlap detection
and the station/date/status queries used by the menu and pricing layers.

Guarantees:

- Ids start at 1, increase strictly and are never reused after deletion.
- Every stored offer satisfies end_date >= start_date.
- Validation and overlap checks complete before anything is mutated.
- Mutations hold a lock around the check-then-act sequence.

The repository never prints, logs or prompts. Callers receive Offer
instances, which are immutable, and translate the exceptions below into
user-facing messages.
"""

import math
import threading
from datetime import date, datetime
from numbers import Number
from typing import Iterator, List, Optional, Union

from ticketing.config import TicketingConfig

from .exceptions import NotFoundError, OverlapWarning, ValidationError, ValidationKind
from .models import Offer

DateInput = Union[date, str]


class OfferRepository:
    """Owns the offers of one session."""

    def __init__(self, config: Optional[TicketingConfig] = None):
        self.config = config or TicketingConfig()
        self._offers: List[Offer] = []
        self._next_id = 1
        self._lock = threading.RLock()

    def __len__(self) -> int:
        return len(self._offers)

    def __iter__(self) -> Iterator[Offer]:
        return iter(list(self._offers))

    @property
    def next_id(self) -> int:
        return self._next_id

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------

    def create(
        self,
        station_name: str,
        discount: float,
        start_date: DateInput,
        end_date: DateInput,
        description: Optional[str] = None,
        force: bool = False,
    ) -> Offer:
        """
        Validate and store a new offer.

        Args:
            station_name: Station the offer applies to
            discount: Percentage in (0, 100]
            start_date: First valid day (date or date string)
            end_date: Last valid day (date or date string)
            description: Display text, defaults to the configured placeholder
            force: Skip the overlap check (caller already confirmed)

        Returns:
            The stored Offer with its assigned id

        Raises:
            ValidationError: Parameters rejected, nothing stored
            OverlapWarning: Same-station offers overlap the interval and
                ``force`` is False, nothing stored
        """
        station = self._clean_station(station_name)
        discount = self._clean_discount(discount)
        start = self._clean_date(start_date, "start_date")
        end = self._clean_date(end_date, "end_date")
        self._check_interval(start, end)
        text = (description or "").strip() or self.config.default_description

        with self._lock:
            if not force:
                conflicts = self._station_conflicts(station, start, end)
                if conflicts:
                    raise OverlapWarning(station, conflicts)

            offer = Offer(
                id=self._next_id,
                station_name=station,
                discount=discount,
                start_date=start,
                end_date=end,
                description=text,
            )
            self._next_id += 1
            self._offers.append(offer)

        return offer

    def delete(self, offer_id: int) -> Offer:
        """Remove and return the offer with ``offer_id``.

        Raises:
            NotFoundError: No such offer, nothing removed
        """
        with self._lock:
            for index, offer in enumerate(self._offers):
                if offer.id == offer_id:
                    return self._offers.pop(index)
        raise NotFoundError(offer_id)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def get(self, offer_id: int) -> Offer:
        for offer in self._offers:
            if offer.id == offer_id:
                return offer
        raise NotFoundError(offer_id)

    def find_by_station(self, query: str) -> List[Offer]:
        """Case-insensitive substring match on station name; "" matches all."""
        needle = (query or "").casefold()
        return [o for o in self._offers if needle in o.station_name.casefold()]

    def find_active_on(self, day: DateInput, station_name: Optional[str] = None) -> List[Offer]:
        """Offers whose interval contains ``day``, optionally for one station."""
        day = self._clean_date(day, "day")
        return [
            o
            for o in self._offers
            if o.is_active_on(day)
            and (station_name is None or o.matches_station(station_name))
        ]

    def find_overlapping(self, start_date: DateInput, end_date: DateInput) -> List[Offer]:
        """Offers sharing at least one day with the range, any station."""
        start = self._clean_date(start_date, "start_date")
        end = self._clean_date(end_date, "end_date")
        self._check_interval(start, end)
        return [o for o in self._offers if o.overlaps(start, end)]

    def list_all(self) -> List[Offer]:
        """All offers by start date ascending, ties by id."""
        return sorted(self._offers, key=Offer.sort_key)

    # ------------------------------------------------------------------
    # Validation helpers
    # ------------------------------------------------------------------

    def _station_conflicts(self, station: str, start: date, end: date) -> List[Offer]:
        return sorted(
            (o for o in self._offers if o.matches_station(station) and o.overlaps(start, end)),
            key=Offer.sort_key,
        )

    @staticmethod
    def _clean_station(station_name: str) -> str:
        station = (station_name or "").strip()
        if not station:
            raise ValidationError(ValidationKind.EMPTY_STATION, "Station name cannot be empty.")
        return station

    @staticmethod
    def _clean_discount(discount: float) -> float:
        # bool is a Number subclass but never a percentage
        if isinstance(discount, (bool, complex)) or not isinstance(discount, Number):
            raise ValidationError(ValidationKind.INVALID_DISCOUNT, "Invalid discount value.")
        try:
            value = float(discount)
        except (ValueError, OverflowError):
            raise ValidationError(ValidationKind.INVALID_DISCOUNT, "Invalid discount value.")
        if math.isnan(value) or value <= 0 or value > 100:
            raise ValidationError(
                ValidationKind.INVALID_DISCOUNT,
                "Discount must be greater than 0 and at most 100.",
            )
        return value

    def _clean_date(self, value: DateInput, field: str) -> date:
        label = {"start_date": "Start date", "end_date": "End date"}.get(field, "Date")
        if isinstance(value, datetime):
            return value.date()
        if isinstance(value, date):
            return value
        if isinstance(value, str):
            raw = value.strip()
            for fmt in (self.config.date_format, "%Y-%m-%d"):
                try:
                    return datetime.strptime(raw, fmt).date()
                except ValueError:
                    continue
        raise ValidationError(
            ValidationKind.INVALID_DATE, f"{label} is not valid.", field=field
        )

    @staticmethod
    def _check_interval(start: date, end: date) -> None:
        if end < start:
            raise ValidationError(
                ValidationKind.END_BEFORE_START, "End date cannot be before start date."
            )
