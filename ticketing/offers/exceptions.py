from enum import Enum
from typing import TYPE_CHECKING, List, Optional

from ticketing.exceptions import TicketingError

if TYPE_CHECKING:
    from .models import Offer


class ValidationKind(str, Enum):
    EMPTY_STATION = "empty_station"
    INVALID_DISCOUNT = "invalid_discount"
    INVALID_DATE = "invalid_date"
    END_BEFORE_START = "end_before_start"


class ValidationError(TicketingError):
    """Raised when offer parameters are rejected before any state changes.

    ``field`` names the offending parameter for INVALID_DATE
    (``"start_date"`` or ``"end_date"``) so callers can re-prompt for it.
    """

    def __init__(self, kind: ValidationKind, message: str, field: Optional[str] = None):
        self.kind = kind
        self.field = field
        super().__init__(message)


class OverlapWarning(TicketingError):
    """Raised when a valid offer overlaps existing offers for the same station.

    Not a hard failure: the caller may retry the creation with ``force=True``.
    """

    def __init__(self, station_name: str, conflicts: List["Offer"]):
        self.station_name = station_name
        self.conflicts = list(conflicts)
        ids = ", ".join(str(offer.id) for offer in self.conflicts)
        super().__init__(
            f"Offer for {station_name} overlaps existing offer(s): {ids}"
        )


class NotFoundError(TicketingError):
    """Raised when no offer exists with the requested id."""

    def __init__(self, offer_id: int):
        self.offer_id = offer_id
        super().__init__(f"No offer found with ID {offer_id}")
