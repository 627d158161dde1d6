"""
Offers Module - in-memory special offer repository and queries.

Construct one OfferRepository and one TimeService per session and pass them
to the collaborators that need them.
"""

from .exceptions import NotFoundError, OverlapWarning, ValidationError, ValidationKind
from .models import Offer, OfferStatus, compute_status, dates_overlap
from .repository import OfferRepository
from .samples import seed_sample_offers
from .time_service import TimeService

__all__ = [
    'NotFoundError',
    'Offer',
    'OfferRepository',
    'OfferStatus',
    'OverlapWarning',
    'TimeService',
    'ValidationError',
    'ValidationKind',
    'compute_status',
    'dates_overlap',
    'seed_sample_offers',
]
