"""Demo offers so a fresh session has data to work with."""

import logging
from datetime import date, timedelta
from typing import List

from .models import Offer
from .repository import OfferRepository

logger = logging.getLogger(__name__)


def seed_sample_offers(repository: OfferRepository, today: date) -> List[Offer]:
    """Create the demo offers relative to ``today``."""
    offers = [
        repository.create(
            station_name="London",
            discount=20.0,
            start_date=today - timedelta(days=5),
            end_date=today + timedelta(days=10),
            description="Weekend special - 20% off",
            force=True,
        ),
        repository.create(
            station_name="Manchester",
            discount=15.0,
            start_date=today,
            end_date=today + timedelta(days=30),
            description="Monthly promotion",
            force=True,
        ),
    ]
    logger.info(f"Seeded {len(offers)} sample offers")
    return offers
