"""
Time Service

Answers "today" for the session, either from the real clock or from a pinned
calendar date (useful for demos and tests).
"""

import logging
from datetime import date
from typing import Optional

from ticketing.config import TicketingConfig

logger = logging.getLogger(__name__)


class TimeService:
    """Clock abstraction for real vs pinned calendar dates."""

    def __init__(self, config: Optional[TicketingConfig] = None):
        self.config = config or TicketingConfig()
        self._pinned: Optional[date] = self.config.pinned_today

    def today(self) -> date:
        """Returns the current calendar date (pinned or real)."""
        if self._pinned is not None:
            return self._pinned
        return date.today()

    def pin(self, day: date) -> None:
        """Freeze the clock on ``day`` until unpinned."""
        self._pinned = day
        logger.info(f"Calendar pinned to {day.isoformat()}")

    def unpin(self) -> None:
        """Return to the real clock."""
        self._pinned = None
        logger.info("Calendar unpinned, using system date")

    def is_pinned(self) -> bool:
        return self._pinned is not None
