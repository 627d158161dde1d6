"""
Configuration for the ticketing offers module.

Values come from environment variables (optionally from a .env file).
"""

import os
from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional

from dotenv import load_dotenv

load_dotenv()


@dataclass
class TicketingConfig:
    """Configuration for the offers session."""

    # Date handling
    date_format: str = "%Y-%m-%d"
    pinned_today: Optional[date] = None  # Overrides the real clock when set

    # Offers
    default_description: str = "Special offer"
    seed_sample_offers: bool = True

    # Authentication
    max_login_attempts: int = 3

    # Logging
    log_level: str = "WARNING"

    def __post_init__(self):
        """Load configuration from environment variables."""
        if fmt := os.getenv("TICKETING_DATE_FORMAT"):
            self.date_format = fmt
        if description := os.getenv("TICKETING_DEFAULT_DESCRIPTION"):
            self.default_description = description
        if seed := os.getenv("TICKETING_SEED_SAMPLES"):
            self.seed_sample_offers = seed.lower() == "true"
        if attempts := os.getenv("TICKETING_MAX_LOGIN_ATTEMPTS"):
            try:
                self.max_login_attempts = int(attempts)
            except ValueError:
                raise ValueError(f"TICKETING_MAX_LOGIN_ATTEMPTS must be an integer, got {attempts!r}")
        if level := os.getenv("TICKETING_LOG_LEVEL"):
            self.log_level = level.upper()
        if today := os.getenv("TICKETING_TODAY"):
            try:
                self.pinned_today = datetime.strptime(today, "%Y-%m-%d").date()
            except ValueError:
                raise ValueError(f"TICKETING_TODAY must be a YYYY-MM-DD date, got {today!r}")

    def validate(self) -> None:
        """Raise ValueError if the configuration cannot be used."""
        if self.max_login_attempts < 1:
            raise ValueError("max_login_attempts must be at least 1")
        if not self.default_description.strip():
            raise ValueError("default_description cannot be empty")
        # The format must round-trip a full calendar date
        sample = date(2024, 1, 31)
        try:
            parsed = datetime.strptime(sample.strftime(self.date_format), self.date_format)
        except ValueError as e:
            raise ValueError(f"Invalid date_format {self.date_format!r}: {e}")
        if parsed.date() != sample:
            raise ValueError(f"date_format {self.date_format!r} does not identify a calendar date")
