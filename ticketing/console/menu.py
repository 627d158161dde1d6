"""
Interactive console session for the offers module.

Handles the login loop and the main menu, parses raw text into the typed
values the repository expects, and turns repository exceptions into
messages and confirmation prompts.
"""

import logging
from datetime import date, datetime
from typing import Optional

from rich.markup import escape

from ticketing.auth import AuthenticationService, InvalidCredentials, LoginAttemptsExceeded
from ticketing.config import TicketingConfig
from ticketing.offers import (
    NotFoundError,
    OfferRepository,
    OverlapWarning,
    TimeService,
    ValidationError,
)

from .dashboard import OfferDashboard

logger = logging.getLogger(__name__)


def parse_date(raw: str, date_format: str) -> Optional[date]:
    """Parse user text into a date, None if it does not match the format."""
    try:
        return datetime.strptime(raw.strip(), date_format).date()
    except ValueError:
        return None


def parse_int(raw: str) -> Optional[int]:
    try:
        return int(raw.strip())
    except ValueError:
        return None


def format_hint(date_format: str) -> str:
    """Human-readable hint for a strftime format, e.g. yyyy-MM-dd."""
    return date_format.replace("%Y", "yyyy").replace("%m", "MM").replace("%d", "dd")


class OfferMenu:
    """Drives one interactive session."""

    def __init__(
        self,
        auth: AuthenticationService,
        repository: OfferRepository,
        time_service: TimeService,
        config: Optional[TicketingConfig] = None,
        dashboard: Optional[OfferDashboard] = None,
    ):
        self.auth = auth
        self.repository = repository
        self.time_service = time_service
        self.config = config or repository.config
        self.dashboard = dashboard or OfferDashboard()

    def run(self) -> bool:
        """Run the session. Returns False if nobody managed to log in."""
        self.dashboard.show_header("Ticket System - Special Offers")
        if not self.login():
            self.dashboard.show_error("Login failed. Exiting.")
            return False
        return self.main_loop()

    # ------------------------------------------------------------------
    # Authentication
    # ------------------------------------------------------------------

    def login(self) -> bool:
        """Prompt for credentials until success or the attempt limit."""
        for attempt in range(1, self.auth.max_attempts + 1):
            self.dashboard.show_info("\n--- Login ---")
            username = self.dashboard.ask("Username:")
            password = self.dashboard.ask("Password:")
            try:
                user = self.auth.login(username, password)
            except InvalidCredentials as e:
                self.dashboard.show_error(str(e))
                self.dashboard.show_info(f"Login attempt {attempt} of {self.auth.max_attempts}")
                continue
            except LoginAttemptsExceeded as e:
                self.dashboard.show_error(str(e))
                return False

            self.dashboard.show_success(f"Login successful. Welcome, {user.username}.")
            if user.is_admin:
                self.dashboard.show_info("Admin access granted.")
            return True
        return False

    # ------------------------------------------------------------------
    # Main menu
    # ------------------------------------------------------------------

    def main_loop(self) -> bool:
        while True:
            self._show_main_menu()
            choice = self.dashboard.ask("Choice:")

            if choice == "1":
                self._admin_only(self.add_offer)
            elif choice == "2":
                self.search_offers()
            elif choice == "3":
                self._admin_only(self.delete_offer)
            elif choice == "4":
                self.view_all()
            elif choice == "8":
                self.auth.logout()
                self.dashboard.show_info("\nLog in as a different user:")
                if not self.login():
                    self.dashboard.show_error("Login failed. Exiting.")
                    return True
            elif choice == "0":
                self.auth.logout()
                self.dashboard.show_info("Application closed.")
                return True
            else:
                self.dashboard.show_error("Please enter a valid option.")

    def _show_main_menu(self) -> None:
        user = self.auth.current_user
        self.dashboard.show_info("\n--- MAIN MENU ---")
        self.dashboard.show_info(f"Logged in as: {user.username} {escape(f'[{user.role}]')}")
        if self.auth.is_admin:
            self.dashboard.show_info("1. Add special offer")
        self.dashboard.show_info("2. Search special offers")
        if self.auth.is_admin:
            self.dashboard.show_info("3. Delete special offer")
        else:
            self.dashboard.show_info("(Read-only user - admin options disabled)")
        self.dashboard.show_info("4. View all offers")
        self.dashboard.show_info("8. Log out and log in as someone else")
        self.dashboard.show_info("0. Exit")

    def _admin_only(self, action) -> None:
        if not self.auth.is_admin:
            self.dashboard.show_error("Admin access required.")
            return
        action()

    # ------------------------------------------------------------------
    # Offer actions
    # ------------------------------------------------------------------

    def add_offer(self) -> None:
        self.dashboard.show_header("ADD SPECIAL OFFER")
        hint = format_hint(self.config.date_format)

        station = self.dashboard.ask("Station name:")
        if not station:
            self.dashboard.show_error("Station name cannot be empty.")
            return
        try:
            discount = float(self.dashboard.ask("Discount percentage (0-100):"))
        except ValueError:
            self.dashboard.show_error("Invalid discount value.")
            return

        start = parse_date(self.dashboard.ask(f"Start date ({hint}):"), self.config.date_format)
        if start is None:
            self.dashboard.show_error("Start date is not valid.")
            return
        end = parse_date(self.dashboard.ask(f"End date ({hint}):"), self.config.date_format)
        if end is None:
            self.dashboard.show_error("End date is not valid.")
            return
        description = self.dashboard.ask("Description:")

        today = self.time_service.today()
        try:
            offer = self.repository.create(station, discount, start, end, description)
        except ValidationError as e:
            self.dashboard.show_error(str(e))
            return
        except OverlapWarning as warning:
            self.dashboard.show_overlap(warning.conflicts, today)
            if not self.dashboard.confirm("Continue anyway?"):
                self.dashboard.show_info("Offer not added.")
                return
            offer = self.repository.create(station, discount, start, end, description, force=True)
            logger.info(
                f"Offer {offer.id} created despite overlap with "
                f"{[o.id for o in warning.conflicts]}"
            )
        else:
            logger.info(f"Offer {offer.id} created for {offer.station_name}")

        self.dashboard.show_success("Offer added successfully:")
        self.dashboard.show_offer(offer, today)

    def search_offers(self) -> None:
        self.dashboard.show_header("SEARCH SPECIAL OFFERS")
        if not self.repository:
            self.dashboard.show_info("No offers available.")
            return

        self.dashboard.show_info("1. By station name")
        self.dashboard.show_info("2. Active today")
        self.dashboard.show_info("3. By date range")
        self.dashboard.show_info("4. Show all")
        choice = self.dashboard.ask("Choice:")
        today = self.time_service.today()

        if choice == "1":
            station = self.dashboard.ask("Station name:")
            results = self.repository.find_by_station(station)
            self.dashboard.show_search_results(results, f"Station = {station}", today)
        elif choice == "2":
            results = self.repository.find_active_on(today)
            self.dashboard.show_search_results(results, "Active today", today)
        elif choice == "3":
            hint = format_hint(self.config.date_format)
            start = parse_date(self.dashboard.ask(f"Start date ({hint}):"), self.config.date_format)
            end = parse_date(self.dashboard.ask(f"End date ({hint}):"), self.config.date_format)
            if start is None or end is None:
                self.dashboard.show_error("Date range is not valid.")
                return
            try:
                results = self.repository.find_overlapping(start, end)
            except ValidationError as e:
                self.dashboard.show_error(str(e))
                return
            self.dashboard.show_search_results(
                results, f"Date range {start.isoformat()} to {end.isoformat()}", today
            )
        elif choice == "4":
            self.view_all()
        else:
            self.dashboard.show_error("Please choose a valid option.")

    def delete_offer(self) -> None:
        self.dashboard.show_header("DELETE SPECIAL OFFER")
        if not self.repository:
            self.dashboard.show_info("No offers to delete.")
            return

        self.view_all()
        offer_id = parse_int(self.dashboard.ask("Enter offer ID to delete (0 to cancel):")) or 0
        if offer_id == 0:
            self.dashboard.show_info("Cancelled.")
            return

        try:
            offer = self.repository.get(offer_id)
        except NotFoundError as e:
            self.dashboard.show_error(str(e))
            return

        self.dashboard.show_info("\nOffer selected:")
        self.dashboard.show_offer(offer, self.time_service.today())
        if not self.dashboard.confirm("Confirm delete?"):
            self.dashboard.show_info("Deletion cancelled.")
            return

        self.repository.delete(offer_id)
        logger.info(f"Offer {offer_id} deleted by {self.auth.current_user.username}")
        self.dashboard.show_success("Offer deleted.")

    def view_all(self) -> None:
        self.dashboard.show_header("ALL SPECIAL OFFERS")
        if not self.repository:
            self.dashboard.show_info("No offers available.")
            return
        self.dashboard.show_offers(
            self.repository.list_all(), self.time_service.today(), title="All Special Offers"
        )
