"""
Rich console rendering for the offers menu.

Displays offers with their derived status, search results and messages, and
reads raw answers from the user.
"""

from datetime import date
from typing import List, Optional

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from ticketing.offers import Offer, OfferStatus

console = Console()

STATUS_STYLES = {
    OfferStatus.ACTIVE: "green",
    OfferStatus.UPCOMING: "cyan",
    OfferStatus.EXPIRED: "dim",
}


class OfferDashboard:
    """
    Rich-based display for offers.

    Usage:
        dashboard = OfferDashboard()
        dashboard.show_offers(repository.list_all(), today)
        if dashboard.confirm("Confirm delete?"):
            # proceed with deletion
    """

    def __init__(self, out: Optional[Console] = None):
        self.console = out or console

    # ------------------------------------------------------------------
    # Input
    # ------------------------------------------------------------------

    def ask(self, prompt: str) -> str:
        """Read one line of raw input, stripped."""
        return self.console.input(f"[bold]{prompt}[/bold] ").strip()

    def confirm(self, prompt: str) -> bool:
        """Ask a yes/no question; only "y"/"yes" confirms."""
        response = self.console.input(f"[bold yellow]{prompt}[/bold yellow] (y/n): ")
        return response.strip().lower() in ("y", "yes")

    # ------------------------------------------------------------------
    # Output
    # ------------------------------------------------------------------

    def show_header(self, title: str) -> None:
        self.console.print()
        self.console.print(f"[bold cyan]=== {title} ===[/bold cyan]")

    def show_info(self, message: str) -> None:
        self.console.print(message)

    def show_success(self, message: str) -> None:
        self.console.print(f"[green]✓[/green] {message}")

    def show_warning(self, message: str) -> None:
        self.console.print(f"[yellow]Warning:[/yellow] {message}")

    def show_error(self, message: str) -> None:
        self.console.print(f"[red]{message}[/red]")

    def show_offer(self, offer: Offer, today: date) -> None:
        """Show a single offer in a panel."""
        status = offer.status_on(today)
        style = STATUS_STYLES[status]
        self.console.print(
            Panel(
                f"[bold]ID:[/bold] {offer.id}\n"
                f"[bold]Station:[/bold] {escape(offer.station_name)}\n"
                f"[bold]Discount:[/bold] {offer.discount:g}%\n"
                f"[bold]Valid:[/bold] {offer.start_date.isoformat()} to {offer.end_date.isoformat()}\n"
                f"[bold]Status:[/bold] [{style}]{status.value}[/{style}]\n"
                f"[bold]Details:[/bold] {escape(offer.description)}",
                title=f"[bold]Offer {offer.id}[/bold]",
                border_style=style,
            )
        )

    def show_offers(self, offers: List[Offer], today: date, title: str = "Special Offers") -> None:
        """Show offers as a table in the order given."""
        if not offers:
            self.console.print("[dim]No offers found.[/dim]")
            return

        table = Table(title=f"[bold cyan]{title}[/bold cyan]", show_header=True, header_style="bold magenta")
        table.add_column("ID", justify="right", style="cyan")
        table.add_column("Station", style="white")
        table.add_column("Discount", justify="right", style="green")
        table.add_column("Start", style="white")
        table.add_column("End", style="white")
        table.add_column("Status")
        table.add_column("Details", style="white")

        for offer in offers:
            status = offer.status_on(today)
            style = STATUS_STYLES[status]
            table.add_row(
                str(offer.id),
                escape(offer.station_name),
                f"{offer.discount:g}%",
                offer.start_date.isoformat(),
                offer.end_date.isoformat(),
                f"[{style}]{status.value}[/{style}]",
                escape(offer.description),
            )

        self.console.print(table)
        self.console.print(f"[dim]Total offers: {len(offers)}[/dim]")

    def show_search_results(self, offers: List[Offer], criteria: str, today: date) -> None:
        self.console.print()
        self.console.print(f"Results for: [bold]{escape(criteria)}[/bold]")
        self.show_offers(offers, today, title="Search Results")

    def show_overlap(self, conflicts: List[Offer], today: date) -> None:
        """Show the offers a new offer would overlap."""
        self.show_warning("another offer overlaps this period for the same station.")
        self.show_offers(conflicts, today, title="Overlapping Offers")
