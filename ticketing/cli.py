"""
CLI entry point for the ticketing offers demo.

Usage:
    python -m ticketing.cli menu
    python -m ticketing.cli menu --today 2024-06-15 --no-samples
    python -m ticketing.cli config-show
"""

import logging
import sys

import click
from rich.console import Console
from rich.panel import Panel

from ticketing.auth import AuthenticationService
from ticketing.config import TicketingConfig
from ticketing.console import OfferDashboard, OfferMenu
from ticketing.offers import OfferRepository, TimeService, seed_sample_offers

console = Console()


def load_config() -> TicketingConfig:
    """Build the config from the environment, exiting with a message on bad values."""
    try:
        return TicketingConfig()
    except ValueError as e:
        console.print(f"[red]Error:[/red] {e}")
        sys.exit(1)


def setup_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        handlers=[logging.StreamHandler()],
    )


@click.group()
def cli():
    """Ticket System - special offers management.

    All data lives in memory for the duration of one session.
    """
    pass


@cli.command()
@click.option(
    "--today",
    type=click.DateTime(formats=["%Y-%m-%d"]),
    help="Pin the calendar to this date (default: system date)",
)
@click.option(
    "--samples/--no-samples",
    default=None,
    help="Seed the demo offers (default: from TICKETING_SEED_SAMPLES or on)",
)
def menu(today, samples):
    """Log in and manage special offers interactively."""
    config = load_config()
    if today is not None:
        config.pinned_today = today.date()
    if samples is not None:
        config.seed_sample_offers = samples

    try:
        config.validate()
    except ValueError as e:
        console.print(f"[red]Error:[/red] {e}")
        sys.exit(1)

    setup_logging(config.log_level)

    time_service = TimeService(config)
    repository = OfferRepository(config)
    if config.seed_sample_offers:
        seed_sample_offers(repository, time_service.today())

    session = OfferMenu(
        auth=AuthenticationService(max_attempts=config.max_login_attempts),
        repository=repository,
        time_service=time_service,
        config=config,
        dashboard=OfferDashboard(Console()),
    )

    try:
        logged_in = session.run()
    except (EOFError, KeyboardInterrupt):
        console.print("\n[dim]Session ended.[/dim]")
        return

    if not logged_in:
        sys.exit(1)


@cli.command()
def config_show():
    """Show current configuration."""
    config = load_config()
    pinned = config.pinned_today.isoformat() if config.pinned_today else "system date"

    console.print()
    console.print(Panel(f"[bold]Date Format:[/bold] {config.date_format}\n"
                        f"[bold]Today:[/bold] {pinned}\n"
                        f"[bold]Default Description:[/bold] {config.default_description}\n"
                        f"[bold]Seed Sample Offers:[/bold] {config.seed_sample_offers}\n"
                        f"[bold]Max Login Attempts:[/bold] {config.max_login_attempts}\n"
                        f"[bold]Log Level:[/bold] {config.log_level}",
                        title="[bold]Current Configuration[/bold]", border_style="blue"))


if __name__ == "__main__":
    cli()
