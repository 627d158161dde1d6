class TicketingError(Exception):
    """Base class for recoverable errors raised by the ticketing module."""
