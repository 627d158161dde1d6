"""
Ticket System - special offers module.

In-memory management of station discount offers, with a console session
for authentication and offer administration.
"""

__version__ = "0.1.0"
