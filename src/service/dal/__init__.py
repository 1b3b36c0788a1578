"""
Data Access Layer (DAL) for the storefront service.

This module defines the interfaces of the two external services the
endpoints talk to: transactional email delivery and spreadsheet read access.
Concrete implementations live in ``resend_handler`` and ``sheets_handler``;
tests substitute any object satisfying these protocols.
"""

from typing import Any, Dict, List, Protocol, runtime_checkable

from service.models.notification import EmailMessage


@runtime_checkable
class EmailHandler(Protocol):
    """Protocol for the email delivery service."""

    def send_email(self, message: EmailMessage) -> Dict[str, Any]:
        """Submit a message, returning the delivery service's response data."""
        ...


@runtime_checkable
class SheetReader(Protocol):
    """Protocol for spreadsheet read access."""

    def get_values(self) -> List[List[str]]:
        """Return the configured range as rows of cell strings, header row first."""
        ...
