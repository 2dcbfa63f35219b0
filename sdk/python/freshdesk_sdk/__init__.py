"""
Freshdesk Python SDK

Async Python client for the Freshdesk v2 REST API.

Basic usage:
    >>> from freshdesk_sdk import FreshdeskClient
    >>> client = FreshdeskClient.with_api_key("https://demo.freshdesk.com", "your-api-key")
    >>> tickets = await client.list_tickets({"filter": "new_and_my_open"})
    >>> print(f"Found {len(tickets)} tickets")

Errors:
    try:
        await client.create_company({"name": "Acme"})
    except ConflictError as e:
        print(e.message, e.response_data)

    # Or get the result without raising
    result = await client.execute("GET", "/api/v2/tickets/42")
    result.deliver(lambda error, data: ...)
"""

import httpx

from .client import FreshdeskClient
from .config import ClientConfig
from .exceptions import (
    ErrorKind,
    FreshdeskError,
    FreshdeskAPIError,
    UnauthorizedError,
    ForbiddenError,
    NotFoundError,
    ConflictError,
    ConfigurationError,
)
from .models import (
    Ticket,
    Conversation,
    TimeEntry,
    TicketField,
    Contact,
    ContactField,
    Company,
    ErrorResponse,
    TicketListFilter,
    TicketCreateRequest,
    TicketUpdateRequest,
    ReplyCreateRequest,
    NoteCreateRequest,
    ConversationUpdateRequest,
    ContactListFilter,
    ContactCreateRequest,
    ContactUpdateRequest,
    CompanyCreateRequest,
    CompanyUpdateRequest,
)
from .auth import APIKeyAuth
from .response import APIResult

__version__ = "1.0.0"
__license__ = "MIT"

__all__ = [
    # Main client
    "FreshdeskClient",
    "ClientConfig",
    "APIResult",
    # Exceptions
    "ErrorKind",
    "FreshdeskError",
    "FreshdeskAPIError",
    "UnauthorizedError",
    "ForbiddenError",
    "NotFoundError",
    "ConflictError",
    "ConfigurationError",
    # Models
    "Ticket",
    "Conversation",
    "TimeEntry",
    "TicketField",
    "Contact",
    "ContactField",
    "Company",
    "ErrorResponse",
    "TicketListFilter",
    "TicketCreateRequest",
    "TicketUpdateRequest",
    "ReplyCreateRequest",
    "NoteCreateRequest",
    "ConversationUpdateRequest",
    "ContactListFilter",
    "ContactCreateRequest",
    "ContactUpdateRequest",
    "CompanyCreateRequest",
    "CompanyUpdateRequest",
    # Auth
    "APIKeyAuth",
]

# Convenience functions for error checking
def is_freshdesk_error(error: BaseException) -> bool:
    """Check if an exception was raised by the SDK."""
    return isinstance(error, FreshdeskError)

def is_api_error(error: BaseException) -> bool:
    """Check if an exception is an API error (decode or application)."""
    return isinstance(error, FreshdeskAPIError)

def is_not_found_error(error: BaseException) -> bool:
    """Check if an exception is a 404 Not Found error."""
    return isinstance(error, NotFoundError)

def is_conflict_error(error: BaseException) -> bool:
    """Check if an exception is a 409 Conflict error."""
    return isinstance(error, ConflictError)

def is_transport_error(error: BaseException) -> bool:
    """Check if an exception came from the HTTP transport."""
    return isinstance(error, httpx.RequestError)
