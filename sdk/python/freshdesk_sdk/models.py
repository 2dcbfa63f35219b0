"""Data models for the Freshdesk API."""

from datetime import date, datetime
from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict


class BaseFreshdeskModel(BaseModel):
    """Base model for all Freshdesk API models.

    Unknown fields are kept so custom fields and newer API attributes pass
    through untouched.
    """
    
    model_config = ConfigDict(
        use_enum_values=True,
        validate_assignment=True,
        extra="allow",
        populate_by_name=True,
    )


# Response models

class Ticket(BaseFreshdeskModel):
    """Represents a support ticket."""
    
    id: Optional[int] = None
    subject: Optional[str] = None
    description: Optional[str] = None
    description_text: Optional[str] = None
    status: Optional[int] = None
    priority: Optional[int] = None
    source: Optional[int] = None
    type: Optional[str] = None
    requester_id: Optional[int] = None
    responder_id: Optional[int] = None
    group_id: Optional[int] = None
    company_id: Optional[int] = None
    product_id: Optional[int] = None
    email_config_id: Optional[int] = None
    to_emails: Optional[List[str]] = None
    cc_emails: Optional[List[str]] = None
    fwd_emails: Optional[List[str]] = None
    reply_cc_emails: Optional[List[str]] = None
    tags: Optional[List[str]] = None
    spam: Optional[bool] = None
    deleted: Optional[bool] = None
    is_escalated: Optional[bool] = None
    fr_escalated: Optional[bool] = None
    due_by: Optional[datetime] = None
    fr_due_by: Optional[datetime] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    custom_fields: Optional[Dict[str, Any]] = None
    attachments: Optional[List[Dict[str, Any]]] = None


class Conversation(BaseFreshdeskModel):
    """Represents a reply or note on a ticket."""
    
    id: Optional[int] = None
    ticket_id: Optional[int] = None
    user_id: Optional[int] = None
    body: Optional[str] = None
    body_text: Optional[str] = None
    incoming: Optional[bool] = None
    private: Optional[bool] = None
    source: Optional[int] = None
    support_email: Optional[str] = None
    from_email: Optional[str] = None
    to_emails: Optional[List[str]] = None
    cc_emails: Optional[List[str]] = None
    bcc_emails: Optional[List[str]] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    attachments: Optional[List[Dict[str, Any]]] = None


class TimeEntry(BaseFreshdeskModel):
    """Represents time tracked against a ticket."""
    
    id: Optional[int] = None
    ticket_id: Optional[int] = None
    agent_id: Optional[int] = None
    billable: Optional[bool] = None
    note: Optional[str] = None
    time_spent: Optional[str] = None
    timer_running: Optional[bool] = None
    executed_at: Optional[datetime] = None
    start_time: Optional[datetime] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class TicketField(BaseFreshdeskModel):
    """Represents a ticket field definition."""
    
    id: Optional[int] = None
    name: Optional[str] = None
    label: Optional[str] = None
    label_for_customers: Optional[str] = None
    description: Optional[str] = None
    type: Optional[str] = None
    position: Optional[int] = None
    default: Optional[bool] = None
    required_for_closure: Optional[bool] = None
    required_for_agents: Optional[bool] = None
    required_for_customers: Optional[bool] = None
    customers_can_edit: Optional[bool] = None
    displayed_to_customers: Optional[bool] = None
    choices: Optional[Union[List[Any], Dict[str, Any]]] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class Contact(BaseFreshdeskModel):
    """Represents a customer contact."""
    
    id: Optional[int] = None
    name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    mobile: Optional[str] = None
    twitter_id: Optional[str] = None
    unique_external_id: Optional[str] = None
    company_id: Optional[int] = None
    job_title: Optional[str] = None
    language: Optional[str] = None
    time_zone: Optional[str] = None
    description: Optional[str] = None
    address: Optional[str] = None
    active: Optional[bool] = None
    deleted: Optional[bool] = None
    view_all_tickets: Optional[bool] = None
    other_emails: Optional[List[str]] = None
    tags: Optional[List[str]] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    custom_fields: Optional[Dict[str, Any]] = None


class ContactField(BaseFreshdeskModel):
    """Represents a contact field definition."""
    
    id: Optional[int] = None
    name: Optional[str] = None
    label: Optional[str] = None
    label_for_customers: Optional[str] = None
    type: Optional[str] = None
    position: Optional[int] = None
    default: Optional[bool] = None
    required_for_agents: Optional[bool] = None
    required_for_customers: Optional[bool] = None
    customers_can_edit: Optional[bool] = None
    displayed_for_customers: Optional[bool] = None
    editable_in_signup: Optional[bool] = None
    choices: Optional[List[Any]] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class Company(BaseFreshdeskModel):
    """Represents a company. ``name`` is unique across the account."""
    
    id: Optional[int] = None
    name: Optional[str] = None
    description: Optional[str] = None
    note: Optional[str] = None
    domains: Optional[List[str]] = None
    health_score: Optional[str] = None
    account_tier: Optional[str] = None
    renewal_date: Optional[Union[date, datetime]] = None
    industry: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    custom_fields: Optional[Dict[str, Any]] = None


class ErrorResponse(BaseFreshdeskModel):
    """API error payload."""
    
    description: Optional[str] = None
    errors: Optional[List[Dict[str, Any]]] = None


# Request models

class TicketListFilter(BaseFreshdeskModel):
    """Query options for listing tickets.

    ``filter`` is one of the predefined views: ``new_and_my_open``,
    ``watching``, ``spam`` or ``deleted``.
    """
    
    filter: Optional[str] = None
    requester_id: Optional[int] = None
    email: Optional[str] = None
    company_id: Optional[int] = None
    updated_since: Optional[datetime] = None
    order_by: Optional[str] = None
    order_type: Optional[str] = None
    include: Optional[str] = None
    page: Optional[int] = None
    per_page: Optional[int] = None


class TicketUpdateRequest(BaseFreshdeskModel):
    """Request model for updating a ticket."""
    
    subject: Optional[str] = None
    description: Optional[str] = None
    email: Optional[str] = None
    requester_id: Optional[int] = None
    phone: Optional[str] = None
    name: Optional[str] = None
    status: Optional[int] = None
    priority: Optional[int] = None
    source: Optional[int] = None
    type: Optional[str] = None
    responder_id: Optional[int] = None
    group_id: Optional[int] = None
    company_id: Optional[int] = None
    product_id: Optional[int] = None
    due_by: Optional[datetime] = None
    fr_due_by: Optional[datetime] = None
    tags: Optional[List[str]] = None
    cc_emails: Optional[List[str]] = None
    custom_fields: Optional[Dict[str, Any]] = None


class TicketCreateRequest(TicketUpdateRequest):
    """Request model for creating a ticket."""


class ReplyCreateRequest(BaseFreshdeskModel):
    """Request model for replying to a ticket."""
    
    body: str
    from_email: Optional[str] = None
    user_id: Optional[int] = None
    cc_emails: Optional[List[str]] = None
    bcc_emails: Optional[List[str]] = None


class NoteCreateRequest(BaseFreshdeskModel):
    """Request model for adding a note to a ticket."""
    
    body: str
    private: Optional[bool] = None
    incoming: Optional[bool] = None
    user_id: Optional[int] = None
    notify_emails: Optional[List[str]] = None


class ConversationUpdateRequest(BaseFreshdeskModel):
    """Request model for editing a conversation."""
    
    body: Optional[str] = None


class ContactListFilter(BaseFreshdeskModel):
    """Query options for listing contacts."""
    
    email: Optional[str] = None
    mobile: Optional[str] = None
    phone: Optional[str] = None
    company_id: Optional[int] = None
    state: Optional[str] = None
    updated_since: Optional[datetime] = None
    page: Optional[int] = None
    per_page: Optional[int] = None


class ContactUpdateRequest(BaseFreshdeskModel):
    """Request model for updating a contact."""
    
    name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    mobile: Optional[str] = None
    twitter_id: Optional[str] = None
    unique_external_id: Optional[str] = None
    company_id: Optional[int] = None
    job_title: Optional[str] = None
    language: Optional[str] = None
    time_zone: Optional[str] = None
    description: Optional[str] = None
    address: Optional[str] = None
    tags: Optional[List[str]] = None
    other_emails: Optional[List[str]] = None
    view_all_tickets: Optional[bool] = None
    custom_fields: Optional[Dict[str, Any]] = None


class ContactCreateRequest(ContactUpdateRequest):
    """Request model for creating a contact."""
    
    name: str


class CompanyUpdateRequest(BaseFreshdeskModel):
    """Request model for updating a company.

    Only dates in ``YYYY-MM-DD`` form are accepted for custom date fields.
    """
    
    name: Optional[str] = None
    description: Optional[str] = None
    domains: Optional[List[str]] = None
    note: Optional[str] = None
    health_score: Optional[str] = None
    account_tier: Optional[str] = None
    renewal_date: Optional[date] = None
    industry: Optional[str] = None
    custom_fields: Optional[Dict[str, Any]] = None


class CompanyCreateRequest(CompanyUpdateRequest):
    """Request model for creating a company."""
    
    name: str
