"""Main client for the Freshdesk SDK."""

from typing import Any, Optional, Union

import httpx

from .auth import APIKeyAuth
from .config import DEFAULT_TIMEOUT, DEFAULT_USER_AGENT, ClientConfig
from .http_client import HTTPClient, Payload, QueryParams
from .response import APIResult

ResourceId = Union[int, str]


class FreshdeskClient:
    """Async client for the Freshdesk v2 REST API.

    Every method maps to one endpoint. It returns the parsed JSON body, or
    ``None`` when the API answers 204, and raises ``FreshdeskAPIError`` (or
    a subclass) for API errors. Transport failures are raised as the
    original ``httpx`` exception.

        >>> async with FreshdeskClient("https://demo.freshdesk.com", "key") as fd:
        ...     ticket = await fd.get_ticket(42)
    """
    
    def __init__(
        self,
        base_url: str,
        api_key: str,
        *,
        timeout: float = DEFAULT_TIMEOUT,
        user_agent: str = DEFAULT_USER_AGENT,
        debug: bool = False,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        http_client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        config = ClientConfig.create(
            base_url=base_url,
            api_key=api_key,
            timeout=timeout,
            user_agent=user_agent,
            debug=debug,
        )
        self.config = config
        self.auth = APIKeyAuth(config.api_key)
        self._http = HTTPClient(
            config, self.auth, transport=transport, client=http_client
        )
    
    @classmethod
    def with_api_key(cls, base_url: str, api_key: str, **kwargs: Any) -> "FreshdeskClient":
        """Create a client authenticated with an API key."""
        return cls(base_url, api_key, **kwargs)
    
    @classmethod
    def from_config(
        cls,
        config: ClientConfig,
        *,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        http_client: Optional[httpx.AsyncClient] = None,
    ) -> "FreshdeskClient":
        """Create a client from an existing configuration."""
        return cls(
            config.base_url,
            config.api_key,
            timeout=config.timeout,
            user_agent=config.user_agent,
            debug=config.debug,
            transport=transport,
            http_client=http_client,
        )
    
    @property
    def base_url(self) -> str:
        return self.config.base_url
    
    async def __aenter__(self) -> "FreshdeskClient":
        return self
    
    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        await self.close()
    
    async def close(self) -> None:
        """Close the underlying HTTP client."""
        await self._http.close()
    
    async def execute(
        self,
        method: str,
        path: str,
        params: Optional[QueryParams] = None,
        data: Optional[Payload] = None,
    ) -> APIResult:
        """Call an endpoint and return the result without raising."""
        return await self._http.submit(method, path, params=params, data=data)
    
    async def _request(
        self,
        method: str,
        path: str,
        params: Optional[QueryParams] = None,
        data: Optional[Payload] = None,
    ) -> Any:
        result = await self.execute(method, path, params=params, data=data)
        return result.unwrap()
    
    # Tickets
    
    async def list_tickets(self, filters: Optional[QueryParams] = None) -> Any:
        """List tickets, optionally narrowed by a ``TicketListFilter``."""
        return await self._request("GET", "/api/v2/tickets", params=filters)
    
    async def list_ticket_fields(self) -> Any:
        return await self._request("GET", "/api/v2/ticket_fields")
    
    async def create_ticket(self, data: Payload) -> Any:
        return await self._request("POST", "/api/v2/tickets", data=data)
    
    async def get_ticket(self, ticket_id: ResourceId) -> Any:
        return await self._request("GET", f"/api/v2/tickets/{ticket_id}")
    
    async def update_ticket(self, ticket_id: ResourceId, data: Payload) -> Any:
        return await self._request("PUT", f"/api/v2/tickets/{ticket_id}", data=data)
    
    async def delete_ticket(self, ticket_id: ResourceId) -> Any:
        return await self._request("DELETE", f"/api/v2/tickets/{ticket_id}")
    
    async def restore_ticket(self, ticket_id: ResourceId) -> Any:
        """Restore a deleted ticket."""
        return await self._request("PUT", f"/api/v2/tickets/{ticket_id}/restore")
    
    async def list_conversations(self, ticket_id: ResourceId) -> Any:
        return await self._request("GET", f"/api/v2/tickets/{ticket_id}/conversations")
    
    async def list_time_entries(self, ticket_id: ResourceId) -> Any:
        return await self._request("GET", f"/api/v2/tickets/{ticket_id}/time_entries")
    
    # Conversations
    
    async def create_reply(self, ticket_id: ResourceId, data: Payload) -> Any:
        return await self._request("POST", f"/api/v2/tickets/{ticket_id}/reply", data=data)
    
    async def create_note(self, ticket_id: ResourceId, data: Payload) -> Any:
        return await self._request("POST", f"/api/v2/tickets/{ticket_id}/notes", data=data)
    
    async def update_conversation(self, conversation_id: ResourceId, data: Payload) -> Any:
        return await self._request(
            "PUT", f"/api/v2/conversations/{conversation_id}", data=data
        )
    
    async def delete_conversation(self, conversation_id: ResourceId) -> Any:
        return await self._request("DELETE", f"/api/v2/conversations/{conversation_id}")
    
    # Contacts
    
    async def create_contact(self, data: Payload) -> Any:
        return await self._request("POST", "/api/v2/contacts", data=data)
    
    async def get_contact(self, contact_id: ResourceId) -> Any:
        return await self._request("GET", f"/api/v2/contacts/{contact_id}")
    
    async def list_contacts(self, filters: Optional[QueryParams] = None) -> Any:
        return await self._request("GET", "/api/v2/contacts", params=filters)
    
    async def update_contact(self, contact_id: ResourceId, data: Payload) -> Any:
        return await self._request("PUT", f"/api/v2/contacts/{contact_id}", data=data)
    
    async def delete_contact(self, contact_id: ResourceId) -> Any:
        return await self._request("DELETE", f"/api/v2/contacts/{contact_id}")
    
    async def make_agent(self, contact_id: ResourceId) -> Any:
        """Convert a contact into an agent."""
        return await self._request("PUT", f"/api/v2/contacts/{contact_id}/make_agent")
    
    async def list_contact_fields(self) -> Any:
        return await self._request("GET", "/api/v2/contact_fields")
    
    # Companies
    
    async def create_company(self, data: Payload) -> Any:
        """Create a company. A taken name raises ``ConflictError``."""
        return await self._request("POST", "/api/v2/companies", data=data)
    
    async def get_company(self, company_id: ResourceId) -> Any:
        return await self._request("GET", f"/api/v2/companies/{company_id}")
    
    async def list_companies(self) -> Any:
        return await self._request("GET", "/api/v2/companies")
    
    async def update_company(self, company_id: ResourceId, data: Payload) -> Any:
        return await self._request("PUT", f"/api/v2/companies/{company_id}", data=data)
    
    async def delete_company(self, company_id: ResourceId) -> Any:
        """Delete a company.

        Contacts of the company are kept but lose the association. A deleted
        company cannot be restored.
        """
        return await self._request("DELETE", f"/api/v2/companies/{company_id}")
