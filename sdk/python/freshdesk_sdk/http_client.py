"""HTTP client for the Freshdesk SDK."""

import json
import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Mapping, Optional, Union

import httpx
from pydantic import BaseModel

from .auth import Authenticator
from .config import ClientConfig
from .exceptions import ConfigurationError
from .response import APIResult, classify_response

logger = logging.getLogger(__name__)

ALLOWED_METHODS = frozenset({"GET", "POST", "PUT", "DELETE"})

QueryParams = Union[Mapping[str, Any], BaseModel]
Payload = Union[Mapping[str, Any], BaseModel, List[Any]]


@dataclass(frozen=True)
class RequestDescription:
    """Everything the transport needs to send one request."""
    
    method: str
    url: str
    headers: Dict[str, str]
    params: Optional[Dict[str, str]] = None
    content: Optional[str] = None


def _query_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (list, tuple)):
        return ",".join(_query_value(v) for v in value)
    return str(value)


def serialize_params(params: Optional[QueryParams]) -> Optional[Dict[str, str]]:
    """Flatten query parameters to strings, dropping ``None`` values."""
    if params is None:
        return None
    if isinstance(params, BaseModel):
        params = params.model_dump(mode="json", exclude_none=True)
    
    clean_params = {
        str(key): _query_value(value)
        for key, value in params.items()
        if value is not None
    }
    return clean_params or None


def serialize_body(data: Optional[Payload]) -> Optional[str]:
    """Serialize a request payload to JSON text, or ``None`` for no body."""
    if data is None:
        return None
    if isinstance(data, BaseModel):
        data = data.model_dump(mode="json", exclude_none=True)
    return json.dumps(data)


class HTTPClient:
    """Builds requests for the Freshdesk API and classifies the responses."""
    
    def __init__(
        self,
        config: ClientConfig,
        auth: Authenticator,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        if client is not None and transport is not None:
            raise ConfigurationError(
                "Pass either an httpx client or a transport, not both",
                field="transport",
            )

        self.config = config
        self.auth = auth
        # debug clients trace at INFO, leaving the package logger level alone
        self.trace_level = logging.INFO if config.debug else logging.DEBUG

        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(
            timeout=httpx.Timeout(config.timeout),
            transport=transport,
            follow_redirects=True,
        )
    
    @property
    def base_url(self) -> str:
        return self.config.base_url
    
    async def __aenter__(self) -> "HTTPClient":
        """Async context manager entry."""
        return self
    
    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        """Async context manager exit."""
        await self.close()
    
    async def close(self) -> None:
        """Close the HTTP client if this instance created it."""
        if self._owns_client:
            await self._client.aclose()
    
    def _prepare_headers(self) -> Dict[str, str]:
        headers = {
            "Content-Type": "application/json",
            "User-Agent": self.config.user_agent,
        }
        headers.update(self.auth.get_auth_headers())
        return headers
    
    def _build_url(self, path: str) -> str:
        return f"{self.base_url}/{path.lstrip('/')}"
    
    def build_request(
        self,
        method: str,
        url: str,
        params: Optional[QueryParams] = None,
        data: Optional[Payload] = None,
    ) -> RequestDescription:
        """Describe a request without sending it."""
        method = method.upper()
        if method not in ALLOWED_METHODS:
            raise ValueError(f"Unsupported HTTP method: {method}")
        
        return RequestDescription(
            method=method,
            url=url,
            headers=self._prepare_headers(),
            params=serialize_params(params),
            content=serialize_body(data),
        )
    
    async def send(self, request: RequestDescription) -> httpx.Response:
        """Hand a request description to the transport."""
        return await self._client.request(
            request.method,
            request.url,
            headers=request.headers,
            params=request.params,
            content=request.content,
        )
    
    async def submit(
        self,
        method: str,
        path: str,
        params: Optional[QueryParams] = None,
        data: Optional[Payload] = None,
    ) -> APIResult:
        """Send one request and classify its outcome.

        Transport failures (any ``httpx.RequestError``, decoding errors and
        too many redirects included) come back as a ``transport`` result
        holding the original httpx exception. Every call yields exactly one
        result.
        """
        request = self.build_request(method, self._build_url(path), params, data)
        request_path = httpx.URL(request.url).path
        logger.log(self.trace_level, "%s %s", request.method, request.url)

        try:
            response = await self.send(request)
        except httpx.RequestError as e:
            return classify_response(
                e, None, None, request_path, log_level=self.trace_level
            )

        return classify_response(
            None,
            response.status_code,
            response.text,
            request_path,
            log_level=self.trace_level,
        )
