"""Authentication classes for the Freshdesk SDK."""

import base64
from abc import ABC, abstractmethod
from typing import Dict

from .exceptions import ConfigurationError


class Authenticator(ABC):
    """Base class for authentication methods."""
    
    @abstractmethod
    def get_auth_headers(self) -> Dict[str, str]:
        """Get authentication headers for requests."""
        pass
    
    @property
    @abstractmethod
    def auth_type(self) -> str:
        """Get the authentication type."""
        pass


class APIKeyAuth(Authenticator):
    """API key authentication.

    Freshdesk takes the key as the Basic auth username with ``X`` as the
    password. The header value is computed once and never changes.
    """
    
    def __init__(self, api_key: str) -> None:
        if not api_key:
            raise ConfigurationError("API key must not be empty", field="api_key")
        token = base64.b64encode(f"{api_key}:X".encode("utf-8")).decode("ascii")
        self._credential = f"Basic {token}"
    
    @property
    def credential(self) -> str:
        """The precomputed Authorization header value."""
        return self._credential
    
    def get_auth_headers(self) -> Dict[str, str]:
        """Get Basic authorization headers."""
        return {"Authorization": self._credential}
    
    @property
    def auth_type(self) -> str:
        return "api-key"
    
    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(credential='Basic ***')"
