"""Client configuration for the Freshdesk SDK."""

from typing import Any

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from .exceptions import ConfigurationError

DEFAULT_TIMEOUT = 30.0
DEFAULT_USER_AGENT = "freshdesk-python-sdk/1.0.0"


class ClientConfig(BaseModel):
    """Settings owned by a single client instance."""
    
    model_config = ConfigDict(frozen=True, extra="forbid")
    
    base_url: str
    api_key: str
    timeout: float = DEFAULT_TIMEOUT
    user_agent: str = DEFAULT_USER_AGENT
    debug: bool = False
    
    @field_validator("base_url")
    @classmethod
    def _check_base_url(cls, value: str) -> str:
        value = value.strip().rstrip("/")
        if not value.startswith(("http://", "https://")):
            raise ValueError("base_url must start with http:// or https://")
        return value
    
    @field_validator("api_key")
    @classmethod
    def _check_api_key(cls, value: str) -> str:
        if not value:
            raise ValueError("api_key must not be empty")
        return value
    
    @field_validator("timeout")
    @classmethod
    def _check_timeout(cls, value: float) -> float:
        if value <= 0:
            raise ValueError("timeout must be positive")
        return value
    
    @classmethod
    def create(cls, **values: Any) -> "ClientConfig":
        """Validate values, raising ConfigurationError instead of ValidationError."""
        try:
            return cls(**values)
        except ValidationError as e:
            first = e.errors()[0]
            field = ".".join(str(part) for part in first["loc"]) or None
            raise ConfigurationError(
                f"Invalid client configuration: {first['msg']}", field=field
            ) from e
