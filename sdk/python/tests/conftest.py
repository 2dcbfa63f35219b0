"""Pytest fixtures for Freshdesk SDK tests."""
import json

import httpx
import pytest

from freshdesk_sdk import FreshdeskClient


BASE_URL = "https://demo.freshdesk.com"
API_KEY = "abc"


class RecordingTransport(httpx.MockTransport):
    """Mock transport that remembers every request it receives."""
    
    def __init__(self, status_code=200, body="{}", error=None):
        self.requests = []
        self.status_code = status_code
        self.body = body
        self.error = error
        super().__init__(self._handle)
    
    def _handle(self, request):
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        return httpx.Response(self.status_code, text=self.body)
    
    @property
    def last_request(self):
        return self.requests[-1]


@pytest.fixture
def transport():
    """Transport answering 200 with an empty JSON object."""
    return RecordingTransport()


@pytest.fixture
def make_transport():
    """Factory for transports with a chosen status and body."""
    def _make(status_code=200, body=None, error=None):
        if body is None:
            body = "{}"
        elif not isinstance(body, str):
            body = json.dumps(body)
        return RecordingTransport(status_code, body, error)
    return _make


@pytest.fixture
def make_client():
    """Factory for clients wired to a mock transport."""
    def _make(transport, **kwargs):
        return FreshdeskClient(BASE_URL, API_KEY, transport=transport, **kwargs)
    return _make


@pytest.fixture
def sample_ticket():
    """Returns a ticket as the API sends it."""
    return {
        "id": 42,
        "subject": "Printer on fire",
        "description": "<div>Please help</div>",
        "status": 2,
        "priority": 4,
        "requester_id": 1001,
        "tags": ["hardware"],
        "custom_fields": {"cf_floor": "3"},
        "created_at": "2024-01-01T12:00:00Z",
        "updated_at": "2024-01-02T08:30:00Z",
    }


@pytest.fixture
def conflict_body():
    """Returns a 409 payload for a duplicate company name."""
    return {
        "description": "Name has already been taken",
        "errors": [
            {"field": "name", "message": "It should be a unique value", "code": "duplicate_value"}
        ],
    }
