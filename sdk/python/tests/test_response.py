"""Tests for response classification."""
import json
import logging

import httpx
import pytest

from freshdesk_sdk.exceptions import (
    ConflictError,
    ErrorKind,
    FreshdeskAPIError,
    NotFoundError,
)
from freshdesk_sdk.response import APIResult, classify_response


class TestClassifySuccess:
    """200/201/204 handling."""
    
    @pytest.mark.parametrize("status", [200, 201])
    def test_json_body_is_parsed(self, status, sample_ticket):
        """Test a JSON body comes back as the parsed value."""
        result = classify_response(None, status, json.dumps(sample_ticket), "/api/v2/tickets/42")
        
        assert result.ok
        assert result.data == sample_ticket
        assert result.kind is None
        assert result.status_code == status
    
    @pytest.mark.parametrize("status", [200, 201])
    def test_json_array_body(self, status):
        """Test list payloads parse too."""
        result = classify_response(None, status, '[{"id": 1}, {"id": 2}]')
        
        assert result.data == [{"id": 1}, {"id": 2}]
    
    @pytest.mark.parametrize("status", [200, 201])
    def test_non_json_body_is_decode_error(self, status):
        """Test a success status with a non-JSON body is an API error."""
        result = classify_response(None, status, "not json")
        
        assert not result.ok
        assert isinstance(result.error, FreshdeskAPIError)
        assert result.error.message == "Not a JSON response from API"
        assert result.error.response_data is None
        assert result.error.kind == ErrorKind.DECODE
        assert result.kind == ErrorKind.DECODE
    
    @pytest.mark.parametrize("status", [200, 201])
    def test_empty_body_is_decode_error(self, status):
        """Test an empty body does not parse as JSON."""
        result = classify_response(None, status, "")
        
        assert result.error.message == "Not a JSON response from API"
    
    @pytest.mark.parametrize("body", ["", "garbage", '{"id": 1}', None])
    def test_no_content_is_null_success(self, body):
        """Test 204 is success with None whatever the body holds."""
        result = classify_response(None, 204, body)
        
        assert result.ok
        assert result.data is None
        assert result.status_code == 204


class TestClassifyErrors:
    """Error status handling."""
    
    def test_conflict_uses_description(self, conflict_body):
        """Test the description field becomes the error message."""
        result = classify_response(None, 409, json.dumps(conflict_body))
        
        assert isinstance(result.error, ConflictError)
        assert result.error.message == "Name has already been taken"
        assert result.error.response_data == conflict_body
        assert result.error.status_code == 409
        assert result.kind == ErrorKind.APPLICATION
    
    def test_not_found_subclass(self):
        """Test 404 maps to NotFoundError."""
        result = classify_response(None, 404, '{"description": "Record not found"}')
        
        assert isinstance(result.error, NotFoundError)
        assert isinstance(result.error, FreshdeskAPIError)
        assert result.error.message == "Record not found"
    
    @pytest.mark.parametrize("status", [400, 422, 429, 500, 503])
    def test_other_statuses_use_base_error(self, status):
        """Test unmapped statuses use FreshdeskAPIError itself."""
        result = classify_response(None, status, '{"description": "Validation failed"}')
        
        assert type(result.error) is FreshdeskAPIError
        assert result.error.message == "Validation failed"
        assert result.error.kind == ErrorKind.APPLICATION
    
    @pytest.mark.parametrize("status", [400, 404, 409, 500, 302])
    def test_non_json_error_body(self, status):
        """Test a non-JSON error body is a decode error with no payload."""
        result = classify_response(None, status, "<html>Bad Gateway</html>")
        
        assert type(result.error) is FreshdeskAPIError
        assert result.error.message == "Not a JSON response from API"
        assert result.error.response_data is None
        assert result.kind == ErrorKind.DECODE
    
    def test_missing_description_falls_back(self):
        """Test an error payload without description gets the default message."""
        body = {"errors": [{"field": "email", "code": "invalid_value"}]}
        result = classify_response(None, 400, json.dumps(body))
        
        assert result.error.message == "Error in Freshdesk's client API"
        assert result.error.response_data == body
    
    def test_non_object_error_payload_falls_back(self):
        """Test a JSON array error payload gets the default message."""
        result = classify_response(None, 500, "[1, 2]")
        
        assert result.error.message == "Error in Freshdesk's client API"
        assert result.error.response_data == [1, 2]


class TestClassifyTransport:
    """Transport failure handling."""
    
    def test_transport_error_passed_through(self):
        """Test the transport error is delivered unchanged."""
        error = httpx.ConnectError("Connection refused")
        result = classify_response(error, None, None, "/api/v2/tickets")
        
        assert result.error is error
        assert result.kind == ErrorKind.TRANSPORT
        assert result.status_code is None
    
    def test_transport_error_skips_parsing(self, monkeypatch):
        """Test no JSON parsing happens for transport errors."""
        def fail(*args, **kwargs):
            raise AssertionError("json.loads called")
        
        monkeypatch.setattr("freshdesk_sdk.response.json.loads", fail)
        error = httpx.ReadTimeout("timed out")
        
        result = classify_response(error, 200, '{"id": 1}')
        
        assert result.error is error


class TestTraceLogging:
    """Debug trace lines."""
    
    def test_logs_status_path_and_body(self, caplog):
        """Test each classification writes a debug line."""
        with caplog.at_level(logging.DEBUG, logger="freshdesk_sdk"):
            classify_response(None, 409, '{"description": "taken"}', "/api/v2/companies")
        
        assert len(caplog.records) == 1
        message = caplog.records[0].getMessage()
        assert "409" in message
        assert "/api/v2/companies" in message
        assert '{"description": "taken"}' in message
    
    def test_logs_transport_error(self, caplog):
        """Test transport errors are traced too."""
        with caplog.at_level(logging.DEBUG, logger="freshdesk_sdk"):
            classify_response(httpx.ConnectError("refused"), None, None, "/api/v2/tickets")
        
        assert "refused" in caplog.text
        assert "/api/v2/tickets" in caplog.text


class TestAPIResult:
    """Tests for the result union."""
    
    def test_unwrap_success(self):
        """Test unwrap returns the data."""
        assert APIResult.success({"id": 1}).unwrap() == {"id": 1}
    
    def test_unwrap_raises_same_error(self):
        """Test unwrap raises the stored error object."""
        error = httpx.ConnectError("refused")
        result = APIResult.failure(error, ErrorKind.TRANSPORT)
        
        with pytest.raises(httpx.ConnectError) as exc_info:
            result.unwrap()
        
        assert exc_info.value is error
    
    def test_deliver_success_once(self):
        """Test deliver calls the callback once with (None, data)."""
        calls = []
        APIResult.success([1, 2]).deliver(lambda err, data: calls.append((err, data)))
        
        assert calls == [(None, [1, 2])]
    
    def test_deliver_failure_once(self):
        """Test deliver calls the callback once with (error, None)."""
        error = FreshdeskAPIError("boom")
        calls = []
        APIResult.failure(error, ErrorKind.APPLICATION).deliver(
            lambda err, data: calls.append((err, data))
        )
        
        assert calls == [(error, None)]
    
    def test_no_content_delivers_none(self):
        """Test a 204 result delivers None data without an error."""
        calls = []
        classify_response(None, 204, "").deliver(lambda err, data: calls.append((err, data)))
        
        assert calls == [(None, None)]
