"""Pytest fixtures for callsy tests."""

import json
from unittest.mock import MagicMock

import pytest


@pytest.fixture
def sample_request_data():
    """Sample request document."""
    return {
        "url": "https://api.example.com/users",
        "method": "POST",
        "headers": {
            "Content-Type": "application/json",
            "Content-Length": None,
            "X-Empty": "",
        },
        "body": '{"name": "test"}',
    }


@pytest.fixture
def sample_request_file(sample_request_data, tmp_path):
    """Create a temporary request file."""
    request_file = tmp_path / "request.json"
    with open(request_file, "w", encoding="utf-8") as f:
        json.dump(sample_request_data, f)
    return request_file


@pytest.fixture
def write_request(tmp_path):
    """Write a request document (dict or raw text) and return its path."""
    def _write(data, name="request.json"):
        path = tmp_path / name
        if isinstance(data, str):
            path.write_text(data, encoding="utf-8")
        else:
            path.write_text(json.dumps(data), encoding="utf-8")
        return path
    return _write


@pytest.fixture
def make_mock_client():
    """Factory for a mock httpx.Client whose request() returns a canned response."""
    def _make(status_code=200, headers=None, text=""):
        mock_response = MagicMock()
        mock_response.status_code = status_code
        mock_response.headers = headers if headers is not None else {}
        mock_response.text = text

        mock_client = MagicMock()
        mock_client.__enter__ = MagicMock(return_value=mock_client)
        mock_client.__exit__ = MagicMock(return_value=False)
        mock_client.request.return_value = mock_response
        return mock_client
    return _make
