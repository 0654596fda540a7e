"""Tests for the HTTP client (with mocked httpx)."""

from __future__ import annotations

from unittest.mock import MagicMock, patch

import httpx
import pytest

from callsy.errors import NetworkError
from callsy.request.http_client import CallsyHttpClient
from callsy.request.models import ResponseDescriptor


class TestCallsyHttpClient:

    @patch("callsy.request.http_client.httpx.Client")
    def test_send_get_request(self, mock_client_cls: MagicMock, make_mock_client) -> None:
        mock_client = make_mock_client(
            status_code=200,
            headers={"content-type": "text/plain"},
            text="ok",
        )
        mock_client_cls.return_value = mock_client

        response = CallsyHttpClient().send("GET", "https://example.com", {})

        assert isinstance(response, ResponseDescriptor)
        assert response.status == 200
        assert response.headers == {"content-type": "text/plain"}
        assert response.body == "ok"
        assert response.elapsed_ms >= 0
        mock_client.request.assert_called_once_with(
            method="GET",
            url="https://example.com",
            headers={},
            content=None,
        )

    @patch("callsy.request.http_client.httpx.Client")
    def test_send_post_with_body(self, mock_client_cls: MagicMock, make_mock_client) -> None:
        mock_client = make_mock_client(status_code=201, text="{}")
        mock_client_cls.return_value = mock_client

        CallsyHttpClient().send(
            "POST",
            "https://api.example.com/users",
            {"Content-Type": "application/json", "Content-Length": "16"},
            '{"name": "test"}',
        )

        call_kwargs = mock_client.request.call_args.kwargs
        assert call_kwargs["content"] == b'{"name": "test"}'
        assert call_kwargs["headers"] == {
            "Content-Type": "application/json",
            "Content-Length": "16",
        }

    @patch("callsy.request.http_client.httpx.Client")
    def test_body_sent_utf8_encoded(self, mock_client_cls: MagicMock, make_mock_client) -> None:
        mock_client = make_mock_client()
        mock_client_cls.return_value = mock_client

        CallsyHttpClient().send("POST", "https://example.com", {}, "café")

        assert mock_client.request.call_args.kwargs["content"] == "café".encode("utf-8")

    @patch("callsy.request.http_client.httpx.Client")
    def test_empty_body_still_sent(self, mock_client_cls: MagicMock, make_mock_client) -> None:
        mock_client = make_mock_client()
        mock_client_cls.return_value = mock_client

        CallsyHttpClient().send("POST", "https://example.com", {}, "")

        assert mock_client.request.call_args.kwargs["content"] == b""

    @patch("callsy.request.http_client.httpx.Client")
    def test_client_uses_library_defaults(
        self, mock_client_cls: MagicMock, make_mock_client
    ) -> None:
        mock_client_cls.return_value = make_mock_client()

        CallsyHttpClient().send("GET", "https://example.com", {})

        mock_client_cls.assert_called_once_with(transport=None)

    @patch("callsy.request.http_client.httpx.Client")
    def test_error_status_is_not_an_exception(
        self, mock_client_cls: MagicMock, make_mock_client
    ) -> None:
        mock_client_cls.return_value = make_mock_client(status_code=503, text="down")

        response = CallsyHttpClient().send("GET", "https://example.com", {})

        assert response.status == 503
        assert response.body == "down"

    @pytest.mark.parametrize("error", [
        httpx.ConnectError("connection refused"),
        httpx.ReadTimeout("timed out"),
        httpx.RemoteProtocolError("bad response"),
    ])
    @patch("callsy.request.http_client.httpx.Client")
    def test_transport_error_wrapped(
        self, mock_client_cls: MagicMock, error: Exception, make_mock_client
    ) -> None:
        mock_client = make_mock_client()
        mock_client.request.side_effect = error
        mock_client_cls.return_value = mock_client

        with pytest.raises(NetworkError) as exc_info:
            CallsyHttpClient().send("GET", "https://example.com", {})

        assert exc_info.value.__cause__ is error
        assert "https://example.com" in str(exc_info.value)


class TestCallsyHttpClientTransport:
    """Requests go through a real httpx.Client on a MockTransport."""

    @pytest.fixture
    def captured(self):
        return []

    @pytest.fixture
    def client(self, captured):
        def handler(request: httpx.Request) -> httpx.Response:
            captured.append(request)
            return httpx.Response(
                200,
                headers=[
                    ("content-type", "text/plain"),
                    ("x-multi", "a"),
                    ("x-multi", "b"),
                ],
                content=b"ok",
            )
        return CallsyHttpClient(transport=httpx.MockTransport(handler))

    def test_headers_and_body_on_the_wire(self, client, captured) -> None:
        client.send(
            "POST",
            "https://api.example.com/users",
            {"Content-Type": "application/json", "Content-Length": "16", "X-Empty": ""},
            '{"name": "test"}',
        )

        request = captured[0]
        assert request.method == "POST"
        assert str(request.url) == "https://api.example.com/users"
        assert request.headers["content-type"] == "application/json"
        assert request.headers["content-length"] == "16"
        assert request.headers["x-empty"] == ""
        assert request.content == b'{"name": "test"}'

    def test_response_captured(self, client) -> None:
        response = client.send("GET", "https://example.com", {})

        assert response.status == 200
        assert response.body == "ok"
        assert response.headers["content-type"] == "text/plain"
        assert response.headers["x-multi"] == "a, b"

    def test_no_body_sent_when_absent(self, client, captured) -> None:
        client.send("GET", "https://example.com", {})
        assert captured[0].content == b""

    def test_transport_error_wrapped(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("refused", request=request)

        client = CallsyHttpClient(transport=httpx.MockTransport(handler))
        with pytest.raises(NetworkError, match="refused"):
            client.send("GET", "https://example.com", {})
