"""HTTP client for sending the described request."""

from __future__ import annotations

import time
from typing import Mapping, Optional

import httpx

from ..errors import NetworkError
from .models import ResponseDescriptor


class CallsyHttpClient:
    """Thin wrapper around ``httpx.Client``.

    Timeouts and redirect handling are left at the httpx defaults.
    Pass an ``httpx.MockTransport`` (or patch
    ``callsy.request.http_client.httpx.Client``) to test without a network.
    """

    def __init__(self, transport: Optional[httpx.BaseTransport] = None) -> None:
        self._transport = transport

    def send(
        self,
        method: str,
        url: str,
        headers: Mapping[str, str],
        body: Optional[str] = None,
    ) -> ResponseDescriptor:
        """Send one request and capture the response.

        Args:
            method: HTTP method, already upper-cased
            url: Absolute http(s) URL
            headers: Resolved header values
            body: Request body text, sent UTF-8 encoded

        Returns:
            ResponseDescriptor with status, headers, body text and timing

        Raises:
            NetworkError: On connection, timeout, TLS or protocol errors
        """
        start = time.monotonic()

        try:
            with httpx.Client(transport=self._transport) as client:
                response = client.request(
                    method=method,
                    url=url,
                    headers=dict(headers),
                    content=body.encode("utf-8") if body is not None else None,
                )
        except httpx.RequestError as e:
            raise NetworkError(f"Error when sending the request to {url}: {e}") from e

        elapsed = (time.monotonic() - start) * 1000  # ms

        return ResponseDescriptor(
            status=response.status_code,
            headers=dict(response.headers),
            body=response.text,
            elapsed_ms=elapsed,
        )
