"""Data models for requests and responses."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional


@dataclass(frozen=True)
class RequestDescriptor:
    """HTTP request as read from the request file.

    Header values are ``None`` where the file says ``null``; they are
    resolved into strings before sending (see ``resolve_headers``).
    """

    url: str
    method: str
    headers: dict[str, Optional[str]] = field(default_factory=dict)
    body: Optional[str] = None


@dataclass(frozen=True)
class ResponseDescriptor:
    """HTTP response as written to the response file."""

    status: int
    headers: dict[str, str] = field(default_factory=dict)
    body: Optional[str] = None
    elapsed_ms: float = 0.0  # not serialized
