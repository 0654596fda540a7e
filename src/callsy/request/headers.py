"""Header resolution."""

from __future__ import annotations

from typing import Mapping, Optional

from ..errors import UnresolvedHeaderError

CONTENT_LENGTH = "content-length"


def body_length(body: Optional[str]) -> int:
    """Return the UTF-8 byte length of a request body (0 when absent)."""
    if body is None:
        return 0
    return len(body.encode("utf-8"))


def resolve_headers(
    headers: Mapping[str, Optional[str]],
    body: Optional[str],
) -> dict[str, str]:
    """Turn raw header values into the strings that will be sent.

    String values, including the empty string, pass through unchanged.
    A null ``content-length`` (any casing) becomes the decimal byte length
    of ``body``. Any other null value cannot be filled in.

    Raises:
        UnresolvedHeaderError: a header other than content-length is null
    """
    resolved: dict[str, str] = {}

    for name, value in headers.items():
        if value is not None:
            resolved[name] = value
        elif name.lower() == CONTENT_LENGTH:
            resolved[name] = str(body_length(body))
        else:
            raise UnresolvedHeaderError(name)

    return resolved
