"""Request file loading."""

from __future__ import annotations

import json
import re
from pathlib import Path
from typing import Any, Optional, Union

import httpx

from ..errors import FileError, ParseError
from .models import RequestDescriptor

REQUIRED_FIELDS = ("url", "method")

# RFC 9110 token characters, used for methods and header names
TOKEN_PATTERN = re.compile(r"[!#$%&'*+.^_`|~0-9A-Za-z-]+")

ALLOWED_SCHEMES = ("http", "https")


def load_request(request_file: Union[str, Path]) -> RequestDescriptor:
    """Load and parse a request file.

    Args:
        request_file: Path to the JSON request file

    Returns:
        RequestDescriptor with the method upper-cased and the body read
        from ``body_path`` when one is given

    Raises:
        FileError: If the request file (or body_path file) cannot be read
        ParseError: If the content is not a valid request document
    """
    request_path = Path(request_file)

    try:
        with open(request_path, "r", encoding="utf-8") as f:
            text = f.read()
    except UnicodeDecodeError as e:
        raise ParseError(f"Request file '{request_path}' is not valid UTF-8: {e}") from e
    except OSError as e:
        raise FileError(f"Cannot read request file '{request_path}': {e}") from e

    return parse_request(text, source=str(request_path))


def parse_request(text: str, source: str = "<request>") -> RequestDescriptor:
    """Parse request JSON text into a RequestDescriptor."""
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise ParseError(
            f"Invalid JSON in '{source}' at line {e.lineno}, column {e.colno}: {e.msg}"
        ) from e

    if not isinstance(data, dict):
        raise ParseError(
            f"Request in '{source}' must be a JSON object, got {_json_type(data)}"
        )

    for name in REQUIRED_FIELDS:
        if name not in data:
            raise ParseError(f"Missing required field '{name}' in '{source}'")

    url = _parse_url(data["url"])
    method = _parse_method(data["method"])
    headers = _parse_headers(data.get("headers"))
    body = _parse_body(data.get("body"), data.get("body_path"))

    return RequestDescriptor(url=url, method=method, headers=headers, body=body)


def _parse_url(value: Any) -> str:
    if not isinstance(value, str):
        raise ParseError(f"'url' must be a string, got {_json_type(value)}")

    try:
        url = httpx.URL(value)
    except httpx.InvalidURL as e:
        raise ParseError(f"Invalid URL '{value}': {e}") from e

    if url.scheme not in ALLOWED_SCHEMES:
        raise ParseError(f"Invalid URL '{value}': scheme must be http or https")
    if not url.host:
        raise ParseError(f"Invalid URL '{value}': missing host")

    return value


def _parse_method(value: Any) -> str:
    if not isinstance(value, str):
        raise ParseError(f"'method' must be a string, got {_json_type(value)}")
    if not TOKEN_PATTERN.fullmatch(value):
        raise ParseError(f"The HTTP method '{value}' is invalid")
    return value.upper()


def _parse_headers(value: Any) -> dict[str, Optional[str]]:
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise ParseError(f"'headers' must be an object, got {_json_type(value)}")

    headers: dict[str, Optional[str]] = {}
    for name, header_value in value.items():
        if not TOKEN_PATTERN.fullmatch(name):
            raise ParseError(f"Invalid header name '{name}'")
        if header_value is not None and not isinstance(header_value, str):
            raise ParseError(
                f"Header '{name}' must be a string or null, "
                f"got {_json_type(header_value)}"
            )
        if header_value is not None and not header_value.isascii():
            raise ParseError(
                f"Header '{name}' has a non-ASCII value; "
                "header values must be ASCII"
            )
        headers[name] = header_value
    return headers


def _parse_body(body: Any, body_path: Any) -> Optional[str]:
    if body is not None and not isinstance(body, str):
        raise ParseError(f"'body' must be a string or null, got {_json_type(body)}")

    if body_path is None:
        return body

    if body is not None:
        raise ParseError("Cannot provide both 'body' and 'body_path'")
    if not isinstance(body_path, str):
        raise ParseError(f"'body_path' must be a string, got {_json_type(body_path)}")

    try:
        with open(body_path, "r", encoding="utf-8") as f:
            return f.read()
    except UnicodeDecodeError as e:
        raise ParseError(f"Body file '{body_path}' is not valid UTF-8: {e}") from e
    except OSError as e:
        raise FileError(f"Cannot read body file '{body_path}': {e}") from e


def _json_type(value: Any) -> str:
    """Name a parsed JSON value's type the way JSON does."""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, list):
        return "array"
    return "object"
