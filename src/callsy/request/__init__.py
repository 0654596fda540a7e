"""Request loading, header resolution, sending and response writing."""

from .models import RequestDescriptor, ResponseDescriptor
from .loader import load_request, parse_request
from .headers import body_length, resolve_headers
from .http_client import CallsyHttpClient
from .writer import response_to_dict, write_body, write_response

__all__ = [
    "RequestDescriptor",
    "ResponseDescriptor",
    "load_request",
    "parse_request",
    "body_length",
    "resolve_headers",
    "CallsyHttpClient",
    "response_to_dict",
    "write_body",
    "write_response",
]
