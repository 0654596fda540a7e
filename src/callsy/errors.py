"""Error types for callsy.

Every failure that should end an invocation is a ``CallsyError``. The CLI
catches it, prints ``Error: <kind>: <message>`` to stderr and exits with
status 1.
"""

from __future__ import annotations


class CallsyError(Exception):
    """Base class for errors that abort a callsy invocation."""

    kind = "CallsyError"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


class FileError(CallsyError):
    """A file could not be opened, read, created or written."""

    kind = "FileError"


class ParseError(CallsyError):
    """The request file is malformed or incomplete."""

    kind = "ParseError"


class UnresolvedHeaderError(CallsyError):
    """A header was given as null and its value cannot be computed."""

    kind = "UnresolvedHeaderError"

    def __init__(self, header: str) -> None:
        super().__init__(
            f"Cannot compute a value for the '{header}' header. "
            "Supply a value directly."
        )
        self.header = header


class NetworkError(CallsyError):
    """The HTTP request failed at the transport level."""

    kind = "NetworkError"


class ConfigError(CallsyError):
    """The configuration file is missing or invalid."""

    kind = "ConfigError"
