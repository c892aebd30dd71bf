"""Exceptions for influxdb_wire."""

from __future__ import annotations

from typing import Any, Optional


class InfluxException(Exception):
    """Base exception for failures reported by or about an InfluxDB request."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ServerError(InfluxException):
    """The server reported a failure."""

    def __repr__(self) -> str:
        return f"ServerError({self.message!r})"


class BadRequest(InfluxException):
    """The request was malformed. Carries the offending request."""

    def __init__(self, message: str, request: Optional[Any] = None) -> None:
        super().__init__(message)
        self.request = request

    def __repr__(self) -> str:
        return f"BadRequest({self.message!r}, {self.request!r})"


class IllformedJSON(InfluxException):
    """The response body could not be decoded. Carries the raw body."""

    def __init__(self, message: str, body: bytes = b"") -> None:
        super().__init__(message)
        self.body = body

    def __repr__(self) -> str:
        return f"IllformedJSON({self.message!r}, {self.body!r})"


class EmptyIdentifierError(ValueError):
    """Raised when a database name or key is constructed from empty text."""


class InvalidPrecisionError(ValueError):
    """Raised when a precision is not valid for the request it is used with."""


class TimestampOverflowError(OverflowError):
    """Raised when a converted timestamp does not fit in a signed 64-bit integer."""
