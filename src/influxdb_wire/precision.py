"""Time precisions understood by the InfluxDB HTTP API.

Writes and queries accept different sets of precisions: the human readable
RFC3339 format is only available when reading. The restriction is carried by
two enumerations rather than a runtime flag. ``Precision`` holds every
precision and is what query parameters take. ``WritePrecision`` is the subset
without RFC3339 and is the only type the write path and the timestamp
conversions accept, so an RFC3339 write precision cannot be constructed.
"""

from __future__ import annotations

from enum import Enum
from fractions import Fraction
from typing import Dict, Union

from .exceptions import InvalidPrecisionError


class RequestType(Enum):
    """Kind of HTTP request a precision is used with."""

    QUERY = "query"
    WRITE = "write"


class Precision(Enum):
    """Precisions accepted by ``/query``.

    Member values are the wire tokens, so ``Precision("ms")`` parses a token.
    """

    NANOSECOND = "n"
    MICROSECOND = "u"
    MILLISECOND = "ms"
    SECOND = "s"
    MINUTE = "m"
    HOUR = "h"
    # Nanosecond precision in a human readable format such as
    # 2016-01-04T00:00:23.135623Z. Default format for /query.
    RFC3339 = "rfc3339"

    @property
    def request_type(self) -> RequestType:
        return RequestType.QUERY


class WritePrecision(Enum):
    """Precisions accepted by ``/write``. POSIX time only, never RFC3339."""

    NANOSECOND = "n"
    MICROSECOND = "u"
    MILLISECOND = "ms"
    SECOND = "s"
    MINUTE = "m"
    HOUR = "h"

    @property
    def request_type(self) -> RequestType:
        return RequestType.WRITE

    def as_query(self) -> Precision:
        """Widen to the query precision with the same wire token."""
        return Precision(self.value)


AnyPrecision = Union[Precision, WritePrecision]

# Seconds represented by one unit of each precision, keyed by wire token.
_SCALES: Dict[str, Fraction] = {
    "rfc3339": Fraction(1, 10**9),
    "n": Fraction(1, 10**9),
    "u": Fraction(1, 10**6),
    "ms": Fraction(1, 10**3),
    "s": Fraction(1),
    "m": Fraction(60),
    "h": Fraction(60 * 60),
}


def precision_name(precision: AnyPrecision) -> str:
    """Return the wire token of ``precision`` (``"n"``, ``"ms"``, ``"rfc3339"``...)."""
    if not isinstance(precision, (Precision, WritePrecision)):
        raise TypeError(f"Expected a precision, got {type(precision).__name__}")
    return precision.value


def precision_scale(precision: AnyPrecision) -> Fraction:
    """Return the number of seconds one unit of ``precision`` represents.

    The value is an exact rational; RFC3339 scales like nanoseconds.
    """
    return _SCALES[precision_name(precision)]


def to_write_precision(precision: Union[AnyPrecision, str]) -> WritePrecision:
    """Narrow a precision or wire token to a ``WritePrecision``.

    Raises ``InvalidPrecisionError`` for RFC3339 and for unknown tokens.
    """
    if isinstance(precision, WritePrecision):
        return precision
    token = precision.value if isinstance(precision, Precision) else precision
    try:
        return WritePrecision(token)
    except ValueError as exc:
        raise InvalidPrecisionError(
            f"{token!r} is not a valid precision for write requests"
        ) from exc


def to_query_precision(precision: Union[AnyPrecision, str]) -> Precision:
    """Widen a precision or parse a wire token to a query ``Precision``."""
    if isinstance(precision, Precision):
        return precision
    token = precision.value if isinstance(precision, WritePrecision) else precision
    try:
        return Precision(token)
    except ValueError as exc:
        raise InvalidPrecisionError(f"{token!r} is not a known precision") from exc
