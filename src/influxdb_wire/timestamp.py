"""Conversion of time values to InfluxDB integer timestamps.

Every supported time value is first turned into an exact number of seconds
since the Unix epoch by :func:`posix_seconds`, then either snapped to a
precision (:func:`round_to`, reported in nanoseconds) or counted in units of
a precision (:func:`scale_to`). Arithmetic is done on ``Fraction`` so the
result does not depend on float representation, and rounding uses the
built-in ``round`` (ties go to the even neighbour).

New time types are supported either by registering a converter::

    @posix_seconds.register
    def _(value: MyInstant) -> Fraction:
        return Fraction(value.nanos, 10**9)

or by implementing the :class:`Timestamp` protocol directly.
"""

from __future__ import annotations

from datetime import UTC, datetime, timedelta
from decimal import Decimal
from fractions import Fraction
from functools import singledispatch
from numbers import Integral, Real
from typing import Any, Protocol, Union, runtime_checkable

import numpy as np
import pandas as pd

from .exceptions import TimestampOverflowError
from .precision import AnyPrecision, WritePrecision, precision_scale, to_write_precision

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1

_EPOCH = datetime(1970, 1, 1, tzinfo=UTC)
_NANOS_PER_SECOND = 10**9


@runtime_checkable
class Timestamp(Protocol):
    """Something that converts itself to an InfluxDB timestamp."""

    def round_to(self, precision: WritePrecision) -> int:
        """Round to ``precision`` and express the result in nanoseconds."""

    def scale_to(self, precision: WritePrecision) -> int:
        """Express the time as a count of ``precision`` units."""


@singledispatch
def posix_seconds(time: Any) -> Fraction:
    """Return ``time`` as exact seconds since the Unix epoch."""
    raise TypeError(f"Unsupported timestamp type: {type(time).__name__}")


@posix_seconds.register
def _(time: datetime) -> Fraction:
    if time.tzinfo is None:
        time = time.replace(tzinfo=UTC)
    return posix_seconds(time - _EPOCH)


@posix_seconds.register(type(pd.NaT))
def _(time: Any) -> Fraction:
    raise ValueError("NaT cannot be converted to a timestamp")


@posix_seconds.register
def _(time: pd.Timestamp) -> Fraction:
    if pd.isna(time):
        raise ValueError("NaT cannot be converted to a timestamp")
    return Fraction(time.value, _NANOS_PER_SECOND)


@posix_seconds.register
def _(time: np.datetime64) -> Fraction:
    converted = pd.Timestamp(time)
    if pd.isna(converted):
        raise ValueError("NaT cannot be converted to a timestamp")
    return posix_seconds(converted)


@posix_seconds.register
def _(time: timedelta) -> Fraction:
    whole = time.days * 86400 + time.seconds
    return Fraction(whole) + Fraction(time.microseconds, 10**6)


@posix_seconds.register
def _(time: pd.Timedelta) -> Fraction:
    if pd.isna(time):
        raise ValueError("NaT cannot be converted to a timestamp")
    return Fraction(time.value, _NANOS_PER_SECOND)


@posix_seconds.register
def _(time: Real) -> Fraction:
    if isinstance(time, bool):
        raise TypeError("bool is not a timestamp")
    if isinstance(time, Integral):
        return Fraction(int(time))
    # Fraction(float) raises on NaN and infinity.
    return Fraction(time)


@posix_seconds.register
def _(time: Decimal) -> Fraction:
    return Fraction(time)


def round_at(scale: Fraction, seconds: Fraction) -> Fraction:
    """Snap ``seconds`` to the nearest multiple of ``scale``."""
    return round(seconds / scale) * scale


def round_to(precision: Union[AnyPrecision, str], time: Any) -> int:
    """Round ``time`` to ``precision`` and return it in nanoseconds.

    >>> round_to(WritePrecision.SECOND, 1.6)
    2000000000
    """
    precision = to_write_precision(precision)
    if isinstance(time, Timestamp):
        return time.round_to(precision)
    rounded = round_at(precision_scale(precision), posix_seconds(time))
    return _to_int64(round(rounded * _NANOS_PER_SECOND))


def scale_to(precision: Union[AnyPrecision, str], time: Any) -> int:
    """Return ``time`` as a whole number of ``precision`` units since the epoch.

    >>> scale_to(WritePrecision.MINUTE, 100)
    2
    """
    precision = to_write_precision(precision)
    if isinstance(time, Timestamp):
        return time.scale_to(precision)
    return _to_int64(round(posix_seconds(time) / precision_scale(precision)))


def _to_int64(value: int) -> int:
    if not INT64_MIN <= value <= INT64_MAX:
        raise TimestampOverflowError(f"Timestamp {value} does not fit in a signed 64-bit integer")
    return value
