"""Field values of an InfluxDB point.

A field value is one of five variants: integer, float, string, boolean or
null. Each variant is a frozen dataclass so equality is structural and a
``FieldInt(1)`` never equals a ``FieldFloat(1.0)``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Mapping, Union
import math

import numpy as np
import pandas as pd

from .models import Key

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1


@dataclass(frozen=True)
class FieldInt:
    value: int

    def __post_init__(self) -> None:
        value = self.value
        if isinstance(value, np.integer):
            value = int(value)
            object.__setattr__(self, "value", value)
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(f"FieldInt expects an int, got {type(value).__name__}")
        if not INT64_MIN <= value <= INT64_MAX:
            raise ValueError(f"{value} does not fit in a signed 64-bit integer")

    @property
    def field_type(self) -> str:
        return "integer"


@dataclass(frozen=True)
class FieldFloat:
    """A finite float. NaN and infinity cannot be written to InfluxDB."""

    value: float

    def __post_init__(self) -> None:
        value = self.value
        if isinstance(value, (bool, np.bool_)) or not isinstance(
            value, (float, int, np.floating, np.integer)
        ):
            raise TypeError(f"FieldFloat expects a float, got {type(value).__name__}")
        value = float(value)
        if not math.isfinite(value):
            raise ValueError(f"{value} is not a finite float")
        object.__setattr__(self, "value", value)

    @property
    def field_type(self) -> str:
        return "float"


@dataclass(frozen=True)
class FieldString:
    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str):
            raise TypeError(f"FieldString expects a str, got {type(self.value).__name__}")

    @property
    def field_type(self) -> str:
        return "string"


@dataclass(frozen=True)
class FieldBool:
    value: bool

    def __post_init__(self) -> None:
        if not isinstance(self.value, (bool, np.bool_)):
            raise TypeError(f"FieldBool expects a bool, got {type(self.value).__name__}")
        object.__setattr__(self, "value", bool(self.value))

    @property
    def field_type(self) -> str:
        return "boolean"


@dataclass(frozen=True)
class FieldNull:
    """An absent field value."""

    @property
    def value(self) -> None:
        return None

    @property
    def field_type(self) -> str:
        return "null"


FieldValue = Union[FieldInt, FieldFloat, FieldString, FieldBool, FieldNull]

_FIELD_TYPES = (FieldInt, FieldFloat, FieldString, FieldBool, FieldNull)


def string_value(text: str) -> FieldString:
    """Explicit constructor for string literals."""
    return FieldString(text)


def field_value(obj: Any) -> FieldValue:
    """Convert a plain Python, numpy or pandas scalar to a field value.

    ``None``, ``pandas.NA`` and float NaN become ``FieldNull``; an infinite
    float raises ``ValueError`` like ``FieldFloat`` does. Field values are
    returned unchanged.
    """
    if isinstance(obj, _FIELD_TYPES):
        return obj
    if obj is None or obj is pd.NA:
        return FieldNull()
    # bool before int: bool is an int subclass
    if isinstance(obj, (bool, np.bool_)):
        return FieldBool(bool(obj))
    if isinstance(obj, (int, np.integer)):
        return FieldInt(int(obj))
    if isinstance(obj, (float, np.floating)):
        if math.isnan(obj):
            return FieldNull()
        return FieldFloat(float(obj))
    if isinstance(obj, str):
        return FieldString(obj)
    raise TypeError(f"Cannot use {type(obj).__name__} as a field value")


def fields_from_mapping(mapping: Mapping[Any, Any]) -> Dict[Key, FieldValue]:
    """Build a ``{Key: FieldValue}`` dict from plain keys and values."""
    fields: Dict[Key, FieldValue] = {}
    for name, value in mapping.items():
        key = name if isinstance(name, Key) else Key(name)
        fields[key] = field_value(value)
    return fields
