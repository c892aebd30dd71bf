from __future__ import annotations

import numpy as np
import pandas as pd
import pytest

from influxdb_wire.models import Key
from influxdb_wire.values import (
    FieldBool,
    FieldFloat,
    FieldInt,
    FieldNull,
    FieldString,
    field_value,
    fields_from_mapping,
    string_value,
)


def test_structural_equality() -> None:
    assert FieldInt(1) == FieldInt(1)
    assert FieldString("a") == string_value("a")
    assert FieldNull() == FieldNull()
    assert FieldInt(1) != FieldFloat(1.0)
    assert FieldBool(True) != FieldInt(1)


def test_field_types() -> None:
    assert FieldInt(1).field_type == "integer"
    assert FieldFloat(1.5).field_type == "float"
    assert FieldString("x").field_type == "string"
    assert FieldBool(False).field_type == "boolean"
    assert FieldNull().field_type == "null"
    assert FieldNull().value is None


def test_field_int_validation() -> None:
    with pytest.raises(TypeError):
        FieldInt(True)
    with pytest.raises(TypeError):
        FieldInt(1.5)
    with pytest.raises(ValueError):
        FieldInt(2**63)
    assert FieldInt(np.int64(-5)).value == -5
    assert type(FieldInt(np.int32(3)).value) is int


def test_field_string_requires_text() -> None:
    with pytest.raises(TypeError):
        FieldString(3)


def test_field_value_conversion() -> None:
    assert field_value(True) == FieldBool(True)
    assert field_value(np.bool_(False)) == FieldBool(False)
    assert field_value(7) == FieldInt(7)
    assert field_value(np.int64(7)) == FieldInt(7)
    assert field_value(2.5) == FieldFloat(2.5)
    assert field_value(np.float32(0.5)) == FieldFloat(0.5)
    assert field_value("on") == FieldString("on")
    assert field_value(FieldInt(3)) == FieldInt(3)


def test_field_value_nulls() -> None:
    assert field_value(None) == FieldNull()
    assert field_value(pd.NA) == FieldNull()
    assert field_value(float("nan")) == FieldNull()


def test_field_value_rejects_other_types() -> None:
    with pytest.raises(TypeError):
        field_value([1, 2])


def test_fields_from_mapping() -> None:
    fields = fields_from_mapping({"temp": 21.5, Key("ok"): True})
    assert fields == {Key("temp"): FieldFloat(21.5), Key("ok"): FieldBool(True)}


def test_field_float_rejects_non_numbers() -> None:
    with pytest.raises(TypeError):
        FieldFloat("1.5")
    with pytest.raises(TypeError):
        FieldFloat(True)
    assert FieldFloat(2) == FieldFloat(2.0)
    assert type(FieldFloat(np.float32(0.25)).value) is float


def test_field_float_rejects_nan_and_infinity() -> None:
    with pytest.raises(ValueError):
        FieldFloat(float("nan"))
    with pytest.raises(ValueError):
        FieldFloat(float("inf"))
    with pytest.raises(ValueError):
        field_value(float("-inf"))


def test_field_bool_rejects_non_bools() -> None:
    with pytest.raises(TypeError):
        FieldBool("false")
    with pytest.raises(TypeError):
        FieldBool(1)
    assert FieldBool(np.bool_(True)) == FieldBool(True)
