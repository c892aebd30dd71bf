from __future__ import annotations

import pytest

from influxdb_wire.exceptions import EmptyIdentifierError
from influxdb_wire.models import (
    LOCAL_SERVER,
    Credentials,
    Database,
    Key,
    Query,
    RetentionPolicy,
    Server,
)


def test_database_requires_text() -> None:
    with pytest.raises(EmptyIdentifierError):
        Database("")
    with pytest.raises(EmptyIdentifierError):
        Database(None)
    assert str(Database("mydb")) == "mydb"
    assert Database("mydb").name == "mydb"


def test_key_requires_text() -> None:
    with pytest.raises(EmptyIdentifierError):
        Key("")
    assert str(Key("cpu")) == "cpu"


def test_empty_identifier_error_is_value_error() -> None:
    with pytest.raises(ValueError):
        Key("")


def test_identifiers_compare_by_text() -> None:
    assert Key("a") == Key("a")
    assert Key("a") < Key("b")
    assert sorted([Database("z"), Database("a")]) == [Database("a"), Database("z")]


def test_retention_policy_and_query_are_unvalidated() -> None:
    assert str(RetentionPolicy("")) == ""
    assert str(Query("SELECT * FROM cpu")) == "SELECT * FROM cpu"


def test_default_server() -> None:
    assert LOCAL_SERVER == Server(host="localhost", port=8086, ssl=False)
    assert LOCAL_SERVER.url == "http://localhost:8086"
    assert Server("db.example", 443, ssl=True).url == "https://db.example:443"


def test_credentials_hide_password() -> None:
    creds = Credentials(user="admin", password="secret")
    assert "secret" not in repr(creds)
    assert creds.password == "secret"
