"""Identifiers and connection records for influxdb_wire."""

from __future__ import annotations

from dataclasses import dataclass, field

from .exceptions import EmptyIdentifierError


def _require_text(kind: str, name: object) -> None:
    if not isinstance(name, str):
        raise EmptyIdentifierError(f"{kind} name must be a str, got {type(name).__name__}")
    if not name:
        raise EmptyIdentifierError(f"{kind} name must not be empty")


@dataclass(frozen=True, order=True)
class Database:
    """Name of a database. Never empty."""

    name: str

    def __post_init__(self) -> None:
        _require_text("Database", self.name)

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True, order=True)
class Key:
    """Measurement, tag or field key. Never empty."""

    name: str

    def __post_init__(self) -> None:
        _require_text("Key", self.name)

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True, order=True)
class RetentionPolicy:
    name: str

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class Query:
    """Text of an InfluxQL query."""

    text: str

    def __str__(self) -> str:
        return self.text


@dataclass(frozen=True)
class Server:
    host: str = "localhost"
    port: int = 8086
    ssl: bool = False

    @property
    def url(self) -> str:
        scheme = "https" if self.ssl else "http"
        return f"{scheme}://{self.host}:{self.port}"


LOCAL_SERVER = Server()


@dataclass(frozen=True)
class Credentials:
    user: str
    password: str = field(repr=False)
