"""Configuration loading for influxdb_wire."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional
import logging
import os

from dotenv import load_dotenv

from .models import LOCAL_SERVER, Credentials, Database, RetentionPolicy, Server
from .precision import Precision, WritePrecision, precision_name, to_write_precision
from .timestamp import scale_to

logger = logging.getLogger(__name__)


def load_env() -> None:
    """Load environment variables from a .env file if present."""
    load_dotenv()


def _get_bool(value: Optional[str], default: bool = False) -> bool:
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "y", "on"}


def _dict_get(d: Mapping[str, Any], key: str, fallback: Any = None) -> Any:
    if key in d:
        return d[key]
    return fallback


def server_from_env() -> Server:
    load_env()
    return Server(
        host=os.getenv("INFLUXDB_V1_HOST", os.getenv("INFLUXDB_HOST", LOCAL_SERVER.host)),
        port=int(os.getenv("INFLUXDB_V1_PORT", os.getenv("INFLUXDB_PORT", str(LOCAL_SERVER.port)))),
        ssl=_get_bool(os.getenv("INFLUXDB_V1_SSL", os.getenv("INFLUXDB_SSL")), LOCAL_SERVER.ssl),
    )


def credentials_from_env() -> Optional[Credentials]:
    load_env()
    user = os.getenv("INFLUXDB_V1_USER", os.getenv("INFLUXDB_USER"))
    if not user:
        return None
    password = os.getenv("INFLUXDB_V1_PASSWORD", os.getenv("INFLUXDB_PWD", ""))
    return Credentials(user=user, password=password)


def resolve_server(server: Server | Mapping[str, Any]) -> Server:
    if isinstance(server, Server):
        return server
    return Server(
        host=_dict_get(server, "host", LOCAL_SERVER.host),
        port=int(_dict_get(server, "port", LOCAL_SERVER.port)),
        ssl=bool(_dict_get(server, "ssl", LOCAL_SERVER.ssl)),
    )


@dataclass(frozen=True)
class WriteParams:
    """Settings of a /write request."""

    database: Database
    server: Server = LOCAL_SERVER
    precision: WritePrecision = WritePrecision.NANOSECOND
    retention_policy: Optional[RetentionPolicy] = None
    credentials: Optional[Credentials] = None

    def __post_init__(self) -> None:
        if not isinstance(self.precision, WritePrecision):
            raise TypeError(
                f"WriteParams.precision must be a WritePrecision, got {type(self.precision).__name__}"
            )

    def request_params(self) -> Dict[str, str]:
        params = {"db": str(self.database), "precision": precision_name(self.precision)}
        if self.retention_policy is not None:
            params["rp"] = str(self.retention_policy)
        logger.debug("Write params: %s", params)
        return params

    def timestamp(self, time: Any) -> int:
        """Scale ``time`` to this request's precision."""
        return scale_to(self.precision, time)


@dataclass(frozen=True)
class QueryParams:
    """Settings of a /query request."""

    database: Database
    server: Server = LOCAL_SERVER
    precision: Precision = Precision.RFC3339
    credentials: Optional[Credentials] = None

    def request_params(self) -> Dict[str, str]:
        params = {"db": str(self.database)}
        # RFC3339 is the server default and has no epoch token
        if self.precision is not Precision.RFC3339:
            params["epoch"] = precision_name(self.precision)
        logger.debug("Query params: %s", params)
        return params


def write_params_from_env() -> WriteParams:
    load_env()
    database = os.getenv("INFLUXDB_V1_DATABASE", os.getenv("INFLUXDB_DB", ""))
    precision = os.getenv("INFLUXDB_PRECISION", precision_name(WritePrecision.NANOSECOND))
    return WriteParams(
        database=Database(database),
        server=server_from_env(),
        precision=to_write_precision(precision),
        credentials=credentials_from_env(),
    )
