"""influxdb_wire package."""

from .config import QueryParams, WriteParams, load_env, write_params_from_env
from .exceptions import (
    BadRequest,
    EmptyIdentifierError,
    IllformedJSON,
    InfluxException,
    InvalidPrecisionError,
    ServerError,
    TimestampOverflowError,
)
from .models import LOCAL_SERVER, Credentials, Database, Key, Query, RetentionPolicy, Server
from .point import Point, make_point
from .precision import Precision, RequestType, WritePrecision, precision_name, precision_scale
from .timestamp import Timestamp, posix_seconds, round_to, scale_to
from .values import (
    FieldBool,
    FieldFloat,
    FieldInt,
    FieldNull,
    FieldString,
    FieldValue,
    field_value,
    string_value,
)

__all__ = [
    "QueryParams",
    "WriteParams",
    "load_env",
    "write_params_from_env",
    "BadRequest",
    "EmptyIdentifierError",
    "IllformedJSON",
    "InfluxException",
    "InvalidPrecisionError",
    "ServerError",
    "TimestampOverflowError",
    "LOCAL_SERVER",
    "Credentials",
    "Database",
    "Key",
    "Query",
    "RetentionPolicy",
    "Server",
    "Point",
    "make_point",
    "Precision",
    "RequestType",
    "WritePrecision",
    "precision_name",
    "precision_scale",
    "Timestamp",
    "posix_seconds",
    "round_to",
    "scale_to",
    "FieldBool",
    "FieldFloat",
    "FieldInt",
    "FieldNull",
    "FieldString",
    "FieldValue",
    "field_value",
    "string_value",
]
