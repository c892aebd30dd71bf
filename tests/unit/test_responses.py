from __future__ import annotations

import pytest
import requests

from influxdb_wire.exceptions import BadRequest, IllformedJSON, InfluxException, ServerError
from influxdb_wire.responses import check_results, decode_json, raise_for_response


def make_response(status: int, body: bytes) -> requests.Response:
    response = requests.Response()
    response.status_code = status
    response._content = body
    response.encoding = "utf-8"
    response.request = requests.Request("POST", "http://localhost:8086/write").prepare()
    return response


def test_success_passes() -> None:
    raise_for_response(make_response(204, b""))


def test_client_error_is_bad_request() -> None:
    response = make_response(400, b'{"error":"unable to parse"}')
    with pytest.raises(BadRequest) as excinfo:
        raise_for_response(response)
    assert excinfo.value.request is response.request
    assert "unable to parse" in excinfo.value.message


def test_server_error() -> None:
    with pytest.raises(ServerError) as excinfo:
        raise_for_response(make_response(500, b"timeout"))
    assert isinstance(excinfo.value, InfluxException)
    assert "500" in str(excinfo.value)


def test_decode_json() -> None:
    assert decode_json(make_response(200, b'{"results": []}')) == {"results": []}


def test_decode_json_keeps_raw_body() -> None:
    with pytest.raises(IllformedJSON) as excinfo:
        decode_json(make_response(200, b"<html>"))
    assert excinfo.value.body == b"<html>"


def test_check_results() -> None:
    payload = {"results": [{"statement_id": 0, "series": []}]}
    assert check_results(payload) is payload
    with pytest.raises(ServerError):
        check_results({"results": [{"statement_id": 0, "error": "database not found: x"}]})
    with pytest.raises(ServerError):
        check_results({"error": "error parsing query"})


def test_exception_reprs() -> None:
    assert repr(ServerError("boom")) == "ServerError('boom')"
    assert repr(IllformedJSON("bad", b"x")) == "IllformedJSON('bad', b'x')"
