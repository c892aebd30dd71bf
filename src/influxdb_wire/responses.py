"""Classification of InfluxDB HTTP responses into exceptions."""

from __future__ import annotations

from typing import Any, Dict
import logging

import requests

from .exceptions import BadRequest, IllformedJSON, ServerError

logger = logging.getLogger(__name__)


def raise_for_response(response: requests.Response) -> None:
    """Raise ``BadRequest`` for 4xx and ``ServerError`` for other non-2xx responses."""
    status = response.status_code
    if 200 <= status < 300:
        return
    message = f"{status} - {response.text}"
    if 400 <= status < 500:
        raise BadRequest(message, response.request)
    logger.warning("InfluxDB request failed: %s", message)
    raise ServerError(message)


def decode_json(response: requests.Response) -> Dict[str, Any]:
    try:
        return response.json()
    except ValueError as exc:
        raise IllformedJSON(str(exc), response.content) from exc


def check_results(payload: Dict[str, Any]) -> Dict[str, Any]:
    """Raise ``ServerError`` when a statement in a /query result failed."""
    if "error" in payload:
        raise ServerError(payload["error"])
    for result in payload.get("results", []):
        if "error" in result:
            logger.warning("InfluxDB statement failed: %s", result["error"])
            raise ServerError(result["error"])
    return payload
