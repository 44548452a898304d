r"""HTTP response handling utilities.

This module interprets responses of document operations: it extracts
the request charge and session token of successful responses, and turns
error responses into typed exceptions.
"""

from __future__ import annotations

__all__ = [
    "REQUEST_CHARGE_HEADER",
    "SESSION_TOKEN_HEADER",
    "handle_delete_response",
    "parse_error_body",
    "parse_request_charge",
]

import json
import logging
import math
from typing import TYPE_CHECKING

from adocdb.exceptions import MalformedResponseError, RemoteOperationError, ResponseParseError
from adocdb.models import DeleteResult

if TYPE_CHECKING:
    import httpx

logger: logging.Logger = logging.getLogger(__name__)

REQUEST_CHARGE_HEADER = "x-ms-request-charge"
SESSION_TOKEN_HEADER = "x-ms-session-token"


def parse_request_charge(value: str | None) -> float:
    """Parse the value of the ``x-ms-request-charge`` header.

    Args:
        value: The raw header value, or ``None`` if the header is absent.

    Returns:
        The request charge. An absent header yields ``0.0``.

    Raises:
        MalformedResponseError: If the value is not a finite number.

    Example:
        ```pycon
        >>> from adocdb.utils.response import parse_request_charge
        >>> parse_request_charge("1.5")
        1.5
        >>> parse_request_charge(None)
        0.0

        ```
    """
    if value is None:
        return 0.0
    try:
        charge = float(value)
    except ValueError as exc:
        msg = f"{REQUEST_CHARGE_HEADER} header is not numeric: {value!r}"
        raise MalformedResponseError(msg, header=REQUEST_CHARGE_HEADER, value=value) from exc
    if not math.isfinite(charge):
        msg = f"{REQUEST_CHARGE_HEADER} header is not a finite number: {value!r}"
        raise MalformedResponseError(msg, header=REQUEST_CHARGE_HEADER, value=value)
    return charge


def parse_error_body(response: httpx.Response) -> RemoteOperationError:
    """Build the error describing a non-2xx response.

    Args:
        response: The error response. Its body is expected to be a JSON
            object with ``code`` and ``message`` fields.

    Returns:
        The ``RemoteOperationError`` to raise.

    Raises:
        ResponseParseError: If the body is not JSON, is not an object,
            or lacks ``code`` or ``message``.
    """
    status_code = response.status_code
    try:
        body = json.loads(response.content.decode("utf-8"))
    except (UnicodeDecodeError, ValueError) as exc:
        msg = f"Response with status {status_code} does not contain a valid JSON error body"
        raise ResponseParseError(msg, status_code=status_code, response=response) from exc

    if not isinstance(body, dict):
        msg = (
            f"Response with status {status_code} has a JSON error body of type "
            f"{type(body).__name__}, expected an object"
        )
        raise ResponseParseError(msg, status_code=status_code, response=response)

    missing = [field for field in ("code", "message") if field not in body]
    if missing:
        msg = (
            f"Response with status {status_code} has a JSON error body without "
            f"field(s): {', '.join(missing)}"
        )
        raise ResponseParseError(msg, status_code=status_code, response=response)

    return RemoteOperationError(
        code=str(body["code"]),
        message=str(body["message"]),
        status_code=status_code,
        response=response,
    )


def handle_delete_response(response: httpx.Response, url: str) -> DeleteResult:
    """Interpret the response of a DELETE request.

    Args:
        response: The HTTP response.
        url: The URL that was requested, used in log messages.

    Returns:
        The request charge and session token of a 2xx response.

    Raises:
        RemoteOperationError: If the status code is not 2xx.
        ResponseParseError: If the error body cannot be interpreted.
        MalformedResponseError: If the request charge header is not numeric.
    """
    if response.status_code // 100 != 2:
        logger.debug(f"DELETE request to {url} failed with status {response.status_code}")
        raise parse_error_body(response)

    return DeleteResult(
        request_charge=parse_request_charge(response.headers.get(REQUEST_CHARGE_HEADER)),
        session_token=response.headers.get(SESSION_TOKEN_HEADER, ""),
    )
