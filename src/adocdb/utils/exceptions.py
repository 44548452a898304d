r"""Exception handling utilities for transport failures.

This module converts httpx exceptions raised before any response is
received into ``TransportError``.
"""

from __future__ import annotations

__all__ = ["handle_request_error", "handle_timeout_exception"]

import logging
from typing import NoReturn

from adocdb.exceptions import TransportError

logger: logging.Logger = logging.getLogger(__name__)


def handle_timeout_exception(exc: Exception, url: str, method: str) -> NoReturn:
    """Raise a ``TransportError`` for a timed out request.

    Args:
        exc: The timeout exception (typically httpx.TimeoutException).
        url: The URL that was requested.
        method: The HTTP method name.

    Raises:
        TransportError: Always, with ``exc`` chained as the cause.
    """
    logger.debug(f"{method} request to {url} timed out")
    raise TransportError(
        message=f"{method} request to {url} timed out",
        url=url,
        cause=exc,
    ) from exc


def handle_request_error(exc: Exception, url: str, method: str) -> NoReturn:
    """Raise a ``TransportError`` for a network or connection error.

    Args:
        exc: The request error (typically httpx.RequestError or a
            subclass like httpx.ConnectError).
        url: The URL that was requested.
        method: The HTTP method name.

    Raises:
        TransportError: Always, with ``exc`` chained as the cause.
    """
    error_type = type(exc).__name__
    logger.debug(f"{method} request to {url} encountered {error_type}: {exc}")
    raise TransportError(
        message=f"{method} request to {url} failed: {exc}",
        url=url,
        cause=exc,
    ) from exc
