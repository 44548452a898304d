r"""Define the exceptions raised by document operations."""

from __future__ import annotations

__all__ = [
    "DocumentDBError",
    "MalformedResponseError",
    "RemoteOperationError",
    "ResponseParseError",
    "TransportError",
]

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import httpx


class DocumentDBError(Exception):
    r"""Base class for all errors raised by ``adocdb``."""


class RemoteOperationError(DocumentDBError):
    r"""Raised when the service answers with a non-2xx status code.

    Args:
        code: The error code reported by the service (e.g. ``NotFound``).
        message: The error message reported by the service.
        status_code: The HTTP status code of the response.
        response: The HTTP response object.

    Example:
        ```pycon
        >>> from adocdb.exceptions import RemoteOperationError
        >>> error = RemoteOperationError(code="NotFound", message="Document not found")
        >>> str(error)
        'A NotFound error occured during DocumentDB querying. Error Message: Document not found'

        ```
    """

    def __init__(
        self,
        code: str,
        message: str,
        status_code: int | None = None,
        response: httpx.Response | None = None,
    ) -> None:
        super().__init__(
            f"A {code} error occured during DocumentDB querying. Error Message: {message}"
        )
        self.code = code
        self.message = message
        self.status_code = status_code
        self.response = response


class ResponseParseError(DocumentDBError):
    r"""Raised when an error response body cannot be interpreted.

    Args:
        message: Description of the parse failure.
        status_code: The HTTP status code of the response.
        response: The HTTP response object.
    """

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        response: httpx.Response | None = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.response = response


class MalformedResponseError(DocumentDBError):
    r"""Raised when a successful response carries an unusable header.

    Args:
        message: Description of the problem.
        header: The header name.
        value: The raw header value.
    """

    def __init__(self, message: str, header: str, value: str | None) -> None:
        super().__init__(message)
        self.header = header
        self.value = value


class TransportError(DocumentDBError):
    r"""Raised when the request does not produce any HTTP response.

    Args:
        message: Description of the failure.
        url: The URL that was requested.
        cause: The underlying httpx exception.
    """

    def __init__(self, message: str, url: str, cause: Exception | None = None) -> None:
        super().__init__(message)
        self.url = url
        self.__cause__ = cause
