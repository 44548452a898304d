r"""adocdb - Document deletion client for the DocumentDB REST API.

This package deletes single documents from a collection through the
REST API of a cloud-hosted document database. Built on top of the httpx
library, it builds the resource URL, signs the request with the account
master key, sends the DELETE request and returns the request charge and
session token reported by the service.

Key Features:
    - Master key (HMAC-SHA256) request signing
    - Partition key, consistency level, session token and user agent headers
    - Closed ``ConsistencyLevel`` enumeration validated before any I/O
    - Explicit ``RequestConfig`` for shared header defaults
    - Typed errors for service errors, unparsable responses and transport failures
    - Configurable timeout

Example:
    ```pycon
    >>> from adocdb import delete_document, get_connection_info
    >>> my_collection = get_connection_info(
    ...     account_url="https://somedocumentdbaccount.documents.azure.com",
    ...     primary_or_secondary_key="a2V5",
    ...     database_id="MyDatabaseId",
    ...     collection_id="MyCollectionId",
    ... )
    >>> result = delete_document(my_collection, "my-document-id")  # doctest: +SKIP
    >>> print(result.request_charge)  # doctest: +SKIP

    ```
"""

from __future__ import annotations

__all__ = [
    "ConnectionInfo",
    "ConsistencyLevel",
    "DeleteRequest",
    "DeleteResult",
    "DocumentDBError",
    "MalformedResponseError",
    "RemoteOperationError",
    "RequestConfig",
    "ResponseParseError",
    "TransportError",
    "__version__",
    "delete_document",
    "execute_delete",
    "get_connection_info",
]

from importlib.metadata import PackageNotFoundError, version

from adocdb.connection import ConnectionInfo, get_connection_info
from adocdb.consistency import ConsistencyLevel
from adocdb.core.config import RequestConfig
from adocdb.delete import delete_document, execute_delete
from adocdb.exceptions import (
    DocumentDBError,
    MalformedResponseError,
    RemoteOperationError,
    ResponseParseError,
    TransportError,
)
from adocdb.models import DeleteRequest, DeleteResult

try:
    __version__ = version(__name__)
except PackageNotFoundError:  # pragma: no cover
    # Package is not installed, fallback if needed
    __version__ = "0.0.0"
