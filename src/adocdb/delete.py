r"""Contains the document DELETE operation."""

from __future__ import annotations

__all__ = ["delete_document", "execute_delete"]

import logging
from typing import TYPE_CHECKING

import httpx

from adocdb.auth import format_http_date, generate_auth_token
from adocdb.core.config import DEFAULT_TIMEOUT, RequestConfig
from adocdb.core.headers import build_headers
from adocdb.core.resource import build_document_link, build_resource_url
from adocdb.core.validation import validate_timeout
from adocdb.models import DeleteRequest, DeleteResult
from adocdb.utils import (
    handle_delete_response,
    handle_request_error,
    handle_timeout_exception,
)
from adocdb.utils.structured_logging import log_structured

if TYPE_CHECKING:
    from adocdb.connection import ConnectionInfo
    from adocdb.consistency import ConsistencyLevel

logger: logging.Logger = logging.getLogger(__name__)


def execute_delete(
    connection_info: ConnectionInfo,
    request: DeleteRequest,
    *,
    client: httpx.Client | None = None,
    config: RequestConfig | None = None,
    timeout: float | httpx.Timeout = DEFAULT_TIMEOUT,
) -> DeleteResult:
    r"""Delete a single document described by a ``DeleteRequest``.

    Values set on ``request`` take precedence over ``config``; unset
    values fall back to the config, and then to an empty header.

    Args:
        connection_info: The collection to delete from.
        request: The document id and per-request header values.
        client: An optional httpx.Client object to use for the request.
            If None, a new client will be created and closed after use.
        config: An optional RequestConfig with default header values.
        timeout: Maximum seconds to wait for the server response.
            Only used if client is None. Must be > 0.

    Returns:
        The request charge and session token of the response.

    Raises:
        RemoteOperationError: If the service answers with a non-2xx status.
        ResponseParseError: If the error body cannot be interpreted.
        MalformedResponseError: If the request charge header is not numeric.
        TransportError: If the request times out or fails at network level.
        ValueError: If timeout is non-positive or the key is not base64.
    """
    validate_timeout(timeout)

    effective_config = (config if config is not None else RequestConfig()).merge(
        consistency_level=request.consistency_level,
        session_token=request.session_token,
        user_agent=request.user_agent,
    )

    resource_link = build_document_link(connection_info, request.document_id)
    url = build_resource_url(connection_info, resource_link)

    date = format_http_date()
    authorization = generate_auth_token(
        verb="DELETE",
        resource_type="docs",
        resource_link=resource_link,
        date=date,
        key=connection_info.primary_or_secondary_key,
    )
    headers = build_headers(
        authorization=authorization,
        date=date,
        partition_key=request.partition_key,
        **effective_config.to_dict(),
    )

    owns_client = client is None
    client = client or httpx.Client(timeout=timeout)
    try:
        logger.debug(f"Sending DELETE request to {url}")
        try:
            response = client.delete(url=url, headers=headers)
        except httpx.TimeoutException as exc:
            handle_timeout_exception(exc, url=url, method="DELETE")
        except httpx.RequestError as exc:
            handle_request_error(exc, url=url, method="DELETE")
    finally:
        if owns_client:
            client.close()

    result = handle_delete_response(response, url=url)
    log_structured(
        logger,
        logging.DEBUG,
        f"DELETE request to {url} succeeded with status {response.status_code}",
        resource_link=resource_link,
        status_code=response.status_code,
        request_charge=result.request_charge,
    )
    return result


def delete_document(
    connection_info: ConnectionInfo,
    document_id: str,
    partition_key: str = "",
    consistency_level: ConsistencyLevel | str | None = None,
    session_token: str = "",
    user_agent: str = "",
    *,
    client: httpx.Client | None = None,
    config: RequestConfig | None = None,
    timeout: float | httpx.Timeout = DEFAULT_TIMEOUT,
) -> DeleteResult:
    r"""Delete a single document from a collection.

    Args:
        connection_info: The collection to delete from, see
            ``get_connection_info``.
        document_id: The id of the document to delete.
        partition_key: The partition key value of the document. Must be
            given if and only if the collection was created with a
            partition key definition.
        consistency_level: Optional consistency level override: Strong,
            Bounded, Session or Eventual. The override must be the same or
            weaker than the account's configured consistency level.
        session_token: Optional session token used with session level
            consistency.
        user_agent: Optional client user agent, recommended format is
            ``{user agent name}/{version}``, e.g. ``ContosoMarketingApp/1.0.0``.
        client: An optional httpx.Client object to use for the request.
            If None, a new client will be created and closed after use.
        config: An optional RequestConfig with default header values.
            Non-empty arguments above override it.
        timeout: Maximum seconds to wait for the server response.
            Only used if client is None. Must be > 0.

    Returns:
        The request charge and session token of the response.

    Raises:
        RemoteOperationError: If the service answers with a non-2xx status.
        ResponseParseError: If the error body cannot be interpreted.
        MalformedResponseError: If the request charge header is not numeric.
        TransportError: If the request times out or fails at network level.
        ValueError: If the consistency level is unknown, the timeout is
            non-positive or the key is not base64.

    Example:
        ```pycon
        >>> from adocdb import delete_document, get_connection_info
        >>> my_collection = get_connection_info(
        ...     account_url="https://somedocumentdbaccount.documents.azure.com",
        ...     primary_or_secondary_key="a2V5",
        ...     database_id="MyDatabaseId",
        ...     collection_id="MyCollectionId",
        ... )
        >>> result = delete_document(
        ...     my_collection, document_id="fe7718ad-0000-4f42-cf5a-e2d79d2156df"
        ... )  # doctest: +SKIP
        >>> result.request_charge  # doctest: +SKIP
        5.71

        ```
    """
    request = DeleteRequest(
        document_id=document_id,
        partition_key=partition_key,
        consistency_level=consistency_level,
        session_token=session_token,
        user_agent=user_agent,
    )
    return execute_delete(
        connection_info,
        request,
        client=client,
        config=config,
        timeout=timeout,
    )
