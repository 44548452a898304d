r"""Contains the connection information for a document collection."""

from __future__ import annotations

__all__ = ["ConnectionInfo", "get_connection_info"]

from dataclasses import dataclass

from adocdb.core.validation import validate_connection_fields


@dataclass(frozen=True)
class ConnectionInfo:
    """Immutable description of the collection to operate on.

    Args:
        account_url: The account endpoint, e.g.
            ``https://myaccount.documents.azure.com``.
        database_id: The id of the database.
        collection_id: The id of the collection.
        primary_or_secondary_key: The base64-encoded master key of the
            account.
    """

    account_url: str
    database_id: str
    collection_id: str
    primary_or_secondary_key: str

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__qualname__}(account_url={self.account_url!r}, "
            f"database_id={self.database_id!r}, collection_id={self.collection_id!r}, "
            "primary_or_secondary_key='***')"
        )


def get_connection_info(
    account_url: str,
    primary_or_secondary_key: str,
    database_id: str,
    collection_id: str,
) -> ConnectionInfo:
    r"""Build a validated ``ConnectionInfo``.

    A trailing ``/`` on the account URL is removed so that resource URLs
    never contain a double slash.

    Args:
        account_url: The account endpoint.
        primary_or_secondary_key: The base64-encoded master key.
        database_id: The id of the database.
        collection_id: The id of the collection.

    Returns:
        The connection information.

    Raises:
        ValueError: If any field is empty.

    Example:
        ```pycon
        >>> from adocdb import get_connection_info
        >>> info = get_connection_info(
        ...     account_url="https://myaccount.documents.azure.com/",
        ...     primary_or_secondary_key="a2V5",
        ...     database_id="MyDatabaseId",
        ...     collection_id="MyCollectionId",
        ... )
        >>> info.account_url
        'https://myaccount.documents.azure.com'

        ```
    """
    validate_connection_fields(
        account_url=account_url,
        primary_or_secondary_key=primary_or_secondary_key,
        database_id=database_id,
        collection_id=collection_id,
    )
    return ConnectionInfo(
        account_url=account_url.rstrip("/"),
        database_id=database_id,
        collection_id=collection_id,
        primary_or_secondary_key=primary_or_secondary_key,
    )
