r"""Resource link and URL construction."""

from __future__ import annotations

__all__ = ["build_document_link", "build_resource_url"]

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from adocdb.connection import ConnectionInfo


def build_document_link(connection_info: ConnectionInfo, document_id: str) -> str:
    r"""Return the resource link of a document.

    The ids are used verbatim; malformed ids are reported by the service.

    Example:
        ```pycon
        >>> from adocdb import ConnectionInfo
        >>> from adocdb.core.resource import build_document_link
        >>> info = ConnectionInfo("https://acc.example.com", "D", "C", "a2V5")
        >>> build_document_link(info, "X")
        'dbs/D/colls/C/docs/X'

        ```
    """
    return (
        f"dbs/{connection_info.database_id}"
        f"/colls/{connection_info.collection_id}"
        f"/docs/{document_id}"
    )


def build_resource_url(connection_info: ConnectionInfo, resource_link: str) -> str:
    r"""Join the account URL and a resource link.

    Example:
        ```pycon
        >>> from adocdb import ConnectionInfo
        >>> from adocdb.core.resource import build_resource_url
        >>> info = ConnectionInfo("https://acc.example.com", "D", "C", "a2V5")
        >>> build_resource_url(info, "dbs/D/colls/C/docs/X")
        'https://acc.example.com/dbs/D/colls/C/docs/X'

        ```
    """
    return f"{connection_info.account_url}/{resource_link}"
