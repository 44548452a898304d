r"""Request header construction for document operations.

All optional headers are always sent; an empty value is treated by the
service as absent.
"""

from __future__ import annotations

__all__ = ["build_headers", "encode_partition_key"]

from adocdb.core.config import API_VERSION


def encode_partition_key(partition_key: str | None) -> str:
    r"""Encode a partition key for the ``x-ms-documentdb-partitionkey``
    header.

    Args:
        partition_key: The partition key value, or ``None``/``""`` when
            the collection has no partition key definition.

    Returns:
        The value wrapped in a single-element JSON array literal, or an
        empty string.

    Example:
        ```pycon
        >>> from adocdb.core.headers import encode_partition_key
        >>> encode_partition_key("abc")
        '["abc"]'
        >>> encode_partition_key("")
        ''

        ```
    """
    if not partition_key:
        return ""
    return f'["{partition_key}"]'


def build_headers(
    *,
    authorization: str,
    date: str,
    partition_key: str = "",
    consistency_level: str = "",
    session_token: str = "",
    user_agent: str = "",
) -> dict[str, str | bytes]:
    r"""Build the headers of a document request.

    Caller-supplied values (partition key, session token, user agent) are
    encoded as UTF-8 bytes, since httpx only encodes ``str`` values as
    ASCII.

    Args:
        authorization: The signed authorization token.
        date: The HTTP date used to sign the token.
        partition_key: The raw partition key value (encoded here).
        consistency_level: The consistency level wire value.
        session_token: The session token.
        user_agent: The client user agent.

    Returns:
        The header mapping.

    Example:
        ```pycon
        >>> from adocdb.core.headers import build_headers
        >>> headers = build_headers(authorization="token", date="d", partition_key="caf\u00e9")
        >>> headers["x-ms-documentdb-partitionkey"]
        b'["caf\xc3\xa9"]'

        ```
    """
    return {
        "Accept": "application/json",
        "authorization": authorization,
        "x-ms-date": date,
        "x-ms-version": API_VERSION,
        "x-ms-documentdb-partitionkey": encode_partition_key(partition_key).encode("utf-8"),
        "x-ms-consistency-level": consistency_level,
        "x-ms-session-token": session_token.encode("utf-8"),
        "User-Agent": user_agent.encode("utf-8"),
    }
