r"""Master key authorization for the document database REST API.

The service authenticates each request with a token built from an
HMAC-SHA256 signature over the HTTP verb, resource type, resource link
and request date, keyed with the base64-decoded account key.

Example:
    ```pycon
    >>> from adocdb.auth import format_http_date, generate_auth_token
    >>> date = format_http_date(0)
    >>> date
    'Thu, 01 Jan 1970 00:00:00 GMT'
    >>> token = generate_auth_token(
    ...     verb="DELETE",
    ...     resource_type="docs",
    ...     resource_link="dbs/D/colls/C/docs/X",
    ...     date=date,
    ...     key="a2V5",
    ... )
    >>> token.startswith("type%3Dmaster%26ver%3D1.0%26sig%3D")
    True

    ```
"""

from __future__ import annotations

__all__ = ["format_http_date", "generate_auth_token"]

import base64
import binascii
import hashlib
import hmac
import time
from email.utils import formatdate
from urllib.parse import quote

from adocdb.core.config import KEY_TYPE, TOKEN_VERSION


def format_http_date(timestamp: float | None = None) -> str:
    r"""Format a timestamp as an RFC 1123 HTTP date.

    Args:
        timestamp: Seconds since the epoch. Defaults to the current time.

    Returns:
        The date, e.g. ``Tue, 15 Nov 1994 08:12:31 GMT``.
    """
    return formatdate(time.time() if timestamp is None else timestamp, usegmt=True)


def generate_auth_token(
    verb: str,
    resource_type: str,
    resource_link: str,
    date: str,
    key: str,
    key_type: str = KEY_TYPE,
    token_version: str = TOKEN_VERSION,
) -> str:
    r"""Generate the value of the ``authorization`` header.

    Args:
        verb: The HTTP verb, e.g. ``DELETE``.
        resource_type: The resource type, e.g. ``docs``.
        resource_link: The resource link without the host, e.g.
            ``dbs/D/colls/C/docs/X``. Case is preserved.
        date: The HTTP date also sent in the ``x-ms-date`` header.
        key: The base64-encoded account key.
        key_type: The key type.
        token_version: The token version.

    Returns:
        The URL-encoded authorization token.

    Raises:
        ValueError: If ``key`` is not valid base64.
    """
    try:
        decoded_key = base64.b64decode(key, validate=True)
    except (binascii.Error, ValueError) as exc:
        msg = "key must be a valid base64-encoded string"
        raise ValueError(msg) from exc

    payload = (
        f"{verb.lower()}\n{resource_type.lower()}\n{resource_link}\n{date.lower()}\n\n"
    )
    digest = hmac.new(decoded_key, payload.encode("utf-8"), hashlib.sha256).digest()
    signature = base64.b64encode(digest).decode("utf-8")
    return quote(f"type={key_type}&ver={token_version}&sig={signature}", safe="-_.!~*'()")
