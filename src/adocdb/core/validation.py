r"""Parameter validation utilities for document requests.

This module provides validation functions that check caller-supplied
parameters before any network I/O happens.
"""

from __future__ import annotations

__all__ = ["validate_connection_fields", "validate_timeout"]

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import httpx


def validate_timeout(timeout: float | httpx.Timeout) -> None:
    """Validate timeout parameter.

    Args:
        timeout: Maximum seconds to wait for server responses.
            Must be > 0 if provided as a numeric value.

    Raises:
        ValueError: If timeout is a numeric value <= 0.

    Example:
        ```pycon
        >>> from adocdb.core.validation import validate_timeout
        >>> validate_timeout(10.0)
        >>> validate_timeout(0)  # doctest: +SKIP
        Traceback (most recent call last):
        ...
        ValueError: timeout must be > 0, got 0

        ```
    """
    if isinstance(timeout, (int, float)) and timeout <= 0:
        msg = f"timeout must be > 0, got {timeout}"
        raise ValueError(msg)


def validate_connection_fields(**fields: str) -> None:
    """Validate that connection fields are non-empty strings.

    Args:
        **fields: Field names mapped to their values.

    Raises:
        ValueError: If any value is not a string or is empty.

    Example:
        ```pycon
        >>> from adocdb.core.validation import validate_connection_fields
        >>> validate_connection_fields(database_id="db", collection_id="coll")
        >>> validate_connection_fields(database_id="")  # doctest: +SKIP
        Traceback (most recent call last):
        ...
        ValueError: database_id must be a non-empty string, got ''

        ```
    """
    for name, value in fields.items():
        if not isinstance(value, str) or not value:
            msg = f"{name} must be a non-empty string, got {value!r}"
            raise ValueError(msg)
