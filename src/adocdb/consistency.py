r"""Consistency levels accepted by the ``x-ms-consistency-level``
header."""

from __future__ import annotations

__all__ = ["ConsistencyLevel"]

from enum import Enum


class ConsistencyLevel(Enum):
    """Consistency level override for a single request.

    Members are listed from strongest to weakest. The override must be the
    same or weaker than the account's configured consistency level, which
    is only checked by the service.

    Example:
        ```pycon
        >>> from adocdb.consistency import ConsistencyLevel
        >>> ConsistencyLevel.parse("eventual")
        <ConsistencyLevel.EVENTUAL: 'Eventual'>
        >>> ConsistencyLevel.parse("") is None
        True

        ```
    """

    STRONG = "Strong"
    BOUNDED = "Bounded"
    SESSION = "Session"
    EVENTUAL = "Eventual"

    @classmethod
    def parse(cls, value: ConsistencyLevel | str | None) -> ConsistencyLevel | None:
        """Parse a consistency level from user input.

        Args:
            value: A ``ConsistencyLevel`` member, a level name (matched
                case-insensitively), or ``None``/blank for no override.

        Returns:
            The matching member, or ``None`` if no override is requested.

        Raises:
            ValueError: If ``value`` does not name a known level.
        """
        if value is None or isinstance(value, cls):
            return value
        if not isinstance(value, str):
            msg = f"consistency_level must be a string or ConsistencyLevel, got {type(value).__name__}"
            raise ValueError(msg)
        if value.strip() == "":
            return None
        for member in cls:
            if member.value.lower() == value.strip().lower():
                return member
        valid = ", ".join(member.value for member in cls)
        msg = f"Invalid consistency_level {value!r}. Valid values are: {valid}"
        raise ValueError(msg)
