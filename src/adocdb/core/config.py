r"""Configuration dataclass and defaults for document requests.

This module provides the REST API constants and a dataclass-based
configuration object that carries the per-request header values
(consistency level, session token, user agent) explicitly instead of
relying on global state.
"""

from __future__ import annotations

__all__ = [
    "API_VERSION",
    "DEFAULT_TIMEOUT",
    "KEY_TYPE",
    "TOKEN_VERSION",
    "RequestConfig",
]

from dataclasses import dataclass, replace
from typing import Any

from adocdb.consistency import ConsistencyLevel

# REST API version sent in the x-ms-version header
API_VERSION = "2016-07-11"

# Default timeout in seconds for HTTP requests
# Only used when the library creates its own httpx.Client
DEFAULT_TIMEOUT = 10.0

# Authorization token settings for master key signing
KEY_TYPE = "master"
TOKEN_VERSION = "1.0"


@dataclass(frozen=True)
class RequestConfig:
    """Header-level configuration shared by document requests.

    Empty strings and ``None`` mean "not set": the header is still sent,
    but with an empty value, which the service treats as absent.

    Args:
        consistency_level: Optional consistency level override. Accepts a
            ``ConsistencyLevel`` member or its name (case-insensitive).
        session_token: Optional session token used with session level
            consistency.
        user_agent: Optional client user agent, recommended format is
            ``{user agent name}/{version}``.

    Raises:
        ValueError: If ``consistency_level`` is not a known level.

    Example:
        ```pycon
        >>> from adocdb.core.config import RequestConfig
        >>> config = RequestConfig(consistency_level="session", user_agent="MyApp/1.0")
        >>> config.consistency_level
        <ConsistencyLevel.SESSION: 'Session'>
        >>> merged = config.merge(user_agent="Other/2.0", session_token="")
        >>> merged.user_agent
        'Other/2.0'
        >>> config.user_agent  # Original unchanged
        'MyApp/1.0'

        ```
    """

    consistency_level: ConsistencyLevel | str | None = None
    session_token: str = ""
    user_agent: str = ""

    def __post_init__(self) -> None:
        """Normalize the consistency level.

        Raises:
            ValueError: If the consistency level is not recognized.
        """
        # frozen dataclass: bypass __setattr__ to store the normalized value
        object.__setattr__(
            self, "consistency_level", ConsistencyLevel.parse(self.consistency_level)
        )
        if self.session_token is None:
            object.__setattr__(self, "session_token", "")
        if self.user_agent is None:
            object.__setattr__(self, "user_agent", "")

    def merge(self, **overrides: Any) -> RequestConfig:
        """Create a new config with specified parameters overridden.

        Only overrides that are neither ``None`` nor an empty string are
        applied, so an omitted per-call argument keeps the configured
        value.

        Args:
            **overrides: Keyword arguments for parameters to override.

        Returns:
            A new RequestConfig instance with overrides applied.

        Example:
            ```pycon
            >>> from adocdb.core.config import RequestConfig
            >>> config = RequestConfig(session_token="0:1")
            >>> config.merge(session_token=None).session_token
            '0:1'
            >>> config.merge(session_token="0:2").session_token
            '0:2'

            ```
        """
        filtered_overrides = {k: v for k, v in overrides.items() if v is not None and v != ""}
        return replace(self, **filtered_overrides)

    def to_dict(self) -> dict[str, str]:
        """Convert configuration to the header-facing string values.

        Returns:
            Dictionary with ``consistency_level``, ``session_token`` and
            ``user_agent`` as strings (empty when unset).

        Example:
            ```pycon
            >>> from adocdb.core.config import RequestConfig
            >>> RequestConfig(consistency_level="Eventual").to_dict()
            {'consistency_level': 'Eventual', 'session_token': '', 'user_agent': ''}

            ```
        """
        level = self.consistency_level
        return {
            "consistency_level": level.value if isinstance(level, ConsistencyLevel) else "",
            "session_token": self.session_token,
            "user_agent": self.user_agent,
        }
