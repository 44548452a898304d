from __future__ import annotations

from typing import TYPE_CHECKING
from unittest.mock import Mock

import httpx
import pytest

from adocdb import ConnectionInfo
from tests.helpers import ACCOUNT_URL

if TYPE_CHECKING:
    from collections.abc import Callable


@pytest.fixture
def connection_info() -> ConnectionInfo:
    """Create connection information for database D and collection C."""
    # "a2V5" is base64 for "key"
    return ConnectionInfo(
        account_url=ACCOUNT_URL,
        database_id="D",
        collection_id="C",
        primary_or_secondary_key="a2V5",
    )


@pytest.fixture
def mock_client() -> httpx.Client:
    """Create a mock httpx.Client for testing."""
    return Mock(spec=httpx.Client)


@pytest.fixture
def mock_response() -> httpx.Response:
    """Create a mock 204 httpx.Response for testing."""
    return Mock(
        spec=httpx.Response,
        status_code=204,
        headers=httpx.Headers(
            {"x-ms-request-charge": "1.5", "x-ms-session-token": "0:12"}
        ),
    )


@pytest.fixture
def make_transport_client() -> Callable[..., tuple[httpx.Client, list[httpx.Request]]]:
    """Create a factory of httpx.Client objects backed by a
    MockTransport that records the requests it receives."""

    def factory(
        status_code: int = 204,
        headers: dict[str, str] | None = None,
        content: bytes = b"",
    ) -> tuple[httpx.Client, list[httpx.Request]]:
        requests: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            requests.append(request)
            return httpx.Response(status_code, headers=headers, content=content)

        return httpx.Client(transport=httpx.MockTransport(handler)), requests

    return factory
