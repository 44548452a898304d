r"""Core request building logic: configuration, validation, resource
links and headers."""

from __future__ import annotations

__all__ = [
    "API_VERSION",
    "DEFAULT_TIMEOUT",
    "RequestConfig",
    "build_document_link",
    "build_headers",
    "build_resource_url",
    "encode_partition_key",
    "validate_connection_fields",
    "validate_timeout",
]

from adocdb.core.config import API_VERSION, DEFAULT_TIMEOUT, RequestConfig
from adocdb.core.headers import build_headers, encode_partition_key
from adocdb.core.resource import build_document_link, build_resource_url
from adocdb.core.validation import validate_connection_fields, validate_timeout
