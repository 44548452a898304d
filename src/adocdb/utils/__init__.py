r"""Utility functions for document requests."""

from __future__ import annotations

__all__ = [
    "handle_delete_response",
    "handle_request_error",
    "handle_timeout_exception",
    "parse_error_body",
    "parse_request_charge",
]

from adocdb.utils.exceptions import handle_request_error, handle_timeout_exception
from adocdb.utils.response import (
    handle_delete_response,
    parse_error_body,
    parse_request_charge,
)
