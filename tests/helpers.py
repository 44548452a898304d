r"""Shared constants for adocdb tests."""

from __future__ import annotations

__all__ = ["ACCOUNT_URL", "DOCUMENT_URL"]

ACCOUNT_URL = "https://myaccount.documents.azure.com"
DOCUMENT_URL = f"{ACCOUNT_URL}/dbs/D/colls/C/docs/X"
