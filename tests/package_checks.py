from __future__ import annotations

import json
import logging
import sys

import httpx

import adocdb

logger: logging.Logger = logging.getLogger(__name__)

ACCOUNT_URL = "https://myaccount.documents.azure.com"


def _handler(request: httpx.Request) -> httpx.Response:
    if request.url.path.endswith("/docs/missing"):
        body = {"code": "NotFound", "message": "Document not found"}
        return httpx.Response(404, content=json.dumps(body).encode())
    return httpx.Response(204, headers={"x-ms-request-charge": "5.71", "x-ms-session-token": "0:1"})


def _connection_info() -> adocdb.ConnectionInfo:
    return adocdb.get_connection_info(
        account_url=ACCOUNT_URL,
        primary_or_secondary_key="a2V5",
        database_id="MyDatabaseId",
        collection_id="MyCollectionId",
    )


def check_delete_document() -> None:
    logger.info("Checking delete_document...")
    with httpx.Client(transport=httpx.MockTransport(_handler)) as client:
        result = adocdb.delete_document(_connection_info(), "doc-1", client=client)
    assert result.request_charge == 5.71
    assert result.session_token == "0:1"


def check_delete_document_not_found() -> None:
    logger.info("Checking delete_document error handling...")
    with httpx.Client(transport=httpx.MockTransport(_handler)) as client:
        try:
            adocdb.delete_document(_connection_info(), "missing", client=client)
        except adocdb.RemoteOperationError as exc:
            assert exc.code == "NotFound"
        else:
            msg = "RemoteOperationError was not raised"
            raise AssertionError(msg)


def main() -> None:
    r"""Run all package checks to validate installation and
    functionality."""
    try:
        check_delete_document()
        check_delete_document_not_found()

        logger.info("✅ All package checks passed successfully!")
    except Exception:
        logger.exception("❌ Package check failed")
        sys.exit(1)


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    main()
