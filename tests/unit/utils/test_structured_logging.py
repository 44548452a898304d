from __future__ import annotations

import json
import logging
from io import StringIO
from typing import TYPE_CHECKING

import pytest

from adocdb.utils.structured_logging import (
    StructuredFormatter,
    clear_correlation_id,
    get_correlation_id,
    log_structured,
    set_correlation_id,
)

if TYPE_CHECKING:
    from collections.abc import Generator


@pytest.fixture
def logger_and_stream() -> Generator[tuple[logging.Logger, StringIO], None, None]:
    stream = StringIO()
    handler = logging.StreamHandler(stream)
    handler.setFormatter(StructuredFormatter())
    logger = logging.getLogger("adocdb.tests.structured")
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG)
    logger.propagate = False
    yield logger, stream
    logger.removeHandler(handler)
    clear_correlation_id()


##############################################
#     Tests for correlation ID management    #
##############################################


def test_get_correlation_id_initially_none() -> None:
    clear_correlation_id()
    assert get_correlation_id() is None


def test_set_and_clear_correlation_id() -> None:
    set_correlation_id("cleanup-42")
    assert get_correlation_id() == "cleanup-42"
    clear_correlation_id()
    assert get_correlation_id() is None


#########################################
#     Tests for StructuredFormatter     #
#########################################


def test_structured_formatter_basic_log(
    logger_and_stream: tuple[logging.Logger, StringIO],
) -> None:
    logger, stream = logger_and_stream
    logger.info("Deleted document")

    record = json.loads(stream.getvalue())
    assert record["message"] == "Deleted document"
    assert record["level"] == "INFO"
    assert record["logger"] == "adocdb.tests.structured"
    assert record["timestamp"].endswith("Z")
    assert "correlation_id" not in record


def test_structured_formatter_correlation_id(
    logger_and_stream: tuple[logging.Logger, StringIO],
) -> None:
    logger, stream = logger_and_stream
    set_correlation_id("req-1")
    logger.info("Deleted document")

    assert json.loads(stream.getvalue())["correlation_id"] == "req-1"


def test_structured_formatter_redacts_secrets(
    logger_and_stream: tuple[logging.Logger, StringIO],
) -> None:
    logger, stream = logger_and_stream
    logger.info("Signed", extra={"authorization": "type=master", "key": "a2V5", "verb": "DELETE"})

    record = json.loads(stream.getvalue())
    assert record["authorization"] == "***"
    assert record["key"] == "***"
    assert record["verb"] == "DELETE"


def test_structured_formatter_exception(
    logger_and_stream: tuple[logging.Logger, StringIO],
) -> None:
    logger, stream = logger_and_stream
    try:
        msg = "boom"
        raise RuntimeError(msg)
    except RuntimeError:
        logger.exception("Failed")

    assert "RuntimeError: boom" in json.loads(stream.getvalue())["exception"]


####################################
#     Tests for log_structured     #
####################################


def test_log_structured(logger_and_stream: tuple[logging.Logger, StringIO]) -> None:
    logger, stream = logger_and_stream
    log_structured(
        logger,
        logging.DEBUG,
        "DELETE succeeded",
        status_code=204,
        request_charge=1.5,
        resource_link="dbs/D/colls/C/docs/X",
    )

    record = json.loads(stream.getvalue())
    assert record["status_code"] == 204
    assert record["request_charge"] == 1.5
    assert record["resource_link"] == "dbs/D/colls/C/docs/X"
