r"""Unit tests for RequestConfig dataclass.

This file contains tests for the RequestConfig dataclass in
core/config.py.
"""

from __future__ import annotations

import dataclasses

import pytest
from coola.equality import objects_are_equal

from adocdb import ConsistencyLevel
from adocdb.core import API_VERSION, DEFAULT_TIMEOUT, RequestConfig

###################################
#     Tests for RequestConfig     #
###################################


def test_constants() -> None:
    assert API_VERSION == "2016-07-11"
    assert DEFAULT_TIMEOUT == 10.0


def test_request_config_defaults() -> None:
    config = RequestConfig()
    assert config.consistency_level is None
    assert config.session_token == ""
    assert config.user_agent == ""


@pytest.mark.parametrize(
    ("value", "expected"),
    [("Strong", ConsistencyLevel.STRONG), ("eventual", ConsistencyLevel.EVENTUAL), ("", None)],
)
def test_request_config_consistency_level(value: str, expected: ConsistencyLevel | None) -> None:
    assert RequestConfig(consistency_level=value).consistency_level is expected


def test_request_config_invalid_consistency_level() -> None:
    with pytest.raises(ValueError, match=r"Invalid consistency_level 'Weak'"):
        RequestConfig(consistency_level="Weak")


def test_request_config_none_strings() -> None:
    config = RequestConfig(session_token=None, user_agent=None)
    assert config.session_token == ""
    assert config.user_agent == ""


def test_request_config_is_immutable() -> None:
    config = RequestConfig()
    with pytest.raises(dataclasses.FrozenInstanceError):
        config.user_agent = "MyApp/1.0"


def test_request_config_merge() -> None:
    config = RequestConfig(consistency_level="Session", session_token="0:1", user_agent="A/1")
    merged = config.merge(consistency_level=ConsistencyLevel.STRONG, user_agent="B/2")
    assert merged == RequestConfig(
        consistency_level=ConsistencyLevel.STRONG, session_token="0:1", user_agent="B/2"
    )
    assert config.user_agent == "A/1"


def test_request_config_merge_ignores_unset_values() -> None:
    config = RequestConfig(consistency_level="Session", session_token="0:1", user_agent="A/1")
    assert config.merge(consistency_level=None, session_token="", user_agent=None) == config


def test_request_config_merge_invalid_consistency_level() -> None:
    with pytest.raises(ValueError, match=r"Invalid consistency_level"):
        RequestConfig().merge(consistency_level="Weak")


def test_request_config_to_dict() -> None:
    config = RequestConfig(consistency_level="Bounded", session_token="0:7", user_agent="A/1")
    assert objects_are_equal(
        config.to_dict(),
        {"consistency_level": "Bounded", "session_token": "0:7", "user_agent": "A/1"},
    )


def test_request_config_to_dict_defaults() -> None:
    assert objects_are_equal(
        RequestConfig().to_dict(),
        {"consistency_level": "", "session_token": "", "user_agent": ""},
    )


def test_request_config_blank_consistency_level() -> None:
    config = RequestConfig(consistency_level="  ")
    assert config.consistency_level is None
    assert config.to_dict()["consistency_level"] == ""
