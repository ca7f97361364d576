import os
from unittest import mock

import pytest

from autoresponder_core.config import (
    DEFAULT_API_BASE,
    DEFAULT_TIMEOUT_SECONDS,
    DEFAULT_USER_AGENT,
    FlodeskConfig,
    load_config,
)


def test_defaults_when_environment_is_empty():
    with mock.patch.dict(os.environ, {}, clear=True):
        config = load_config()

    assert config.api_base == DEFAULT_API_BASE == "https://api.flodesk.com/v1"
    assert config.timeout_seconds == DEFAULT_TIMEOUT_SECONDS
    assert config.user_agent == DEFAULT_USER_AGENT


def test_environment_overrides():
    env = {
        "FLODESK_API_BASE": "https://sandbox.flodesk.test/v1/",
        "FLODESK_TIMEOUT_SECONDS": "2.5",
        "FLODESK_USER_AGENT": "Site/2.0",
    }
    config = load_config(env)

    assert config.api_base == "https://sandbox.flodesk.test/v1"
    assert config.timeout_seconds == 2.5
    assert config.user_agent == "Site/2.0"


def test_blank_values_fall_back_to_defaults():
    config = load_config({"FLODESK_API_BASE": "  ", "FLODESK_TIMEOUT_SECONDS": ""})

    assert config.api_base == DEFAULT_API_BASE
    assert config.timeout_seconds == DEFAULT_TIMEOUT_SECONDS


@pytest.mark.parametrize("timeout", ["soon", "0", "-1"])
def test_invalid_timeout_raises(timeout):
    with pytest.raises(ValueError):
        load_config({"FLODESK_TIMEOUT_SECONDS": timeout})


def test_empty_api_base_rejected_by_model():
    with pytest.raises(ValueError):
        FlodeskConfig(api_base="/")
