# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2025 Waldiez and contributors.

"""Tests for the logging configuration."""
# pylint: disable=missing-return-doc,missing-param-doc,missing-raises-doc

import logging
import logging.config
import os
import sys
from typing import Any
from unittest.mock import patch

import pytest

# noinspection PyProtectedMember
from password_provider._logging import (
    ENV_PREFIX,
    get_log_level,
    get_logging_config,
)


@pytest.fixture(name="mock_logging_config")
def mock_logging_config_fixture() -> dict[str, Any]:
    """Fixture to mock the uvicorn logging configuration."""
    return {
        "formatters": {
            "default": {"fmt": "%(message)s"},
            "access": {"fmt": "%(message)s"},
        },
        "handlers": {
            "default": {"formatter": "default"},
            "access": {"formatter": "access"},
        },
        "loggers": {
            "uvicorn": {"level": "DEBUG", "handlers": []},
            "uvicorn.error": {"level": "DEBUG", "handlers": []},
            "uvicorn.access": {"level": "DEBUG", "handlers": []},
        },
    }


def test_get_logging_config(mock_logging_config: dict[str, Any]) -> None:
    """Test the get_logging_config function."""
    with patch("uvicorn.config.LOGGING_CONFIG", mock_logging_config):
        log_level = "WARNING"
        config = get_logging_config(log_level)
        assert (
            config["formatters"]["default"]["fmt"]
            == "%(levelprefix)s %(asctime)s.%(msecs)06d [%(name)s:%(filename)s:%(lineno)d] %(message)s"  # pylint: disable=line-too-long # noqa: E501
        )
        assert config["formatters"]["default"]["datefmt"] == "%Y-%m-%d %H:%M:%S"
        for module in ("uvicorn", "uvicorn.error", "uvicorn.access"):
            assert module not in config["loggers"]
        assert "access" not in config["handlers"]
        assert "access" not in config["formatters"]

        argon2_logger = config["loggers"]["argon2"]
        assert argon2_logger["handlers"] == ["default"]
        assert argon2_logger["level"] == "INFO"
        assert argon2_logger["propagate"] is False

        for name in ("", "password_provider"):
            module_logger = config["loggers"][name]
            assert module_logger["level"] == log_level
            assert module_logger["handlers"] == ["default"]
            assert module_logger["propagate"] is False
    # the template itself is left untouched
    assert "uvicorn" in mock_logging_config["loggers"]


def test_logging_config_is_usable() -> None:
    """The real config can be applied."""
    config = get_logging_config("DEBUG")
    config["disable_existing_loggers"] = False
    logging.config.dictConfig(config)
    logger = logging.getLogger("password_provider")
    assert logger.level == logging.DEBUG
    assert logger.propagate is False
    logger.propagate = True


def test_get_log_level() -> None:
    """Test get_log_level."""
    original_argv = sys.argv[:]
    sys.argv = ["test_lib.py"]
    os.environ[f"{ENV_PREFIX}LOG_LEVEL"] = "DEBUG"
    assert get_log_level() == "DEBUG"

    os.environ.pop(f"{ENV_PREFIX}LOG_LEVEL", "INVALID")
    assert get_log_level() == "INFO"

    sys.argv = ["test_lib.py", "--debug"]
    assert get_log_level() == "DEBUG"

    sys.argv = ["test_lib.py", "--log-level", "warning"]
    assert get_log_level() == "WARNING"

    os.environ.pop(f"{ENV_PREFIX}LOG_LEVEL", None)
    sys.argv = ["test_lib.py", "--log-level"]
    assert get_log_level() == "INFO"

    os.environ.pop(f"{ENV_PREFIX}LOG_LEVEL", None)
    sys.argv = ["test_lib.py", "--log-level", "INVALID"]
    assert get_log_level() == "INFO"

    sys.argv = ["test_lib.py"]
    os.environ[f"{ENV_PREFIX}LOG_LEVEL"] = "INVALID"
    assert get_log_level() == "INFO"
    assert os.environ[f"{ENV_PREFIX}LOG_LEVEL"] == "INFO"

    sys.argv = original_argv
    os.environ.pop(f"{ENV_PREFIX}LOG_LEVEL", None)
