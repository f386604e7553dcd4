# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2025 Waldiez and contributors.

# pylint: disable=missing-return-doc,missing-param-doc,missing-yield-doc
"""Test password_provider.config.settings.*."""

import pytest
from pydantic import ValidationError

from password_provider.config import (
    DEFAULT_ALGORITHM,
    DEFAULT_PROFILE,
    DEFAULT_SALT_LENGTH,
    Settings,
    SettingsManager,
)


def test_default_settings_load() -> None:
    """Ensure default settings are loaded properly."""
    settings = Settings()
    assert settings.algorithm == DEFAULT_ALGORITHM
    assert settings.profile == DEFAULT_PROFILE
    assert settings.salt_length == DEFAULT_SALT_LENGTH


def test_fixture_settings(settings: Settings) -> None:
    """Ensure the test settings are what the other tests expect."""
    assert settings.log_level == "DEBUG"
    assert settings.algorithm == "argon2id"
    assert settings.profile == "rfc9106-low-memory"


def test_log_level_validator() -> None:
    """Test log level is converted to uppercase if provided as a string."""
    settings = Settings(log_level="debug")
    assert settings.log_level == "DEBUG"


def test_names_are_case_insensitive() -> None:
    """Algorithm and profile names are lower-cased."""
    settings = Settings(algorithm="ARGON2I", profile="RFC9106-High-Memory")
    assert settings.algorithm == "argon2i"
    assert settings.profile == "rfc9106-high-memory"


@pytest.mark.parametrize(
    "field,value",
    [
        ("algorithm", "bcrypt"),
        ("profile", "fast"),
        ("salt_length", 4),
        ("salt_length", 4096),
    ],
)
def test_invalid_values(field: str, value: object) -> None:
    """Values outside the allowed ones are rejected."""
    with pytest.raises(ValidationError):
        Settings(**{field: value})


def test_kebab_case_aliases() -> None:
    """Settings can be populated by their kebab-case names."""
    settings = Settings.model_validate({"salt-length": 32})
    assert settings.salt_length == 32


def test_settings_manager_singleton() -> None:
    """Ensure `SettingsManager` maintains a singleton instance."""
    settings1 = SettingsManager.load_settings()
    settings2 = SettingsManager.get_settings()
    assert id(settings1) == id(settings2)  # Should be the same instance


def test_settings_manager_force_reload() -> None:
    """Ensure `force_reload=True` creates a new instance."""
    settings1 = SettingsManager.load_settings()
    settings2 = SettingsManager.load_settings(
        force_reload=True,
    )
    assert id(settings1) != id(settings2)  # Should be a new instance


def test_settings_manager_reset() -> None:
    """A reset drops the cached instance."""
    settings1 = SettingsManager.get_settings()
    SettingsManager.reset_settings()
    assert id(SettingsManager.get_settings()) != id(settings1)
