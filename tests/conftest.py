# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2025 Waldiez and contributors.
# pylint: disable=missing-return-doc,missing-yield-doc,missing-param-doc
"""Shared fixtures for tests."""

import os
from collections.abc import Generator
from typing import Any, Dict

import pytest

from password_provider.config import Settings, SettingsManager
from password_provider.hashing import Argon2Hasher, CostParameters
from password_provider.resources import (
    EXPLICIT_SALT,
    GENERATED_SALT,
    Argon2Resource,
    ProviderData,
)

ENV_KEY_PREFIX = "PASSWORD_PROVIDER_"

# cheap enough for the test suite, still valid argon2 parameters
FAST_PARAMS = CostParameters(
    key_length=32,
    parallelism=1,
    memory_kib=1024,
    iterations=1,
)


@pytest.fixture(scope="function", autouse=True)
def reset_settings_and_env() -> Generator[None, None, None]:
    """Automatically reset SettingsManager before each test."""
    SettingsManager.reset_settings()
    for key in list(os.environ):
        if key.startswith(ENV_KEY_PREFIX):
            os.environ.pop(key, "")
    yield
    SettingsManager.reset_settings()


@pytest.fixture(name="settings")
def settings_fixture() -> Settings:
    """Fixture to create a Settings instance."""
    return Settings(
        log_level="DEBUG",
        algorithm="argon2id",
        profile="rfc9106-low-memory",
        salt_length=16,
    )


@pytest.fixture(name="fast_params")
def fast_params_fixture() -> CostParameters:
    """Cheap cost parameters."""
    return FAST_PARAMS


@pytest.fixture(name="hasher")
def hasher_fixture() -> Argon2Hasher:
    """An argon2id hasher."""
    return Argon2Hasher()


@pytest.fixture(name="provider_data")
def provider_data_fixture(settings: Settings) -> ProviderData:
    """Provider data built from the test settings."""
    return ProviderData.from_settings(settings)


@pytest.fixture(name="explicit_resource")
def explicit_resource_fixture(provider_data: ProviderData) -> Argon2Resource:
    """A configured explicit-salt resource."""
    resource = Argon2Resource(EXPLICIT_SALT)
    resource.configure(provider_data)
    return resource


@pytest.fixture(name="generated_resource")
def generated_resource_fixture(provider_data: ProviderData) -> Argon2Resource:
    """A configured generated-salt resource."""
    resource = Argon2Resource(GENERATED_SALT)
    resource.configure(provider_data)
    return resource


def make_plan(
    password: str,
    salt: str | None = None,
    params: CostParameters | None = FAST_PARAMS,
    **extra: Any,
) -> Dict[str, Any]:
    """Build a plan as the configuration engine would send it."""
    plan: Dict[str, Any] = {"password": password}
    if salt is not None:
        plan["salt"] = salt
    if params is not None:
        plan.update(
            {
                "key_len": params.key_length,
                "thread": params.parallelism,
                "memory": params.memory_kib,
                "iterations": params.iterations,
            }
        )
    plan.update(extra)
    return plan


@pytest.fixture(name="plan_factory")
def plan_factory_fixture() -> Any:
    """Get the plan builder."""
    return make_plan
