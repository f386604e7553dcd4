# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2025 Waldiez and contributors.

# pylint: disable=missing-param-doc
"""Tests for the resource variants."""

from unittest.mock import patch

import pytest
from pydantic import SecretStr

from password_provider.hashing import CostParameters, InvalidParametersError
from password_provider.models import ResourceRecord
from password_provider.resources import (
    EXPLICIT_SALT,
    GENERATED_SALT,
    VARIANTS,
    ResourceVariant,
    SaltMode,
)


def _record(password: str, salt: str | None = None) -> ResourceRecord:
    return ResourceRecord(secret=password, salt=salt)


def test_type_suffixes() -> None:
    """Test the registered type suffixes."""
    assert [v.type_suffix for v in VARIANTS] == [
        "argon2",
        "argon2_random_salt",
    ]
    assert EXPLICIT_SALT.salt_mode is SaltMode.EXPLICIT
    assert GENERATED_SALT.salt_mode is SaltMode.GENERATED


def test_secret_fields() -> None:
    """Test the secret-determining fields."""
    assert EXPLICIT_SALT.secret_fields == ("secret", "salt")
    assert GENERATED_SALT.secret_fields == ("secret",)


def test_explicit_salt_change_detection() -> None:
    """Password and salt both matter."""
    prior = _record("example-password", "example-salt")
    assert not EXPLICIT_SALT.secret_changed(
        prior, _record("example-password", "example-salt")
    )
    assert EXPLICIT_SALT.secret_changed(
        prior, _record("example-password", "new-salt")
    )
    assert EXPLICIT_SALT.secret_changed(
        prior, _record("new-password", "example-salt")
    )


def test_generated_salt_change_detection() -> None:
    """Only the password matters."""
    prior = _record("example-password")
    assert not GENERATED_SALT.secret_changed(
        prior, _record("example-password")
    )
    assert GENERATED_SALT.secret_changed(prior, _record("new-password"))


@pytest.mark.parametrize("variant", VARIANTS)
def test_change_detection_follows_secret_fields(
    variant: ResourceVariant,
) -> None:
    """Exactly the secret fields of a variant trigger a new hash."""
    prior = ResourceRecord(secret="example-password", salt="example-salt")
    changed = {"secret": "new-password", "salt": "new-salt"}
    for name, value in changed.items():
        desired = prior.model_copy(update={name: SecretStr(value)})
        assert variant.secret_changed(prior, desired) is (
            name in variant.secret_fields
        )


def test_cost_parameters_are_not_secret() -> None:
    """Changing the cost alone is not a secret change."""
    prior = ResourceRecord(
        secret="example-password", salt="example-salt", memory_kib=1024
    )
    desired = ResourceRecord(
        secret="example-password", salt="example-salt", memory_kib=4096
    )
    assert not EXPLICIT_SALT.secret_changed(prior, desired)


def test_explicit_salt_defaults_follow_cpu_count() -> None:
    """Test the explicit-salt defaults."""
    with patch(
        "password_provider.hashing.params.os.cpu_count", return_value=6
    ):
        defaults = EXPLICIT_SALT.default_parameters("rfc9106-low-memory")
    assert defaults == CostParameters(32, 6, 65536, 3)


def test_generated_salt_defaults_follow_profile() -> None:
    """Test the generated-salt defaults."""
    assert GENERATED_SALT.default_parameters(
        "rfc9106-high-memory"
    ) == CostParameters.from_profile("rfc9106-high-memory")
    with pytest.raises(InvalidParametersError):
        GENERATED_SALT.default_parameters("nope")


def test_schemas() -> None:
    """Only the explicit variant has a salt attribute."""
    explicit = EXPLICIT_SALT.schema()
    generated = GENERATED_SALT.schema()
    assert "salt" in explicit.names()
    assert "salt" not in generated.names()
    assert explicit.attribute("memory").default == 65536
    assert generated.attribute("memory").default is None
