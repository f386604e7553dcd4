# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2025 Waldiez and contributors.

# pylint: disable=missing-param-doc
"""Tests for the lifecycle dispatcher."""

from unittest.mock import MagicMock

import pytest

from password_provider.resources import (
    Argon2Resource,
    LifecycleRequest,
    LifecycleResponse,
    LifecycleVerb,
    Resource,
    dispatch,
    get_handlers,
)


def test_argon2_resource_is_a_resource() -> None:
    """Test the resource protocol."""
    assert isinstance(Argon2Resource(), Resource)


def test_handlers_cover_all_verbs() -> None:
    """Every verb has a handler."""
    handlers = get_handlers(Argon2Resource())
    assert set(handlers) == set(LifecycleVerb)


@pytest.mark.parametrize("verb", list(LifecycleVerb))
def test_dispatch_calls_the_verb(verb: LifecycleVerb) -> None:
    """Test dispatching by enum and by name."""
    resource = MagicMock(spec=Argon2Resource)
    expected = LifecycleResponse()
    getattr(resource, verb.value).return_value = expected
    request = LifecycleRequest(import_id="argon2-id")

    assert dispatch(resource, verb, request) is expected
    assert dispatch(resource, verb.value, request) is expected
    getattr(resource, verb.value).assert_called_with(request)


def test_dispatch_unknown_verb() -> None:
    """Unknown verbs are rejected."""
    with pytest.raises(ValueError):
        dispatch(Argon2Resource(), "upsert", LifecycleRequest())


def test_dispatch_import(explicit_resource: Argon2Resource) -> None:
    """Dispatch to a real resource."""
    response = dispatch(
        explicit_resource,
        LifecycleVerb.IMPORT_STATE,
        LifecycleRequest(import_id="argon2-id"),
    )
    assert response.state is not None
    assert response.state["id"] == "argon2-id"
