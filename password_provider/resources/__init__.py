# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2025 Waldiez and contributors.
"""Managed resources and their lifecycle."""

from .argon2 import RESOURCE_ID, Argon2Resource
from .dispatch import LifecycleVerb, dispatch, get_handlers
from .protocol import (
    LifecycleRequest,
    LifecycleResponse,
    ProviderData,
    Resource,
)
from .variants import (
    EXPLICIT_SALT,
    GENERATED_SALT,
    VARIANTS,
    ResourceVariant,
    SaltMode,
)

__all__ = [
    "Argon2Resource",
    "EXPLICIT_SALT",
    "GENERATED_SALT",
    "LifecycleRequest",
    "LifecycleResponse",
    "LifecycleVerb",
    "ProviderData",
    "RESOURCE_ID",
    "Resource",
    "ResourceVariant",
    "SaltMode",
    "VARIANTS",
    "dispatch",
    "get_handlers",
]
