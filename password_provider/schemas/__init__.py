# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2025 Waldiez and contributors.
"""Schema declarations."""

from .argon2 import argon2_resource_schema, provider_schema
from .attribute import Attribute, AttributeType, ResourceSchema

__all__ = [
    "Attribute",
    "AttributeType",
    "ResourceSchema",
    "argon2_resource_schema",
    "provider_schema",
]
