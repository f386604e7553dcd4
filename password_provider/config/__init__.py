# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2025 Waldiez and contributors.
"""Configuration module for the password provider."""

from ._common import ENV_PREFIX
from ._hashing import (
    DEFAULT_ALGORITHM,
    DEFAULT_PROFILE,
    DEFAULT_SALT_LENGTH,
    AlgorithmType,
    ProfileType,
)
from .settings import Settings
from .settings_manager import SettingsManager

__all__ = [
    "AlgorithmType",
    "ProfileType",
    "Settings",
    "SettingsManager",
    "ENV_PREFIX",
    "DEFAULT_ALGORITHM",
    "DEFAULT_PROFILE",
    "DEFAULT_SALT_LENGTH",
]
