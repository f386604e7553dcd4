# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2025 Waldiez and contributors.

"""Declarative password hash provider."""

from ._version import __version__
from .provider import PasswordProvider, ProviderData

__all__ = ["__version__", "PasswordProvider", "ProviderData"]
