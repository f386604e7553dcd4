# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2025 Waldiez and contributors.

"""Resource data models."""

from .record import COST_FIELDS, SENSITIVE_FIELDS, ResourceRecord

__all__ = ["ResourceRecord", "COST_FIELDS", "SENSITIVE_FIELDS"]
