# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2025 Waldiez and contributors.

"""Hashing errors."""

from enum import Enum


class HashErrorKind(str, Enum):
    """Why a hash could not be produced."""

    INVALID_PARAMETERS = "invalid_parameters"
    COMPUTATION_FAILED = "computation_failed"


class HashError(Exception):
    """Base class for hashing failures.

    The message must never contain the secret, the salt or a digest.
    """

    kind: HashErrorKind = HashErrorKind.COMPUTATION_FAILED


class InvalidParametersError(HashError, ValueError):
    """Cost parameters or salt outside the valid argon2 domain."""

    kind = HashErrorKind.INVALID_PARAMETERS


class ComputationFailedError(HashError, RuntimeError):
    """The argon2 primitive itself failed."""

    kind = HashErrorKind.COMPUTATION_FAILED


__all__ = [
    "HashErrorKind",
    "HashError",
    "InvalidParametersError",
    "ComputationFailedError",
]
