# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2025 Waldiez and contributors.

"""Secret hashing and verification."""

from typing import Optional

from ._argon_hasher import Argon2Hasher
from .errors import (
    ComputationFailedError,
    HashError,
    HashErrorKind,
    InvalidParametersError,
)
from .params import (
    ALGORITHMS,
    PROFILES,
    CostParameters,
    get_algorithm_type,
    validate_salt,
)
from .protocol import Hasher


def compute_hash(
    secret: str,
    salt: Optional[str],
    params: CostParameters,
    algorithm: str = "argon2id",
) -> str:
    """Compute an encoded argon2 hash.

    Parameters
    ----------
    secret : str
        The secret to hash.
    salt : Optional[str]
        The salt, or None to generate a random one.
    params : CostParameters
        The cost parameters.
    algorithm : str
        The argon2 variant, by default argon2id.

    Returns
    -------
    str
        The encoded hash.
    """
    hasher = Argon2Hasher(type=get_algorithm_type(algorithm))
    return hasher.hash(secret, params, salt=salt)


def verify_hash(secret: str, encoded: str) -> bool:
    """Verify a secret against an encoded argon2 hash.

    Parameters
    ----------
    secret : str
        The secret to check.
    encoded : str
        The encoded hash.

    Returns
    -------
    bool
        Whether the secret matches.
    """
    return Argon2Hasher().verify(secret, encoded)


__all__ = [
    "ALGORITHMS",
    "PROFILES",
    "Argon2Hasher",
    "ComputationFailedError",
    "CostParameters",
    "HashError",
    "HashErrorKind",
    "Hasher",
    "InvalidParametersError",
    "compute_hash",
    "get_algorithm_type",
    "validate_salt",
    "verify_hash",
]
