# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2025 Waldiez and contributors.

"""Hashing related configuration.

Environment variables (with prefix PASSWORD_PROVIDER_)
------------------------------------------------------
ALGORITHM (str) # default: argon2id
PROFILE (str) # default: rfc9106-low-memory
SALT_LENGTH (int) # default: 16

Command line arguments (no prefix)
----------------------------------
--algorithm (str)
--profile (str)
--salt-length (int)
"""

from typing import Literal, get_args

from ._common import get_value

AlgorithmType = Literal["argon2id", "argon2i", "argon2d"]
"""Argon2 variants that can be requested."""

ProfileType = Literal["rfc9106-low-memory", "rfc9106-high-memory"]
"""Named cost profiles for resources that generate their own salt."""

DEFAULT_ALGORITHM: AlgorithmType = "argon2id"
DEFAULT_PROFILE: ProfileType = "rfc9106-low-memory"
DEFAULT_SALT_LENGTH = 16


def get_algorithm() -> AlgorithmType:
    """Get the argon2 variant to use.

    Returns
    -------
    AlgorithmType
        The algorithm, argon2id unless configured otherwise
    """
    value = get_value("--algorithm", "ALGORITHM", str, DEFAULT_ALGORITHM)
    value = value.lower()
    if value not in get_args(AlgorithmType):
        return DEFAULT_ALGORITHM
    return value  # type: ignore[return-value]


def get_profile() -> ProfileType:
    """Get the default cost profile.

    Returns
    -------
    ProfileType
        The profile name
    """
    value = get_value("--profile", "PROFILE", str, DEFAULT_PROFILE)
    value = value.lower()
    if value not in get_args(ProfileType):
        return DEFAULT_PROFILE
    return value  # type: ignore[return-value]


def get_salt_length() -> int:
    """Get the length in bytes of generated salts.

    Returns
    -------
    int
        The salt length
    """
    return get_value("--salt-length", "SALT_LENGTH", int, DEFAULT_SALT_LENGTH)
