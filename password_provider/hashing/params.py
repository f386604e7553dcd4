# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2025 Waldiez and contributors.

"""Argon2 cost parameters, their bounds and the named profiles."""

import os
from dataclasses import dataclass
from typing import Dict, Optional

from argon2 import Parameters, profiles
from argon2.low_level import Type

from .errors import InvalidParametersError

# Bounds from the argon2 reference implementation (argon2.h)
MAX_UINT32 = 2**32 - 1
MIN_KEY_LENGTH = 4
MIN_SALT_LENGTH = 8
MAX_PARALLELISM = 2**24 - 1
MIN_MEMORY_PER_LANE = 8

# Defaults of the explicit-salt resource
EXPLICIT_SALT_KEY_LENGTH = 32
EXPLICIT_SALT_MEMORY_KIB = 65536  # 64 MiB
EXPLICIT_SALT_ITERATIONS = 3

ALGORITHMS: Dict[str, Type] = {
    "argon2id": Type.ID,
    "argon2i": Type.I,
    "argon2d": Type.D,
}

PROFILES: Dict[str, Parameters] = {
    "rfc9106-low-memory": profiles.RFC_9106_LOW_MEMORY,
    "rfc9106-high-memory": profiles.RFC_9106_HIGH_MEMORY,
}


@dataclass(frozen=True)
class CostParameters:
    """The tunable argon2 knobs.

    Attributes
    ----------
    key_length : int
        The digest length in bytes.
    parallelism : int
        The number of lanes (threads).
    memory_kib : int
        The memory cost in KiB.
    iterations : int
        The number of passes over the memory (time cost).
    """

    key_length: int
    parallelism: int
    memory_kib: int
    iterations: int

    def validate(self) -> None:
        """Check the parameters against the argon2 domain.

        Raises
        ------
        InvalidParametersError
            If any of the parameters is out of range.
        """
        for name in ("key_length", "parallelism", "memory_kib", "iterations"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise InvalidParametersError(f"{name} must be an integer")
            if value < 1:
                raise InvalidParametersError(f"{name} must be positive")
            if value > MAX_UINT32:
                raise InvalidParametersError(
                    f"{name} must be at most {MAX_UINT32}"
                )
        if self.key_length < MIN_KEY_LENGTH:
            raise InvalidParametersError(
                f"key_length must be at least {MIN_KEY_LENGTH}"
            )
        if self.parallelism > MAX_PARALLELISM:
            raise InvalidParametersError(
                f"parallelism must be at most {MAX_PARALLELISM}"
            )
        min_memory = MIN_MEMORY_PER_LANE * self.parallelism
        if self.memory_kib < min_memory:
            raise InvalidParametersError(
                f"memory_kib must be at least {min_memory} "
                f"for parallelism {self.parallelism}"
            )

    @classmethod
    def from_profile(cls, name: str) -> "CostParameters":
        """Get the parameters of a named profile.

        Parameters
        ----------
        name : str
            The profile name (see ``PROFILES``).

        Returns
        -------
        CostParameters
            The profile's cost parameters.

        Raises
        ------
        InvalidParametersError
            If the profile is unknown.
        """
        try:
            profile = PROFILES[name]
        except KeyError as error:
            raise InvalidParametersError(
                f"Unknown profile: {name}"
            ) from error
        return cls(
            key_length=profile.hash_len,
            parallelism=profile.parallelism,
            memory_kib=profile.memory_cost,
            iterations=profile.time_cost,
        )

    @classmethod
    def explicit_salt_defaults(
        cls, cpu_count: Optional[int] = None
    ) -> "CostParameters":
        """Get the defaults of the explicit-salt resource.

        Parallelism follows the number of available cpus,
        so callers must resolve this once and store it.

        Parameters
        ----------
        cpu_count : Optional[int]
            The cpu count to use, queried from the os if not given.

        Returns
        -------
        CostParameters
            The default parameters.
        """
        if cpu_count is None:
            cpu_count = os.cpu_count() or 1
        return cls(
            key_length=EXPLICIT_SALT_KEY_LENGTH,
            parallelism=max(1, min(cpu_count, MAX_PARALLELISM)),
            memory_kib=EXPLICIT_SALT_MEMORY_KIB,
            iterations=EXPLICIT_SALT_ITERATIONS,
        )


def get_algorithm_type(name: str) -> Type:
    """Get the argon2 type for an algorithm name.

    Parameters
    ----------
    name : str
        One of argon2id, argon2i, argon2d.

    Returns
    -------
    Type
        The argon2 type.

    Raises
    ------
    InvalidParametersError
        If the name is not an argon2 variant.
    """
    try:
        return ALGORITHMS[name.lower()]
    except KeyError as error:
        raise InvalidParametersError(
            f"Unknown algorithm: {name}"
        ) from error


def validate_salt(salt: bytes) -> None:
    """Check an explicit salt's length.

    Parameters
    ----------
    salt : bytes
        The encoded salt.

    Raises
    ------
    InvalidParametersError
        If the salt is too short or too long.
    """
    # the length only, never the value
    if len(salt) < MIN_SALT_LENGTH:
        raise InvalidParametersError(
            f"salt must be at least {MIN_SALT_LENGTH} bytes long"
        )
    if len(salt) > MAX_UINT32:  # pragma: no cover
        raise InvalidParametersError(
            f"salt must be at most {MAX_UINT32} bytes long"
        )


__all__ = [
    "ALGORITHMS",
    "PROFILES",
    "CostParameters",
    "get_algorithm_type",
    "validate_salt",
]
