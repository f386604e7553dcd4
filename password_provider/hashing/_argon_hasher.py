# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2025 Waldiez and contributors.

"""Argon2 password hasher implementation."""

import logging
import secrets
from dataclasses import dataclass, field
from typing import Optional

from argon2 import PasswordHasher, extract_parameters
from argon2.exceptions import (
    HashingError,
    InvalidHashError,
    VerificationError,
)
from argon2.low_level import ARGON2_VERSION, Type, hash_secret

from .errors import ComputationFailedError, InvalidParametersError
from .params import CostParameters, validate_salt

LOG = logging.getLogger(__name__)


@dataclass(frozen=True)
class Argon2Hasher:
    """Argon2 hasher.

    Instances hold no mutable state and can be shared between threads.
    """

    type: Type = Type.ID
    salt_len: int = 16
    _ph: PasswordHasher = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        if self.salt_len < 8:
            raise InvalidParametersError("salt_len must be at least 8")
        # only used for verification, the type is read from the hash
        object.__setattr__(self, "_ph", PasswordHasher(type=self.type))

    def hash(
        self,
        plain: str,
        params: CostParameters,
        salt: Optional[str] = None,
    ) -> str:
        """Hash a secret using argon2.

        The parameters (and the salt, if given) are validated before
        anything else happens: an invalid request neither draws random
        bytes nor starts the computation.

        Parameters
        ----------
        plain : str
            The plain secret to hash.
        params : CostParameters
            The cost parameters.
        salt : Optional[str]
            The salt to use, a random one is generated if not given.

        Returns
        -------
        str
            The encoded hash ($argon2id$v=19$m=..,t=..,p=..$salt$digest).

        Raises
        ------
        InvalidParametersError
            If the parameters or the salt are invalid.
        ComputationFailedError
            If the argon2 computation failed.
        """
        params.validate()
        if salt is not None:
            salt_bytes = salt.encode("utf-8")
            validate_salt(salt_bytes)
        else:
            salt_bytes = secrets.token_bytes(self.salt_len)
        LOG.debug(
            "Hashing with %s m=%d t=%d p=%d len=%d (explicit salt: %s)",
            self.type.name,
            params.memory_kib,
            params.iterations,
            params.parallelism,
            params.key_length,
            salt is not None,
        )
        # pylint: disable=too-many-try-statements
        try:
            encoded = hash_secret(
                secret=plain.encode("utf-8"),
                salt=salt_bytes,
                time_cost=params.iterations,
                memory_cost=params.memory_kib,
                parallelism=params.parallelism,
                hash_len=params.key_length,
                type=self.type,
                version=ARGON2_VERSION,
            )
        except HashingError as error:
            raise ComputationFailedError(
                f"Unable to compute the argon2 hash: {error}"
            ) from error
        except MemoryError as error:
            raise ComputationFailedError(
                "Unable to allocate memory for the argon2 hash"
            ) from error
        return encoded.decode("ascii")

    def verify(self, plain: str, stored: str) -> bool:
        """Verify a secret against an argon2 hash.

        Parameters
        ----------
        plain : str
            The plain secret to check.
        stored : str
            The stored hashed secret.

        Returns
        -------
        bool
            True if the verification succeeds, false otherwise.
        """
        if not stored.startswith("$argon2"):
            return False
        try:
            return self._ph.verify(stored, plain)
        except (VerificationError, InvalidHashError):
            return False

    def identify(self, stored: str) -> bool:
        """Check whether a stored value is an encoded argon2 hash.

        Parameters
        ----------
        stored : str
            The stored value

        Returns
        -------
        bool
            True if the parameters can be read from it.
        """
        if not stored.startswith("$argon2"):
            return False
        try:
            extract_parameters(stored)
        except InvalidHashError:
            return False
        return True

    def needs_rehash(self, stored: str, params: CostParameters) -> bool:
        """Check if a stored hash was made with other parameters.

        Parameters
        ----------
        stored : str
            The stored hash
        params : CostParameters
            The wanted parameters

        Returns
        -------
        bool
            True if the hash does not embed ``params`` (or this type).
        """
        if not stored.startswith("$argon2"):
            return True
        try:
            embedded = extract_parameters(stored)
        except InvalidHashError:
            return True
        return (
            embedded.type != self.type
            or embedded.hash_len != params.key_length
            or embedded.time_cost != params.iterations
            or embedded.memory_cost != params.memory_kib
            or embedded.parallelism != params.parallelism
        )


__all__ = ["Argon2Hasher"]
