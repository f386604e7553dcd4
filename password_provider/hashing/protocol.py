# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2025 Waldiez and contributors.

# pylint: disable=unnecessary-ellipsis

"""Password hashing protocol."""

from typing import Optional, Protocol, runtime_checkable

from .params import CostParameters


@runtime_checkable
class Hasher(Protocol):  # pragma: no cover
    """Protocol for secret hashing implementations."""

    def hash(
        self,
        plain: str,
        params: CostParameters,
        salt: Optional[str] = None,
    ) -> str:
        """Hash a plain text secret.

        Parameters
        ----------
        plain : str
            The plain text secret
        params : CostParameters
            The cost parameters
        salt : Optional[str]
            An explicit salt, generated if not given
        """
        ...

    def verify(self, plain: str, stored: str) -> bool:
        """Verify a plain text secret against a stored hash.

        Parameters
        ----------
        plain : str
            The plain text secret
        stored : str
            The stored hash
        """
        ...

    def identify(self, stored: str) -> bool:
        """Check whether a stored value is a hash of this kind.

        Parameters
        ----------
        stored : str
            The stored value
        """
        ...

    def needs_rehash(self, stored: str, params: CostParameters) -> bool:
        """Check if the stored hash was made with other parameters.

        Parameters
        ----------
        stored : str
            The stored hash
        params : CostParameters
            The wanted parameters
        """
        ...


__all__ = ["Hasher"]
