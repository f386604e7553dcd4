# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2025 Waldiez and contributors.

# pylint: disable=unnecessary-ellipsis

"""Lifecycle requests, responses and the resource protocol."""

from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Protocol, runtime_checkable

from password_provider.config import Settings, SettingsManager
from password_provider.diagnostics import Diagnostics
from password_provider.hashing import Argon2Hasher, get_algorithm_type
from password_provider.schemas import ResourceSchema


@dataclass(frozen=True)
class ProviderData:
    """What the provider hands to its resources when configured."""

    settings: Settings
    hasher: Argon2Hasher
    profile: str

    @classmethod
    def from_settings(
        cls,
        settings: Settings,
        algorithm: Optional[str] = None,
        profile: Optional[str] = None,
    ) -> "ProviderData":
        """Build the provider data.

        Parameters
        ----------
        settings : Settings
            The settings to start from.
        algorithm : Optional[str]
            Overrides ``settings.algorithm``.
        profile : Optional[str]
            Overrides ``settings.profile``.

        Returns
        -------
        ProviderData
            The provider data.
        """
        hasher = Argon2Hasher(
            type=get_algorithm_type(algorithm or settings.algorithm),
            salt_len=settings.salt_length,
        )
        return cls(
            settings=settings,
            hasher=hasher,
            profile=profile or settings.profile,
        )

    @classmethod
    def default(cls) -> "ProviderData":
        """Provider data from the current settings.

        Returns
        -------
        ProviderData
            The provider data.
        """
        return cls.from_settings(SettingsManager.get_settings())


@dataclass
class LifecycleRequest:
    """The input of a lifecycle verb.

    ``plan`` is the desired record, ``state`` the prior persisted one.
    """

    plan: Optional[Dict[str, Any]] = field(default=None, repr=False)
    state: Optional[Dict[str, Any]] = field(default=None, repr=False)
    import_id: Optional[str] = None


@dataclass
class LifecycleResponse:
    """The output of a lifecycle verb.

    ``state`` is what must be persisted (None: the record is absent).
    """

    state: Optional[Dict[str, Any]] = field(default=None, repr=False)
    diagnostics: Diagnostics = field(default_factory=Diagnostics)


@runtime_checkable
class Resource(Protocol):  # pragma: no cover
    """Protocol for managed resources."""

    def metadata(self, provider_type_name: str) -> str:
        """Get the resource type name.

        Parameters
        ----------
        provider_type_name : str
            The provider's type name.
        """
        ...

    def schema(self) -> ResourceSchema:
        """Get the resource schema."""
        ...

    def configure(self, provider_data: Any) -> Diagnostics:
        """Receive the provider data.

        Parameters
        ----------
        provider_data : Any
            The data the provider produced when configured.
        """
        ...

    def create(self, request: LifecycleRequest) -> LifecycleResponse:
        """Create the resource.

        Parameters
        ----------
        request : LifecycleRequest
            The request (plan).
        """
        ...

    def read(self, request: LifecycleRequest) -> LifecycleResponse:
        """Refresh the resource.

        Parameters
        ----------
        request : LifecycleRequest
            The request (state).
        """
        ...

    def update(self, request: LifecycleRequest) -> LifecycleResponse:
        """Update the resource.

        Parameters
        ----------
        request : LifecycleRequest
            The request (plan and state).
        """
        ...

    def delete(self, request: LifecycleRequest) -> LifecycleResponse:
        """Delete the resource.

        Parameters
        ----------
        request : LifecycleRequest
            The request (state).
        """
        ...

    def import_state(self, request: LifecycleRequest) -> LifecycleResponse:
        """Import an existing resource.

        Parameters
        ----------
        request : LifecycleRequest
            The request (import id).
        """
        ...


__all__ = [
    "LifecycleRequest",
    "LifecycleResponse",
    "ProviderData",
    "Resource",
]
