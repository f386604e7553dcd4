# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2025 Waldiez and contributors.
"""The password provider: metadata, configuration and resource list."""

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, List, Mapping, Optional, Tuple

from pydantic import BaseModel, ConfigDict, ValidationError

from password_provider._version import __version__
from password_provider.config import (
    AlgorithmType,
    ProfileType,
    Settings,
    SettingsManager,
)
from password_provider.diagnostics import Diagnostics, ErrorKind
from password_provider.resources import (
    EXPLICIT_SALT,
    GENERATED_SALT,
    Argon2Resource,
    ProviderData,
    Resource,
)
from password_provider.schemas import ResourceSchema, provider_schema

LOG = logging.getLogger(__name__)

PROVIDER_TYPE_NAME = "password"


class ProviderConfig(BaseModel):
    """The provider configuration block."""

    model_config = ConfigDict(extra="forbid")

    algorithm: Optional[AlgorithmType] = None
    profile: Optional[ProfileType] = None


@dataclass
class ConfigureResponse:
    """The result of configuring the provider."""

    provider_data: Optional[ProviderData] = None
    diagnostics: Diagnostics = field(default_factory=Diagnostics)


def new_argon2_resource() -> Resource:
    """Get a new explicit-salt argon2 resource."""
    return Argon2Resource(EXPLICIT_SALT)


def new_argon2_random_salt_resource() -> Resource:
    """Get a new generated-salt argon2 resource."""
    return Argon2Resource(GENERATED_SALT)


class PasswordProvider:
    """Password provider."""

    def __init__(
        self,
        version: str = __version__,
        settings: Optional[Settings] = None,
    ) -> None:
        """Initialize the provider.

        Parameters
        ----------
        version : str
            The provider version ("dev" for local builds, "test" in tests).
        settings : Optional[Settings]
            The settings, loaded through the settings manager if not given.
        """
        self.version = version
        self._settings = settings

    @property
    def settings(self) -> Settings:
        """The provider settings."""
        if self._settings is None:
            return SettingsManager.get_settings()
        return self._settings

    def metadata(self) -> Tuple[str, str]:
        """Get the provider type name and version.

        Returns
        -------
        Tuple[str, str]
            The type name and the version.
        """
        return PROVIDER_TYPE_NAME, self.version

    @staticmethod
    def schema() -> ResourceSchema:
        """Get the provider configuration schema.

        Returns
        -------
        ResourceSchema
            The schema.
        """
        return provider_schema()

    def configure(
        self, config: Optional[Mapping[str, Any]] = None
    ) -> ConfigureResponse:
        """Configure the provider.

        Parameters
        ----------
        config : Optional[Mapping[str, Any]]
            The provider configuration block.

        Returns
        -------
        ConfigureResponse
            The data to hand to the resources, or the errors.
        """
        response = ConfigureResponse()
        try:
            parsed = ProviderConfig.model_validate(dict(config or {}))
        except ValidationError as error:
            details = "; ".join(
                f"{'.'.join(str(p) for p in item['loc'])}: {item['msg']}"
                for item in error.errors(include_url=False)
            )
            response.diagnostics.add_error(
                "Invalid Provider Configuration",
                details,
                kind=ErrorKind.INVALID_DATA,
            )
            return response
        response.provider_data = ProviderData.from_settings(
            self.settings,
            algorithm=parsed.algorithm,
            profile=parsed.profile,
        )
        LOG.debug(
            "Provider configured: algorithm=%s profile=%s",
            response.provider_data.hasher.type.name,
            response.provider_data.profile,
        )
        return response

    @staticmethod
    def resources() -> List[Callable[[], Resource]]:
        """Get the resource factories.

        Returns
        -------
        List[Callable[[], Resource]]
            One factory per resource type.
        """
        return [new_argon2_resource, new_argon2_random_salt_resource]

    def get_resource(
        self,
        type_name: str,
        provider_data: Optional[ProviderData] = None,
    ) -> Tuple[Optional[Resource], Diagnostics]:
        """Get a configured resource by its type name.

        Parameters
        ----------
        type_name : str
            The resource type name (e.g. ``password_argon2``).
        provider_data : Optional[ProviderData]
            The data to configure the resource with.

        Returns
        -------
        Tuple[Optional[Resource], Diagnostics]
            The resource (None if unknown) and any diagnostics.
        """
        diagnostics = Diagnostics()
        for factory in self.resources():
            resource = factory()
            if resource.metadata(PROVIDER_TYPE_NAME) == type_name:
                diagnostics.extend(resource.configure(provider_data))
                return resource, diagnostics
        diagnostics.add_error(
            "Unknown Resource Type",
            f"The provider has no resource named {type_name}.",
            kind=ErrorKind.INVALID_DATA,
        )
        return None, diagnostics


__all__ = [
    "ConfigureResponse",
    "PasswordProvider",
    "ProviderConfig",
    "ProviderData",
    "PROVIDER_TYPE_NAME",
    "new_argon2_random_salt_resource",
    "new_argon2_resource",
]
