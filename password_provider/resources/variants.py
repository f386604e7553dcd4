# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2025 Waldiez and contributors.

"""The two named configurations of the argon2 resource."""

from dataclasses import dataclass
from enum import Enum
from typing import Tuple

from password_provider.hashing import CostParameters
from password_provider.models import ResourceRecord
from password_provider.schemas import ResourceSchema, argon2_resource_schema


class SaltMode(str, Enum):
    """Who provides the salt."""

    EXPLICIT = "explicit"
    GENERATED = "generated"


@dataclass(frozen=True)
class ResourceVariant:
    """A named argon2 resource configuration.

    Attributes
    ----------
    type_suffix : str
        Appended to the provider type name (``password_<suffix>``).
    salt_mode : SaltMode
        Whether the operator supplies the salt.
    description : str
        The resource description.
    """

    type_suffix: str
    salt_mode: SaltMode
    description: str

    @property
    def explicit_salt(self) -> bool:
        """Whether the salt is an operator supplied attribute."""
        return self.salt_mode is SaltMode.EXPLICIT

    @property
    def secret_fields(self) -> Tuple[str, ...]:
        """The fields whose change requires a new hash."""
        if self.explicit_salt:
            return ("secret", "salt")
        return ("secret",)

    def secret_changed(
        self, prior: ResourceRecord, desired: ResourceRecord
    ) -> bool:
        """Check whether any secret-determining field differs.

        Parameters
        ----------
        prior : ResourceRecord
            The persisted record.
        desired : ResourceRecord
            The planned record.

        Returns
        -------
        bool
            True if the hash must be recomputed.
        """
        return any(
            getattr(prior, f"{name}_value") != getattr(desired, f"{name}_value")
            for name in self.secret_fields
        )

    def default_parameters(self, profile: str) -> CostParameters:
        """Resolve the default cost parameters.

        For the explicit-salt variant the parallelism follows the host's
        cpu count at the time of the call.

        Parameters
        ----------
        profile : str
            The profile used by the generated-salt variant.

        Returns
        -------
        CostParameters
            The defaults.
        """
        if self.explicit_salt:
            return CostParameters.explicit_salt_defaults()
        return CostParameters.from_profile(profile)

    def schema(self) -> ResourceSchema:
        """Build this variant's schema.

        Returns
        -------
        ResourceSchema
            The schema.
        """
        # the generated-salt defaults depend on the configured profile
        defaults = (
            CostParameters.explicit_salt_defaults()
            if self.explicit_salt
            else None
        )
        return argon2_resource_schema(
            explicit_salt=self.explicit_salt,
            defaults=defaults,
            description=self.description,
        )


EXPLICIT_SALT = ResourceVariant(
    type_suffix="argon2",
    salt_mode=SaltMode.EXPLICIT,
    description="Argon2 hash of a password with an operator supplied salt",
)
GENERATED_SALT = ResourceVariant(
    type_suffix="argon2_random_salt",
    salt_mode=SaltMode.GENERATED,
    description="Argon2 hash of a password with a random salt",
)
VARIANTS = (EXPLICIT_SALT, GENERATED_SALT)

__all__ = [
    "SaltMode",
    "ResourceVariant",
    "EXPLICIT_SALT",
    "GENERATED_SALT",
    "VARIANTS",
]
