# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2025 Waldiez and contributors.
"""Schemas of the argon2 resources and of the provider."""

from typing import Optional

from password_provider.hashing import CostParameters

from .attribute import Attribute, ResourceSchema


def argon2_resource_schema(
    explicit_salt: bool,
    defaults: Optional[CostParameters] = None,
    description: str = "Argon2 resource",
) -> ResourceSchema:
    """Build the schema of an argon2 resource.

    Parameters
    ----------
    explicit_salt : bool
        Whether the operator supplies the salt.
    defaults : Optional[CostParameters]
        The static defaults to advertise, if any.
    description : str
        The resource description.

    Returns
    -------
    ResourceSchema
        The schema.
    """
    attributes = [
        Attribute(
            name="password",
            type="string",
            description="The password to hash",
            required=True,
            sensitive=True,
        ),
    ]
    if explicit_salt:
        attributes.append(
            Attribute(
                name="salt",
                type="string",
                description="The salt to use for hashing",
                required=True,
                sensitive=True,
            )
        )
    attributes.extend(
        [
            Attribute(
                name="key_len",
                type="int64",
                description="The length of the key to generate",
                optional=True,
                computed=True,
                default=defaults.key_length if defaults else None,
            ),
            Attribute(
                name="thread",
                type="int64",
                description="The number of threads to use",
                optional=True,
                computed=True,
                default=defaults.parallelism if defaults else None,
            ),
            Attribute(
                name="memory",
                type="int64",
                description="The amount of memory (KiB) to use for hashing",
                optional=True,
                computed=True,
                default=defaults.memory_kib if defaults else None,
            ),
            Attribute(
                name="iterations",
                type="int64",
                description="The number of passes over the memory",
                optional=True,
                computed=True,
                default=defaults.iterations if defaults else None,
            ),
            Attribute(
                name="hash",
                type="string",
                description="The generated hash",
                computed=True,
                sensitive=True,
            ),
            Attribute(
                name="id",
                type="string",
                description="Argon2 identifier",
                computed=True,
                use_state_for_unknown=True,
            ),
        ]
    )
    return ResourceSchema(description=description, attributes=attributes)


def provider_schema() -> ResourceSchema:
    """Build the provider configuration schema.

    Returns
    -------
    ResourceSchema
        The schema.
    """
    return ResourceSchema(
        description="Password hashing provider",
        attributes=[
            Attribute(
                name="algorithm",
                type="string",
                description="The argon2 variant (argon2id, argon2i, argon2d)",
                optional=True,
            ),
            Attribute(
                name="profile",
                type="string",
                description=(
                    "The cost profile of resources generating their own salt"
                ),
                optional=True,
            ),
        ],
    )
