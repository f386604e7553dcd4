# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2025 Waldiez and contributors.

"""The persisted state of a managed password hash."""

from typing import Any, Dict, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field, SecretStr

from password_provider.hashing import CostParameters

SENSITIVE_FIELDS = ("secret", "salt", "hash")
COST_FIELDS = ("key_length", "parallelism", "memory_kib", "iterations")


class ResourceRecord(BaseModel):
    """A managed password hash record.

    Field names are pythonic, the aliases are the attribute names used
    in plans and states. Every field is optional here: plans carry
    unknown computed values and imported records only carry the id.
    Sensitive values are ``SecretStr`` so formatting a record never
    shows them.
    """

    model_config = ConfigDict(
        populate_by_name=True,
        frozen=True,
        extra="ignore",
    )

    secret: Optional[SecretStr] = Field(default=None, alias="password")
    salt: Optional[SecretStr] = Field(default=None, alias="salt")
    key_length: Optional[int] = Field(default=None, alias="key_len")
    parallelism: Optional[int] = Field(default=None, alias="thread")
    memory_kib: Optional[int] = Field(default=None, alias="memory")
    iterations: Optional[int] = Field(default=None, alias="iterations")
    hash: Optional[SecretStr] = Field(default=None, alias="hash")
    identifier: Optional[str] = Field(default=None, alias="id")

    @classmethod
    def from_state(cls, data: Mapping[str, Any]) -> "ResourceRecord":
        """Decode a plan or a state.

        Parameters
        ----------
        data : Mapping[str, Any]
            The attribute values, keyed by attribute name.

        Returns
        -------
        ResourceRecord
            The record.

        Raises
        ------
        pydantic.ValidationError
            If the data cannot be decoded.
        """
        return cls.model_validate(dict(data))

    def to_state(self) -> Dict[str, Any]:
        """Encode the record for persistence.

        This is the only place sensitive values are unwrapped.

        Returns
        -------
        Dict[str, Any]
            The attribute values, keyed by attribute name.
        """
        data = self.model_dump(by_alias=True)
        for name in SENSITIVE_FIELDS:
            alias = type(self).model_fields[name].alias or name
            value: Optional[SecretStr] = getattr(self, name)
            data[alias] = (
                value.get_secret_value() if value is not None else None
            )
        return data

    @property
    def secret_value(self) -> Optional[str]:
        """The plain secret, if known."""
        return (
            self.secret.get_secret_value() if self.secret is not None else None
        )

    @property
    def salt_value(self) -> Optional[str]:
        """The plain salt, if known."""
        return (
            self.salt.get_secret_value() if self.salt is not None else None
        )

    @property
    def hash_value(self) -> Optional[str]:
        """The encoded hash, if computed."""
        return (
            self.hash.get_secret_value() if self.hash is not None else None
        )

    def cost_parameters(self) -> Optional[CostParameters]:
        """Get the cost parameters if all of them are known.

        Returns
        -------
        Optional[CostParameters]
            The parameters or None if any of them is unset.
        """
        values = [getattr(self, name) for name in COST_FIELDS]
        if any(value is None for value in values):
            return None
        return CostParameters(*values)


__all__ = ["ResourceRecord", "SENSITIVE_FIELDS", "COST_FIELDS"]
