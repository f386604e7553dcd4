# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2025 Waldiez and contributors.
"""Schema metadata exposed to the configuration engine."""

from typing import Any, Dict, List, Literal, Optional

from pydantic import BaseModel, Field

AttributeType = Literal["string", "int64"]


class Attribute(BaseModel):
    """A single resource (or provider) attribute."""

    name: str
    type: AttributeType
    description: str = ""
    required: bool = False
    optional: bool = False
    computed: bool = False
    sensitive: bool = False
    default: Optional[Any] = None
    use_state_for_unknown: bool = False


class ResourceSchema(BaseModel):
    """The set of attributes of a resource type."""

    description: str = ""
    attributes: List[Attribute] = Field(default_factory=list)

    def attribute(self, name: str) -> Attribute:
        """Get an attribute by name.

        Parameters
        ----------
        name : str
            The attribute name.

        Returns
        -------
        Attribute
            The attribute.

        Raises
        ------
        KeyError
            If there is no such attribute.
        """
        for attribute in self.attributes:
            if attribute.name == name:
                return attribute
        raise KeyError(name)

    def names(self) -> List[str]:
        """Get the attribute names."""
        return [attribute.name for attribute in self.attributes]

    def sensitive_names(self) -> List[str]:
        """Get the names of the sensitive attributes."""
        return [a.name for a in self.attributes if a.sensitive]

    def to_dict(self) -> Dict[str, Any]:
        """Get a json-friendly view of the schema."""
        return self.model_dump(mode="json")
