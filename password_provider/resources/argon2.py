# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2025 Waldiez and contributors.

# pylint: disable=too-many-return-statements
"""Argon2 resource lifecycle controller."""

import logging
from typing import Any, Mapping, Optional, Union

from pydantic import SecretStr, ValidationError

from password_provider.diagnostics import Diagnostics, ErrorKind
from password_provider.hashing import CostParameters, HashError, Hasher
from password_provider.models import COST_FIELDS, ResourceRecord
from password_provider.schemas import ResourceSchema

from .protocol import LifecycleRequest, LifecycleResponse, ProviderData
from .variants import EXPLICIT_SALT, ResourceVariant

LOG = logging.getLogger(__name__)

RESOURCE_ID = "argon2-id"


def _describe_validation_error(error: ValidationError) -> str:
    """Describe a decode error without echoing any input value."""
    parts = []
    for item in error.errors(
        include_url=False, include_context=False, include_input=False
    ):
        location = ".".join(str(part) for part in item["loc"]) or "record"
        parts.append(f"{location}: {item['msg']}")
    return "; ".join(parts)


class Argon2Resource:
    """Argon2 resource.

    Decides on every lifecycle call whether a new hash is computed,
    the persisted one is kept, or nothing changes at all.
    """

    def __init__(self, variant: ResourceVariant = EXPLICIT_SALT) -> None:
        """Initialize the resource.

        Parameters
        ----------
        variant : ResourceVariant
            The resource configuration, by default the explicit-salt one.
        """
        self.variant = variant
        self._provider_data: Optional[ProviderData] = None

    @property
    def provider_data(self) -> ProviderData:
        """The configured provider data (or one built from the settings)."""
        if self._provider_data is None:
            return ProviderData.default()
        return self._provider_data

    @property
    def configured(self) -> bool:
        """Whether the provider data was received."""
        return self._provider_data is not None

    def metadata(self, provider_type_name: str) -> str:
        """Get the resource type name.

        Parameters
        ----------
        provider_type_name : str
            The provider's type name.

        Returns
        -------
        str
            The resource type name.
        """
        return f"{provider_type_name}_{self.variant.type_suffix}"

    def schema(self) -> ResourceSchema:
        """Get the resource schema.

        Returns
        -------
        ResourceSchema
            The schema.
        """
        return self.variant.schema()

    def configure(self, provider_data: Any) -> Diagnostics:
        """Receive the provider data.

        Parameters
        ----------
        provider_data : Any
            What the provider produced, None if not configured yet.

        Returns
        -------
        Diagnostics
            An error if the data has an unexpected type.
        """
        diagnostics = Diagnostics()
        # the provider may not be configured yet
        if provider_data is None:
            return diagnostics
        if not isinstance(provider_data, ProviderData):
            diagnostics.add_error(
                "Unexpected Resource Configure Type",
                (
                    "Expected ProviderData, got: "
                    f"{type(provider_data).__name__}. Please report this "
                    "issue to the provider developers."
                ),
                kind=ErrorKind.CONFIGURATION_TYPE_MISMATCH,
            )
            return diagnostics
        self._provider_data = provider_data
        return diagnostics

    def create(self, request: LifecycleRequest) -> LifecycleResponse:
        """Create the resource: assign the id and compute the hash.

        Parameters
        ----------
        request : LifecycleRequest
            The request, with the plan.

        Returns
        -------
        LifecycleResponse
            The full record, or no state on failure.
        """
        response = LifecycleResponse()
        diagnostics = response.diagnostics
        plan = self._decode(request.plan, "plan", diagnostics)
        if plan is None or not self._check_attributes(plan, diagnostics):
            return response
        provider_data = self.provider_data
        params = self._resolve_parameters(plan, None, provider_data)
        if params is None:
            self._invalid_defaults(diagnostics)
            return response
        if not self._validate(params, diagnostics):
            return response
        digest = self._compute(
            plan, params, provider_data.hasher, diagnostics
        )
        if digest is None:
            return response
        record = self._build(plan, params, digest, RESOURCE_ID)
        LOG.debug(
            "Created %s (%s)", record.identifier, self.variant.type_suffix
        )
        response.state = record.to_state()
        return response

    def read(self, request: LifecycleRequest) -> LifecycleResponse:
        """Refresh the resource.

        There is nothing to reconcile against,
        the prior state is passed through.

        Parameters
        ----------
        request : LifecycleRequest
            The request, with the prior state.

        Returns
        -------
        LifecycleResponse
            The unchanged state.
        """
        response = LifecycleResponse()
        if request.state is None:
            return response
        self._decode(request.state, "state", response.diagnostics)
        response.state = dict(request.state)
        return response

    def update(self, request: LifecycleRequest) -> LifecycleResponse:
        """Update the resource.

        The hash is recomputed only if a secret-determining field
        changed (or no hash was persisted yet). On any failure
        the prior state is returned untouched.

        Parameters
        ----------
        request : LifecycleRequest
            The request, with the plan and the prior state.

        Returns
        -------
        LifecycleResponse
            The updated record, or the prior one on failure.
        """
        response = LifecycleResponse(
            state=dict(request.state) if request.state is not None else None
        )
        diagnostics = response.diagnostics
        prior = self._decode(request.state, "state", diagnostics)
        if prior is None:
            return response
        plan = self._decode(request.plan, "plan", diagnostics)
        if plan is None or not self._check_attributes(plan, diagnostics):
            return response
        provider_data = self.provider_data
        params = self._resolve_parameters(plan, prior, provider_data)
        if params is None:
            self._invalid_defaults(diagnostics)
            return response
        if not self._validate(params, diagnostics):
            return response
        prior_hash = prior.hash_value
        hasher = provider_data.hasher
        replace_invalid = bool(prior_hash and not hasher.identify(prior_hash))
        if replace_invalid:
            prior_hash = None
        if prior_hash and not self.variant.secret_changed(prior, plan):
            LOG.debug("Secret unchanged, keeping the persisted hash")
            digest = prior_hash
            if hasher.needs_rehash(prior_hash, params):
                diagnostics.add_warning(
                    "Hash parameters changed",
                    (
                        "The password did not change, so the existing hash "
                        "is kept. It still embeds the parameters it was "
                        "computed with until the password changes."
                    ),
                )
        else:
            LOG.debug("Computing a new hash")
            computed = self._compute(plan, params, hasher, diagnostics)
            if computed is None:
                return response
            digest = computed
            if replace_invalid:
                diagnostics.add_warning(
                    "Hash recomputed",
                    (
                        "The persisted hash is not a valid argon2 hash, "
                        "a new one was computed."
                    ),
                )
        record = self._build(
            plan, params, digest, prior.identifier or RESOURCE_ID
        )
        response.state = record.to_state()
        return response

    def delete(self, request: LifecycleRequest) -> LifecycleResponse:
        """Delete the resource.

        Parameters
        ----------
        request : LifecycleRequest
            The request, with the prior state.

        Returns
        -------
        LifecycleResponse
            No state, or the prior one if it could not be read.
        """
        response = LifecycleResponse()
        if request.state is None:
            return response
        prior = self._decode(request.state, "state", response.diagnostics)
        if prior is None:
            response.state = dict(request.state)
            return response
        LOG.debug("Deleted %s", prior.identifier)
        return response

    def import_state(self, request: LifecycleRequest) -> LifecycleResponse:
        """Import a resource by id.

        Only the id is set, the rest is filled by the following read
        and the next update computes the hash.

        Parameters
        ----------
        request : LifecycleRequest
            The request, with the import id.

        Returns
        -------
        LifecycleResponse
            A record holding only the id.
        """
        response = LifecycleResponse()
        if not request.import_id:
            response.diagnostics.add_error(
                "Missing Resource Import Identifier",
                "An identifier is required to import the resource.",
                kind=ErrorKind.INVALID_ATTRIBUTE,
            )
            return response
        record = ResourceRecord(identifier=request.import_id)
        response.state = record.to_state()
        return response

    @staticmethod
    def _decode(
        data: Optional[Mapping[str, Any]],
        what: str,
        diagnostics: Diagnostics,
    ) -> Optional[ResourceRecord]:
        if data is None:
            diagnostics.add_error(
                "Invalid Resource Data",
                f"The {what} is missing.",
                kind=ErrorKind.INVALID_DATA,
            )
            return None
        try:
            return ResourceRecord.from_state(data)
        except ValidationError as error:
            diagnostics.add_error(
                "Invalid Resource Data",
                (
                    f"Unable to read the {what}, got error: "
                    f"{_describe_validation_error(error)}"
                ),
                kind=ErrorKind.INVALID_DATA,
            )
            return None

    def _check_attributes(
        self, plan: ResourceRecord, diagnostics: Diagnostics
    ) -> bool:
        if not plan.secret_value:
            diagnostics.add_error(
                "Invalid Attribute Value",
                "The password attribute is required and cannot be empty.",
                kind=ErrorKind.INVALID_ATTRIBUTE,
            )
        if self.variant.explicit_salt and plan.salt is None:
            diagnostics.add_error(
                "Missing Required Attribute",
                "The salt attribute is required for this resource.",
                kind=ErrorKind.INVALID_ATTRIBUTE,
            )
        if not self.variant.explicit_salt and plan.salt is not None:
            diagnostics.add_error(
                "Unexpected Attribute",
                "This resource generates its own salt, "
                "the salt attribute cannot be set.",
                kind=ErrorKind.INVALID_ATTRIBUTE,
            )
        return not diagnostics.has_error()

    def _resolve_parameters(
        self,
        plan: ResourceRecord,
        prior: Optional[ResourceRecord],
        provider_data: ProviderData,
    ) -> Optional[CostParameters]:
        """Planned value, else persisted value, else the default."""
        if prior is not None:
            plan = self._fill_missing(plan, prior)
        params = plan.cost_parameters()
        if params is not None:
            return params
        try:
            defaults = self.variant.default_parameters(provider_data.profile)
        except HashError:
            return None
        return self._fill_missing(plan, defaults).cost_parameters()

    @staticmethod
    def _fill_missing(
        record: ResourceRecord, source: Union[ResourceRecord, CostParameters]
    ) -> ResourceRecord:
        missing = {
            name: getattr(source, name)
            for name in COST_FIELDS
            if getattr(record, name) is None
        }
        return record.model_copy(update=missing) if missing else record

    def _invalid_defaults(self, diagnostics: Diagnostics) -> None:
        diagnostics.add_error(
            "Invalid Provider Configuration",
            (
                f"Unknown cost profile: {self.provider_data.profile}. "
                "Unable to resolve the default hash parameters."
            ),
            kind=ErrorKind.INVALID_PARAMETERS,
        )

    @staticmethod
    def _validate(params: CostParameters, diagnostics: Diagnostics) -> bool:
        try:
            params.validate()
        except HashError as error:
            diagnostics.add_error(
                "Invalid Hash Parameters",
                str(error),
                kind=ErrorKind(error.kind.value),
            )
            return False
        return True

    @staticmethod
    def _compute(
        plan: ResourceRecord,
        params: CostParameters,
        hasher: Hasher,
        diagnostics: Diagnostics,
    ) -> Optional[str]:
        try:
            return hasher.hash(
                plan.secret_value or "",
                params,
                salt=plan.salt_value,
            )
        except HashError as error:
            diagnostics.add_error(
                "Argon 2 error",
                f"Unable to hash Argon2, got error: {error}",
                kind=ErrorKind(error.kind.value),
            )
            return None

    @staticmethod
    def _build(
        plan: ResourceRecord,
        params: CostParameters,
        digest: str,
        identifier: str,
    ) -> ResourceRecord:
        return plan.model_copy(
            update={
                "key_length": params.key_length,
                "parallelism": params.parallelism,
                "memory_kib": params.memory_kib,
                "iterations": params.iterations,
                "hash": SecretStr(digest),
                "identifier": identifier,
            }
        )


__all__ = ["Argon2Resource", "RESOURCE_ID"]
