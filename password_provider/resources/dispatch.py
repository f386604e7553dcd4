# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2025 Waldiez and contributors.
"""Lifecycle verb dispatcher."""

import logging
from enum import Enum
from typing import Callable, Dict

from .protocol import LifecycleRequest, LifecycleResponse, Resource

LOG = logging.getLogger(__name__)

Handler = Callable[[LifecycleRequest], LifecycleResponse]


class LifecycleVerb(str, Enum):
    """The lifecycle verbs the configuration engine invokes."""

    CREATE = "create"
    READ = "read"
    UPDATE = "update"
    DELETE = "delete"
    IMPORT_STATE = "import_state"


def get_handlers(resource: Resource) -> Dict[LifecycleVerb, Handler]:
    """Get the verb to method table of a resource.

    Parameters
    ----------
    resource : Resource
        The resource.

    Returns
    -------
    Dict[LifecycleVerb, Handler]
        The handlers.
    """
    return {
        LifecycleVerb.CREATE: resource.create,
        LifecycleVerb.READ: resource.read,
        LifecycleVerb.UPDATE: resource.update,
        LifecycleVerb.DELETE: resource.delete,
        LifecycleVerb.IMPORT_STATE: resource.import_state,
    }


def dispatch(
    resource: Resource,
    verb: LifecycleVerb | str,
    request: LifecycleRequest,
) -> LifecycleResponse:
    """Invoke a lifecycle verb on a resource.

    Parameters
    ----------
    resource : Resource
        The resource.
    verb : LifecycleVerb | str
        The verb (or its name).
    request : LifecycleRequest
        The request.

    Returns
    -------
    LifecycleResponse
        The verb's response.

    Raises
    ------
    ValueError
        If the verb is unknown.
    """
    handler = get_handlers(resource)[LifecycleVerb(verb)]
    LOG.debug("Dispatching %s", LifecycleVerb(verb).value)
    return handler(request)


__all__ = ["LifecycleVerb", "Handler", "dispatch", "get_handlers"]
