# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2025 Waldiez and contributors.

"""Diagnostics returned to the configuration engine."""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Iterable, Iterator, List, Optional

LOG = logging.getLogger(__name__)


class Severity(str, Enum):
    """Diagnostic severity."""

    ERROR = "error"
    WARNING = "warning"


class ErrorKind(str, Enum):
    """Error taxonomy, shared with the hashing errors."""

    INVALID_PARAMETERS = "invalid_parameters"
    COMPUTATION_FAILED = "computation_failed"
    CONFIGURATION_TYPE_MISMATCH = "configuration_type_mismatch"
    INVALID_ATTRIBUTE = "invalid_attribute"
    INVALID_DATA = "invalid_data"


@dataclass(frozen=True)
class Diagnostic:
    """A (severity, summary, detail) triple.

    Neither the summary nor the detail may contain sensitive values.
    """

    severity: Severity
    summary: str
    detail: str = ""
    kind: Optional[ErrorKind] = None

    def to_dict(self) -> Dict[str, str]:
        """Get a plain dict view of the diagnostic.

        Returns
        -------
        Dict[str, str]
            The severity, summary and detail (and kind if set).
        """
        data = {
            "severity": self.severity.value,
            "summary": self.summary,
            "detail": self.detail,
        }
        if self.kind is not None:
            data["kind"] = self.kind.value
        return data


@dataclass
class Diagnostics:
    """An ordered collection of diagnostics."""

    items: List[Diagnostic] = field(default_factory=list)

    def add_error(
        self,
        summary: str,
        detail: str = "",
        kind: Optional[ErrorKind] = None,
    ) -> None:
        """Add an error.

        Parameters
        ----------
        summary : str
            Short summary.
        detail : str
            Longer explanation.
        kind : Optional[ErrorKind]
            Where the error falls in the taxonomy.
        """
        LOG.debug("Diagnostic error: %s: %s", summary, detail)
        self.items.append(Diagnostic(Severity.ERROR, summary, detail, kind))

    def add_warning(self, summary: str, detail: str = "") -> None:
        """Add a warning.

        Parameters
        ----------
        summary : str
            Short summary.
        detail : str
            Longer explanation.
        """
        LOG.debug("Diagnostic warning: %s: %s", summary, detail)
        self.items.append(Diagnostic(Severity.WARNING, summary, detail))

    def extend(self, other: Iterable[Diagnostic]) -> None:
        """Append diagnostics from another collection.

        Parameters
        ----------
        other : Iterable[Diagnostic]
            The diagnostics to append.
        """
        self.items.extend(other)

    def has_error(self) -> bool:
        """Check for errors.

        Returns
        -------
        bool
            True if at least one error was added.
        """
        return any(item.severity is Severity.ERROR for item in self.items)

    def errors(self) -> List[Diagnostic]:
        """Get the errors only."""
        return [i for i in self.items if i.severity is Severity.ERROR]

    def warnings(self) -> List[Diagnostic]:
        """Get the warnings only."""
        return [i for i in self.items if i.severity is Severity.WARNING]

    def __iter__(self) -> Iterator[Diagnostic]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)


__all__ = ["Severity", "ErrorKind", "Diagnostic", "Diagnostics"]
