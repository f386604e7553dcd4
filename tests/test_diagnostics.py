# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2025 Waldiez and contributors.
"""Tests for diagnostics."""

from password_provider.diagnostics import (
    Diagnostic,
    Diagnostics,
    ErrorKind,
    Severity,
)
from password_provider.hashing import HashErrorKind


def test_empty() -> None:
    """An empty collection has no errors."""
    diagnostics = Diagnostics()
    assert not diagnostics.has_error()
    assert len(diagnostics) == 0
    assert not list(diagnostics)


def test_errors_and_warnings() -> None:
    """Errors and warnings are kept in order."""
    diagnostics = Diagnostics()
    diagnostics.add_warning("Careful", "something is off")
    diagnostics.add_error(
        "Broken", "it failed", kind=ErrorKind.COMPUTATION_FAILED
    )

    assert diagnostics.has_error()
    assert [d.severity for d in diagnostics] == [
        Severity.WARNING,
        Severity.ERROR,
    ]
    assert diagnostics.errors()[0].kind is ErrorKind.COMPUTATION_FAILED
    assert diagnostics.warnings()[0].kind is None


def test_warnings_only() -> None:
    """Warnings are not errors."""
    diagnostics = Diagnostics()
    diagnostics.add_warning("Careful")
    assert not diagnostics.has_error()
    assert len(diagnostics) == 1


def test_extend() -> None:
    """Diagnostics can be merged."""
    first = Diagnostics()
    first.add_warning("one")
    second = Diagnostics()
    second.add_error("two")
    first.extend(second)
    assert [d.summary for d in first] == ["one", "two"]
    assert first.has_error()


def test_to_dict() -> None:
    """Test the plain dict view."""
    error = Diagnostic(
        Severity.ERROR, "Argon 2 error", "details", ErrorKind.INVALID_DATA
    )
    assert error.to_dict() == {
        "severity": "error",
        "summary": "Argon 2 error",
        "detail": "details",
        "kind": "invalid_data",
    }
    assert "kind" not in Diagnostic(Severity.WARNING, "w").to_dict()


def test_hash_error_kinds_map_to_error_kinds() -> None:
    """Every hashing failure has a diagnostic counterpart."""
    for kind in HashErrorKind:
        assert ErrorKind(kind.value).value == kind.value
