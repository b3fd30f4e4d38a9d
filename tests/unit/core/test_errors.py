"""Unit tests for the error hierarchy."""

from __future__ import annotations

from core.errors import AssociativeError, KeyNotFoundError


def test_key_not_found_carries_missing_key() -> None:
    """Lookup error should expose the key that was not found."""
    error = KeyNotFoundError("missing")

    assert error.key == "missing"
    assert "missing" in str(error)


def test_key_not_found_is_catchable_as_key_error() -> None:
    """Lookup error should satisfy both package and mapping handlers."""
    error = KeyNotFoundError(3)

    assert isinstance(error, AssociativeError)
    assert isinstance(error, KeyError)
