"""Associative container exception hierarchy.

This module defines the typed failures raised by the container.
Lookup misses and configuration problems each get their own type.
"""

from __future__ import annotations


class AssociativeError(Exception):
    """Base exception for all associative container failures."""


class AssociativeConfigError(AssociativeError):
    """Raised for invalid container configuration."""


class KeyNotFoundError(AssociativeError, KeyError):
    """Raised when a lookup finds no slot holding the requested key.

    Attributes:
        key: The key that was not found.
    """

    def __init__(self, key: object) -> None:
        super().__init__(f"Key not found: {key!r}. Check has_key() before get().")
        self.key = key
