"""Mutable key/value entry stored in container slots."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

K = TypeVar("K")
V = TypeVar("V")


@dataclass
class KVPair(Generic[K, V]):
    """One stored key/value pair.

    Attributes:
        key: Entry key, compared by equality.
        value: Associated value, overwritten in place on update.
    """

    key: K
    value: V

    def copy(self) -> "KVPair[K, V]":
        """Return an independently owned pair with the same key and value."""
        return KVPair(key=self.key, value=self.value)

    def __str__(self) -> str:
        return f"{self.key}={self.value}"
