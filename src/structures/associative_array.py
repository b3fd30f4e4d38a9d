"""Associative array backed by a linear slot sequence.

This module stores key/value pairs in a growable list of optional slots.
Lookups scan the list; removed slots are recycled by first-fit insertion.
"""

from __future__ import annotations

from typing import Generic, TypeVar, cast

from core.config import ContainerConfig
from core.constants import EMPTY_RENDERING, ENTRY_SEPARATOR
from core.errors import KeyNotFoundError
from core.logging_config import get_logger
from structures.kv_pair import KVPair

K = TypeVar("K")
V = TypeVar("V")

_LOGGER = get_logger(__name__)


class AssociativeArray(Generic[K, V]):
    """Key/value container with linear-scan lookup.

    Slots are either a ``KVPair`` or ``None``. Capacity only grows, and
    ``None`` keys are never stored or matched.
    """

    def __init__(self, config: ContainerConfig | None = None) -> None:
        """Create an empty container.

        Args:
            config: Optional sizing config. Defaults to 16 slots doubling on growth.

        Raises:
            AssociativeConfigError: If the supplied config is invalid.
        """
        self._config = (config or ContainerConfig()).validate()
        self._slots: list[KVPair[K, V] | None] = [None] * self._config.initial_capacity
        self._size = 0

    def set(self, key: K, value: V) -> None:
        """Associate value with key, updating in place when key exists.

        Args:
            key: Entry key. ``None`` is ignored.
            value: Value to store.
        """
        if key is None:
            return
        index = self._index_of(key)
        if index is not None:
            pair = cast(KVPair[K, V], self._slots[index])
            pair.value = value
            return
        target = self._first_empty_index()
        if target is None:
            self.expand()
            target = self._size
        self._slots[target] = KVPair(key=key, value=value)
        self._size += 1

    def get(self, key: K) -> V:
        """Return the value stored for key.

        Args:
            key: Key to look up.

        Returns:
            The associated value.

        Raises:
            KeyNotFoundError: If no slot holds key.
        """
        pair = cast(KVPair[K, V], self._slots[self.find(key)])
        return pair.value

    def has_key(self, key: K) -> bool:
        """Return whether key is stored."""
        return self._index_of(key) is not None

    def remove(self, key: K) -> None:
        """Clear the slot holding key. Missing keys are ignored."""
        if key is None:
            return
        for index, pair in enumerate(self._slots):
            if pair is not None and pair.key == key and self._size > 0:
                self._slots[index] = None
                self._size -= 1

    def size(self) -> int:
        """Return the number of stored pairs."""
        return self._size

    def capacity(self) -> int:
        """Return the current length of the backing slot sequence."""
        return len(self._slots)

    def clone(self) -> "AssociativeArray[K, V]":
        """Return an independent copy with deep-copied entries.

        Returns:
            A container of equal capacity and size sharing no entries.
        """
        result: AssociativeArray[K, V] = AssociativeArray(self._config)
        result._slots = [pair.copy() if pair is not None else None for pair in self._slots]
        result._size = self._size
        _LOGGER.debug("associative_array_cloned", capacity=len(result._slots), size=result._size)
        return result

    def render(self) -> str:
        """Render occupied entries in slot order.

        Returns:
            ``{ k1=v1, k2=v2 }``, or ``{}`` when empty.
        """
        entries = [str(pair) for pair in self._slots if pair is not None]
        if not entries:
            return EMPTY_RENDERING
        return "{ " + ENTRY_SEPARATOR.join(entries) + " }"

    def expand(self) -> None:
        """Grow the slot sequence, keeping every entry at its index."""
        previous_capacity = len(self._slots)
        new_capacity = previous_capacity * self._config.growth_factor
        self._slots.extend([None] * (new_capacity - previous_capacity))
        _LOGGER.debug(
            "associative_array_expanded",
            previous_capacity=previous_capacity,
            capacity=new_capacity,
            size=self._size,
        )

    def find(self, key: K) -> int:
        """Return the slot index holding key.

        Args:
            key: Key to locate.

        Returns:
            Index of the first slot whose key equals key.

        Raises:
            KeyNotFoundError: If no slot holds key.
        """
        index = self._index_of(key)
        if index is None:
            raise KeyNotFoundError(key)
        return index

    def _index_of(self, key: K) -> int | None:
        if key is None:
            return None
        for index, pair in enumerate(self._slots):
            if pair is not None and pair.key == key:
                return index
        return None

    def _first_empty_index(self) -> int | None:
        for index, pair in enumerate(self._slots):
            if pair is None:
                return index
        return None

    def __len__(self) -> int:
        return self.size()

    def __contains__(self, key: object) -> bool:
        return self.has_key(key)  # type: ignore[arg-type]

    def __getitem__(self, key: K) -> V:
        return self.get(key)

    def __setitem__(self, key: K, value: V) -> None:
        self.set(key, value)

    def __copy__(self) -> "AssociativeArray[K, V]":
        return self.clone()

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"AssociativeArray({self.render()})"
