"""Public import surface for the associative container.

This module provides a stable import path for library users.
It re-exports the container, its entry type, config, and errors.
"""

from __future__ import annotations

from core.config import ContainerConfig
from core.errors import AssociativeConfigError, AssociativeError, KeyNotFoundError
from structures.associative_array import AssociativeArray
from structures.kv_pair import KVPair

__all__ = [
    "AssociativeArray",
    "AssociativeConfigError",
    "AssociativeError",
    "ContainerConfig",
    "KVPair",
    "KeyNotFoundError",
]
