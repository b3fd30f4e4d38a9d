"""Core constants used by the associative container.

This module centralizes sizing constants for the backing sequence.
Keeping values here avoids magic literals in container logic.
"""

from __future__ import annotations

DEFAULT_CAPACITY = 16
DEFAULT_GROWTH_FACTOR = 2
MIN_GROWTH_FACTOR = 2
EMPTY_RENDERING = "{}"
ENTRY_SEPARATOR = ", "
