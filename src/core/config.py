"""Container configuration model.

This module owns sizing parameters and their validation.
The container consumes a typed config object instead of raw integers.
"""

from __future__ import annotations

from dataclasses import dataclass

from core.constants import DEFAULT_CAPACITY, DEFAULT_GROWTH_FACTOR, MIN_GROWTH_FACTOR
from core.errors import AssociativeConfigError


@dataclass(frozen=True)
class ContainerConfig:
    """Validated container sizing configuration.

    Attributes:
        initial_capacity: Number of empty slots allocated on construction.
        growth_factor: Multiplier applied to capacity when the sequence is full.
    """

    initial_capacity: int = DEFAULT_CAPACITY
    growth_factor: int = DEFAULT_GROWTH_FACTOR

    def validate(self) -> "ContainerConfig":
        """Check sizing values and return self for chaining.

        Returns:
            This config, unchanged.

        Raises:
            AssociativeConfigError: If a sizing value is invalid.
        """
        _require_int("initial_capacity", self.initial_capacity)
        _require_int("growth_factor", self.growth_factor)
        if self.initial_capacity < 1:
            raise AssociativeConfigError(
                "Invalid initial_capacity value: "
                f"expected a positive integer, got {self.initial_capacity}. "
                "Use at least one slot."
            )
        if self.growth_factor < MIN_GROWTH_FACTOR:
            raise AssociativeConfigError(
                "Invalid growth_factor value: "
                f"expected an integer >= {MIN_GROWTH_FACTOR}, got {self.growth_factor}. "
                "Capacity must grow on expansion."
            )
        return self


def _require_int(field_name: str, value: object) -> None:
    """Reject non-integer sizing values.

    Args:
        field_name: Config field being checked.
        value: Raw field value.

    Raises:
        AssociativeConfigError: If value is not a plain integer.
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise AssociativeConfigError(
            f"Invalid {field_name} value: expected integer, got {type(value).__name__}."
        )
