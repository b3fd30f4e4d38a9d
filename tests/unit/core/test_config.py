"""Unit tests for container config validation."""

from __future__ import annotations

import pytest

from core.config import ContainerConfig
from core.constants import DEFAULT_CAPACITY, DEFAULT_GROWTH_FACTOR
from core.errors import AssociativeConfigError


def test_default_config_uses_core_constants() -> None:
    """Default config should allocate 16 slots and double on growth."""
    config = ContainerConfig().validate()

    assert config.initial_capacity == DEFAULT_CAPACITY == 16
    assert config.growth_factor == DEFAULT_GROWTH_FACTOR == 2


def test_validate_rejects_zero_capacity() -> None:
    """Config should fail for a capacity with no slots."""
    with pytest.raises(AssociativeConfigError):
        ContainerConfig(initial_capacity=0).validate()


def test_validate_rejects_non_growing_factor() -> None:
    """Config should fail when expansion would not add slots."""
    with pytest.raises(AssociativeConfigError):
        ContainerConfig(growth_factor=1).validate()


def test_validate_rejects_non_integer_capacity() -> None:
    """Config should fail for a fractional or boolean capacity."""
    with pytest.raises(AssociativeConfigError):
        ContainerConfig(initial_capacity=2.5).validate()  # type: ignore[arg-type]
    with pytest.raises(AssociativeConfigError):
        ContainerConfig(initial_capacity=True).validate()
