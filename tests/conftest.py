"""Shared test fixtures — small cost lists and a fresh store per test."""

from __future__ import annotations

import pytest

from workshop_pricing.config import CostItem, InputRanges
from workshop_pricing.store import CostStore


@pytest.fixture
def fixed_costs() -> list[CostItem]:
    return [
        CostItem(id=1, name="Studio Rental", cost=1_500),
        CostItem(id=2, name="Instructor Fee", cost=2_000),
    ]


@pytest.fixture
def variable_costs() -> list[CostItem]:
    return [
        CostItem(id=1, name="Materials", cost=50),
    ]


@pytest.fixture
def store() -> CostStore:
    """Store seeded with the default items."""
    return CostStore()


@pytest.fixture
def small_store(fixed_costs: list[CostItem], variable_costs: list[CostItem]) -> CostStore:
    """Two fixed items, one variable item."""
    return CostStore(fixed_costs=fixed_costs, variable_costs=variable_costs)


@pytest.fixture
def input_ranges() -> InputRanges:
    return InputRanges()
