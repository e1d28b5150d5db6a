"""Cost line items and the seeded defaults for a fresh store."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field


class CostKind(str, Enum):
    """Which of the two cost lists an item belongs to."""

    FIXED = "fixed"
    VARIABLE = "variable"


class CostItem(BaseModel):
    """One editable cost line.

    Business rules (non-blank name, non-negative cost) are applied by
    ``CostList.add``, not here: bulk loads and renames store values as given.
    """

    id: int = Field(description="Unique within its list, assigned in increasing order")
    name: str = Field(description="Label shown in the breakdown")
    cost: float = Field(
        description="Fixed items: total amount. Variable items: amount per enrolled student.",
    )


DEFAULT_FIXED_COSTS: tuple[CostItem, ...] = (
    CostItem(id=1, name="Studio Rental (2 Days)", cost=1_500.0),
    CostItem(id=2, name="Instructor Fee/Planning", cost=2_000.0),
    CostItem(id=3, name="Marketing/Ad Spend", cost=300.0),
)

DEFAULT_VARIABLE_COSTS: tuple[CostItem, ...] = (
    CostItem(id=1, name="Model Fee Allocation", cost=150.0),
    CostItem(id=2, name="Catering/Refreshments", cost=100.0),
    CostItem(id=3, name="Materials/Swag", cost=50.0),
)


def default_fixed_costs() -> list[CostItem]:
    return [item.model_copy() for item in DEFAULT_FIXED_COSTS]


def default_variable_costs() -> list[CostItem]:
    return [item.model_copy() for item in DEFAULT_VARIABLE_COSTS]


def default_costs(kind: CostKind) -> list[CostItem]:
    """Fresh copies of the seed items for ``kind``."""
    if CostKind(kind) is CostKind.FIXED:
        return default_fixed_costs()
    return default_variable_costs()
