"""Saved scenario — the shape handed to the persistence collaborator."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field

from workshop_pricing.config.costs import CostItem


class ScenarioInputs(BaseModel):
    """Everything needed to recompute a scenario."""

    price: float = Field(description="Price per student ($)")
    enrollment: int = Field(ge=0, description="Enrolled students")
    fixed_costs: list[CostItem] = Field(default_factory=list)
    variable_costs: list[CostItem] = Field(default_factory=list)


class ScenarioOutputs(BaseModel):
    """Headline results captured at save time (for listing, not recomputation)."""

    revenue: float
    costs: float
    profit: float
    margin: float
    break_even: float | None = Field(
        default=None,
        description="Break-even enrollment; None when it cannot be reached",
    )


class SavedScenario(BaseModel):
    """One named snapshot of the calculator."""

    id: int = Field(description="Timestamp in milliseconds unless supplied")
    name: str
    timestamp: datetime
    inputs: ScenarioInputs
    outputs: ScenarioOutputs
