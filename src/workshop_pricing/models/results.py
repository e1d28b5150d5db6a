"""Result types — the contract between engine, store, and API.

``FinancialSummary`` is recomputed on every call and never persisted.
``CostResult`` is what every store mutator hands back instead of raising.
"""

from __future__ import annotations

import math
from enum import Enum

from pydantic import BaseModel, Field, computed_field, field_serializer

from workshop_pricing.config.costs import CostItem


# ═══════════════════════════════════════════════════════════════════════════
# Financial summary
# ═══════════════════════════════════════════════════════════════════════════

class FinancialSummary(BaseModel):
    """Workshop economics for one (price, enrollment, cost lists) input."""

    price: float
    enrollment: float

    total_fixed_cost: float
    """Sum of all fixed cost items."""

    variable_cost_per_student: float
    """Sum of all variable cost items (each is a per-student rate)."""

    total_costs: float
    """total_fixed_cost + variable_cost_per_student × enrollment."""

    total_revenue: float
    """price × enrollment."""

    net_profit: float
    """total_revenue − total_costs."""

    profit_margin: float
    """net_profit / total_revenue × 100, or 0 when revenue ≤ 0."""

    break_even_point: float
    """Students needed to cover fixed costs. ``inf`` when price ≤ variable cost
    per student and there are fixed costs to recover."""

    breakdown: dict[str, float] = Field(default_factory=dict)
    """``fixed`` total plus one entry per cost item name (last write wins)."""

    @computed_field
    @property
    def break_even_reachable(self) -> bool:
        return not math.isinf(self.break_even_point)

    @field_serializer("break_even_point", when_used="json")
    def _serialize_break_even(self, value: float) -> float | None:
        # JSON has no infinity
        return None if math.isinf(value) else value


class ProfitCurve(BaseModel):
    """Revenue, costs, and profit sampled across enrollment values (chart data)."""

    price: float
    enrollments: list[float]
    revenue: list[float]
    costs: list[float]
    profit: list[float]


# ═══════════════════════════════════════════════════════════════════════════
# Cost store results
# ═══════════════════════════════════════════════════════════════════════════

class CostError(str, Enum):
    """Why a cost list mutation was refused."""

    EMPTY_NAME = "empty_name"
    INVALID_AMOUNT = "invalid_amount"
    LAST_ITEM_PROTECTED = "last_item_protected"
    NOT_FOUND = "not_found"


class CostResult(BaseModel):
    """Outcome of a cost list mutation.

    ``cost`` is set only by a successful ``add``.
    """

    success: bool
    message: str | None = None
    cost: CostItem | None = None
    error: CostError | None = None

    @classmethod
    def ok(cls, cost: CostItem | None = None) -> "CostResult":
        return cls(success=True, cost=cost)

    @classmethod
    def fail(cls, error: CostError, message: str) -> "CostResult":
        return cls(success=False, error=error, message=message)
