"""Profit curve — revenue / costs / profit across enrollment values.

Feeds the chart collaborator.  Uses the same arithmetic as
``calculate_financials``, vectorised over the enrollment points.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Any

import numpy as np

from workshop_pricing.engine.calculations import (
    calculate_profit,
    calculate_revenue,
    calculate_total_costs,
    calculate_total_fixed_costs,
    calculate_variable_cost_per_student,
)
from workshop_pricing.models.results import ProfitCurve

DEFAULT_ENROLLMENT_POINTS: tuple[int, ...] = (0, 5, 10, 15, 20)


def build_profit_curve(
    price: float,
    fixed_costs: Iterable[Any],
    variable_costs: Iterable[Any],
    enrollments: Sequence[float] = DEFAULT_ENROLLMENT_POINTS,
) -> ProfitCurve:
    """Evaluate the economics at each enrollment point, in the given order."""
    total_fixed_cost = calculate_total_fixed_costs(fixed_costs)
    variable_cost_per_student = calculate_variable_cost_per_student(variable_costs)

    points = np.asarray(enrollments, dtype=float)
    revenue = calculate_revenue(price, points)
    costs = calculate_total_costs(total_fixed_cost, variable_cost_per_student, points)
    profit = calculate_profit(revenue, costs)

    return ProfitCurve(
        price=price,
        enrollments=points.tolist(),
        revenue=np.asarray(revenue, dtype=float).tolist(),
        costs=np.asarray(costs, dtype=float).tolist(),
        profit=np.asarray(profit, dtype=float).tolist(),
    )
