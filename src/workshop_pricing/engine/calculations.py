"""Workshop financial calculations.

Pure arithmetic: price + enrollment + cost lists → FinancialSummary.
Nothing here validates or raises; callers validate cost items up front
(see ``CostList.add``) and every numeric edge case maps to a defined value.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from workshop_pricing.models.results import FinancialSummary


def _field(item: Any, key: str) -> Any:
    """Read ``key`` from a CostItem or from a plain ``{id, name, cost}`` mapping."""
    if isinstance(item, Mapping):
        return item[key]
    return getattr(item, key)


def calculate_revenue(price: float, enrollment: float) -> float:
    return price * enrollment


def calculate_total_fixed_costs(fixed_costs: Iterable[Any]) -> float:
    return sum((_field(fc, "cost") for fc in fixed_costs), 0)


def calculate_variable_cost_per_student(variable_costs: Iterable[Any]) -> float:
    """Each variable item is a per-student rate, so the sum is the rate per student."""
    return sum((_field(vc, "cost") for vc in variable_costs), 0)


def calculate_total_costs(
    total_fixed_cost: float,
    variable_cost_per_student: float,
    enrollment: float,
) -> float:
    total_variable_cost = variable_cost_per_student * enrollment
    return total_fixed_cost + total_variable_cost


def calculate_profit(total_revenue: float, total_costs: float) -> float:
    return total_revenue - total_costs


def calculate_profit_margin(net_profit: float, total_revenue: float) -> float:
    """Profit as a percentage of revenue; 0 when there is no positive revenue."""
    if total_revenue <= 0:
        return 0
    return (net_profit / total_revenue) * 100


def calculate_break_even(
    total_fixed_cost: float,
    price: float,
    variable_cost_per_student: float,
) -> float:
    """Enrollment at which revenue covers total costs.

    Each student contributes ``price − variable_cost_per_student`` towards the
    fixed costs.  With no positive contribution the point is unreachable
    (``inf``) unless there is nothing to recover, in which case it is 0.
    """
    if price > variable_cost_per_student:
        return total_fixed_cost / (price - variable_cost_per_student)
    elif total_fixed_cost > 0:
        return float("inf")
    return 0


def build_cost_breakdown(
    total_fixed_cost: float,
    fixed_costs: Iterable[Any],
    variable_costs: Iterable[Any],
    enrollment: float,
) -> dict[str, float]:
    """Map each cost name to its contribution, after a ``fixed`` total entry.

    Fixed items contribute their cost, variable items cost × enrollment.
    Keys are names, so a repeated name (or an item literally called
    ``"fixed"``) overwrites the earlier value and keeps its original position.
    """
    breakdown: dict[str, float] = {"fixed": total_fixed_cost}

    for fc in fixed_costs:
        breakdown[_field(fc, "name")] = _field(fc, "cost")

    for vc in variable_costs:
        breakdown[_field(vc, "name")] = _field(vc, "cost") * enrollment

    return breakdown


def calculate_financials(
    price: float,
    enrollment: float,
    fixed_costs: Iterable[Any],
    variable_costs: Iterable[Any],
) -> FinancialSummary:
    """Compute the full financial summary for one set of inputs."""
    # Materialise once: generators would be exhausted by the totals.
    fixed_costs = list(fixed_costs)
    variable_costs = list(variable_costs)

    total_fixed_cost = calculate_total_fixed_costs(fixed_costs)
    variable_cost_per_student = calculate_variable_cost_per_student(variable_costs)
    total_revenue = calculate_revenue(price, enrollment)
    total_costs = calculate_total_costs(total_fixed_cost, variable_cost_per_student, enrollment)
    net_profit = calculate_profit(total_revenue, total_costs)
    profit_margin = calculate_profit_margin(net_profit, total_revenue)
    break_even_point = calculate_break_even(total_fixed_cost, price, variable_cost_per_student)
    breakdown = build_cost_breakdown(total_fixed_cost, fixed_costs, variable_costs, enrollment)

    return FinancialSummary(
        price=price,
        enrollment=enrollment,
        total_fixed_cost=total_fixed_cost,
        variable_cost_per_student=variable_cost_per_student,
        total_costs=total_costs,
        total_revenue=total_revenue,
        net_profit=net_profit,
        profit_margin=profit_margin,
        break_even_point=break_even_point,
        breakdown=breakdown,
    )
