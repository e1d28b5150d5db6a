"""Engine — pure financial calculations for a workshop."""

from workshop_pricing.engine.calculations import (
    build_cost_breakdown,
    calculate_break_even,
    calculate_financials,
    calculate_profit,
    calculate_profit_margin,
    calculate_revenue,
    calculate_total_costs,
    calculate_total_fixed_costs,
    calculate_variable_cost_per_student,
)
from workshop_pricing.engine.curve import DEFAULT_ENROLLMENT_POINTS, build_profit_curve

__all__ = [
    "calculate_revenue",
    "calculate_total_fixed_costs",
    "calculate_variable_cost_per_student",
    "calculate_total_costs",
    "calculate_profit",
    "calculate_profit_margin",
    "calculate_break_even",
    "build_cost_breakdown",
    "calculate_financials",
    # Chart data
    "DEFAULT_ENROLLMENT_POINTS",
    "build_profit_curve",
]
