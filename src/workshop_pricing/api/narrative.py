"""Narrative generator — plain-English reading of a financial summary.

Also holds the display formatters the UI uses for the headline cards.
"""

from __future__ import annotations

import math

from workshop_pricing.models.results import FinancialSummary


def format_currency(value: float) -> str:
    """Whole dollars with thousands separators: ``$12,000`` / ``-$500``."""
    sign = "-" if value < 0 else ""
    return f"{sign}${abs(value):,.0f}"


def format_percentage(value: float) -> str:
    return f"{value:.1f}%"


def format_break_even(value: float) -> str:
    """Students needed, rounded up; ``Not reachable`` when infinite."""
    if math.isinf(value):
        return "Not reachable"
    students = math.ceil(value)
    return f"{students} student" if students == 1 else f"{students} students"


def generate_narrative(summary: FinancialSummary, top_n: int = 3) -> str:
    """Short text block: headline numbers, verdict, biggest cost lines."""
    s = summary
    lines: list[str] = []

    lines.append(
        f"At {format_currency(s.price)} per student with {s.enrollment:g} enrolled, "
        f"revenue is {format_currency(s.total_revenue)} against "
        f"{format_currency(s.total_costs)} in costs."
    )

    if s.net_profit > 0:
        lines.append(
            f"The workshop is PROFITABLE: {format_currency(s.net_profit)} net "
            f"({format_percentage(s.profit_margin)} margin)."
        )
    elif s.net_profit == 0:
        lines.append("The workshop exactly breaks even.")
    else:
        lines.append(f"The workshop LOSES {format_currency(-s.net_profit)}.")

    if s.break_even_reachable:
        lines.append(f"Break-even: {format_break_even(s.break_even_point)}.")
    else:
        lines.append(
            f"Break-even is not reachable: the price does not exceed the "
            f"{format_currency(s.variable_cost_per_student)} variable cost per student."
        )

    # -- Largest cost lines (the "fixed" entry is a subtotal, not a line) --
    lines_by_cost = sorted(
        ((name, amount) for name, amount in s.breakdown.items() if name != "fixed"),
        key=lambda x: x[1],
        reverse=True,
    )
    if lines_by_cost and top_n > 0:
        top = ", ".join(f"{name} ({format_currency(amount)})" for name, amount in lines_by_cost[:top_n])
        lines.append(f"Largest costs: {top}.")

    return "\n".join(lines)
