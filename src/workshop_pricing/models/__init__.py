"""Result models — engine and store output contracts."""

from workshop_pricing.models.results import (
    CostError,
    CostResult,
    FinancialSummary,
    ProfitCurve,
)

__all__ = [
    "CostError",
    "CostResult",
    "FinancialSummary",
    "ProfitCurve",
]
