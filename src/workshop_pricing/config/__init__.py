"""Configuration models — cost items, input ranges, saved scenarios."""

from workshop_pricing.config.costs import (
    DEFAULT_FIXED_COSTS,
    DEFAULT_VARIABLE_COSTS,
    CostItem,
    CostKind,
    default_costs,
    default_fixed_costs,
    default_variable_costs,
)
from workshop_pricing.config.inputs import InputRanges
from workshop_pricing.config.scenario import SavedScenario, ScenarioInputs, ScenarioOutputs

__all__ = [
    "CostItem",
    "CostKind",
    "DEFAULT_FIXED_COSTS",
    "DEFAULT_VARIABLE_COSTS",
    "default_costs",
    "default_fixed_costs",
    "default_variable_costs",
    "InputRanges",
    "SavedScenario",
    "ScenarioInputs",
    "ScenarioOutputs",
]
