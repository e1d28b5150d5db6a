"""Scenario snapshots — build one from a store, load one back into it.

Storage is somebody else's job: these helpers only produce and consume the
plain ``SavedScenario`` shape.
"""

from __future__ import annotations

import logging
import math
from datetime import datetime, timezone

from workshop_pricing.config.scenario import SavedScenario, ScenarioInputs, ScenarioOutputs
from workshop_pricing.store.cost_store import CostStore

logger = logging.getLogger(__name__)


def snapshot_scenario(
    store: CostStore,
    name: str,
    price: float,
    enrollment: int,
    *,
    scenario_id: int | None = None,
    timestamp: datetime | None = None,
) -> SavedScenario:
    """Capture the current inputs and headline results under ``name``."""
    if not name or not name.strip():
        raise ValueError("Scenario name cannot be empty")

    timestamp = timestamp or datetime.now(timezone.utc)
    fixed_costs = store.fixed.get_all()
    variable_costs = store.variable.get_all()
    summary = store.calculate(price, enrollment)

    scenario = SavedScenario(
        id=scenario_id if scenario_id is not None else int(timestamp.timestamp() * 1_000),
        name=name.strip(),
        timestamp=timestamp,
        inputs=ScenarioInputs(
            price=price,
            enrollment=enrollment,
            fixed_costs=fixed_costs,
            variable_costs=variable_costs,
        ),
        outputs=ScenarioOutputs(
            revenue=summary.total_revenue,
            costs=summary.total_costs,
            profit=summary.net_profit,
            margin=summary.profit_margin,
            break_even=None if math.isinf(summary.break_even_point) else summary.break_even_point,
        ),
    )
    logger.debug("Captured scenario %s (%s)", scenario.id, scenario.name)
    return scenario


def restore_scenario(store: CostStore, scenario: SavedScenario) -> ScenarioInputs:
    """Replace both cost lists with the scenario's; returns its inputs.

    Price and enrollment are not held by the store, so the caller applies
    them from the returned inputs.
    """
    store.replace_all(scenario.inputs.fixed_costs, scenario.inputs.variable_costs)
    logger.info("Restored scenario %s (%s)", scenario.id, scenario.name)
    return scenario.inputs.model_copy(deep=True)
