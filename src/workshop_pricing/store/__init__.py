"""Store — cost list state and scenario snapshots."""

from workshop_pricing.store.cost_store import CostList, CostStore, parse_amount
from workshop_pricing.store.scenarios import restore_scenario, snapshot_scenario

__all__ = [
    "CostList",
    "CostStore",
    "parse_amount",
    "restore_scenario",
    "snapshot_scenario",
]
