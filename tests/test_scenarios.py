"""Tests for store/scenarios.py — snapshot and restore."""

from __future__ import annotations

import threading
from datetime import datetime, timezone

import pytest

from workshop_pricing.config import CostItem, SavedScenario
from workshop_pricing.store import CostStore, restore_scenario, snapshot_scenario


FIXED_TS = datetime(2026, 3, 1, 12, 0, tzinfo=timezone.utc)


def test_snapshot_captures_inputs_and_outputs(small_store: CostStore):
    sc = snapshot_scenario(small_store, "  Spring session ", 1_500, 8, timestamp=FIXED_TS)

    assert sc.name == "Spring session"
    assert sc.timestamp == FIXED_TS
    assert sc.id == int(FIXED_TS.timestamp() * 1_000)
    assert sc.inputs.price == 1_500
    assert sc.inputs.enrollment == 8
    assert [c.name for c in sc.inputs.fixed_costs] == ["Studio Rental", "Instructor Fee"]
    # 1500 × 8 = 12000 revenue; 3500 + 50 × 8 = 3900 costs
    assert sc.outputs.revenue == 12_000
    assert sc.outputs.costs == 3_900
    assert sc.outputs.profit == 8_100
    assert sc.outputs.margin == pytest.approx(67.5)
    assert sc.outputs.break_even == pytest.approx(3_500 / 1_450)


def test_snapshot_explicit_id(small_store: CostStore):
    sc = snapshot_scenario(small_store, "A", 1_000, 1, scenario_id=7)
    assert sc.id == 7


def test_snapshot_unreachable_break_even_is_none():
    store = CostStore(
        fixed_costs=[CostItem(id=1, name="Hall", cost=1_000)],
        variable_costs=[CostItem(id=1, name="Kit", cost=600)],
    )
    sc = snapshot_scenario(store, "Underpriced", 500, 4)
    assert sc.outputs.break_even is None


@pytest.mark.parametrize("name", ["", "   "])
def test_snapshot_requires_name(small_store: CostStore, name):
    with pytest.raises(ValueError):
        snapshot_scenario(small_store, name, 1_000, 1)


def test_snapshot_is_detached_from_store(small_store: CostStore):
    sc = snapshot_scenario(small_store, "Before edit", 1_500, 8)
    small_store.fixed.update_amount(1, 0)
    assert sc.inputs.fixed_costs[0].cost == 1_500


def test_restore_replaces_lists(store: CostStore, small_store: CostStore):
    sc = snapshot_scenario(small_store, "Small", 2_000, 5)

    inputs = restore_scenario(store, sc)

    assert inputs.price == 2_000
    assert inputs.enrollment == 5
    assert [c.name for c in store.fixed.get_all()] == ["Studio Rental", "Instructor Fee"]
    assert [c.name for c in store.variable.get_all()] == ["Materials"]
    assert store.fixed.next_id == 3
    assert store.variable.next_id == 2


def test_restore_from_json_round_trip(small_store: CostStore):
    sc = snapshot_scenario(small_store, "Saved", 1_500, 8, timestamp=FIXED_TS)
    loaded = SavedScenario.model_validate_json(sc.model_dump_json())

    fresh = CostStore()
    restore_scenario(fresh, loaded)
    s = fresh.calculate(loaded.inputs.price, loaded.inputs.enrollment)
    assert s.net_profit == sc.outputs.profit


def test_restore_is_detached_from_scenario(store: CostStore, small_store: CostStore):
    sc = snapshot_scenario(small_store, "Small", 2_000, 5)
    restore_scenario(store, sc)
    sc.inputs.fixed_costs[0].cost = 0
    assert store.fixed.get_all()[0].cost == 1_500


def test_restore_holds_both_lists_together(store: CostStore, small_store: CostStore):
    sc = snapshot_scenario(small_store, "Small", 2_000, 5)
    results = []
    reader = threading.Thread(target=lambda: results.append(store.calculate(2_000, 5)))

    with store.locked():
        reader.start()
        restore_scenario(store, sc)
        reader.join(timeout=0.2)
        assert reader.is_alive()

    reader.join(timeout=5)
    assert results[0].net_profit == sc.outputs.profit
